from typing import List
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from app.core import errors
from app.database import get_db
from app.auth.credentials import authenticate_admin
from app.db.admin import list_admins, delete_admin
from app.schemas.admin import AdminLogin, AdminLoginResponse, Admin as AdminSchema
from app.schemas.user import MessageResponse

router = APIRouter(prefix="/api", tags=["admin"])

@router.post("/admin/login", response_model=AdminLoginResponse)
def admin_login(data: AdminLogin, db: Session = Depends(get_db)):
    return {"success": authenticate_admin(db, data.email, data.password)}

@router.get("/admins", response_model=List[AdminSchema])
def get_admins(db: Session = Depends(get_db)):
    return list_admins(db)

@router.delete("/admins/{admin_id}", response_model=MessageResponse)
def remove_admin(admin_id: int, db: Session = Depends(get_db)):
    if not delete_admin(db, admin_id):
        raise errors.NotFound("Admin not found")
    return {"message": "Admin deleted successfully"}
