from typing import List
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from app.core import errors
from app.database import get_db
from app.db.bank_profile import create_bank_profile, list_bank_profiles, delete_bank_profile
from app.db.lead import create_lead, list_leads, delete_lead
from app.schemas.bank_profile import BankProfileCreate, BankProfile as BankProfileSchema
from app.schemas.lead import LeadCreate, Lead as LeadSchema
from app.schemas.user import MessageResponse

router = APIRouter(prefix="/api", tags=["customers"])

# users1: payout details
@router.post("/users1", response_model=MessageResponse)
def save_bank_profile(profile: BankProfileCreate, db: Session = Depends(get_db)):
    create_bank_profile(db, profile)
    return {"message": "User saved successfully"}

@router.get("/users1", response_model=List[BankProfileSchema])
def get_bank_profiles(db: Session = Depends(get_db)):
    return list_bank_profiles(db)

@router.delete("/users1/{profile_id}", response_model=MessageResponse)
def remove_bank_profile(profile_id: int, db: Session = Depends(get_db)):
    if not delete_bank_profile(db, profile_id):
        raise errors.NotFound("User not found")
    return {"message": "User deleted successfully"}

# users2: email-or-mobile leads
@router.post("/save-user2")
def save_lead(data: LeadCreate, db: Session = Depends(get_db)):
    if not data.emailOrMobile:
        raise errors.ValidationError("Email/Mobile required")
    lead = create_lead(db, data.emailOrMobile)
    return {"success": True, "id": lead.id}

@router.get("/users2", response_model=List[LeadSchema])
def get_leads(db: Session = Depends(get_db)):
    return list_leads(db)

@router.delete("/users2/{lead_id}", response_model=MessageResponse)
def remove_lead(lead_id: int, db: Session = Depends(get_db)):
    if not delete_lead(db, lead_id):
        raise errors.NotFound("User not found")
    return {"message": "User deleted successfully"}
