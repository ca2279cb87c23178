from typing import List
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from app.core import errors
from app.database import get_db
from app.db.user import list_users, delete_user
from app.auth.credentials import CredentialManager
from app.dependencies import get_credential_manager
from app.schemas.user import (
    UserCreate, UserLogin, PasswordChange, LoginUser, LoginResponse,
    UserIdLoginResponse, MessageResponse, SuccessResponse, User as UserSchema
)

router = APIRouter(prefix="/api", tags=["auth"])

@router.post("/signup", response_model=MessageResponse)
def signup(user: UserCreate, credentials: CredentialManager = Depends(get_credential_manager)):
    credentials.register(user)
    return {"message": "User registered successfully"}

@router.post("/login", response_model=LoginResponse)
def login(user_data: UserLogin, credentials: CredentialManager = Depends(get_credential_manager)):
    try:
        user = credentials.authenticate(user_data.email, user_data.password)
    except errors.NotFound:
        # Unknown email and wrong password look the same to this client
        raise errors.InvalidCredential()

    return {
        "message": "Login successful",
        "user": LoginUser(id=user.id, name=user.name, email=user.email),
    }

@router.post("/login/user-id", response_model=UserIdLoginResponse)
def login_user_id(user_data: UserLogin, credentials: CredentialManager = Depends(get_credential_manager)):
    try:
        user = credentials.authenticate(user_data.email, user_data.password)
    except errors.InvalidCredential:
        raise errors.InvalidCredential("Invalid password")

    return {"success": True, "message": "Login successful", "userId": user.id}

@router.post("/change-password", response_model=SuccessResponse)
def change_password(data: PasswordChange, credentials: CredentialManager = Depends(get_credential_manager)):
    credentials.change_password(data.id, data.password)
    return {"success": True, "message": "Password changed successfully"}

@router.get("/user/{email}/{password}", response_model=UserSchema)
def get_user_by_credentials(
    email: str,
    password: str,
    credentials: CredentialManager = Depends(get_credential_manager)
):
    try:
        return credentials.authenticate(email, password)
    except (errors.NotFound, errors.InvalidCredential):
        raise errors.NotFound("Invalid email or password")

@router.get("/users", response_model=List[UserSchema])
def get_users(db: Session = Depends(get_db)):
    return list_users(db)

@router.delete("/users/{user_id}", response_model=MessageResponse)
def remove_user(user_id: int, db: Session = Depends(get_db)):
    if not delete_user(db, user_id):
        raise errors.NotFound("User not found")
    return {"message": "User deleted successfully"}
