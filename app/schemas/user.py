from pydantic import BaseModel, EmailStr
from typing import Optional
from datetime import datetime

class UserCreate(BaseModel):
    firstName: str
    lastName: str
    email: EmailStr
    phone: Optional[str] = None
    address: Optional[str] = None
    password: str

class UserLogin(BaseModel):
    email: str
    password: str

class PasswordChange(BaseModel):
    # "id" carries the user's email, not the numeric id
    id: Optional[str] = None
    password: Optional[str] = None

class LoginUser(BaseModel):
    id: int
    name: str
    email: str

    class Config:
        from_attributes = True

class LoginResponse(BaseModel):
    message: str
    user: LoginUser

class UserIdLoginResponse(BaseModel):
    success: bool
    message: str
    userId: int

class MessageResponse(BaseModel):
    message: str

class SuccessResponse(BaseModel):
    success: bool
    message: str

class User(BaseModel):
    id: int
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email: str
    phone: Optional[str] = None
    address: Optional[str] = None
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True
