from pydantic import BaseModel
from typing import Optional

class AdminLogin(BaseModel):
    email: Optional[str] = None
    password: Optional[str] = None

class AdminLoginResponse(BaseModel):
    success: bool

class Admin(BaseModel):
    id: int
    email: str

    class Config:
        from_attributes = True
