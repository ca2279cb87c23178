from pydantic import BaseModel
from typing import Optional
from datetime import datetime

class ContactCreate(BaseModel):
    firstName: Optional[str] = None
    lastName: Optional[str] = None
    email: Optional[str] = None
    message: Optional[str] = None

class Contact(BaseModel):
    id: int
    first_name: str
    last_name: str
    email: str
    message: str
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True
