from pydantic import BaseModel
from typing import Optional
from datetime import datetime

class BankProfileCreate(BaseModel):
    firstName: Optional[str] = None
    lastName: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None
    pincode: Optional[str] = None
    accountNumber: Optional[str] = None
    ifscCode: Optional[str] = None

class BankProfile(BaseModel):
    id: int
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None
    pincode: Optional[str] = None
    account_number: Optional[str] = None
    ifsc_code: Optional[str] = None
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True
