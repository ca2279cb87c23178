from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime

class LeadCreate(BaseModel):
    emailOrMobile: Optional[str] = None

class Lead(BaseModel):
    id: int
    emailOrMobile: str = Field(validation_alias="email_or_mobile")
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True
