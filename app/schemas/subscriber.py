from pydantic import BaseModel
from typing import Optional
from datetime import datetime

class SubscriberCreate(BaseModel):
    email: Optional[str] = None

class Subscriber(BaseModel):
    id: int
    email: str
    subscribed_at: Optional[datetime] = None

    class Config:
        from_attributes = True
