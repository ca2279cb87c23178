from pydantic import BaseModel
from typing import Optional
from datetime import datetime

class ReviewCreate(BaseModel):
    name: Optional[str] = None
    rating: Optional[int] = None
    comment: Optional[str] = None

class ReviewOut(BaseModel):
    id: int
    name: str
    rating: int
    comment: str

    class Config:
        from_attributes = True

class Review(ReviewOut):
    created_at: Optional[datetime] = None
