from pydantic import BaseModel
from typing import Optional

class OrderCreate(BaseModel):
    amount: float
    currency: Optional[str] = None
