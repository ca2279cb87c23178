from pydantic import BaseModel
from typing import Optional

class OTPSend(BaseModel):
    toEmail: Optional[str] = None

class OTPVerify(BaseModel):
    email: Optional[str] = None
    otp: Optional[str] = None
