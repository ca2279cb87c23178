from fastapi import APIRouter, Depends
from app.auth.otp import OtpExchange
from app.dependencies import get_otp_exchange
from app.schemas.otp import OTPSend, OTPVerify
from app.schemas.user import SuccessResponse

router = APIRouter(tags=["otp"])

@router.post("/send-otp", response_model=SuccessResponse)
def send_otp(data: OTPSend, otp_exchange: OtpExchange = Depends(get_otp_exchange)):
    otp_exchange.issue(data.toEmail)
    return {"success": True, "message": "OTP sent to email"}

@router.post("/verify-otp", response_model=SuccessResponse)
def verify_otp(data: OTPVerify, otp_exchange: OtpExchange = Depends(get_otp_exchange)):
    otp_exchange.verify(data.email, data.otp)
    return {"success": True, "message": "OTP verified"}
