from fastapi import Depends, Request
from sqlalchemy.orm import Session
from app.database import get_db
from app.auth.credentials import CredentialManager
from app.auth.otp import OtpExchange
from app.core.payment_gateway import RazorpayGateway

def get_credential_manager(db: Session = Depends(get_db)) -> CredentialManager:
    return CredentialManager(db)

def get_otp_exchange(request: Request) -> OtpExchange:
    return request.app.state.otp_exchange

def get_payment_gateway(request: Request) -> RazorpayGateway:
    return request.app.state.payment_gateway
