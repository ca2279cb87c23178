from sqlalchemy import Column, String, Integer, DateTime, func
from app.database import Base

class BankProfile(Base):
    """Payout details captured from the storefront, kept in the ``users1`` table."""
    __tablename__ = "users1"

    id = Column(Integer, primary_key=True, index=True)
    first_name = Column(String(100), nullable=True)
    last_name = Column(String(100), nullable=True)
    email = Column(String(255), nullable=True)
    phone = Column(String(20), nullable=True)
    address = Column(String(500), nullable=True)
    pincode = Column(String(10), nullable=True)
    account_number = Column(String(34), nullable=True)
    ifsc_code = Column(String(11), nullable=True)
    created_at = Column(DateTime, server_default=func.now())
