from sqlalchemy import Column, String, Integer, DateTime, func
from app.database import Base

class Lead(Base):
    """A bare email address or mobile number left by a visitor (``users2``)."""
    __tablename__ = "users2"

    id = Column(Integer, primary_key=True, index=True)
    email_or_mobile = Column("emailOrMobile", String(255), nullable=False)
    created_at = Column(DateTime, server_default=func.now())
