from sqlalchemy import Column, String, Integer, DateTime, func
from app.database import Base

class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    first_name = Column(String(100), nullable=True)
    last_name = Column(String(100), nullable=True)
    email = Column(String(255), unique=True, index=True, nullable=False)
    phone = Column(String(20), nullable=True)
    address = Column(String(500), nullable=True)
    password = Column(String(255), nullable=False)  # bcrypt hash
    created_at = Column(DateTime, server_default=func.now())

    @property
    def name(self) -> str:
        return f"{self.first_name or ''} {self.last_name or ''}".strip()
