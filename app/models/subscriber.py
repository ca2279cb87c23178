from sqlalchemy import Column, String, Integer, DateTime, func
from app.database import Base

class Subscriber(Base):
    __tablename__ = "subscribers"

    id = Column(Integer, primary_key=True, index=True)
    email = Column(String(255), unique=True, nullable=False)
    subscribed_at = Column(DateTime, server_default=func.now())
