from sqlalchemy.orm import Session
from app.models.lead import Lead

def create_lead(db: Session, email_or_mobile: str) -> Lead:
    db_lead = Lead(email_or_mobile=email_or_mobile)
    db.add(db_lead)
    db.commit()
    db.refresh(db_lead)
    return db_lead

def list_leads(db: Session) -> list[Lead]:
    return db.query(Lead).order_by(Lead.id).all()

def delete_lead(db: Session, lead_id: int) -> bool:
    deleted = db.query(Lead).filter(Lead.id == lead_id).delete()
    db.commit()
    return deleted > 0
