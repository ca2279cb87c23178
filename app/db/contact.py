from sqlalchemy.orm import Session
from app.models.contact import Contact
from app.schemas.contact import ContactCreate

def create_contact(db: Session, contact: ContactCreate) -> Contact:
    """
    Save a contact form submission.

    Args:
        db: Database session
        contact: Contact form data

    Returns:
        Created contact object
    """
    db_contact = Contact(
        first_name=contact.firstName,
        last_name=contact.lastName,
        email=contact.email,
        message=contact.message,
    )
    db.add(db_contact)
    db.commit()
    db.refresh(db_contact)
    return db_contact

def list_contacts(db: Session) -> list[Contact]:
    return db.query(Contact).order_by(Contact.id).all()

def delete_contact(db: Session, contact_id: int) -> bool:
    deleted = db.query(Contact).filter(Contact.id == contact_id).delete()
    db.commit()
    return deleted > 0
