from typing import List
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from app.core import errors
from app.database import get_db
from app.db.contact import create_contact, list_contacts, delete_contact
from app.db.subscriber import create_subscriber, list_subscribers, delete_subscriber
from app.db.review import create_review, list_reviews
from app.schemas.contact import ContactCreate, Contact as ContactSchema
from app.schemas.subscriber import SubscriberCreate, Subscriber as SubscriberSchema
from app.schemas.review import ReviewCreate, ReviewOut, Review as ReviewSchema
from app.schemas.user import MessageResponse

router = APIRouter(prefix="/api", tags=["forms"])

### CONTACT ###

@router.post("/contact", response_model=MessageResponse)
def submit_contact(contact: ContactCreate, db: Session = Depends(get_db)):
    if not all([contact.firstName, contact.lastName, contact.email, contact.message]):
        raise errors.ValidationError("All fields are required")
    create_contact(db, contact)
    return {"message": "Message saved successfully!"}

@router.get("/contacts", response_model=List[ContactSchema])
def get_contacts(db: Session = Depends(get_db)):
    return list_contacts(db)

@router.delete("/contacts/{contact_id}", response_model=MessageResponse)
def remove_contact(contact_id: int, db: Session = Depends(get_db)):
    if not delete_contact(db, contact_id):
        raise errors.NotFound("Contact not found")
    return {"message": "Contact deleted successfully"}

### NEWSLETTER ###

@router.post("/subscribe", response_model=MessageResponse)
def subscribe(data: SubscriberCreate, db: Session = Depends(get_db)):
    if not data.email:
        raise errors.ValidationError("Email is required")
    create_subscriber(db, data.email)
    return {"message": "Subscription successful"}

@router.get("/subscribers", response_model=List[SubscriberSchema])
def get_subscribers(db: Session = Depends(get_db)):
    return list_subscribers(db)

@router.delete("/subscribers/{subscriber_id}", response_model=MessageResponse)
def remove_subscriber(subscriber_id: int, db: Session = Depends(get_db)):
    if not delete_subscriber(db, subscriber_id):
        raise errors.NotFound("Subscriber not found")
    return {"message": "Subscriber deleted successfully"}

### REVIEWS ###

@router.post("/reviews", response_model=ReviewOut, status_code=status.HTTP_201_CREATED)
def submit_review(review: ReviewCreate, db: Session = Depends(get_db)):
    if not review.name or not review.rating or not (review.comment or "").strip():
        raise errors.ValidationError("All fields are required.")
    return create_review(db, review)

@router.get("/reviews", response_model=List[ReviewSchema])
def get_reviews(db: Session = Depends(get_db)):
    return list_reviews(db)
