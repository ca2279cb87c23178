from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from app.core.errors import DuplicateSubscription
from app.models.subscriber import Subscriber

def create_subscriber(db: Session, email: str) -> Subscriber:
    """
    Subscribe an email address to the newsletter.

    Args:
        db: Database session
        email: Address to subscribe

    Returns:
        Created subscriber object

    Raises:
        DuplicateSubscription: the address is already subscribed
    """
    db_subscriber = Subscriber(email=email)
    db.add(db_subscriber)
    try:
        db.commit()
    except IntegrityError as exc:
        db.rollback()
        raise DuplicateSubscription() from exc
    db.refresh(db_subscriber)
    return db_subscriber

def list_subscribers(db: Session) -> list[Subscriber]:
    return db.query(Subscriber).order_by(Subscriber.id).all()

def delete_subscriber(db: Session, subscriber_id: int) -> bool:
    deleted = db.query(Subscriber).filter(Subscriber.id == subscriber_id).delete()
    db.commit()
    return deleted > 0
