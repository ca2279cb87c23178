from sqlalchemy.orm import Session
from app.models.user import User

def get_user_by_email(db: Session, email: str) -> User:
    """
    Get a user by email address.

    Args:
        db: Database session
        email: Email of the user to retrieve

    Returns:
        User object if found, None otherwise
    """
    return db.query(User).filter(User.email == email).first()

def list_users(db: Session) -> list[User]:
    """
    Get all registered users, for the admin dashboard.

    Args:
        db: Database session

    Returns:
        List of users
    """
    return db.query(User).order_by(User.id).all()

def delete_user(db: Session, user_id: int) -> bool:
    """
    Delete a user by ID.

    Args:
        db: Database session
        user_id: ID of the user to delete

    Returns:
        True if a user was deleted, False if none matched
    """
    deleted = db.query(User).filter(User.id == user_id).delete()
    db.commit()
    return deleted > 0
