from sqlalchemy.orm import Session
from app.models.review import Review
from app.schemas.review import ReviewCreate

def create_review(db: Session, review: ReviewCreate) -> Review:
    db_review = Review(name=review.name, rating=review.rating, comment=review.comment)
    db.add(db_review)
    db.commit()
    db.refresh(db_review)
    return db_review

def list_reviews(db: Session) -> list[Review]:
    """
    Get all reviews, newest first.

    Args:
        db: Database session

    Returns:
        List of reviews ordered by creation time, descending
    """
    return db.query(Review).order_by(Review.created_at.desc(), Review.id.desc()).all()
