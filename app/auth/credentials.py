import logging
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session
from app.core import errors
from app.models.user import User
from app.models.admin import Admin
from app.db.user import get_user_by_email
from app.schemas.user import UserCreate
from app.auth.utils import verify_password, get_password_hash, normalize_email

logger = logging.getLogger(__name__)


class CredentialManager:
    """
    Owns the user credential lifecycle: signup, login and password change.

    Every call does one store read and at most one write. Store failures are
    surfaced as StoreError without retrying.
    """

    def __init__(self, db: Session):
        self.db = db

    def register(self, user: UserCreate) -> User:
        email = normalize_email(user.email)
        try:
            existing = get_user_by_email(self.db, email)
        except SQLAlchemyError as exc:
            logger.exception("Signup lookup failed")
            raise errors.StoreError() from exc

        if existing:
            raise errors.DuplicateEmail()

        db_user = User(
            first_name=user.firstName,
            last_name=user.lastName,
            email=email,
            phone=user.phone,
            address=user.address,
            password=get_password_hash(user.password),
        )
        try:
            self.db.add(db_user)
            self.db.commit()
            self.db.refresh(db_user)
        except IntegrityError as exc:
            # Lost a race with a concurrent signup for the same email
            self.db.rollback()
            raise errors.DuplicateEmail() from exc
        except SQLAlchemyError as exc:
            self.db.rollback()
            logger.exception("Error saving user")
            raise errors.StoreError("Error saving user") from exc

        logger.info("Registered user %s", db_user.id)
        return db_user

    def authenticate(self, email: str, password: str) -> User:
        try:
            user = get_user_by_email(self.db, normalize_email(email))
        except SQLAlchemyError as exc:
            logger.exception("Login lookup failed")
            raise errors.StoreError() from exc

        if not user:
            raise errors.NotFound("User not found")
        if not verify_password(password, user.password):
            raise errors.InvalidCredential()
        return user

    def change_password(self, identifier: str, new_password: str) -> None:
        """
        Replace the password of the user whose *email* equals ``identifier``.

        No proof of identity is required here; callers are trusted.
        """
        if not identifier or not new_password:
            raise errors.ValidationError("Missing id or password")

        identifier = normalize_email(identifier)
        hashed_password = get_password_hash(new_password)
        try:
            updated = (
                self.db.query(User)
                .filter(User.email == identifier)
                .update({User.password: hashed_password}, synchronize_session=False)
            )
            self.db.commit()
        except SQLAlchemyError as exc:
            self.db.rollback()
            logger.exception("Password update failed")
            raise errors.StoreError() from exc

        if updated == 0:
            raise errors.NotFound("User not found")
        logger.info("Password changed for %s", identifier)


def authenticate_admin(db: Session, email: str, password: str) -> bool:
    if not email or not password:
        return False
    try:
        admin = db.query(Admin).filter(Admin.email == email).first()
    except SQLAlchemyError as exc:
        logger.exception("Admin lookup failed")
        raise errors.StoreError() from exc
    return bool(admin and verify_password(password, admin.password))
