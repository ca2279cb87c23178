from sqlalchemy.orm import Session
from app.models.admin import Admin
from app.auth.utils import get_password_hash

def create_or_update_admin(db: Session, email: str, password: str) -> Admin:
    """
    Create an admin or reset the password of an existing one.

    Args:
        db: Database session
        email: Admin email
        password: Plaintext password, stored hashed

    Returns:
        Created or updated admin object
    """
    admin = db.query(Admin).filter(Admin.email == email).first()
    if admin:
        admin.password = get_password_hash(password)
    else:
        admin = Admin(email=email, password=get_password_hash(password))
        db.add(admin)
    db.commit()
    db.refresh(admin)
    return admin

def list_admins(db: Session) -> list[Admin]:
    return db.query(Admin).order_by(Admin.id).all()

def delete_admin(db: Session, admin_id: int) -> bool:
    deleted = db.query(Admin).filter(Admin.id == admin_id).delete()
    db.commit()
    return deleted > 0
