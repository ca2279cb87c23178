from sqlalchemy.orm import Session
from app.models.bank_profile import BankProfile
from app.schemas.bank_profile import BankProfileCreate

def create_bank_profile(db: Session, profile: BankProfileCreate) -> BankProfile:
    """
    Save payout details submitted from the storefront.

    Args:
        db: Database session
        profile: Profile data to be inserted

    Returns:
        Created profile object
    """
    db_profile = BankProfile(
        first_name=profile.firstName,
        last_name=profile.lastName,
        email=profile.email,
        phone=profile.phone,
        address=profile.address,
        pincode=profile.pincode,
        account_number=profile.accountNumber,
        ifsc_code=profile.ifscCode,
    )
    db.add(db_profile)
    db.commit()
    db.refresh(db_profile)
    return db_profile

def list_bank_profiles(db: Session) -> list[BankProfile]:
    return db.query(BankProfile).order_by(BankProfile.id).all()

def delete_bank_profile(db: Session, profile_id: int) -> bool:
    deleted = db.query(BankProfile).filter(BankProfile.id == profile_id).delete()
    db.commit()
    return deleted > 0
