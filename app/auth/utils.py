import logging
import secrets
import smtplib
from email.mime.text import MIMEText
from email.mime.multipart import MIMEMultipart
from passlib.context import CryptContext
from app.core.config import settings

logger = logging.getLogger(__name__)

# Password hashing
pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto",
    bcrypt__rounds=settings.BCRYPT_ROUNDS,
)

def verify_password(plain_password: str, hashed_password: str) -> bool:
    try:
        return pwd_context.verify(plain_password, hashed_password)
    except ValueError:
        # Stored value is not a recognised hash (e.g. a legacy plaintext row)
        logger.warning("Stored password is not a bcrypt hash; rejecting")
        return False

def get_password_hash(password: str) -> str:
    return pwd_context.hash(password)

def normalize_email(email: str) -> str:
    """Lowercase the domain part, the same way signup validation stores it."""
    local, sep, domain = email.strip().rpartition("@")
    if not sep:
        return email.strip()
    return f"{local}@{domain.lower()}"

def generate_otp(length: int = settings.OTP_LENGTH) -> str:
    """Uniform random code in [10**(length-1), 10**length - 1]."""
    low = 10 ** (length - 1)
    return str(low + secrets.randbelow(9 * low))

def send_email(to_email: str, subject: str, body: str) -> bool:
    try:
        msg = MIMEMultipart()
        msg['From'] = settings.EMAIL_USERNAME
        msg['To'] = to_email
        msg['Subject'] = subject

        msg.attach(MIMEText(body, 'plain'))

        with smtplib.SMTP(settings.EMAIL_HOST, settings.EMAIL_PORT, timeout=30) as server:
            server.starttls()
            server.login(settings.EMAIL_USERNAME, settings.EMAIL_PASSWORD)
            server.send_message(msg)
        return True
    except (smtplib.SMTPException, OSError):
        logger.exception("Error sending email to %s", to_email)
        return False

def send_otp_email(email: str, otp: str) -> bool:
    subject = "Your OTP Code"
    body = f"Your OTP code is: {otp}"
    return send_email(email, subject, body)
