from typing import List
from decouple import config, Csv


def _database_url() -> str:
    url = config("DATABASE_URL", default="")
    if url:
        return url
    user = config("MYSQLUSER", default="root")
    password = config("MYSQLPASSWORD", default="")
    host = config("MYSQLHOST", default="localhost")
    port = config("MYSQLPORT", default=3306, cast=int)
    database = config("MYSQL_DATABASE", default="storefront")
    return f"mysql+pymysql://{user}:{password}@{host}:{port}/{database}"


class Settings():
    PROJECT_NAME: str = "Storefront"

    # CORS Configuration
    ALLOWED_ORIGINS: List[str] = config("ALLOWED_ORIGINS", default="*", cast=Csv())
    ALLOW_CREDENTIALS: bool = config("ALLOW_CREDENTIALS", default=False, cast=bool)
    ALLOW_METHODS: List[str] = ["GET", "POST", "PUT", "DELETE", "OPTIONS"]
    ALLOW_HEADERS: List[str] = ["*"]

    DATABASE_URL: str = _database_url()

    # Password hashing work factor
    BCRYPT_ROUNDS: int = config("BCRYPT_ROUNDS", default=10, cast=int)

    # OTP, 0 disables expiry
    OTP_LENGTH: int = 6
    OTP_TTL_SECONDS: int = config("OTP_TTL_SECONDS", default=600, cast=int)

    # Email
    EMAIL_HOST: str = config("EMAIL_HOST", default="smtp.gmail.com")
    EMAIL_PORT: int = config("EMAIL_PORT", default=587, cast=int)
    EMAIL_USERNAME: str = config("EMAIL_USERNAME", default="")
    EMAIL_PASSWORD: str = config("EMAIL_PASSWORD", default="")

    # Razorpay
    RAZORPAY_KEY_ID: str = config("RAZORPAY_KEY_ID", default="")
    RAZORPAY_KEY_SECRET: str = config("RAZORPAY_KEY_SECRET", default="")
    RAZORPAY_BASE_URL: str = config("RAZORPAY_BASE_URL", default="https://api.razorpay.com/v1")
    PAYMENT_TIMEOUT_SECONDS: int = config("PAYMENT_TIMEOUT_SECONDS", default=10, cast=int)
    DEFAULT_CURRENCY: str = config("DEFAULT_CURRENCY", default="INR")

    LOG_LEVEL: str = config("LOG_LEVEL", default="INFO")

    class Config:
        case_sensitive = True

settings = Settings()
