from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker
from contextlib import contextmanager
from app.core.config import settings

SQLALCHEMY_DATABASE_URL = settings.DATABASE_URL

if SQLALCHEMY_DATABASE_URL.startswith("sqlite"):
    # Local runs only; SQLite connections are shared across the request threadpool
    engine = create_engine(
        SQLALCHEMY_DATABASE_URL,
        connect_args={"check_same_thread": False}
    )
else:
    engine = create_engine(
        SQLALCHEMY_DATABASE_URL,
        pool_pre_ping=True,       # Detect and refresh dead connections
        pool_size=10,             # Base number of DB connections to keep
        max_overflow=20           # Allow 20 extra temporary connections if pool is exhausted
    )

# Create a session factory
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# Create the declarative base for models
Base = declarative_base()

# For FastAPI dependency injection
def get_db():
    """
    Standard generator for FastAPI.
    Usage: Depends(get_db)
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()

# Context manager for non-FastAPI use (scripts and migrations helpers)
@contextmanager
def get_db_session():
    """
    Context manager for using database sessions safely outside FastAPI.
    Usage: with get_db_session() as db:
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
