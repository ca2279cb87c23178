import os

# Must be set before the application modules read their settings
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ["OTP_TTL_SECONDS"] = "600"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.main import app
from app.database import Base, get_db
from app.auth.otp import InMemoryOtpStore, OtpExchange
from app.core.errors import GatewayError
from app.dependencies import get_otp_exchange, get_payment_gateway

engine = create_engine(
    "sqlite://",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


class FakeMailer:
    def __init__(self, ok: bool = True):
        self.ok = ok
        self.sent = []

    def __call__(self, email: str, code: str) -> bool:
        self.sent.append((email, code))
        return self.ok

    def last_code(self, email: str) -> str:
        return [code for to, code in self.sent if to == email][-1]


class FakeGateway:
    def __init__(self, fail: bool = False):
        self.fail = fail
        self.calls = []

    def create_order(self, amount, currency=None):
        self.calls.append((amount, currency))
        if self.fail:
            raise GatewayError()
        return {
            "id": "order_test123",
            "entity": "order",
            "amount": int(round(amount * 100)),
            "currency": currency or "INR",
            "status": "created",
        }


@pytest.fixture
def db_session():
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def mailer():
    return FakeMailer()


@pytest.fixture
def otp_exchange(mailer):
    return OtpExchange(store=InMemoryOtpStore(), send_email=mailer, ttl_seconds=600)


@pytest.fixture
def gateway():
    return FakeGateway()


@pytest.fixture
def client(db_session, otp_exchange, gateway):
    def override_get_db():
        db = TestingSessionLocal()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_otp_exchange] = lambda: otp_exchange
    app.dependency_overrides[get_payment_gateway] = lambda: gateway
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
