"""
Shared fixtures for the MeroMart API tests.

The environment is set before the app is imported so settings load
without a .env file. Every test gets a fresh in-memory SQLite database
(one connection through StaticPool, foreign keys on) wired into the app
through a get_db override.
"""

import os

os.environ.setdefault("SECRET_KEY", "test-secret-key-not-for-production")
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["AUTO_CREATE_TABLES"] = "false"
os.environ["RATE_LIMIT_ENABLED"] = "false"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from meromart.main import app
from meromart.database import Base, get_db
from meromart.core.hashing import hash_password
from meromart.core.jwt import create_session_token
from meromart.models.users import User


@pytest.fixture
def engine():
    test_engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=test_engine)
    yield test_engine
    Base.metadata.drop_all(bind=test_engine)
    test_engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db_session(session_factory):
    """Session for arranging data and inspecting results outside requests."""
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def client(session_factory):
    def _override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = _override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


def _make_user(db, name, email, role, password="secret-pass-1"):
    user = User(
        name=name,
        email=email,
        password_hash=hash_password(password),
        role=role,
        employee_id=None,
        is_active=True,
    )
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


@pytest.fixture
def admin_user(db_session):
    return _make_user(db_session, "Asha Admin", "admin@meromart.com", "admin")


@pytest.fixture
def cashier_user(db_session):
    return _make_user(db_session, "Ram Cashier", "cashier@meromart.com", "cashier")


def bearer(user):
    token = create_session_token(user)
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def admin_headers(admin_user):
    return bearer(admin_user)


@pytest.fixture
def cashier_headers(cashier_user):
    return bearer(cashier_user)


@pytest.fixture
def bill_payload():
    def _build(**overrides):
        payload = {
            "customer_name": "Sita Sharma",
            "customer_phone": "9800000000",
            "subtotal": 100,
            "discount": 10,
            "discount_type": "amount",
            "vat_rate": 13,
            "vat_amount": 11.7,
            "net_amount": 101.7,
            "date_time": "2026-01-15T10:30:00",
            "status": "paid",
            "payment_method": "cash",
            "cashier_id": "Ram Cashier",
            "items": [
                {
                    "product_id": "p-rice",
                    "product_name": "Rice 1kg",
                    "quantity": 2,
                    "price": 50,
                    "total_price": 100,
                },
            ],
        }
        payload.update(overrides)
        return payload

    return _build
