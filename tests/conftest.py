"""Pytest fixtures for async FastAPI testing.

Loads `.env.test` before any app module reads settings, initializes a clean
SQLite test database, and provides an `AsyncClient` for integration tests.
"""
import os
import pathlib
import uuid

import pytest
from dotenv import load_dotenv

ROOT = pathlib.Path(__file__).resolve().parent.parent

# Settings are read at import time, so this has to run before app imports.
load_dotenv(dotenv_path=str(ROOT / ".env.test"))
os.environ.setdefault("DATABASE_URL", "sqlite:///./test.db")
os.environ.setdefault("SECRET_KEY", "test-secret-key")


@pytest.fixture(scope="session")
def prepare_database():
    """Create clean schema for the test session."""
    from app.core.database import engine, Base

    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)

    yield

    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def db_session(prepare_database):
    """Yield a SQLAlchemy session for direct DB access in tests."""
    from app.core.database import SessionLocal

    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture(autouse=True)
def clear_rate_limits():
    from app.dependencies.rate_limit import reset_rate_limits

    reset_rate_limits()
    yield
    reset_rate_limits()


@pytest.fixture
def api_app(prepare_database):
    from app.main import create_app

    return create_app()


@pytest.fixture
async def async_client(api_app):
    """Provide an httpx AsyncClient configured with the FastAPI app."""
    from httpx import AsyncClient, ASGITransport

    async with AsyncClient(transport=ASGITransport(app=api_app), base_url="http://testserver") as client:
        yield client


@pytest.fixture
def unique_email():
    return f"user-{uuid.uuid4().hex[:8]}@example.com"


@pytest.fixture
def make_user(db_session):
    """Insert a user directly and return it."""
    from app.models.user import User
    from app.core.security import hash_password

    def _make(email=None, password="StrongPassw0rd!"):
        user = User(
            email=email or f"user-{uuid.uuid4().hex[:8]}@example.com",
            password_hash=hash_password(password),
        )
        db_session.add(user)
        db_session.commit()
        db_session.refresh(user)
        return user

    return _make
