"""Shared test fixtures."""

import base64
import os

# Must be set before userhub.database builds its engine
os.environ.setdefault("DATABASE_URL", "sqlite://")

from unittest.mock import patch

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from userhub.config import settings
from userhub.constants import AccountStatus
from userhub.database import Base, get_db
from userhub.main import app
from userhub.models import User
from userhub.services.auth_service import AuthService
from userhub.services.email_service import EmailService

# Cheap bcrypt cost keeps the suite fast
settings.bcrypt_rounds = 4

DEFAULT_PASSWORD = "P4ssword"


def basic_auth_header(email: str, password: str) -> dict:
    """Build a Basic Authorization header."""
    encoded = base64.b64encode(f"{email}:{password}".encode()).decode()
    return {"Authorization": f"Basic {encoded}"}


@pytest.fixture
def basic_auth():
    return basic_auth_header


@pytest.fixture
def db_session_maker():
    """In-memory SQLite database shared across threads via StaticPool."""
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)

    testing_session_local = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    yield testing_session_local

    engine.dispose()


@pytest.fixture
def db(db_session_maker):
    """A session for direct repository/service tests."""
    session = db_session_maker()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client(db_session_maker):
    """Create test client with in-memory database.

    Yields a tuple of (TestClient, SessionMaker) for use in tests.
    """

    def override_get_db():
        db = db_session_maker()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as test_client:
        yield test_client, db_session_maker

    app.dependency_overrides.clear()


@pytest.fixture
def mock_send_activation():
    """Patch the activation email so no network call is made."""
    with patch.object(EmailService, "send_account_activation") as mock_send:
        mock_send.return_value = None
        yield mock_send


@pytest.fixture
def add_user(db_session_maker):
    """Factory inserting a user directly, bypassing registration."""

    def _add_user(
        username: str = "user1",
        email: str = "user1@mail.com",
        password: str = DEFAULT_PASSWORD,
        active: bool = True,
        activation_token: str | None = None,
    ) -> User:
        db = db_session_maker()
        user = User(
            username=username,
            email=email,
            password_hash=AuthService.hash_password(password),
            status=AccountStatus.ACTIVE if active else AccountStatus.PENDING,
            activation_token=None if active else activation_token,
        )
        db.add(user)
        db.commit()
        db.refresh(user)
        db.close()
        return user

    return _add_user


@pytest.fixture
def add_users(db_session_maker):
    """Factory inserting ``active_count`` active then ``inactive_count`` pending users."""

    def _add_users(active_count: int, inactive_count: int = 0) -> list[User]:
        db = db_session_maker()
        users = []
        for i in range(active_count + inactive_count):
            active = i < active_count
            users.append(
                User(
                    username=f"user{i + 1}",
                    email=f"user{i + 1}@mail.com",
                    password_hash="not-a-real-hash",
                    status=AccountStatus.ACTIVE if active else AccountStatus.PENDING,
                    activation_token=None if active else f"token-{i + 1}",
                )
            )
        db.add_all(users)
        db.commit()
        for user in users:
            db.refresh(user)
        db.close()
        return users

    return _add_users
