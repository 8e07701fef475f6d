"""Pytest fixtures and configuration for todolist tests."""

import pytest
from datetime import datetime
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, Session
from sqlalchemy.pool import StaticPool
from fastapi.testclient import TestClient

from todolist.auth.jwt import TokenIssuer
from todolist.auth.passwords import PasswordHasher
from todolist.config import AppSettings, JwtSettings
from todolist.database.database import Base
from todolist.database.repository import TaskRepository
from todolist.database.user_repository import UserRepository
from todolist.models.user import User


# Use in-memory SQLite database for tests
TEST_DATABASE_URL = "sqlite:///:memory:"

TEST_PASSWORD = "Secret123!"
OTHER_PASSWORD = "Other123!"


@pytest.fixture(scope="session")
def password_hasher():
    """bcrypt at its minimum work factor keeps the suite fast."""
    return PasswordHasher(rounds=4)


@pytest.fixture
def jwt_settings():
    return JwtSettings(
        secret_key="test-secret-key-that-is-long-enough-for-hs256",
        algorithm="HS256",
        issuer="todolist-test",
        audience="todolist-test-client",
        expiration_minutes=60,
    )


@pytest.fixture
def token_issuer(jwt_settings):
    return TokenIssuer(jwt_settings)


@pytest.fixture
def test_user_id():
    """Test user ID for multi-user testing."""
    return "6f1c2d3e-4a5b-4c6d-8e7f-9a0b1c2d3e4f"


@pytest.fixture
def other_user_id():
    """A second user, used to check ownership isolation."""
    return "0a9b8c7d-6e5f-4a3b-9c1d-2e3f4a5b6c7d"


@pytest.fixture
def test_user(test_user_id, password_hasher):
    """Create a test user object."""
    return User(
        id=test_user_id,
        email="test@example.com",
        password_hash=password_hasher.hash(TEST_PASSWORD),
        full_name="Test User",
        created_at=datetime.utcnow(),
    )


@pytest.fixture
def other_user(other_user_id, password_hasher):
    return User(
        id=other_user_id,
        email="other@example.com",
        password_hash=password_hasher.hash(OTHER_PASSWORD),
        full_name="Other User",
        created_at=datetime.utcnow(),
    )


@pytest.fixture(scope="function")
def db_session(test_user, other_user):
    """Create a database session for testing.

    Uses an in-memory SQLite database that is created fresh for each test,
    with the two test users already inserted.
    """
    from todolist.database import models  # noqa: F401  (registers tables)

    # Create engine with StaticPool for in-memory database
    engine = create_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
        echo=False
    )

    # Create all tables
    Base.metadata.create_all(bind=engine)

    # Create session
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    session = TestingSessionLocal()

    users = UserRepository(session)
    users.add(test_user)
    users.add(other_user)

    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture
def task_repository(db_session: Session):
    """Create a TaskRepository instance for testing."""
    return TaskRepository(db_session)


@pytest.fixture
def user_repository(db_session: Session):
    return UserRepository(db_session)


@pytest.fixture
def app_settings():
    return AppSettings(seed_database=False, expose_error_detail=False, bcrypt_rounds=4)


@pytest.fixture
def app(jwt_settings, app_settings, db_session: Session):
    """FastAPI app with the database dependency pointed at the test session."""
    from todolist.api.app import create_app
    from todolist.database.database import get_db

    application = create_app(
        jwt_settings=jwt_settings,
        app_settings=app_settings,
        initialize_database=False,
    )

    # Override the get_db dependency to use our test database session
    def override_get_db():
        try:
            yield db_session
        finally:
            pass  # Don't close the session here, let the fixture handle it

    application.dependency_overrides[get_db] = override_get_db
    yield application
    application.dependency_overrides.clear()


@pytest.fixture
def test_client(app):
    """Create a FastAPI test client (no credentials attached)."""
    with TestClient(app) as client:
        yield client


@pytest.fixture
def auth_headers(token_issuer, test_user):
    """Bearer header for the test user."""
    return {"Authorization": f"Bearer {token_issuer.issue(test_user).token}"}


@pytest.fixture
def other_auth_headers(token_issuer, other_user):
    """Bearer header for the second user."""
    return {"Authorization": f"Bearer {token_issuer.issue(other_user).token}"}


@pytest.fixture
def test_password():
    """Plain-text password of `test_user`."""
    return TEST_PASSWORD
