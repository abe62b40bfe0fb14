"""Pytest configuration and fixtures."""

import os

os.environ.setdefault("ENVIRONMENT", "test")

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy import create_engine  # noqa: E402
from sqlalchemy.orm import sessionmaker  # noqa: E402

from puckmind.api.dependencies import get_auth_provider, get_memory_store  # noqa: E402
from puckmind.config import get_settings  # noqa: E402
from puckmind.database import Base, get_db  # noqa: E402
from puckmind.main import app  # noqa: E402
from puckmind.services.auth import JWTAuthProvider, Principal  # noqa: E402
from puckmind.stores.memory import InMemoryStore  # noqa: E402


class AuthHeaders(dict):
    """Dict subclass that also stores user_id and email."""

    def __init__(self, *args, user_id: int | None = None, email: str | None = None, **kwargs):
        super().__init__(*args, **kwargs)
        self.user_id = user_id
        self.email = email


# Use test database - PostgreSQL in Docker, SQLite locally
if os.getenv("TEST_DATABASE_URL"):
    SQLALCHEMY_DATABASE_URL = os.getenv("TEST_DATABASE_URL")
else:
    SQLALCHEMY_DATABASE_URL = "sqlite:///./test.db"

connect_args = {"check_same_thread": False} if "sqlite" in SQLALCHEMY_DATABASE_URL else {}
engine = create_engine(SQLALCHEMY_DATABASE_URL, connect_args=connect_args)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture(scope="session", autouse=True)
def setup_test_database():
    """Create test database schema once at the start of the test session."""
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield


@pytest.fixture(scope="function", autouse=True)
def db():
    """Create a fresh database session for each test with cleanup."""
    session = TestingSessionLocal()

    yield session

    # Clean up all data after test
    session.rollback()
    for table in reversed(Base.metadata.sorted_tables):
        session.execute(table.delete())
    session.commit()
    session.close()


@pytest.fixture
def session_factory():
    """Session factory for tests that need more than one session."""
    return TestingSessionLocal


def clear_cached_collaborators():
    get_settings.cache_clear()
    get_auth_provider.cache_clear()
    get_memory_store.cache_clear()


@pytest.fixture(scope="function")
def client(db):
    """Create a test client with database override."""

    def override_get_db():
        try:
            yield db
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_auth_provider] = JWTAuthProvider
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def dev_client(db, monkeypatch):
    """Test client running with the dev auth provider and the in-memory store."""
    monkeypatch.setenv("AUTH_PROVIDER", "dev")
    monkeypatch.setenv("STORE_BACKEND", "memory")
    clear_cached_collaborators()

    def override_get_db():
        yield db

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
    clear_cached_collaborators()


def signup_and_login(client, email: str, name: str = "Test Player") -> AuthHeaders:
    """Create a player and return bearer headers for them."""
    response = client.post(
        "/api/auth/signup",
        json={
            "email": email,
            "password": "testpass123",
            "name": name,
            "team": "JWU Wildcats",
            "position": "Right Wing",
        },
    )
    assert response.status_code == 201
    user_id = response.json()["user"]["id"]

    response = client.post("/api/auth/login", json={"email": email, "password": "testpass123"})
    assert response.status_code == 200
    token = response.json()["access_token"]

    return AuthHeaders({"Authorization": f"Bearer {token}"}, user_id=user_id, email=email)


@pytest.fixture
def auth_headers(client):
    """Create a user and return auth headers with user info."""
    return signup_and_login(client, "test@example.com")


@pytest.fixture
def other_auth_headers(client):
    """A second, unrelated user."""
    return signup_and_login(client, "other@example.com", name="Other Player")


@pytest.fixture
def store():
    """Fresh in-memory store for service-level tests."""
    return InMemoryStore()


@pytest.fixture
def owner(store):
    user = store.add_user(
        {
            "email": "owner@example.com",
            "password_hash": "x",
            "name": "Owner",
            "team": "Wildcats",
            "position": "Center",
        }
    )
    return Principal.from_user(user)


@pytest.fixture
def stranger(store):
    user = store.add_user(
        {
            "email": "stranger@example.com",
            "password_hash": "x",
            "name": "Stranger",
            "team": "Bruins",
            "position": "Goalie",
        }
    )
    return Principal.from_user(user)
