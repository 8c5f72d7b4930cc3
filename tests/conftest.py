"""Pytest configuration and fixtures."""

import os

# The app must not probe the real database on startup during tests
os.environ.setdefault("DATABASE_STARTUP_CHECK", "false")

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy import create_engine  # noqa: E402
from sqlalchemy.orm import sessionmaker  # noqa: E402

from src import models  # noqa: E402, F401
from src.database import Base, get_db  # noqa: E402
from src.main import app  # noqa: E402

TEST_PASSWORD = "testpass123"

# Use test database - PostgreSQL in Docker, SQLite locally
if os.getenv("DATABASE_URL"):
    # Running in Docker - use PostgreSQL test database
    SQLALCHEMY_DATABASE_URL = os.getenv("DATABASE_URL").replace(
        "/holo_bookmarks", "/holo_bookmarks_test"
    )
else:
    # Running locally - use SQLite
    SQLALCHEMY_DATABASE_URL = "sqlite:///./test.db"

connect_args = {"check_same_thread": False} if "sqlite" in SQLALCHEMY_DATABASE_URL else {}
engine = create_engine(SQLALCHEMY_DATABASE_URL, connect_args=connect_args)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture(scope="session", autouse=True)
def setup_test_database():
    """Create test database schema once at the start of the test session."""
    if "postgresql" in SQLALCHEMY_DATABASE_URL:
        from sqlalchemy_utils import create_database, database_exists

        if not database_exists(SQLALCHEMY_DATABASE_URL):
            create_database(SQLALCHEMY_DATABASE_URL)

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


@pytest.fixture(scope="function")
def client(db):
    """Create a test client with database override."""

    def override_get_db():
        try:
            yield db
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def signup(client):
    """Return a helper that signs a user up; the client keeps that user's session cookie."""

    def _signup(email: str = "test@example.com", name: str = "Test User") -> dict:
        response = client.post(
            "/api/v1/auth/signup",
            json={"email": email, "password": TEST_PASSWORD, "name": name},
        )
        assert response.status_code == 201, response.text
        return response.json()

    return _signup


@pytest.fixture
def auth_user(signup):
    """Sign up the default test user and return their profile."""
    return signup()


@pytest.fixture
def make_bookmark(client):
    """Return a helper that creates a bookmark as the currently signed-in user."""

    def _make(title: str = "Docs", category: str = "Development", **extra) -> dict:
        payload = {"title": title, "url": "https://example.com/docs", "category": category}
        payload.update(extra)
        response = client.post("/api/v1/bookmarks", json=payload)
        assert response.status_code == 201, response.text
        return response.json()

    return _make
