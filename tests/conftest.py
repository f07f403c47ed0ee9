"""
pytest Fixtures for Bookstore Tests

Shared fixtures used across all test files.

For database tests, we use:
- session scope for the engine (expensive to create)
- function scope for sessions (isolation between tests)

Failure paths are exercised by swapping the query layer for a stub whose
operations raise, through app.dependency_overrides.
"""

import os

# Keep the test run independent of any developer .env or DB_* variables
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["LOG_LEVEL"] = "DEBUG"
os.environ["APP_NAME"] = "Bookstore"

from collections.abc import Generator
from decimal import Decimal

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.exc import OperationalError
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from bookstore.config import ENV_FILE_VAR, get_settings
from bookstore.database import Base, get_db
from bookstore.dependencies import get_queries
from bookstore.main import app
from bookstore.models import Book

# =============================================================================
# SETTINGS ISOLATION
# =============================================================================
@pytest.fixture(autouse=True)
def settings_source(monkeypatch):
    """
    Undo env file selection made by load_settings() during a test.

    load_settings() points get_settings() at the file it validated; this
    restores the default source and drops any settings cached from it.
    """
    monkeypatch.setenv(ENV_FILE_VAR, ".env")
    yield
    get_settings.cache_clear()


# =============================================================================
# DATABASE FIXTURES
# =============================================================================
# SQLite in-memory: fast, isolated, no external database needed.
# StaticPool keeps the single connection alive, otherwise the in-memory
# database would disappear between connections.


@pytest.fixture(scope="session")
def engine():
    """Create a SQLite in-memory database engine with the schema."""
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    Base.metadata.create_all(bind=engine)

    yield engine

    Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def db_session(engine) -> Generator[Session, None, None]:
    """
    Create a fresh database session for each test.

    The session is bound to an outer transaction that is rolled back
    afterwards, so commits made by the code under test never leak between
    tests.
    """
    TestSessionLocal = sessionmaker(
        autocommit=False,
        autoflush=False,
        bind=engine,
    )

    connection = engine.connect()
    transaction = connection.begin()
    session = TestSessionLocal(bind=connection)

    yield session

    session.close()
    transaction.rollback()
    connection.close()


@pytest.fixture(scope="function")
def client(db_session: Session) -> Generator[TestClient, None, None]:
    """Create a test client bound to the test database session."""

    def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


# =============================================================================
# FAILURE INJECTION
# =============================================================================
class FailingQueries:
    """Query layer stand-in whose every operation fails like a lost database."""

    def __init__(self) -> None:
        self.error = OperationalError(
            "SELECT 1", {}, Exception("connection refused")
        )

    def count_books(self) -> int:
        raise self.error

    def list_books(self):
        raise self.error

    def create_book(self, params):
        raise self.error


@pytest.fixture
def failing_queries(client: TestClient) -> FailingQueries:
    """Make every query in the app fail for the duration of the test."""
    queries = FailingQueries()
    app.dependency_overrides[get_queries] = lambda: queries
    return queries


# =============================================================================
# SAMPLE DATA FIXTURES
# =============================================================================
@pytest.fixture
def sample_book(db_session: Session) -> Book:
    """Create a sample book for testing."""
    book = Book(
        title="1984",
        author="George Orwell",
        price=Decimal("12.99"),
    )
    db_session.add(book)
    db_session.commit()
    db_session.refresh(book)
    return book


@pytest.fixture
def multiple_books(db_session: Session) -> list[Book]:
    """Create several books."""
    books = [
        Book(title=f"Test Book {i + 1}", author=f"Author {i + 1}")
        for i in range(5)
    ]
    db_session.add_all(books)
    db_session.commit()
    for book in books:
        db_session.refresh(book)

    return books
