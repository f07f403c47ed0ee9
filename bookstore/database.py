"""
Database Configuration Module

This module sets up SQLAlchemy 2.0 with PostgreSQL for the Bookstore.

Connection Pool
===============
The engine owns a QueuePool shared by every request. Connections are
checked out when a session first talks to the database and returned when
the session closes. The pool is thread-safe; handlers do no locking.

Session Management Pattern
==========================
We use the "session per request" pattern:
1. Request arrives → create a new session
2. Use session for all database operations in that request
3. Close session when request ends

On PostgreSQL every pooled connection also gets a statement_timeout, so a
slow query fails that one request instead of holding a worker forever.
"""

from collections.abc import Generator
from typing import Any

from sqlalchemy import Engine, create_engine
from sqlalchemy.engine import make_url
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker

from bookstore.config import Settings, get_settings

# Get settings instance
settings = get_settings()


def engine_options(settings: Settings) -> dict[str, Any]:
    """
    Build the keyword arguments for create_engine().

    Pool sizing only applies to pooled backends, and the statement timeout
    is passed to libpq through the "options" connect argument, which only
    PostgreSQL understands.

    Args:
        settings: Application settings

    Returns:
        Keyword arguments for create_engine()
    """
    url = make_url(settings.sqlalchemy_url)
    options: dict[str, Any] = {
        "pool_pre_ping": True,  # Verify connections are alive before using
        "echo": settings.debug,  # Log SQL in debug mode
    }

    if url.get_backend_name() == "sqlite":
        return options

    options["pool_size"] = settings.db_pool_size
    options["max_overflow"] = settings.db_max_overflow

    if url.get_backend_name() == "postgresql" and settings.db_statement_timeout_ms:
        options["connect_args"] = {
            "options": f"-c statement_timeout={settings.db_statement_timeout_ms}",
        }

    return options


def create_db_engine(settings: Settings) -> Engine:
    """Create the application engine from settings."""
    return create_engine(settings.sqlalchemy_url, **engine_options(settings))


# =============================================================================
# Database Engine
# =============================================================================
engine = create_db_engine(settings)


# =============================================================================
# Session Factory
# =============================================================================
SessionLocal = sessionmaker(
    autocommit=False,
    autoflush=False,
    bind=engine,
)


# =============================================================================
# Base Model Class
# =============================================================================
class Base(DeclarativeBase):
    """
    Base class for all SQLAlchemy models.

    Alembic uses Base.metadata to discover tables for migrations.
    """
    pass


# =============================================================================
# Dependency Injection
# =============================================================================
def get_db() -> Generator[Session, None, None]:
    """
    Database session dependency for FastAPI.

    Creates a session for the request, yields it to the route handler and
    closes it (returning the connection to the pool) when the request ends.

    Yields:
        SQLAlchemy Session instance
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


# =============================================================================
# Utility Functions
# =============================================================================
def create_tables() -> None:
    """
    Create all database tables.

    WARNING: In production, use Alembic migrations instead!
    """
    Base.metadata.create_all(bind=engine)


def drop_tables() -> None:
    """
    Drop all database tables.

    DANGER: This deletes all data! Only use in development and tests.
    """
    Base.metadata.drop_all(bind=engine)
