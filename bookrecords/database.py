"""
Database Configuration Module

SQLAlchemy 2.0 setup backing the SQL book store.

Synchronous SQLAlchemy is used: the routes are plain ``def`` functions,
which FastAPI runs in its threadpool, so each store call simply blocks
until the database answers.

Session Management Pattern
==========================
"Session per request":
1. Request arrives -> create a new session
2. The book store uses that session for its single operation
3. The store commits on success, rolls back on failure
4. The session is closed when the request ends
"""

from collections.abc import Generator

from sqlalchemy import create_engine
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker

from bookrecords.config import get_settings

settings = get_settings()


# =============================================================================
# Database Engine
# =============================================================================
# pool_size / max_overflow only make sense for server databases;
# SQLite needs check_same_thread=False because routes run in a threadpool.

def _engine_options() -> dict:
    if settings.is_sqlite:
        return {"connect_args": {"check_same_thread": False}}
    return {
        "pool_size": settings.db_pool_size,
        "max_overflow": settings.db_max_overflow,
        "pool_pre_ping": True,
    }


engine = create_engine(
    settings.database_url,
    echo=settings.db_echo,
    **_engine_options(),
)


# =============================================================================
# Session Factory
# =============================================================================
SessionLocal = sessionmaker(
    autocommit=False,
    autoflush=False,
    bind=engine,
)


class Base(DeclarativeBase):
    """
    Base class for all SQLAlchemy models.

    Alembic uses ``Base.metadata`` to discover tables for migrations.
    """
    pass


# =============================================================================
# Dependency Injection
# =============================================================================
def get_db() -> Generator[Session, None, None]:
    """
    Database session dependency for FastAPI.

    Code before yield creates the session, code after yield closes it,
    even if the route raised.

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

    Handy for development and tests. Use Alembic migrations in production.
    """
    Base.metadata.create_all(bind=engine)


def drop_tables() -> None:
    """
    Drop all database tables.

    DANGER: This deletes all data! Development and tests only.
    """
    Base.metadata.drop_all(bind=engine)
