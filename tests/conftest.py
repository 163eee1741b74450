"""
pytest Fixtures for Book Records API Tests

Two kinds of fixtures live here:

1. Mocked store (handler tests)
   - mock_store: a MagicMock shaped like SqlBookStore
   - client: TestClient with get_book_store overridden to return mock_store
   Each test decides what the store returns or raises, so every status
   code path can be reached without a database.

2. Real SQL store (store and integration tests)
   - engine / db_session: fresh SQLite in-memory database per test
   - sql_client: TestClient wired to that database through get_db
"""

# =============================================================================
# TEST ENVIRONMENT SETUP
# =============================================================================
# Set environment variables BEFORE importing the app: settings are read
# once at import time.
import os

os.environ["RATE_LIMIT_ENABLED"] = "false"
os.environ["DATABASE_URL"] = "sqlite://"

from collections.abc import Generator
from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from bookrecords.database import Base, get_db
from bookrecords.dependencies import get_book_store
from bookrecords.main import app
from bookrecords.models import Book
from bookrecords.store import SqlBookStore


# =============================================================================
# MOCKED STORE FIXTURES
# =============================================================================
@pytest.fixture
def mock_store() -> MagicMock:
    """A store double; configure return_value / side_effect per test."""
    return MagicMock(spec=SqlBookStore)


@pytest.fixture
def client(mock_store: MagicMock) -> Generator[TestClient, None, None]:
    """Test client whose routes talk to mock_store."""
    app.dependency_overrides[get_book_store] = lambda: mock_store

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


@pytest.fixture
def new_book() -> dict:
    """A complete, valid create payload."""
    return {
        "isbn": "123456",
        "title": "Book 1",
        "author": "Author 1",
        "published_year": 2021,
        "genre": "Fiction",
        "available": True,
    }


# =============================================================================
# DATABASE FIXTURES
# =============================================================================
# StaticPool keeps the single in-memory connection alive; without it the
# database would disappear between connections.

@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)

    yield engine

    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def db_session(engine) -> Generator[Session, None, None]:
    TestSessionLocal = sessionmaker(
        autocommit=False,
        autoflush=False,
        bind=engine,
    )
    session = TestSessionLocal()

    yield session

    session.close()


@pytest.fixture
def sql_store(db_session: Session) -> SqlBookStore:
    return SqlBookStore(db_session)


@pytest.fixture
def sql_client(db_session: Session) -> Generator[TestClient, None, None]:
    """
    Test client backed by the real SQL store.

    get_db is overridden, so the default get_book_store builds a
    SqlBookStore on the test session.
    """

    def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


@pytest.fixture
def sample_book(db_session: Session) -> Book:
    book = Book(
        isbn="9780451524935",
        title="1984",
        author="George Orwell",
        published_year=1949,
        genre="Dystopian",
        available=True,
    )
    db_session.add(book)
    db_session.commit()
    db_session.refresh(book)
    return book
