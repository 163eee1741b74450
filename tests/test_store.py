"""
Tests for SqlBookStore

Run against a fresh SQLite in-memory database per test.
"""

from unittest.mock import MagicMock

import pytest
from sqlalchemy.exc import OperationalError

from bookrecords.errors import BookNotFoundError, StoreError
from bookrecords.models import Book
from bookrecords.store import SqlBookStore


class TestFind:

    def test_find_all_empty(self, sql_store):
        assert sql_store.find_all() == []

    def test_find_all_returns_every_book(self, sql_store, sample_book):
        sql_store.create({"isbn": "111", "title": "Animal Farm", "author": "George Orwell"})

        books = sql_store.find_all()

        assert [b.isbn for b in books] == ["9780451524935", "111"]

    def test_find_one(self, sql_store, sample_book):
        book = sql_store.find_one("9780451524935")

        assert book is not None
        assert book.title == "1984"

    def test_find_one_missing_returns_none(self, sql_store):
        assert sql_store.find_one("nope") is None


class TestCreate:

    def test_create_persists(self, sql_store, db_session):
        book = sql_store.create(
            {"isbn": "123456", "title": "Book 1", "author": "Author 1"}
        )

        assert book.isbn == "123456"
        assert book.available is True
        assert db_session.get(Book, "123456") is not None

    def test_create_duplicate_isbn_raises_store_error(self, sql_store, sample_book):
        with pytest.raises(StoreError):
            sql_store.create(
                {"isbn": sample_book.isbn, "title": "Copy", "author": "Someone"}
            )

        # Session is usable again after the rollback
        assert sql_store.find_one(sample_book.isbn).title == "1984"


class TestUpdate:

    def test_update_changes_only_given_fields(self, sql_store, sample_book):
        book = sql_store.update(sample_book.isbn, {"title": "Nineteen Eighty-Four"})

        assert book.title == "Nineteen Eighty-Four"
        assert book.author == "George Orwell"
        assert book.published_year == 1949

    def test_update_missing_raises_not_found(self, sql_store):
        with pytest.raises(BookNotFoundError):
            sql_store.update("nope", {"title": "x"})


class TestRemove:

    def test_remove(self, sql_store, sample_book):
        sql_store.remove(sample_book.isbn)

        assert sql_store.find_one("9780451524935") is None

    def test_remove_missing_raises_not_found(self, sql_store):
        with pytest.raises(BookNotFoundError):
            sql_store.remove("nope")

    def test_clear(self, sql_store, sample_book):
        assert sql_store.clear() == 1
        assert sql_store.find_all() == []


class TestDatabaseFailures:
    """SQLAlchemy errors surface as StoreError."""

    @pytest.fixture
    def broken_store(self) -> SqlBookStore:
        db = MagicMock()
        failure = OperationalError("SELECT", {}, Exception("connection lost"))
        db.execute.side_effect = failure
        db.get.side_effect = failure
        db.commit.side_effect = failure
        return SqlBookStore(db)

    def test_find_all(self, broken_store):
        with pytest.raises(StoreError):
            broken_store.find_all()

    def test_find_one(self, broken_store):
        with pytest.raises(StoreError):
            broken_store.find_one("123456")

    def test_create_rolls_back(self, broken_store):
        with pytest.raises(StoreError):
            broken_store.create({"isbn": "1", "title": "t", "author": "a"})

        broken_store.db.rollback.assert_called_once()
