"""
Book Store

The persistence collaborator behind the book endpoints.

BookStore is the capability set the handler depends on:
- find_all() -> every book, in store order
- find_one(isbn) -> the book, or None when there is no such isbn
- create(record) -> the stored book
- update(isbn, changes) -> the updated book
- remove(isbn) -> None

Any method may raise StoreError. update() and remove() raise
BookNotFoundError for an unknown isbn.

SqlBookStore implements the protocol on top of a SQLAlchemy session.
Routes receive a store through the get_book_store dependency, so tests
can swap in a mock without touching the database.
"""

import logging
from typing import Any, Mapping, Protocol, Sequence

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from bookrecords.errors import BookNotFoundError, StoreError
from bookrecords.models import Book

logger = logging.getLogger(__name__)


class BookStore(Protocol):
    """Abstract CRUD primitives keyed by isbn."""

    def find_all(self) -> Sequence[Any]: ...

    def find_one(self, isbn: str) -> Any | None: ...

    def create(self, record: Mapping[str, Any]) -> Any: ...

    def update(self, isbn: str, changes: Mapping[str, Any]) -> Any: ...

    def remove(self, isbn: str) -> None: ...


class SqlBookStore:
    """
    BookStore backed by the ``books`` table.

    Each write commits immediately; on any SQLAlchemy failure the session is
    rolled back and the failure is re-raised as StoreError.
    """

    def __init__(self, db: Session) -> None:
        self.db = db

    def find_all(self) -> list[Book]:
        try:
            books = self.db.execute(select(Book).order_by(Book.title)).scalars().all()
        except SQLAlchemyError as e:
            raise StoreError(f"Failed to list books: {e}") from e
        logger.debug(f"Loaded {len(books)} books")
        return list(books)

    def find_one(self, isbn: str) -> Book | None:
        try:
            return self.db.get(Book, isbn)
        except SQLAlchemyError as e:
            raise StoreError(f"Failed to load book {isbn}: {e}") from e

    def create(self, record: Mapping[str, Any]) -> Book:
        book = Book(**record)
        try:
            self.db.add(book)
            self.db.commit()
            self.db.refresh(book)
        except SQLAlchemyError as e:
            self.db.rollback()
            raise StoreError(f"Failed to create book {record.get('isbn')}: {e}") from e
        logger.info(f"Created book {book.isbn}")
        return book

    def update(self, isbn: str, changes: Mapping[str, Any]) -> Book:
        book = self._get_or_raise(isbn)
        for field, value in changes.items():
            setattr(book, field, value)
        try:
            self.db.commit()
            self.db.refresh(book)
        except SQLAlchemyError as e:
            self.db.rollback()
            raise StoreError(f"Failed to update book {isbn}: {e}") from e
        logger.info(f"Updated book {isbn}: {sorted(changes)}")
        return book

    def remove(self, isbn: str) -> None:
        book = self._get_or_raise(isbn)
        try:
            self.db.delete(book)
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            raise StoreError(f"Failed to delete book {isbn}: {e}") from e
        logger.info(f"Deleted book {isbn}")

    def clear(self) -> int:
        """Delete every book. Used by the seed script."""
        try:
            count = self.db.query(Book).delete()
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            raise StoreError(f"Failed to clear books: {e}") from e
        return count

    def _get_or_raise(self, isbn: str) -> Book:
        book = self.find_one(isbn)
        if book is None:
            raise BookNotFoundError(isbn)
        return book
