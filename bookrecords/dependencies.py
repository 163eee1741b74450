"""
FastAPI Dependencies Module

Dependencies are reusable components injected into route handlers.

- DbSession: one SQLAlchemy session per request
- Store: the book store the routes talk to
- UpdatePayload: the validated body of an update request

Tests replace the store with:

    app.dependency_overrides[get_book_store] = lambda: mock_store
"""

from typing import Annotated, Any

from fastapi import Body, Depends
from pydantic import ValidationError
from sqlalchemy.orm import Session

from bookrecords.database import get_db
from bookrecords.errors import (
    BookValidationError,
    IsbnNotAllowedError,
    format_validation_errors,
)
from bookrecords.schemas import BookUpdate
from bookrecords.store import BookStore, SqlBookStore

DbSession = Annotated[Session, Depends(get_db)]


def get_book_store(db: DbSession) -> BookStore:
    """Provide the SQL-backed book store for the current request."""
    return SqlBookStore(db)


Store = Annotated[BookStore, Depends(get_book_store)]


def book_update_payload(
    payload: Annotated[dict[str, Any], Body()],
) -> BookUpdate:
    """
    Validate an update body in two gates.

    1. Any "isbn" key, whatever its value, is refused outright.
    2. The remaining fields are checked against BookUpdate.

    The body is taken as a raw dict so the isbn check runs before field
    validation and produces its own response shape.

    Raises:
        IsbnNotAllowedError: isbn present in the body
        BookValidationError: any other field rule violated
    """
    if "isbn" in payload:
        raise IsbnNotAllowedError()

    try:
        return BookUpdate.model_validate(payload)
    except ValidationError as e:
        raise BookValidationError(format_validation_errors(e.errors())) from e


UpdatePayload = Annotated[BookUpdate, Depends(book_update_payload)]
