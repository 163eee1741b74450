"""
Books Router

CRUD endpoints for book records, addressed by ISBN.

Every endpoint makes exactly one call to the injected book store and maps
the outcome to a response:
- validation problems are rejected before the store is touched (400)
- a missing record is reported as 404
- any store failure propagates as StoreError and becomes a 500
  (see bookrecords.errors)
"""

import logging
from collections.abc import Mapping

from fastapi import APIRouter, Request, status

from bookrecords.config import get_settings
from bookrecords.dependencies import Store, UpdatePayload
from bookrecords.errors import BookNotFoundError
from bookrecords.schemas import (
    BookCreate,
    BookEnvelope,
    BookListResponse,
    BookResponse,
    MessageResponse,
    ValidationErrorResponse,
)
from bookrecords.services.rate_limiter import limiter

logger = logging.getLogger(__name__)
settings = get_settings()

router = APIRouter(
    prefix="/books",
    tags=["Books"],
    responses={
        500: {"description": "Book store failure"},
    },
)


def to_envelope(record, isbn: str | None = None) -> BookEnvelope:
    """
    Wrap a store record (ORM row or dict) as {"book": {...}}.

    Stores may hand back just the stored fields of a dict record; when the
    record has no isbn, the one from the request path is filled in.
    """
    if isbn is not None and isinstance(record, Mapping) and not record.get("isbn"):
        record = {**record, "isbn": isbn}
    return BookEnvelope(book=BookResponse.model_validate(record))


@router.get(
    "",
    response_model=BookListResponse,
    summary="List all books",
)
@limiter.limit(settings.rate_limit_default)
def list_books(request: Request, store: Store) -> BookListResponse:
    """Return every book, in the order the store provides them."""
    books = store.find_all()
    return BookListResponse(
        books=[BookResponse.model_validate(book) for book in books],
    )


@router.get(
    "/{isbn}",
    response_model=BookEnvelope,
    summary="Get a book by ISBN",
    responses={404: {"description": "Book not found"}},
)
@limiter.limit(settings.rate_limit_default)
def get_book(request: Request, isbn: str, store: Store) -> BookEnvelope:
    book = store.find_one(isbn)
    if book is None:
        raise BookNotFoundError(isbn)
    return to_envelope(book, isbn)


@router.post(
    "",
    response_model=BookEnvelope,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new book",
    responses={400: {"model": ValidationErrorResponse}},
)
@limiter.limit(settings.rate_limit_write)
def create_book(
    request: Request,
    book_data: BookCreate,
    store: Store,
) -> BookEnvelope:
    """
    Create a new book.

    isbn, title and author must be present and non-empty; otherwise the
    request fails with 400 and an ``errors`` list before the store is called.
    Optional fields left out of the request are not passed to the store.
    """
    record = book_data.model_dump(exclude_unset=True)
    book = store.create(record)
    return to_envelope(book)


@router.put(
    "/{isbn}",
    response_model=BookEnvelope,
    summary="Update a book",
    responses={
        400: {"description": "isbn in body, or invalid fields"},
        404: {"description": "Book not found"},
    },
)
@limiter.limit(settings.rate_limit_write)
def update_book(
    request: Request,
    isbn: str,
    book_data: UpdatePayload,
    store: Store,
) -> BookEnvelope:
    """
    Update an existing book.

    The ISBN lives in the path only: a body carrying ``isbn`` is answered
    with 400 {"message": "Not allowed"}. Only the fields present in the
    body are changed.
    """
    book = store.update(isbn, book_data.changes())
    return to_envelope(book, isbn)


@router.delete(
    "/{isbn}",
    response_model=MessageResponse,
    summary="Delete a book",
    responses={404: {"description": "Book not found"}},
)
@limiter.limit(settings.rate_limit_write)
def delete_book(request: Request, isbn: str, store: Store) -> MessageResponse:
    store.remove(isbn)
    return MessageResponse(message="Book deleted")
