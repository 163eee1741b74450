"""
Error Taxonomy

Exceptions raised by the book handler and the book store, and the
handlers that turn them into HTTP responses.

Error kinds:
- BookValidationError: client input breaks a field rule -> 400 {"errors": [...]}
- IsbnNotAllowedError: update body carries an isbn -> 400 {"message": "Not allowed"}
- BookNotFoundError: no record for the isbn -> 404 {"message": "Book not found"}
- StoreError: anything the persistence layer fails at -> 500 {"error": ...}

All validation happens before the store is called, so a 400 never leaves
a partial write behind.
"""

import logging
from typing import Any, Iterable

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


# =============================================================================
# Exceptions
# =============================================================================
class BookValidationError(Exception):
    """Request data failed one or more field rules."""

    def __init__(self, errors: list[dict[str, Any]]) -> None:
        self.errors = errors
        super().__init__(f"{len(errors)} validation error(s)")


class IsbnNotAllowedError(Exception):
    """An update request tried to set the isbn."""

    message = "Not allowed"


class BookNotFoundError(Exception):
    """The store has no book with the requested isbn."""

    def __init__(self, isbn: str) -> None:
        self.isbn = isbn
        super().__init__(f"Book with isbn {isbn} not found")


class StoreError(Exception):
    """
    The book store failed to complete an operation.

    Store failures are never classified further: a lost connection and
    a constraint violation both end up as a 500.
    """


# =============================================================================
# Formatting
# =============================================================================
def format_validation_errors(errors: Iterable[dict[str, Any]]) -> list[dict[str, Any]]:
    """
    Flatten pydantic error dicts into the API's error entries.

    The leading "body" location segment added by FastAPI is dropped so that
    request-level and manually validated errors look the same.

    Example:
        {"type": "missing", "loc": ("body", "isbn"), "msg": "Field required"}
        -> {"field": "isbn", "message": "Field required", "type": "missing"}
    """
    formatted = []
    for error in errors:
        loc = [str(part) for part in error.get("loc", ())]
        if loc and loc[0] == "body":
            loc = loc[1:]
        formatted.append(
            {
                "field": ".".join(loc) or None,
                "message": error.get("msg", "Invalid value"),
                "type": error.get("type", "value_error"),
            }
        )
    return formatted


# =============================================================================
# Exception Handlers
# =============================================================================
async def request_validation_exception_handler(
    request: Request,
    exc: RequestValidationError,
) -> JSONResponse:
    """Report FastAPI request validation failures as 400 instead of 422."""
    errors = format_validation_errors(exc.errors())
    logger.info(f"Rejected {request.method} {request.url.path}: {errors}")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"errors": errors},
    )


async def book_validation_exception_handler(
    request: Request,
    exc: BookValidationError,
) -> JSONResponse:
    logger.info(f"Rejected {request.method} {request.url.path}: {exc.errors}")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"errors": exc.errors},
    )


async def isbn_not_allowed_exception_handler(
    request: Request,
    exc: IsbnNotAllowedError,
) -> JSONResponse:
    logger.info(f"Rejected {request.method} {request.url.path}: isbn in body")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"message": exc.message},
    )


async def book_not_found_exception_handler(
    request: Request,
    exc: BookNotFoundError,
) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content={"message": "Book not found"},
    )


async def store_exception_handler(
    request: Request,
    exc: StoreError,
) -> JSONResponse:
    """
    Handle book store failures.

    Logs the real error and returns a generic body so database details
    never reach the client.
    """
    logger.error(f"Store error on {request.method} {request.url.path}: {exc}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": "A database error occurred. Please try again later."},
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Attach every handler of the taxonomy to the application."""
    app.add_exception_handler(RequestValidationError, request_validation_exception_handler)
    app.add_exception_handler(BookValidationError, book_validation_exception_handler)
    app.add_exception_handler(IsbnNotAllowedError, isbn_not_allowed_exception_handler)
    app.add_exception_handler(BookNotFoundError, book_not_found_exception_handler)
    app.add_exception_handler(StoreError, store_exception_handler)
