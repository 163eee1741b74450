"""
Pydantic Schemas Package

Schemas are kept separate from the SQLAlchemy model so the API controls
exactly what is accepted and what is exposed.

Schema Naming Convention:
- XxxCreate: Fields required when creating a new record
- XxxUpdate: Fields allowed when updating (all optional)
- XxxResponse: Fields returned in API responses
"""

from bookrecords.schemas.book import (
    BookBase,
    BookCreate,
    BookEnvelope,
    BookListResponse,
    BookResponse,
    BookUpdate,
    MessageResponse,
    ValidationErrorEntry,
    ValidationErrorResponse,
)

__all__ = [
    "BookBase",
    "BookCreate",
    "BookEnvelope",
    "BookListResponse",
    "BookResponse",
    "BookUpdate",
    "MessageResponse",
    "ValidationErrorEntry",
    "ValidationErrorResponse",
]
