"""
Book Pydantic Schemas

Request and response models for the book endpoints.

- BookCreate: full record; isbn, title and author are required
- BookUpdate: partial record; isbn is never accepted here
- BookResponse: a book as returned to clients
- BookEnvelope / BookListResponse / MessageResponse: response wrappers
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator


def _require_text(v: str | None, name: str) -> str:
    if v is None or not v.strip():
        raise ValueError(f"{name} cannot be empty or whitespace")
    return v.strip()


def _require_value(v, name: str):
    if v is None:
        raise ValueError(f"{name} cannot be null")
    return v


class BookBase(BaseModel):
    """Fields shared by create requests and responses."""

    title: str = Field(
        ...,
        max_length=500,
        description="Book title",
        examples=["1984", "Pride and Prejudice"],
    )

    author: str = Field(
        ...,
        max_length=255,
        description="Author name",
        examples=["George Orwell"],
    )

    # strict: "2021" and 2021.0 are type errors, not years
    published_year: int | None = Field(
        default=None,
        strict=True,
        description="Year of publication",
        examples=[1949],
    )

    genre: str | None = Field(
        default=None,
        max_length=100,
        description="Genre label",
        examples=["Fiction"],
    )

    available: bool | None = Field(
        default=None,
        description="Whether the book is available",
    )


class BookCreate(BookBase):
    """
    Schema for creating a new book.

    The client supplies the isbn; it becomes the book's permanent key.

    Example request body:
    {
        "isbn": "123456",
        "title": "Book 1",
        "author": "Author 1",
        "published_year": 2021,
        "genre": "Fiction",
        "available": true
    }
    """

    isbn: str = Field(
        ...,
        max_length=20,
        description="Unique book identifier",
        examples=["9780451524935"],
    )

    model_config = ConfigDict(extra="forbid")

    @field_validator("isbn")
    @classmethod
    def isbn_must_not_be_empty(cls, v: str) -> str:
        return _require_text(v, "ISBN")

    @field_validator("title")
    @classmethod
    def title_must_not_be_empty(cls, v: str) -> str:
        return _require_text(v, "Title")

    @field_validator("author")
    @classmethod
    def author_must_not_be_empty(cls, v: str) -> str:
        return _require_text(v, "Author")

    @field_validator("available")
    @classmethod
    def available_must_not_be_null(cls, v: bool | None) -> bool:
        return _require_value(v, "Available")


class BookUpdate(BaseModel):
    """
    Schema for updating an existing book.

    All fields are optional; only the fields present in the request are
    written. An explicit null for title, author or available is rejected
    because those columns are NOT NULL.
    """

    title: str | None = Field(default=None, max_length=500)
    author: str | None = Field(default=None, max_length=255)
    published_year: int | None = Field(default=None, strict=True)
    genre: str | None = Field(default=None, max_length=100)
    available: bool | None = Field(default=None)

    model_config = ConfigDict(extra="forbid")

    @field_validator("title")
    @classmethod
    def title_must_not_be_empty(cls, v: str | None) -> str:
        return _require_text(v, "Title")

    @field_validator("author")
    @classmethod
    def author_must_not_be_empty(cls, v: str | None) -> str:
        return _require_text(v, "Author")

    @field_validator("available")
    @classmethod
    def available_must_not_be_null(cls, v: bool | None) -> bool:
        return _require_value(v, "Available")

    def changes(self) -> dict:
        """Only the fields the client actually sent."""
        return self.model_dump(exclude_unset=True)


class BookResponse(BaseModel):
    """
    A book as returned to clients.

    Built from ORM rows (from_attributes) or from plain dicts returned by
    other store implementations.
    """

    isbn: str
    title: str
    author: str
    published_year: int | None = None
    genre: str | None = None
    available: bool | None = None

    model_config = ConfigDict(
        from_attributes=True,
        json_schema_extra={
            "example": {
                "isbn": "9780451524935",
                "title": "1984",
                "author": "George Orwell",
                "published_year": 1949,
                "genre": "Fiction",
                "available": True,
            }
        },
    )


class BookEnvelope(BaseModel):
    """Single-book response body: {"book": {...}}."""

    book: BookResponse


class BookListResponse(BaseModel):
    """List response body: {"books": [...]} in store order."""

    books: list[BookResponse] = Field(default_factory=list)


class MessageResponse(BaseModel):
    """Plain message body, e.g. {"message": "Book deleted"}."""

    message: str


class ValidationErrorEntry(BaseModel):
    field: str | None = None
    message: str
    type: str


class ValidationErrorResponse(BaseModel):
    """400 body for field rule violations."""

    errors: list[ValidationErrorEntry]
