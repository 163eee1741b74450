"""
Book Model

The only table of the service. Books are addressed by ISBN, which doubles
as the primary key: it is supplied by the client on create and never
changes afterwards.
"""

from datetime import datetime

from sqlalchemy import Boolean, DateTime, Integer, String, func, true
from sqlalchemy.orm import Mapped, mapped_column

from bookrecords.database import Base


class Book(Base):
    """
    Book row.

    Table: books

    Fields:
    - isbn: Primary key, client-supplied, immutable
    - title: Book title (required)
    - author: Author name (required)
    - published_year: Year of publication
    - genre: Free-form genre label
    - available: Whether the book can currently be borrowed

    Example:
        book = Book(
            isbn="9780451524935",
            title="1984",
            author="George Orwell",
            published_year=1949,
        )
    """

    __tablename__ = "books"

    isbn: Mapped[str] = mapped_column(
        String(20),
        primary_key=True,
        comment="International Standard Book Number"
    )

    title: Mapped[str] = mapped_column(
        String(500),
        index=True,
        nullable=False,
        comment="Book title"
    )

    author: Mapped[str] = mapped_column(
        String(255),
        index=True,
        nullable=False,
        comment="Author name"
    )

    published_year: Mapped[int | None] = mapped_column(
        Integer,
        nullable=True,
        comment="Year of publication"
    )

    genre: Mapped[str | None] = mapped_column(
        String(100),
        nullable=True,
        comment="Genre label"
    )

    available: Mapped[bool] = mapped_column(
        Boolean,
        nullable=False,
        default=True,
        server_default=true(),
        comment="Whether the book is available"
    )

    # -------------------------------------------------------------------------
    # Timestamps
    # -------------------------------------------------------------------------
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False,
    )

    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False,
    )

    def __repr__(self) -> str:
        return f"Book(isbn='{self.isbn}', title='{self.title}')"
