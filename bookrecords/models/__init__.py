"""
SQLAlchemy Models Package

Import all models here so that:
1. They are available as: from bookrecords.models import Book
2. Alembic discovers them for migrations
"""

from bookrecords.models.book import Book

__all__ = [
    "Book",
]
