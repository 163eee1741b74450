#!/usr/bin/env python3
"""
Database Seed Script

Populates the database with sample books for development.

USAGE:
    # From the project root with the virtualenv active
    python scripts/seed_data.py
    python scripts/seed_data.py --clear   # wipe existing books first

Books go through SqlBookStore, the same code path the API uses, so the
seed data obeys the same rules as data created over HTTP.
"""

import argparse
import logging
import sys
from pathlib import Path

# Add project root to Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from bookrecords.database import SessionLocal, create_tables
from bookrecords.errors import StoreError
from bookrecords.schemas import BookCreate
from bookrecords.store import SqlBookStore

logger = logging.getLogger("seed_data")

SAMPLE_BOOKS = [
    {
        "isbn": "9780451524935",
        "title": "1984",
        "author": "George Orwell",
        "published_year": 1949,
        "genre": "Dystopian",
        "available": True,
    },
    {
        "isbn": "9780141439518",
        "title": "Pride and Prejudice",
        "author": "Jane Austen",
        "published_year": 1813,
        "genre": "Romance",
        "available": True,
    },
    {
        "isbn": "9780684801223",
        "title": "The Old Man and the Sea",
        "author": "Ernest Hemingway",
        "published_year": 1952,
        "genre": "Fiction",
        "available": False,
    },
    {
        "isbn": "9780062073488",
        "title": "And Then There Were None",
        "author": "Agatha Christie",
        "published_year": 1939,
        "genre": "Mystery",
        "available": True,
    },
    {
        "isbn": "9780553293357",
        "title": "Foundation",
        "author": "Isaac Asimov",
        "published_year": 1951,
        "genre": "Science Fiction",
        "available": True,
    },
    {
        "isbn": "9780547928227",
        "title": "The Hobbit",
        "author": "J.R.R. Tolkien",
        "published_year": 1937,
        "genre": "Fantasy",
    },
]


def seed(store: SqlBookStore) -> int:
    """Insert every sample book not already present. Returns the count added."""
    created = 0
    for data in SAMPLE_BOOKS:
        book = BookCreate.model_validate(data)
        if store.find_one(book.isbn) is not None:
            logger.info(f"Skipping {book.isbn}: already present")
            continue
        store.create(book.model_dump(exclude_unset=True))
        created += 1
    return created


def main() -> int:
    parser = argparse.ArgumentParser(description="Seed the books table")
    parser.add_argument(
        "--clear",
        action="store_true",
        help="Delete all existing books before seeding",
    )
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    create_tables()
    db = SessionLocal()
    try:
        store = SqlBookStore(db)
        if args.clear:
            removed = store.clear()
            logger.info(f"Cleared {removed} existing books")
        created = seed(store)
    except StoreError as e:
        logger.error(f"Seeding failed: {e}")
        return 1
    finally:
        db.close()

    logger.info(f"Seeded {created} books")
    return 0


if __name__ == "__main__":
    sys.exit(main())
