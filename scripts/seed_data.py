#!/usr/bin/env python3
"""
Database Seed Script

Populates the catalog with sample authors and books for development.

USAGE:
    # From the project root with the virtualenv active
    python scripts/seed_data.py

This script:
1. Connects to the database using app settings
2. Clears existing data (authors cascade to their books)
3. Creates sample authors and their books
"""

import sys
from pathlib import Path

# Add project root to Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from sqlalchemy import delete
from sqlalchemy.orm import Session

from library_api.database import SessionLocal, create_tables
from library_api.models import Author, Book

SAMPLE_CATALOG = [
    {
        "author": {
            "name": "Gabriel Garcia Marquez",
            "email": "gabo@example.com",
            "nationality": "Colombian",
            "birth_year": 1927,
            "bio": "Colombian novelist, short-story writer and journalist.",
        },
        "books": [
            {"title": "One Hundred Years of Solitude", "published_year": 1967,
             "genre": "Magical Realism", "pages": 417, "isbn": "978-0060883287"},
            {"title": "Love in the Time of Cholera", "published_year": 1985,
             "genre": "Romance", "pages": 348},
            {"title": "Chronicle of a Death Foretold", "published_year": 1981,
             "genre": "Novella", "pages": 120},
        ],
    },
    {
        "author": {
            "name": "Jorge Luis Borges",
            "email": "borges@example.com",
            "nationality": "Argentine",
            "birth_year": 1899,
            "bio": "Argentine short-story writer, essayist and poet.",
        },
        "books": [
            {"title": "Ficciones", "published_year": 1944,
             "genre": "Short Stories", "pages": 174},
            {"title": "The Aleph", "published_year": 1949,
             "genre": "Short Stories", "pages": 208},
        ],
    },
    {
        "author": {
            "name": "Isabel Allende",
            "email": "allende@example.com",
            "nationality": "Chilean",
            "birth_year": 1942,
        },
        "books": [
            {"title": "The House of the Spirits", "published_year": 1982,
             "genre": "Magical Realism", "pages": 448},
            {"title": "Eva Luna", "published_year": 1987,
             "genre": "Novel", "pages": 320},
        ],
    },
    {
        "author": {
            "name": "Julio Cortazar",
            "email": "cortazar@example.com",
            "nationality": "Argentine",
            "birth_year": 1914,
        },
        "books": [
            {"title": "Hopscotch", "published_year": 1963, "genre": "Novel", "pages": 576},
            {"title": "Bestiary", "genre": "Short Stories"},
        ],
    },
]


def clear_data(db: Session) -> None:
    """Clear all existing data from the database."""
    print("Clearing existing data...")
    db.execute(delete(Book))
    db.execute(delete(Author))
    db.commit()
    print("Data cleared.")


def create_catalog(db: Session) -> tuple[int, int]:
    """Create the sample authors with their books."""
    print("Creating authors and books...")
    author_count = book_count = 0

    for entry in SAMPLE_CATALOG:
        author = Author(**entry["author"])
        author.books = [Book(**book) for book in entry["books"]]
        db.add(author)
        author_count += 1
        book_count += len(entry["books"])

    db.commit()
    return author_count, book_count


def seed_database(clear_existing: bool = True) -> None:
    """
    Main function to seed the database.

    Args:
        clear_existing: If True, clears existing data before seeding.
    """
    print("=" * 60)
    print("Starting database seed...")
    print("=" * 60)

    # Create tables if they don't exist
    create_tables()

    db = SessionLocal()

    try:
        if clear_existing:
            clear_data(db)

        authors, books = create_catalog(db)

        print("=" * 60)
        print("Database seeding completed successfully!")
        print("=" * 60)
        print("\nSummary:")
        print(f"  - Authors: {authors}")
        print(f"  - Books: {books}")
        print("\nYou can now access the API at http://localhost:8001")
        print("API documentation at http://localhost:8001/docs")

    except Exception as e:
        print(f"Error seeding database: {e}")
        db.rollback()
        raise
    finally:
        db.close()


if __name__ == "__main__":
    seed_database()
