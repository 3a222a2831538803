"""
SQLAlchemy Models Package

Database models for the library catalog.

Model Relationships:
- Author -> Book: One-to-Many (an author owns many books, every book has
                  exactly one author; deleting an author deletes its books)

Import all models here to:
1. Make them available as: from library_api.models import Author, Book
2. Ensure Alembic discovers them for migrations
"""

from library_api.models.author import Author
from library_api.models.book import Book

__all__ = [
    "Author",
    "Book",
]
