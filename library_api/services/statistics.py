"""
Statistics Service

Reduces book records into summary figures, per author and for the
whole catalog.

The reducers (compute_*) are pure functions over already-fetched data;
the get_* helpers load that data from the database first.

Each figure looks at its own subset of the books:
- first/latest book: books with a publication year
- average/longest/shortest: books with a page count
- genres: books with a genre
A book missing one field still contributes to the others.
"""

import logging
import math
from collections.abc import Iterable, Sequence
from typing import Protocol

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from library_api.exceptions import NotFoundError
from library_api.models import Author, Book
from library_api.schemas.stats import AuthorStats, BookPages, BookYear, CatalogStats

logger = logging.getLogger(__name__)


class BookRecord(Protocol):
    """The book fields the reducers read. ORM Book rows satisfy this."""

    title: str
    published_year: int | None
    pages: int | None
    genre: str | None


def round_half_up(value: float, digits: int = 0) -> float:
    """Round halves away from zero for positive values (1.5 -> 2, 2.5 -> 3)."""
    factor = 10 ** digits
    return math.floor(value * factor + 0.5) / factor


def average_pages(pages: Sequence[int]) -> int:
    """
    Rounded mean of page counts.

    Returns:
        0 for an empty sequence
    """
    if not pages:
        return 0
    return int(round_half_up(sum(pages) / len(pages)))


def distinct_genres(genres: Iterable[str | None]) -> list[str]:
    """Sorted, duplicate-free genres with null/blank values left out."""
    return sorted({genre for genre in genres if genre})


def compute_author_stats(
    author_id: int,
    author_name: str,
    books: Sequence[BookRecord],
) -> AuthorStats:
    """
    Summarize one author's books.

    Args:
        author_id: The author's id
        author_name: The author's name
        books: The author's books ordered by published_year ascending.
            First/latest book are taken positionally from that order.

    Returns:
        AuthorStats; zeroed (nulls, 0, []) when books is empty
    """
    if not books:
        return AuthorStats(
            author_id=author_id,
            author_name=author_name,
            total_books=0,
        )

    with_year = [book for book in books if book.published_year is not None]
    with_pages = [book for book in books if book.pages is not None]

    first_book = latest_book = None
    if with_year:
        first, last = with_year[0], with_year[-1]
        first_book = BookYear(title=first.title, year=first.published_year)
        latest_book = BookYear(title=last.title, year=last.published_year)

    longest_book = shortest_book = None
    if with_pages:
        # max()/min() keep the first of equal elements
        longest = max(with_pages, key=lambda book: book.pages)
        shortest = min(with_pages, key=lambda book: book.pages)
        longest_book = BookPages(title=longest.title, pages=longest.pages)
        shortest_book = BookPages(title=shortest.title, pages=shortest.pages)

    return AuthorStats(
        author_id=author_id,
        author_name=author_name,
        total_books=len(books),
        first_book=first_book,
        latest_book=latest_book,
        average_pages=average_pages([book.pages for book in with_pages]),
        genres=distinct_genres(book.genre for book in books),
        longest_book=longest_book,
        shortest_book=shortest_book,
    )


def compute_catalog_stats(
    total_authors: int,
    total_books: int,
    pages: Sequence[int],
    genres: Iterable[str | None],
) -> CatalogStats:
    """
    Summarize the whole catalog.

    average_books_per_author is rounded to one decimal and is 0 when
    there are no authors.
    """
    per_author = (
        round_half_up(total_books / total_authors, 1) if total_authors else 0.0
    )
    return CatalogStats(
        total_authors=total_authors,
        total_books=total_books,
        average_books_per_author=per_author,
        average_pages=average_pages(pages),
        genres=distinct_genres(genres),
    )


def get_author_stats(db: Session, author_id: int) -> AuthorStats:
    """
    Load an author's books and summarize them.

    Raises:
        NotFoundError: If the author does not exist
    """
    author = db.get(Author, author_id)
    if author is None:
        raise NotFoundError.for_resource("Author", author_id)

    stmt = (
        select(Book)
        .where(Book.author_id == author_id)
        .order_by(Book.published_year.asc(), Book.id.asc())
    )
    books = db.execute(stmt).scalars().all()

    return compute_author_stats(author.id, author.name, books)


def get_catalog_stats(db: Session) -> CatalogStats:
    """Count authors and books and summarize page counts and genres."""
    total_authors = db.execute(select(func.count(Author.id))).scalar() or 0
    total_books = db.execute(select(func.count(Book.id))).scalar() or 0
    pages = db.execute(
        select(Book.pages).where(Book.pages.is_not(None))
    ).scalars().all()
    genres = db.execute(
        select(Book.genre).where(Book.genre.is_not(None)).distinct()
    ).scalars().all()

    logger.debug(f"Catalog stats: {total_authors} authors, {total_books} books")

    return compute_catalog_stats(total_authors, total_books, pages, genres)
