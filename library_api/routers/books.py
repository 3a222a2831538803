"""
Books Router

CRUD endpoints for books and the paginated book search.

Demonstrates:
- Search with filters, sorting and pagination
- Owning-author validation on create/update
- Rate limiting per endpoint type
"""

import logging

from fastapi import APIRouter, Request, status
from sqlalchemy import select
from sqlalchemy.orm import selectinload

from library_api.config import get_settings
from library_api.dependencies import DbSession, SearchParams
from library_api.exceptions import NotFoundError, ValidationError
from library_api.models import Author, Book
from library_api.schemas import (
    BookCreate,
    BookSearchResponse,
    BookUpdate,
    BookWithAuthorResponse,
)
from library_api.services.pagination import calculate_pagination
from library_api.services.rate_limiter import limiter
from library_api.services.search import search_books as run_book_search

logger = logging.getLogger(__name__)
settings = get_settings()

router = APIRouter(
    prefix="/books",
    tags=["Books"],
    responses={
        404: {"description": "Book not found"},
    },
)


# =============================================================================
# Helper Functions
# =============================================================================
def get_book_or_404(db: DbSession, book_id: int) -> Book:
    """
    Get a book (with its author loaded) by ID.

    Raises:
        NotFoundError: If the book does not exist
    """
    stmt = (
        select(Book)
        .options(selectinload(Book.author))
        .where(Book.id == book_id)
    )
    book = db.execute(stmt).scalar_one_or_none()

    if book is None:
        raise NotFoundError.for_resource("Book", book_id)

    return book


def ensure_author_exists(db: DbSession, author_id: int) -> Author:
    """
    Check that a book's owning author exists.

    Raises:
        ValidationError: If no author has this id (400, not 404: the
            request body is what is wrong)
    """
    author = db.get(Author, author_id)
    if author is None:
        raise ValidationError(f"Author with id {author_id} not found")
    return author


# =============================================================================
# Search
# =============================================================================
# Declared before /{book_id} so "search" is not parsed as an id.

@router.get(
    "/search",
    response_model=BookSearchResponse,
    summary="Search books",
    description=(
        "Search books by title, genre and author name, sorted by title, "
        "publishedYear or createdAt, with pagination (max 50 per page)."
    ),
)
@limiter.limit(settings.rate_limit_search)
def search_books(
    request: Request,
    db: DbSession,
    query: SearchParams,
) -> BookSearchResponse:
    """
    Search and filter books with pagination.

    - search: title contains (case-insensitive)
    - genre: exact genre
    - authorName: author name contains (case-insensitive)
    - page / limit: clamped to page >= 1 and 1 <= limit <= 50
    - sortBy / order: unknown values fall back to createdAt / desc

    Examples:
        GET /api/v1/books/search?search=solitude
        GET /api/v1/books/search?genre=Novel&sortBy=publishedYear&order=asc
        GET /api/v1/books/search?authorName=borges&page=2&limit=9
    """
    total, books = run_book_search(db, query)

    return BookSearchResponse(
        data=[BookWithAuthorResponse.model_validate(book) for book in books],
        pagination=calculate_pagination(total, query.page, query.limit),
    )


# =============================================================================
# CRUD Endpoints
# =============================================================================
@router.get(
    "/{book_id}",
    response_model=BookWithAuthorResponse,
    summary="Get a book by ID",
    description="Retrieve a book together with its author.",
)
@limiter.limit(settings.rate_limit_default)
def get_book(
    request: Request,
    book_id: int,
    db: DbSession,
) -> BookWithAuthorResponse:
    """Get a single book by its ID."""
    book = get_book_or_404(db, book_id)
    return BookWithAuthorResponse.model_validate(book)


@router.post(
    "",
    response_model=BookWithAuthorResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new book",
    description="Create a new book. authorId must reference an existing author.",
)
@limiter.limit(settings.rate_limit_write)
def create_book(
    request: Request,
    book_data: BookCreate,
    db: DbSession,
) -> BookWithAuthorResponse:
    """
    Create a new book.

    Raises:
        ValidationError: 400 if authorId does not reference an author
    """
    ensure_author_exists(db, book_data.author_id)

    book = Book(**book_data.model_dump())

    db.add(book)
    db.commit()
    db.refresh(book)

    logger.info(f"Created book {book.id} ({book.title}) for author {book.author_id}")
    return BookWithAuthorResponse.model_validate(book)


@router.put(
    "/{book_id}",
    response_model=BookWithAuthorResponse,
    summary="Update a book",
    description="Update an existing book. Only the fields sent are changed.",
)
@limiter.limit(settings.rate_limit_write)
def update_book(
    request: Request,
    book_id: int,
    book_data: BookUpdate,
    db: DbSession,
) -> BookWithAuthorResponse:
    """
    Update an existing book.

    Raises:
        NotFoundError: 404 if the book does not exist
        ValidationError: 400 if a new authorId does not reference an author
    """
    book = get_book_or_404(db, book_id)

    update_data = book_data.model_dump(exclude_unset=True)
    if "author_id" in update_data:
        book.author = ensure_author_exists(db, update_data.pop("author_id"))

    for field, value in update_data.items():
        setattr(book, field, value)

    db.commit()
    db.refresh(book)

    logger.info(f"Updated book {book_id}")
    return BookWithAuthorResponse.model_validate(book)


@router.delete(
    "/{book_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a book",
    description="Permanently delete a book from the catalog.",
)
@limiter.limit(settings.rate_limit_write)
def delete_book(
    request: Request,
    book_id: int,
    db: DbSession,
) -> None:
    """Delete a book. Returns 204 No Content on success."""
    book = get_book_or_404(db, book_id)
    db.delete(book)
    db.commit()

    logger.info(f"Deleted book {book_id}")
