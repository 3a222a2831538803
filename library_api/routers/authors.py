"""
Authors Router

CRUD endpoints for authors, plus the per-author statistics summary.
Deleting an author deletes all of that author's books.
"""

import logging
from typing import List

from fastapi import APIRouter, Request, status
from sqlalchemy import func, select
from sqlalchemy.orm import selectinload

from library_api.config import get_settings
from library_api.dependencies import DbSession
from library_api.exceptions import NotFoundError
from library_api.models import Author, Book
from library_api.schemas import (
    AuthorCreate,
    AuthorDetailResponse,
    AuthorListItem,
    AuthorResponse,
    AuthorStats,
    AuthorUpdate,
)
from library_api.services.rate_limiter import limiter
from library_api.services.statistics import get_author_stats

logger = logging.getLogger(__name__)
settings = get_settings()

router = APIRouter(
    prefix="/authors",
    tags=["Authors"],
    responses={
        404: {"description": "Author not found"},
    },
)


def get_author_or_404(db: DbSession, author_id: int) -> Author:
    """Get an author (with books loaded) by ID or raise NotFoundError."""
    stmt = (
        select(Author)
        .options(selectinload(Author.books))
        .where(Author.id == author_id)
    )
    author = db.execute(stmt).scalar_one_or_none()

    if author is None:
        raise NotFoundError.for_resource("Author", author_id)
    return author


@router.get(
    "",
    response_model=List[AuthorListItem],
    summary="List all authors",
    description="Get all authors, ordered by name, with the number of books each owns.",
)
@limiter.limit(settings.rate_limit_default)
def list_authors(request: Request, db: DbSession) -> List[AuthorListItem]:
    """List all authors with book counts."""
    stmt = (
        select(Author, func.count(Book.id))
        .outerjoin(Book, Book.author_id == Author.id)
        .group_by(Author.id)
        .order_by(Author.name)
    )
    rows = db.execute(stmt).all()

    return [
        AuthorListItem.model_validate(author).model_copy(update={"book_count": count})
        for author, count in rows
    ]


@router.get(
    "/{author_id}",
    response_model=AuthorDetailResponse,
    summary="Get an author by ID",
    description="Retrieve an author together with the author's books.",
)
@limiter.limit(settings.rate_limit_default)
def get_author(
    request: Request,
    author_id: int,
    db: DbSession,
) -> AuthorDetailResponse:
    """Get a single author by ID, books included."""
    author = get_author_or_404(db, author_id)
    return AuthorDetailResponse.model_validate(author)


@router.get(
    "/{author_id}/stats",
    response_model=AuthorStats,
    summary="Get author statistics",
    description=(
        "First and latest book by publication year, average/longest/shortest "
        "by page count, and the distinct genres of the author's books."
    ),
)
@limiter.limit(settings.rate_limit_default)
def author_stats(
    request: Request,
    author_id: int,
    db: DbSession,
) -> AuthorStats:
    """Summary figures over an author's books."""
    return get_author_stats(db, author_id)


@router.post(
    "",
    response_model=AuthorResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new author",
    description="Create a new author in the catalog.",
)
@limiter.limit(settings.rate_limit_write)
def create_author(
    request: Request,
    author_data: AuthorCreate,
    db: DbSession,
) -> AuthorResponse:
    """Create a new author."""
    author = Author(**author_data.model_dump())

    db.add(author)
    db.commit()
    db.refresh(author)

    logger.info(f"Created author {author.id} ({author.name})")
    return AuthorResponse.model_validate(author)


@router.put(
    "/{author_id}",
    response_model=AuthorResponse,
    summary="Update an author",
    description="Update an existing author. Only the fields sent are changed.",
)
@limiter.limit(settings.rate_limit_write)
def update_author(
    request: Request,
    author_id: int,
    author_data: AuthorUpdate,
    db: DbSession,
) -> AuthorResponse:
    """Update an existing author."""
    author = get_author_or_404(db, author_id)

    update_data = author_data.model_dump(exclude_unset=True)
    for field, value in update_data.items():
        setattr(author, field, value)

    db.commit()
    db.refresh(author)

    logger.info(f"Updated author {author_id}: {sorted(update_data)}")
    return AuthorResponse.model_validate(author)


@router.delete(
    "/{author_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete an author",
    description="Permanently delete an author and all of the author's books.",
)
@limiter.limit(settings.rate_limit_write)
def delete_author(
    request: Request,
    author_id: int,
    db: DbSession,
) -> None:
    """Delete an author; the author's books go with it."""
    author = get_author_or_404(db, author_id)
    book_count = len(author.books)

    db.delete(author)
    db.commit()

    logger.info(f"Deleted author {author_id} and {book_count} book(s)")
