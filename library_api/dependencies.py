"""
FastAPI Dependencies Module

Reusable components injected into route handlers with Depends().

Common Dependency Patterns:
- Database sessions (per-request)
- Search/pagination parameters
"""

from typing import Annotated

from fastapi import Depends, Query
from sqlalchemy.orm import Session

from library_api.database import get_db
from library_api.services.search import SearchQuery

# =============================================================================
# Type Aliases with Annotated
# =============================================================================
# Instead of writing:
#   def list_authors(db: Session = Depends(get_db)):
#
# You can write:
#   def list_authors(db: DbSession):

DbSession = Annotated[Session, Depends(get_db)]


# =============================================================================
# Book Search Parameters
# =============================================================================
def get_search_query(
    search: str | None = Query(
        default=None,
        max_length=100,
        description="Filter by title (partial match, case-insensitive)",
        examples=["solitude"],
    ),
    genre: str | None = Query(
        default=None,
        max_length=100,
        description="Filter by genre (exact match)",
        examples=["Magical Realism"],
    ),
    author_name: str | None = Query(
        default=None,
        alias="authorName",
        max_length=100,
        description="Filter by author name (partial match, case-insensitive)",
        examples=["borges"],
    ),
    page: int | None = Query(
        default=None,
        description="Page number (1-indexed); values below 1 are treated as 1",
        examples=[1, 2],
    ),
    limit: int | None = Query(
        default=None,
        description="Items per page (default 10, clamped to 1..50)",
        examples=[9, 20],
    ),
    sort_by: str | None = Query(
        default=None,
        alias="sortBy",
        description="title, publishedYear or createdAt (default)",
    ),
    order: str | None = Query(
        default=None,
        description="asc or desc (default)",
    ),
) -> SearchQuery:
    """
    Collect the search query string into a normalized SearchQuery.

    Usage:
        GET /books/search?search=sol&genre=Novel&page=2&limit=9&sortBy=title&order=asc

    Non-integer page/limit are rejected by FastAPI (400); everything else
    is normalized silently by SearchQuery.from_params().
    """
    return SearchQuery.from_params(
        search=search,
        genre=genre,
        author_name=author_name,
        page=page,
        limit=limit,
        sort_by=sort_by,
        order=order,
    )


# Type alias for cleaner route signatures
SearchParams = Annotated[SearchQuery, Depends(get_search_query)]
