"""
Pydantic Schemas Package

Pydantic models for request/response validation.

Schema Naming Convention:
- XxxBase: Shared fields between create and response
- XxxCreate: Fields required when creating a new record
- XxxUpdate: Fields allowed when updating (all optional)
- XxxResponse: Fields returned in API responses
"""

from library_api.schemas.author import (
    AuthorBase,
    AuthorCreate,
    AuthorDetailResponse,
    AuthorListItem,
    AuthorResponse,
    AuthorUpdate,
)
from library_api.schemas.book import (
    BookAuthor,
    BookBase,
    BookCreate,
    BookResponse,
    BookSearchResponse,
    BookUpdate,
    BookWithAuthorResponse,
)
from library_api.schemas.pagination import PaginationInfo
from library_api.schemas.stats import (
    AuthorStats,
    BookPages,
    BookYear,
    CatalogStats,
)

__all__ = [
    # Author schemas
    "AuthorBase",
    "AuthorCreate",
    "AuthorUpdate",
    "AuthorResponse",
    "AuthorListItem",
    "AuthorDetailResponse",
    # Book schemas
    "BookBase",
    "BookCreate",
    "BookUpdate",
    "BookResponse",
    "BookAuthor",
    "BookWithAuthorResponse",
    "BookSearchResponse",
    # Pagination
    "PaginationInfo",
    # Statistics
    "AuthorStats",
    "BookYear",
    "BookPages",
    "CatalogStats",
]
