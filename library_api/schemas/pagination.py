"""Pagination metadata returned alongside paged results."""

from pydantic import Field

from library_api.schemas.base import CamelModel


class PaginationInfo(CamelModel):
    """
    Derived pagination figures for one page of results.

    total_pages is ceil(total / limit), and 0 when there are no rows.
    """

    page: int = Field(..., ge=1, description="Current page number")
    limit: int = Field(..., ge=1, description="Page size actually applied")
    total: int = Field(..., ge=0, description="Total number of matching rows")
    total_pages: int = Field(..., ge=0, description="Total number of pages")
    has_next: bool = Field(..., description="Whether a later page exists")
    has_prev: bool = Field(..., description="Whether an earlier page exists")
