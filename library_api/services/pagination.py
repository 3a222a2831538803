"""
Pagination Calculator

Turns a row count and the requested page into navigation metadata.
"""

import math

from library_api.schemas.pagination import PaginationInfo


def calculate_pagination(total: int, page: int, limit: int) -> PaginationInfo:
    """
    Build pagination metadata for one page of results.

    Args:
        total: Number of rows matching the query (>= 0)
        page: Current page, 1-indexed (already clamped by the caller)
        limit: Page size (already clamped by the caller)

    Returns:
        PaginationInfo with total_pages = ceil(total / limit), 0 when empty
    """
    total_pages = math.ceil(total / limit) if total > 0 else 0

    return PaginationInfo(
        page=page,
        limit=limit,
        total=total,
        total_pages=total_pages,
        has_next=page < total_pages,
        has_prev=page > 1,
    )
