"""
Catalog Statistics Router

Catalog-wide summary figures (the per-author summary lives under
/authors/{author_id}/stats).
"""

from fastapi import APIRouter, Request

from library_api.config import get_settings
from library_api.dependencies import DbSession
from library_api.schemas import CatalogStats
from library_api.services.rate_limiter import limiter
from library_api.services.statistics import get_catalog_stats

settings = get_settings()

router = APIRouter(
    prefix="/stats",
    tags=["Statistics"],
)


@router.get(
    "",
    response_model=CatalogStats,
    summary="Catalog statistics",
    description="Author and book totals, books per author, average pages and genres.",
)
@limiter.limit(settings.rate_limit_default)
def catalog_stats(request: Request, db: DbSession) -> CatalogStats:
    """Summary figures over the whole catalog."""
    return get_catalog_stats(db)
