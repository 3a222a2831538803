"""
API Routers Package

FastAPI routers grouped by resource.

Router Structure:
- authors.py: /api/v1/authors/* endpoints
- books.py: /api/v1/books/* endpoints (including search)
- stats.py: /api/v1/stats endpoint

Each router is imported and registered in main.py.
"""

from library_api.routers.authors import router as authors_router
from library_api.routers.books import router as books_router
from library_api.routers.stats import router as stats_router

__all__ = [
    "authors_router",
    "books_router",
    "stats_router",
]
