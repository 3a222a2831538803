"""
Services Package

Business logic kept apart from HTTP handling (routers), so it can be
reused and tested in isolation.

Current services:
- pagination.py: Page count and navigation flags
- rate_limiter.py: Per-client rate limiting with slowapi
- search.py: Filtered, sorted and paginated book search
- statistics.py: Per-author and catalog-wide summary figures
"""
