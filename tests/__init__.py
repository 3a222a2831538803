"""
Test Suite for the Library Catalog API

Test Organization:
- conftest.py: Shared fixtures (test database, client, sample data)
- test_authors.py: /api/v1/authors endpoints
- test_books.py: /api/v1/books CRUD endpoints
- test_search.py: /api/v1/books/search
- test_stats.py: author and catalog statistics endpoints
- test_app.py: error envelope, health, root and docs endpoints
- test_rate_limit.py: per-route rate limit tiers and the 429 response
- test_pagination.py, test_search_query.py, test_statistics.py:
  unit tests for the pure services

Running Tests:
    pytest
    pytest tests/test_search.py -v
"""
