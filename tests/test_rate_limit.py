"""
Tests for Rate Limiting

The suite runs with rate limiting disabled (see conftest.py); the
fixture here switches the shared limiter on for a single test and
clears its counters on both sides.
"""

import pytest
from fastapi import status

from library_api.config import get_settings
from library_api.services.rate_limiter import limiter
from tests.conftest import API

settings = get_settings()

WINDOW_SECONDS = {"second": 1, "minute": 60, "hour": 3600, "day": 86400}


def limit_parts(limit: str) -> tuple[int, int]:
    """Split a limit string into (requests, window seconds): "30/minute" -> (30, 60)."""
    amount, period = limit.split("/")
    return int(amount), WINDOW_SECONDS[period.rstrip("s")]


@pytest.fixture
def rate_limiting():
    """Enable the limiter with empty counters for one test."""
    limiter.reset()
    limiter.enabled = True
    yield limiter
    limiter.enabled = False
    limiter.reset()


def assert_rate_limited(response, window: int):
    assert response.status_code == status.HTTP_429_TOO_MANY_REQUESTS
    assert set(response.json()) == {"error"}
    assert "Rate limit exceeded" in response.json()["error"]
    assert response.headers["Retry-After"] == str(window)


class TestWriteLimits:
    """Create/update/delete endpoints share the write tier."""

    def test_author_create_limited(self, client, rate_limiting):
        amount, window = limit_parts(settings.rate_limit_write)

        for i in range(amount):
            response = client.post(
                f"{API}/authors",
                json={"name": f"Author {i}", "email": f"author{i}@example.com"},
            )
            assert response.status_code == status.HTTP_201_CREATED

        response = client.post(
            f"{API}/authors",
            json={"name": "One Too Many", "email": "extra@example.com"},
        )

        assert_rate_limited(response, window)

    def test_book_create_limited(self, client, sample_author, rate_limiting):
        amount, window = limit_parts(settings.rate_limit_write)

        for i in range(amount):
            response = client.post(
                f"{API}/books",
                json={"title": f"Book {i}", "authorId": sample_author.id},
            )
            assert response.status_code == status.HTTP_201_CREATED

        response = client.post(
            f"{API}/books",
            json={"title": "One Too Many", "authorId": sample_author.id},
        )

        assert_rate_limited(response, window)

    def test_author_update_limited(self, client, sample_author, rate_limiting):
        amount, window = limit_parts(settings.rate_limit_write)

        for i in range(amount):
            client.put(f"{API}/authors/{sample_author.id}", json={"bio": f"v{i}"})

        response = client.put(f"{API}/authors/{sample_author.id}", json={"bio": "late"})

        assert_rate_limited(response, window)

    def test_endpoints_counted_separately(self, client, sample_author, rate_limiting):
        """Exhausting author creates leaves book creates untouched."""
        amount, _ = limit_parts(settings.rate_limit_write)

        for i in range(amount + 1):
            client.post(
                f"{API}/authors",
                json={"name": f"Author {i}", "email": f"author{i}@example.com"},
            )

        response = client.post(
            f"{API}/books",
            json={"title": "Still allowed", "authorId": sample_author.id},
        )

        assert response.status_code == status.HTTP_201_CREATED


class TestReadLimits:

    def test_search_limited(self, client, rate_limiting):
        amount, window = limit_parts(settings.rate_limit_search)

        for _ in range(amount):
            assert client.get(f"{API}/books/search").status_code == status.HTTP_200_OK

        assert_rate_limited(client.get(f"{API}/books/search"), window)

    def test_catalog_stats_limited(self, client, rate_limiting):
        amount, window = limit_parts(settings.rate_limit_default)

        for _ in range(amount):
            assert client.get(f"{API}/stats").status_code == status.HTTP_200_OK

        assert_rate_limited(client.get(f"{API}/stats"), window)

    def test_disabled_limiter_never_blocks(self, client, sample_author):
        amount, _ = limit_parts(settings.rate_limit_write)

        for i in range(amount + 5):
            response = client.put(f"{API}/authors/{sample_author.id}", json={"bio": f"v{i}"})
            assert response.status_code == status.HTTP_200_OK
