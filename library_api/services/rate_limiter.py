"""
Rate Limiting Service

Rate limiting with slowapi to protect the API from abuse.

Key Features:
=============
1. IP-based limits (proxy headers honoured)
2. Separate limits for reads, search and writes
3. In-process storage, fixed-window strategy
4. JSON error responses in the API's error envelope

Rate Limit Tiers (defaults):
============================
- Reads: 100 requests/minute
- Search: 60 requests/minute
- Writes: 30 requests/minute
"""

import logging

from fastapi import Request, status
from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.util import get_remote_address
from starlette.responses import JSONResponse

from library_api.config import get_settings

logger = logging.getLogger(__name__)
settings = get_settings()


def get_client_ip(request: Request) -> str:
    """
    Get client IP address for rate limiting.

    Checks X-Forwarded-For, then X-Real-IP, then falls back to the
    direct connection address.
    """
    forwarded_for = request.headers.get("X-Forwarded-For")
    if forwarded_for:
        # X-Forwarded-For can contain multiple IPs; first is the client
        return forwarded_for.split(",")[0].strip()

    real_ip = request.headers.get("X-Real-IP")
    if real_ip:
        return real_ip.strip()

    return get_remote_address(request)


def create_limiter() -> Limiter:
    """Create and configure the rate limiter."""
    limiter = Limiter(
        key_func=get_client_ip,
        default_limits=[settings.rate_limit_default],
        storage_uri="memory://",
        strategy="fixed-window",
        enabled=settings.rate_limit_enabled,
    )

    logger.info(
        f"Rate limiter initialized - enabled: {settings.rate_limit_enabled}, "
        f"default: {settings.rate_limit_default}"
    )

    return limiter


limiter = create_limiter()


def retry_after_seconds(exc: RateLimitExceeded) -> int:
    """Length of the exceeded limit's window: 60 for "30/minute", 3600 for "5/hour"."""
    return exc.limit.limit.get_expiry()


def rate_limit_exceeded_handler(request: Request, exc: RateLimitExceeded) -> JSONResponse:
    """
    Handler for rate limit exceeded errors.

    Returns 429 in the standard error body. Retry-After tells the client
    how long the exceeded window lasts.
    """
    retry_after = retry_after_seconds(exc)

    logger.warning(
        f"Rate limit {exc.detail} exceeded by {get_client_ip(request)} "
        f"on {request.method} {request.url.path}"
    )

    return JSONResponse(
        status_code=status.HTTP_429_TOO_MANY_REQUESTS,
        content={"error": f"Rate limit exceeded: {exc.detail}"},
        headers={"Retry-After": str(retry_after)},
    )
