"""
Rate limiting configuration and setup.

Uses slowapi to enforce a per-client limit on every endpoint.
Each route carries ``@limiter.limit(default_rate_limit)``; the limit
string is read from settings on every request.
"""

from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.util import get_remote_address
from starlette.requests import Request
from starlette.responses import JSONResponse

from slash.core.config import settings

limiter = Limiter(key_func=get_remote_address)


def default_rate_limit() -> str:
    """Return the configured per-client limit, e.g. ``"120/minute"``."""
    return settings.rate_limit_default


def configure_limiter(enabled: bool = True) -> Limiter:
    """Switch the shared limiter on or off and clear its counters.

    Args:
        enabled: Disable to turn every limit into a no-op.

    Returns:
        The limiter, ready to be attached to ``app.state``.
    """
    limiter.enabled = enabled
    limiter.reset()
    return limiter


async def rate_limit_exceeded_handler(
    _request: Request, exc: RateLimitExceeded
) -> JSONResponse:
    """Handle rate limit exceeded errors with a clean JSON response.

    Args:
        _request: The incoming HTTP request.
        exc: The rate limit exceeded exception.

    Returns:
        A 429 JSON response with a clear error message.
    """
    return JSONResponse(
        status_code=429,
        content={"error": "Rate limit exceeded", "detail": str(exc.detail)},
    )
