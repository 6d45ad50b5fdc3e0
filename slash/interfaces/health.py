"""
Health check router.

Liveness endpoint, unauthenticated. Returns application status and version.
"""

from fastapi import APIRouter, Request

from slash.core.config import settings
from slash.interfaces.shortcuts.schemas import HealthResponse
from slash.shared.security.rate_limiting import default_rate_limit, limiter

router = APIRouter(tags=["health"])


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health check",
)
@limiter.limit(default_rate_limit)
def health_check(request: Request) -> HealthResponse:
    """Return current application health status."""
    return HealthResponse(status="ok", version=settings.version)
