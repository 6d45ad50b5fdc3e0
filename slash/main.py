"""
Application entry point.

Creates the FastAPI application and wires together:
- Routers (one per bounded context)
- Error handlers (centralized domain-to-HTTP mapping)
- Security middleware (headers, rate limiting)
- Logging configuration
- The shortcut store engine

No business logic belongs here.
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from slowapi.errors import RateLimitExceeded

from slash.core.config import DEFAULT_AUTH_SECRET, settings
from slash.infrastructure.shortcuts.sql_store import build_engine, create_schema
from slash.interfaces.health import router as health_router
from slash.interfaces.shortcuts.router import router as shortcuts_router
from slash.shared.errors.handlers import register_error_handlers
from slash.shared.logging import configure_logging
from slash.shared.security.headers import SecurityHeadersMiddleware
from slash.shared.security.rate_limiting import configure_limiter, rate_limit_exceeded_handler

API_PREFIX = "/api/v2"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan: prepare the store schema, release the engine."""
    create_schema(app.state.engine)
    yield
    app.state.engine.dispose()


def create_app(database_url: str | None = None, rate_limit_enabled: bool = True) -> FastAPI:
    """Create and configure the FastAPI application.

    This is the composition root of the application.

    Args:
        database_url: Store URL; defaults to ``settings.database_url``.
        rate_limit_enabled: Turn the per-client rate limit on or off.

    Returns:
        A fully configured FastAPI application instance.

    Raises:
        RuntimeError: If the default auth secret is used outside debug mode.
    """
    configure_logging(level=settings.log_level)

    if not settings.debug and settings.auth_secret == DEFAULT_AUTH_SECRET:
        raise RuntimeError("SLASH_AUTH_SECRET must be set when debug is off")

    app = FastAPI(
        title=settings.project_name,
        version=settings.version,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
        lifespan=lifespan,
    )
    app.state.engine = build_engine(database_url or settings.database_url)

    # --- Rate Limiting ---
    app.state.limiter = configure_limiter(enabled=rate_limit_enabled)
    app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)

    # --- Security Middleware ---
    app.add_middleware(SecurityHeadersMiddleware)

    # --- Error Handlers ---
    register_error_handlers(app)

    # --- Routers ---
    app.include_router(health_router, prefix=API_PREFIX)
    app.include_router(shortcuts_router, prefix=API_PREFIX)

    return app


app = create_app()
