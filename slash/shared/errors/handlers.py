"""
Centralized error handlers for FastAPI.

Maps shortcut domain errors to HTTP responses.
No stack traces or internal details are exposed to clients.
All error responses use the ErrorResponse schema.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from slash.domain.shortcuts.errors import (
    InternalError,
    InvalidArgumentError,
    PermissionDeniedError,
    ShortcutAlreadyExistsError,
    ShortcutDomainError,
    ShortcutNotFoundError,
)

logger = logging.getLogger(__name__)

HTTP_400 = 400
HTTP_403 = 403
HTTP_404 = 404
HTTP_409 = 409
HTTP_422 = 422
HTTP_500 = 500


def _error_response(status_code: int, error: str, detail: str | None = None) -> JSONResponse:
    """Build a consistent JSON error response."""
    body: dict[str, str | None] = {"error": error}
    if detail:
        body["detail"] = detail
    return JSONResponse(status_code=status_code, content=body)


def _describe_validation_errors(exc: RequestValidationError) -> str:
    """Flatten validation errors into one "field: message" line per error."""
    return "; ".join(
        ".".join(str(part) for part in error.get("loc", ())) + ": " + error.get("msg", "")
        for error in exc.errors()
    )


def register_error_handlers(app: FastAPI) -> None:
    """Register all domain error handlers on the FastAPI application.

    Args:
        app: The FastAPI application instance.
    """

    @app.exception_handler(InvalidArgumentError)
    async def handle_invalid_argument(
        _request: Request, exc: InvalidArgumentError
    ) -> JSONResponse:
        """Handle malformed requests."""
        logger.warning("Invalid argument: %s", exc.reason)
        return _error_response(HTTP_400, "Invalid argument", exc.reason)

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(
        _request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        """Handle request bodies and parameters that fail schema validation."""
        detail = _describe_validation_errors(exc)
        logger.info("Request validation failed: %s", detail)
        return _error_response(HTTP_422, "Validation error", detail)

    @app.exception_handler(ShortcutNotFoundError)
    async def handle_shortcut_not_found(
        _request: Request, exc: ShortcutNotFoundError
    ) -> JSONResponse:
        """Handle unknown shortcut names."""
        logger.info("Shortcut not found: %s", exc.name)
        return _error_response(HTTP_404, "Shortcut not found")

    @app.exception_handler(PermissionDeniedError)
    async def handle_permission_denied(
        _request: Request, exc: PermissionDeniedError
    ) -> JSONResponse:
        """Handle access rule violations."""
        return _error_response(HTTP_403, "Permission denied")

    @app.exception_handler(ShortcutAlreadyExistsError)
    async def handle_already_exists(
        _request: Request, exc: ShortcutAlreadyExistsError
    ) -> JSONResponse:
        """Handle duplicate shortcut names."""
        logger.info("Shortcut name taken: %s", exc.name)
        return _error_response(HTTP_409, "Shortcut already exists")

    @app.exception_handler(InternalError)
    async def handle_internal(_request: Request, exc: InternalError) -> JSONResponse:
        """Handle store and serialization failures."""
        logger.error("Failed to %s: %s", exc.operation, exc.reason)
        return _error_response(HTTP_500, "Internal server error")

    @app.exception_handler(ShortcutDomainError)
    async def handle_shortcut_domain(
        _request: Request, exc: ShortcutDomainError
    ) -> JSONResponse:
        """Catch-all for unhandled shortcut domain errors."""
        logger.error("Unhandled shortcut domain error: %s", exc.message)
        return _error_response(HTTP_500, "Internal server error")

    @app.exception_handler(Exception)
    async def handle_unexpected(_request: Request, exc: Exception) -> JSONResponse:
        """Catch-all for unexpected errors. Never exposes internals."""
        logger.exception("Unexpected error: %s", type(exc).__name__)
        return _error_response(HTTP_500, "Internal server error")
