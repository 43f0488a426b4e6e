"""Error Handlers — global exception handlers for the glitch API.

Invariants:
    - GlitchStoreError → {"status": "error", "message": ...} with exc.http_status
    - HTTP 405 from routing → localized METHOD_NOT_ALLOWED body
    - Exception (catch-all) → 500, never leaks internal details
    - All handlers respond through GlitchJSONResponse (CORS + charset headers)

Design Decisions:
    - Three-layer handler: domain (GlitchStoreError), routing (HTTPException),
      catch-all (Exception)
    - Locale resolved per request through request_settings, the same provider
      the routes get from Depends(get_settings)
    - Extracted from main.py to keep the app module to wiring only
"""

import logging

from fastapi import FastAPI, Request, status
from starlette.exceptions import HTTPException as StarletteHTTPException

from glitchstore.api.responses import GlitchJSONResponse
from glitchstore.config import Settings, get_settings
from glitchstore.core.errors import (
    ErrorSeverity,
    GlitchStoreError,
    MethodNotAllowedError,
)
from glitchstore.core.language_strings import INTERNAL_ERROR_CODE, get_error_message

logger = logging.getLogger(__name__)


def request_settings(request: Request) -> Settings:
    """Settings as the routes see them, honoring app.dependency_overrides."""
    provider = request.app.dependency_overrides.get(get_settings, get_settings)
    return provider()


def log_glitch_error(exc: GlitchStoreError, request: Request) -> None:
    """Log a domain error at a level matching its severity."""
    level = (
        logging.WARNING
        if exc.severity in (ErrorSeverity.INFO, ErrorSeverity.WARNING)
        else logging.ERROR
    )
    logger.log(
        level,
        f"{type(exc).__name__}: {exc.message}",
        extra={
            "error_code": exc.code,
            "path": request.url.path,
            "method": request.method,
            "storage_path": exc.context.storage_path,
            "field": getattr(exc, "field", None),
        },
    )


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_glitch_error_handler(app)
    _register_http_error_handler(app)
    _register_generic_error_handler(app)


def _register_glitch_error_handler(app: FastAPI) -> None:

    @app.exception_handler(GlitchStoreError)
    async def glitch_error_handler(request: Request, exc: GlitchStoreError):
        log_glitch_error(exc, request)
        return GlitchJSONResponse(
            status_code=exc.http_status,
            content=exc.to_response(request_settings(request).locale),
        )


def _register_http_error_handler(app: FastAPI) -> None:

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        """Routing errors (unsupported method, unknown path) as JSON bodies."""
        if exc.status_code == status.HTTP_405_METHOD_NOT_ALLOWED:
            error = MethodNotAllowedError(request.method)
            log_glitch_error(error, request)
            content = error.to_response(request_settings(request).locale)
        else:
            logger.warning(
                f"HTTP {exc.status_code} on {request.url.path}: {exc.detail}",
                extra={"path": request.url.path, "method": request.method},
            )
            content = {"status": "error", "message": str(exc.detail)}
        return GlitchJSONResponse(
            status_code=exc.status_code,
            content=content,
            headers=getattr(exc, "headers", None),
        )


def _register_generic_error_handler(app: FastAPI) -> None:

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all — never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
            extra={"error_code": INTERNAL_ERROR_CODE, "path": request.url.path},
        )
        return GlitchJSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "status": "error",
                "message": get_error_message(
                    INTERNAL_ERROR_CODE, request_settings(request).locale,
                ),
            },
        )
