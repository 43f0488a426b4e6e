"""Glitch Store API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map GlitchStoreError → structured JSON responses
    - Every response goes through GlitchJSONResponse (CORS + charset headers)
    - Logging configured on startup via lifespan context manager

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern
    - No CORSMiddleware: it only answers requests carrying an Origin header,
      while these headers are required on every response
    - run() hands logging to setup_logging (log_config=None) so uvicorn output
      uses the same formatter
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from glitchstore.api.error_handlers import register_error_handlers
from glitchstore.api.responses import GlitchJSONResponse
from glitchstore.api.routes import glitch, health
from glitchstore.config import get_settings
from glitchstore.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    logger.info(
        "Glitch Store API started",
        extra={"storage_path": settings.storage_path},
    )
    yield
    logger.info("Glitch Store API shutting down")


app = FastAPI(
    title="Glitch Store API",
    version=health.SERVICE_VERSION,
    lifespan=lifespan,
    default_response_class=GlitchJSONResponse,
)

# Routes, registered explicitly
app.include_router(health.router)
app.include_router(glitch.router)

register_error_handlers(app)


def run() -> None:
    """Console entry point: serve the app with uvicorn."""
    settings = get_settings()
    uvicorn.run(app, host=settings.host, port=settings.port, log_config=None)
