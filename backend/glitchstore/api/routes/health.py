"""Health & Readiness Probes — liveness and readiness endpoints for container orchestration.

Invariants:
    - GET /api/v1/health/ always returns 200 if process is up (liveness)
    - GET /api/v1/health/ready returns 503 if the storage location is not writable

Design Decisions:
    - Readiness checks writability only: a missing document is a normal state
      (GET serves the default), an unwritable directory breaks every save
"""

import logging

from fastapi import APIRouter, Depends, status
from starlette.concurrency import run_in_threadpool

from glitchstore.api.responses import GlitchJSONResponse
from glitchstore.api.routes.glitch import get_store
from glitchstore.core.repository_protocols import DocumentStore

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/health", tags=["health"])

SERVICE_NAME = "glitchstore"
SERVICE_VERSION = "1.0.0"


@router.get("/", status_code=status.HTTP_200_OK)
async def health_check():
    """Basic liveness probe. Returns 200 if the process is up."""
    return GlitchJSONResponse(content={
        "status": "healthy",
        "service": SERVICE_NAME,
        "version": SERVICE_VERSION,
    })


@router.get("/ready")
async def readiness_check(store: DocumentStore = Depends(get_store)):
    """Readiness probe — storage directory must accept writes."""
    writable = await run_in_threadpool(store.is_writable)
    if not writable:
        logger.warning("Readiness failed: storage not writable")
        return GlitchJSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"status": "not_ready", "reason": "storage_unwritable"},
        )
    return GlitchJSONResponse(
        content={"status": "ready", "checks": {"storage": "writable"}},
    )
