"""Glitch Endpoint — save and load the single glitch effect document.

Invariants:
    - OPTIONS answers 200 with an empty body (CORS preflight)
    - POST: body checks → JSON parse → validate → stamp → atomic write;
      every failure is a 400 {"status": "error", "message": ...}
    - GET: stored document verbatim; nothing stored → fresh default document
      (never persisted); any other read failure → 500 with a renderable
      fallback text/css alongside the error
    - Other methods → 405 via the routing error handler
    - No state kept between requests other than the storage file

Design Decisions:
    - Store and clock injected with Depends: tests swap in a tmp_path store and
      a deterministic clock through app.dependency_overrides
    - Blocking file IO runs in the threadpool (run_in_threadpool) so the event
      loop never waits on disk
    - Errors caught in the route, not left to the global handler: the same
      StorageError maps to 400 on POST and 500 (+ fallback) on GET
"""

import logging
import time
from typing import Callable

from fastapi import APIRouter, Depends, Request, status
from starlette.concurrency import run_in_threadpool

from glitchstore.api.error_handlers import log_glitch_error
from glitchstore.api.responses import GlitchJSONResponse, empty_response
from glitchstore.config import Settings, get_settings
from glitchstore.core.errors import DocumentNotFoundError, GlitchStoreError
from glitchstore.core.language_strings import get_save_success_message
from glitchstore.core.parse_request import parse_request_body
from glitchstore.core.repository_protocols import DocumentStore
from glitchstore.core.stamp_document import (
    default_document,
    fallback_fields,
    stamp_document,
)
from glitchstore.core.validate_document import validate_document
from glitchstore.infrastructure.glitch_store import GlitchStore
from glitchstore.schemas.glitch import SaveResponse

logger = logging.getLogger(__name__)
router = APIRouter(tags=["glitch"])


def get_store(settings: Settings = Depends(get_settings)) -> DocumentStore:
    return GlitchStore(settings.storage_path)


def get_clock() -> Callable[[], float]:
    return time.time


@router.options("/")
async def preflight():
    """CORS preflight."""
    return empty_response()


@router.post("/")
async def save_glitch(
    request: Request,
    settings: Settings = Depends(get_settings),
    store: DocumentStore = Depends(get_store),
    clock: Callable[[], float] = Depends(get_clock),
):
    """Validate the posted effect and replace the stored document."""
    try:
        raw = parse_request_body(await request.body(), settings.limits)
        draft = validate_document(raw, settings.limits)
        doc = stamp_document(draft, clock())
        await run_in_threadpool(store.write, doc)
    except GlitchStoreError as exc:
        log_glitch_error(exc, request)
        return GlitchJSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=exc.to_response(settings.locale),
        )

    return GlitchJSONResponse(
        content=SaveResponse(
            message=get_save_success_message(settings.locale),
            timestamp=doc.timestamp,
        ).model_dump(),
    )


@router.get("/")
async def load_glitch(
    request: Request,
    settings: Settings = Depends(get_settings),
    store: DocumentStore = Depends(get_store),
    clock: Callable[[], float] = Depends(get_clock),
):
    """Return the stored effect, or the default one if nothing is saved."""
    try:
        data = await run_in_threadpool(store.read)
    except DocumentNotFoundError:
        return GlitchJSONResponse(content=default_document(clock()).model_dump())
    except GlitchStoreError as exc:
        log_glitch_error(exc, request)
        return GlitchJSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={**exc.to_response(settings.locale), **fallback_fields()},
        )
    return GlitchJSONResponse(content=data)
