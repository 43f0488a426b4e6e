"""Document Stamping — attaches server time to drafts and builds built-in documents.

Invariants:
    - timestamp is whole Unix seconds taken from the injected clock
    - updated_at is derived from the same timestamp, in server local time
    - Default and fallback documents are built fresh per call, never cached

Design Decisions:
    - Clock passed in as a float rather than read here: keeps functions pure and
      lets tests pin or advance time
"""

from datetime import datetime

from glitchstore.schemas.glitch import GlitchDocument, GlitchDraft

UPDATED_AT_FORMAT = "%Y-%m-%d %H:%M:%S"

DEFAULT_TEXT = "GLITCH"
DEFAULT_CSS = ".my-glitch { font-size: 3em; color: #fff; font-weight: bold; }"

FALLBACK_TEXT = "ERROR"
FALLBACK_CSS = ".my-glitch { color: red; font-size: 2em; }"


def format_updated_at(timestamp: int) -> str:
    """Human-readable local time for a Unix timestamp."""
    return datetime.fromtimestamp(timestamp).strftime(UPDATED_AT_FORMAT)


def stamp_document(draft: GlitchDraft, now: float) -> GlitchDocument:
    timestamp = int(now)
    return GlitchDocument(
        text=draft.text,
        css=draft.css,
        timestamp=timestamp,
        updated_at=format_updated_at(timestamp),
    )


def default_document(now: float) -> GlitchDocument:
    """Document served while nothing has been saved yet."""
    return stamp_document(GlitchDraft(text=DEFAULT_TEXT, css=DEFAULT_CSS), now)


def fallback_fields() -> dict:
    """Renderable fields attached to read-error responses."""
    return {"text": FALLBACK_TEXT, "css": FALLBACK_CSS}
