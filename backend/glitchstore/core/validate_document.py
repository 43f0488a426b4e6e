"""Document Validation — checks and sanitizes an inbound glitch document.

Invariants:
    - All functions are PURE: no IO, no async, no side effects
    - Checks run in order (presence, type, size) and the first failure wins
    - Size limits are measured in UTF-8 bytes of the raw value, before escaping
    - Only text and css survive validation; extra keys are dropped
    - css is never escaped

Design Decisions:
    - Raises typed errors instead of returning error dicts: the route maps a
      single except clause to a 400 response (ADR: uniform error shape)
    - Numeric &#039; for the single quote, not &#x27;: documents saved by earlier
      deployments compare equal byte for byte
"""

from typing import Any

from glitchstore.core.domain_types import DocumentLimits
from glitchstore.core.errors import (
    CssTooLongError,
    InvalidTypeError,
    MissingFieldsError,
    TextTooLongError,
)
from glitchstore.schemas.glitch import GlitchDraft

REQUIRED_FIELDS = ("text", "css")

_HTML_ESCAPES = str.maketrans({
    "&": "&amp;",
    '"': "&quot;",
    "'": "&#039;",
    "<": "&lt;",
    ">": "&gt;",
})


def escape_html(value: str) -> str:
    """Replace &, ", ', <, > with their HTML entities."""
    return value.translate(_HTML_ESCAPES)


def byte_length(value: str) -> int:
    return len(value.encode("utf-8"))


def check_required_fields(raw: Any) -> None:
    """Rule 1: text and css must be present and non-null."""
    if not isinstance(raw, dict):
        raise MissingFieldsError(list(REQUIRED_FIELDS))
    missing = [name for name in REQUIRED_FIELDS if raw.get(name) is None]
    if missing:
        raise MissingFieldsError(missing)


def check_field_types(raw: dict) -> None:
    """Rule 2: text and css must both be strings."""
    for name in REQUIRED_FIELDS:
        value = raw[name]
        if not isinstance(value, str):
            raise InvalidTypeError(name, type(value).__name__)


def check_field_sizes(text: str, css: str, limits: DocumentLimits) -> None:
    """Rule 3: text and css must fit within their byte limits."""
    text_length = byte_length(text)
    if text_length > limits.max_text_length:
        raise TextTooLongError(text_length, limits.max_text_length)
    css_length = byte_length(css)
    if css_length > limits.max_css_length:
        raise CssTooLongError(css_length, limits.max_css_length)


def validate_document(raw: Any, limits: DocumentLimits | None = None) -> GlitchDraft:
    """Validate a decoded JSON value and return the sanitized draft."""
    limits = limits or DocumentLimits()
    check_required_fields(raw)
    check_field_types(raw)
    check_field_sizes(raw["text"], raw["css"], limits)
    return GlitchDraft(text=escape_html(raw["text"]), css=raw["css"])
