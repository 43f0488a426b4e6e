"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - Size limits are byte counts of the UTF-8 encoded value
    - All valid states encoded as Enums — no raw string matching

Design Decisions:
    - Frozen dataclass for limits: passed explicitly into the validator instead of
      read from module globals (ADR: config injected at construction time)
    - str Enums: serialize to JSON without custom encoders
"""

from dataclasses import dataclass
from enum import Enum
from typing import NewType


# ─── Value Types ─────────────────────────────────────────────────

UnixTimestamp = NewType("UnixTimestamp", int)


# ─── Enums ───────────────────────────────────────────────────────

class Locale(str, Enum):
    """Languages available for user-facing response messages."""
    EN = "en"
    UK = "uk"


# ─── Limits ──────────────────────────────────────────────────────

DEFAULT_MAX_TEXT_LENGTH = 1000
DEFAULT_MAX_CSS_LENGTH = 50_000
DEFAULT_MAX_PAYLOAD_BYTES = 1_048_576


@dataclass(frozen=True)
class DocumentLimits:
    """Upper bounds enforced on inbound documents."""
    max_text_length: int = DEFAULT_MAX_TEXT_LENGTH
    max_css_length: int = DEFAULT_MAX_CSS_LENGTH
    max_payload_bytes: int = DEFAULT_MAX_PAYLOAD_BYTES
