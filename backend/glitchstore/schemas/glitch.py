"""Glitch Schemas — Pydantic models for the stored document and API responses.

Invariants:
    - GlitchDraft is only built by validate_document (already sanitized)
    - GlitchDocument field order is the on-disk key order
    - timestamp/updated_at are always server-generated

Design Decisions:
    - Inbound bodies are NOT parsed through these models: the validator runs on
      the raw decoded JSON so each failure maps to its own error code
"""

from pydantic import BaseModel


class GlitchDraft(BaseModel):
    """Validated and sanitized document fields, not yet stamped."""
    text: str
    css: str


class GlitchDocument(BaseModel):
    """The single persisted glitch effect."""
    text: str
    css: str
    timestamp: int
    updated_at: str


class SaveResponse(BaseModel):
    """Body returned after a successful save."""
    status: str = "success"
    message: str
    timestamp: int
