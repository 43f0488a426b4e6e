"""Request Body Parsing — turns raw POST bytes into a decoded JSON value.

Invariants:
    - PURE: operates on bytes already read by the route
    - Emptiness and size are checked BEFORE any decoding
    - Only UTF-8 JSON is accepted; NaN/Infinity literals and unpaired
      surrogate escapes are rejected
"""

import json
from typing import Any

from glitchstore.core.domain_types import DocumentLimits
from glitchstore.core.errors import (
    EmptyRequestError,
    InvalidJsonError,
    PayloadTooLargeError,
)


def _reject_constant(name: str) -> Any:
    raise ValueError(f"non-standard JSON constant {name}")


def loads_strict(data: bytes) -> Any:
    """Decode UTF-8 JSON the way a standards-compliant encoder can re-emit it.

    Raises ValueError for invalid UTF-8, invalid JSON, NaN/Infinity literals
    and strings holding unpaired surrogates.
    """
    value = json.loads(data.decode("utf-8"), parse_constant=_reject_constant)
    # unpaired \uD800-style escapes decode but cannot be stored as UTF-8
    json.dumps(value, ensure_ascii=False).encode("utf-8")
    return value


def parse_request_body(body: bytes, limits: DocumentLimits | None = None) -> Any:
    """Decode a request body, raising a RequestBodyError on rejection."""
    limits = limits or DocumentLimits()
    if not body:
        raise EmptyRequestError()
    if len(body) > limits.max_payload_bytes:
        raise PayloadTooLargeError(len(body), limits.max_payload_bytes)
    try:
        value = loads_strict(body)
    except ValueError as e:
        # UnicodeDecodeError, UnicodeEncodeError and JSONDecodeError are ValueErrors
        raise InvalidJsonError(str(e)) from e
    return value
