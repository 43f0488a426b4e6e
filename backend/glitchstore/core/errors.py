"""Error Hierarchy — typed, categorized exceptions for all glitch store failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Input errors (400-level) are recoverable and never change stored state
    - to_response() produces the {"status": "error", "message": ...} envelope
    - No internal details leaked in user-facing messages (details stay in context)

Design Decisions:
    - Single hierarchy with GlitchStoreError base: routes and global handlers
      catch one type (ADR: uniform error shape)
    - http_status is the default for the error; the write path reports storage
      failures as 400, so routes may override it when building the response
    - Messages resolved by code through language_strings, not baked into the
      exception, so one error renders in any locale
"""

from dataclasses import dataclass
from enum import Enum

from glitchstore.core.domain_types import Locale
from glitchstore.core.language_strings import get_error_message


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    REQUEST = "request"
    STORAGE = "storage"
    PROTOCOL = "protocol"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Where a storage error happened, surfaced in log records."""
    storage_path: str | None = None


class GlitchStoreError(Exception):
    """Base exception for all glitch store errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status

    def user_message(self, locale: Locale = Locale.EN) -> str:
        return get_error_message(self.code, locale)

    def to_response(self, locale: Locale = Locale.EN) -> dict:
        """Convert to the standard JSON error body."""
        return {"status": "error", "message": self.user_message(locale)}


# ─── Validation Errors (400-level) ──────────────────────────────

class DocumentValidationError(GlitchStoreError):
    """Inbound document failed shape, type or size checks."""
    def __init__(self, message: str, code: str, field: str | None = None):
        super().__init__(
            message, code, ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, None, 400,
        )
        self.field = field


class MissingFieldsError(DocumentValidationError):
    def __init__(self, missing: list[str]):
        super().__init__(
            f"Missing required fields: {', '.join(missing)}",
            "MISSING_FIELDS", missing[0] if missing else None,
        )


class InvalidTypeError(DocumentValidationError):
    def __init__(self, field: str, actual_type: str):
        super().__init__(
            f"Field '{field}' must be a string, got {actual_type}",
            "INVALID_TYPE", field,
        )


class TextTooLongError(DocumentValidationError):
    def __init__(self, length: int, limit: int):
        super().__init__(
            f"text is {length} bytes, limit is {limit}", "TEXT_TOO_LONG", "text",
        )


class CssTooLongError(DocumentValidationError):
    def __init__(self, length: int, limit: int):
        super().__init__(
            f"css is {length} bytes, limit is {limit}", "CSS_TOO_LONG", "css",
        )


# ─── Request Errors (400-level) ─────────────────────────────────

class RequestBodyError(GlitchStoreError):
    """Raw request body rejected before validation."""
    def __init__(self, message: str, code: str):
        super().__init__(
            message, code, ErrorCategory.REQUEST,
            ErrorSeverity.WARNING, None, 400,
        )


class EmptyRequestError(RequestBodyError):
    def __init__(self):
        super().__init__("Request body is empty", "EMPTY_REQUEST")


class PayloadTooLargeError(RequestBodyError):
    def __init__(self, size: int, limit: int):
        super().__init__(
            f"Request body is {size} bytes, limit is {limit}", "PAYLOAD_TOO_LARGE",
        )


class InvalidJsonError(RequestBodyError):
    def __init__(self, reason: str):
        super().__init__(f"Request body is not valid JSON: {reason}", "INVALID_JSON")


# ─── Storage Errors (500-level) ─────────────────────────────────

class StorageError(GlitchStoreError):
    """Reading or writing the storage file failed."""
    def __init__(
        self,
        message: str,
        code: str,
        storage_path: str,
        severity: ErrorSeverity = ErrorSeverity.CRITICAL,
    ):
        super().__init__(
            message, code, ErrorCategory.STORAGE, severity,
            ErrorContext(storage_path=storage_path), 500,
        )


class EncodeFailedError(StorageError):
    def __init__(self, storage_path: str, reason: str):
        super().__init__(
            f"Cannot encode document: {reason}", "ENCODE_FAILED", storage_path,
            ErrorSeverity.ERROR,
        )


class WriteFailedError(StorageError):
    def __init__(self, storage_path: str, reason: str):
        super().__init__(
            f"Cannot write temporary file: {reason}", "WRITE_FAILED", storage_path,
        )


class CommitFailedError(StorageError):
    def __init__(self, storage_path: str, reason: str):
        super().__init__(
            f"Cannot replace storage file: {reason}", "COMMIT_FAILED", storage_path,
        )


class DocumentNotFoundError(StorageError):
    """No document has been stored yet. Callers usually substitute a default."""
    def __init__(self, storage_path: str):
        super().__init__(
            f"No document at {storage_path}", "NOT_FOUND", storage_path,
            ErrorSeverity.INFO,
        )


class ReadFailedError(StorageError):
    def __init__(self, storage_path: str, reason: str):
        super().__init__(
            f"Cannot read storage file: {reason}", "READ_FAILED", storage_path,
        )


class EmptyFileError(StorageError):
    def __init__(self, storage_path: str):
        super().__init__("Storage file is empty", "EMPTY_FILE", storage_path)


class CorruptDataError(StorageError):
    def __init__(self, storage_path: str, reason: str):
        super().__init__(
            f"Storage file is not valid JSON: {reason}", "CORRUPT_DATA", storage_path,
        )


class InvalidStructureError(StorageError):
    def __init__(self, storage_path: str):
        super().__init__(
            "Stored document lacks text or css", "INVALID_STRUCTURE", storage_path,
        )


# ─── Protocol Errors ────────────────────────────────────────────

class MethodNotAllowedError(GlitchStoreError):
    def __init__(self, method: str):
        super().__init__(
            f"Method {method} not supported", "METHOD_NOT_ALLOWED",
            ErrorCategory.PROTOCOL, ErrorSeverity.WARNING, None, 405,
        )
