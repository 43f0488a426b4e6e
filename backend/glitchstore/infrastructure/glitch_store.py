"""Glitch File Store — single JSON document on disk with atomic replace-on-write.

Invariants:
    - The canonical file is never written in place: content goes to a temporary
      sibling first and is published with os.replace (readers see old or new,
      never partial)
    - Each write uses its own temporary name, so concurrent writers never share
      a staging file (last rename wins)
    - Failed writes leave no temporary file behind (removal is best-effort)
    - All OSError/JSON failures mapped to StorageError subclasses (core/errors.py)
    - read() returns the stored object verbatim; timestamps are not recomputed
    - read() accepts only JSON a strict encoder can re-emit (no NaN/Infinity,
      no unpaired surrogates), same decoder as request bodies

Design Decisions:
    - fsync before rename: a crash after os.replace cannot expose an empty file
    - Pretty-printed JSON with literal Unicode: file stays hand-editable
    - No locking: the rename is the only synchronization the protocol needs
"""

import json
import logging
import os
import uuid
from pathlib import Path

from glitchstore.core.errors import (
    CommitFailedError,
    CorruptDataError,
    DocumentNotFoundError,
    EmptyFileError,
    EncodeFailedError,
    InvalidStructureError,
    ReadFailedError,
    WriteFailedError,
)
from glitchstore.core.parse_request import loads_strict
from glitchstore.schemas.glitch import GlitchDocument

logger = logging.getLogger(__name__)

JSON_INDENT = 4
TEMP_SUFFIX = ".tmp"


class GlitchStore:
    """Reads and atomically replaces the single stored glitch document."""

    def __init__(self, path: str | os.PathLike):
        self.path = Path(path)

    def __repr__(self) -> str:
        return f"GlitchStore({str(self.path)!r})"

    # ─── Write ───────────────────────────────────────────────────

    def write(self, doc: GlitchDocument) -> None:
        """Replace the stored document with doc."""
        payload = self._encode(doc)
        temp_path = self._temp_path()
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(temp_path, "wb") as f:
                f.write(payload)
                f.flush()
                os.fsync(f.fileno())
        except OSError as e:
            self._discard(temp_path)
            logger.error(
                f"Temporary write failed: {e}",
                extra={"storage_path": str(self.path), "error_code": "WRITE_FAILED"},
            )
            raise WriteFailedError(str(self.path), str(e)) from e

        try:
            os.replace(temp_path, self.path)
        except OSError as e:
            self._discard(temp_path)
            logger.error(
                f"Rename onto storage file failed: {e}",
                extra={"storage_path": str(self.path), "error_code": "COMMIT_FAILED"},
            )
            raise CommitFailedError(str(self.path), str(e)) from e

        logger.info(
            "Document saved",
            extra={"storage_path": str(self.path), "document_timestamp": doc.timestamp},
        )

    def _encode(self, doc: GlitchDocument) -> bytes:
        try:
            return json.dumps(
                doc.model_dump(), ensure_ascii=False, indent=JSON_INDENT,
            ).encode("utf-8")
        except (TypeError, ValueError) as e:
            raise EncodeFailedError(str(self.path), str(e)) from e

    def _temp_path(self) -> Path:
        return self.path.with_name(
            f"{self.path.name}.{uuid.uuid4().hex}{TEMP_SUFFIX}",
        )

    @staticmethod
    def _discard(temp_path: Path) -> None:
        try:
            temp_path.unlink()
        except OSError:
            pass  # best-effort: the write error is what gets reported

    # ─── Read ────────────────────────────────────────────────────

    def read(self) -> dict:
        """Return the stored document as decoded JSON."""
        try:
            content = self.path.read_bytes()
        except FileNotFoundError as e:
            raise DocumentNotFoundError(str(self.path)) from e
        except OSError as e:
            raise ReadFailedError(str(self.path), str(e)) from e

        if not content:
            raise EmptyFileError(str(self.path))

        try:
            data = loads_strict(content)
        except ValueError as e:
            raise CorruptDataError(str(self.path), str(e)) from e

        if not isinstance(data, dict) or any(
            data.get(key) is None for key in ("text", "css")
        ):
            raise InvalidStructureError(str(self.path))
        return data

    # ─── Probes ──────────────────────────────────────────────────

    def is_writable(self) -> bool:
        """True if a write could create the temp file and rename it into place."""
        directory = self.path.parent
        while not directory.exists():
            if directory.parent == directory:
                return False
            directory = directory.parent
        return directory.is_dir() and os.access(directory, os.W_OK | os.X_OK)
