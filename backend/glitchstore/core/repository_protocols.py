"""Boundary Protocols — contracts between core and shell.

Invariants:
    - Core NEVER imports from shell — dependency arrows point inward only
    - Storage accessed through the DocumentStore protocol only

Design Decisions:
    - Protocol over ABC: structural subtyping, the file store needs no base class
    - Sync methods: storage IO is blocking and the route runs it in a threadpool
"""

from typing import Protocol

from glitchstore.schemas.glitch import GlitchDocument


class DocumentStore(Protocol):
    """Single-slot document storage — implemented by infrastructure.

    read() raises DocumentNotFoundError when nothing is stored and another
    StorageError subclass for any other failure. write() replaces the whole
    document atomically or raises a StorageError.
    """
    def read(self) -> dict: ...
    def write(self, doc: GlitchDocument) -> None: ...
    def is_writable(self) -> bool: ...
