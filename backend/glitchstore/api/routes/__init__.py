"""Route Modules — one file per resource/concern.

Invariants:
    - Each module defines its own APIRouter
    - Routes delegate validation and storage to core/ and infrastructure/
"""
