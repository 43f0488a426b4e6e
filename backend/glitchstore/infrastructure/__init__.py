"""Infrastructure Layer — file storage and cross-cutting concerns.

Invariants:
    - Infrastructure never imports from api/
    - All OS errors mapped to storage errors in core/errors.py
"""
