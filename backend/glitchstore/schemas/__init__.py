"""Pydantic Schemas — the stored document and API response contracts.

Invariants:
    - Schemas describe data already validated by core/ (no request parsing here)
"""
