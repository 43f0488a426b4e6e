"""Core Layer — pure validation, stamping and error types. No IO, no async.

Invariants:
    - No module in core/ imports from api/ or infrastructure/
    - All functions are pure; time is passed in, never read

Design Decisions:
    - Functional core separated from imperative shell: routes do the IO around it
"""
