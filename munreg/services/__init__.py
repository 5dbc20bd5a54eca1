"""Services Layer — imperative shell between routes and the database.

Invariants:
    - Services receive already-validated forms; they never re-validate shape
    - The acting user id is always an explicit argument, never ambient state
    - Commit happens here, not in routes

Design Decisions:
    - Plain async functions over service classes: no state to hold between calls
"""
