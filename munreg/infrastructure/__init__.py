"""Infrastructure Layer — database access, security primitives, cross-cutting concerns.

Invariants:
    - Infrastructure never imports from services/ or api/
    - Library exceptions mapped to core/errors.py types at this boundary
"""
