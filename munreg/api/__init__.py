"""API Layer — FastAPI routes, dependencies, request validation and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - All endpoints return {"statusCode", "data"} on success and the MunRegError
      envelope on failure

Design Decisions:
    - Thin routes delegate to services
"""
