"""Health Probes — process liveness and database readiness.

Invariants:
    - GET /api/v1/health/ answers 200 whenever the process serves requests
    - GET /api/v1/health/ready answers 503 in the standard error envelope when
      the database is unreachable or was never initialized
    - Both use the same envelopes as every other route
"""

from fastapi import APIRouter, Depends

from munreg.config import Settings, get_settings
from munreg.core.errors import DatabaseError
from munreg.infrastructure import database

router = APIRouter(prefix="/api/v1/health", tags=["health"])


@router.get("/")
async def liveness(settings: Settings = Depends(get_settings)):
    return {
        "statusCode": 200,
        "data": {"status": "up", "conference": settings.conference_name},
    }


@router.get("/ready")
async def readiness():
    """Ready once the database answers a ping."""
    if not await database.ping():
        raise DatabaseError("database unreachable", "ping")
    return {"statusCode": 200, "data": {"status": "ready", "database": "up"}}
