"""Auth Routes — signup and login.

Invariants:
    - Both routes validate their body before touching the DB
    - Responses carry the public user view plus a bearer token, never the hash
"""

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from munreg.api.request_validator import ValidatedRequest, validate
from munreg.config import Settings, get_settings
from munreg.infrastructure.database import get_db
from munreg.schemas.forms import LOGIN, SIGNUP
from munreg.schemas.responses import AuthResponse, UserResponse
from munreg.services import auth_service

router = APIRouter(prefix="/api/v1/auth", tags=["auth"])


def _auth_payload(user, token: str) -> dict:
    return AuthResponse(
        user=UserResponse.model_validate(user), token=token,
    ).to_json()


@router.post("/signup", status_code=status.HTTP_201_CREATED)
async def signup(
    validated: ValidatedRequest = Depends(validate(body=SIGNUP)),
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    """Create an account and log it in."""
    user, token = await auth_service.register_user(db, validated.body, settings)
    return {"statusCode": 201, "data": _auth_payload(user, token)}


@router.post("/login")
async def login(
    validated: ValidatedRequest = Depends(validate(body=LOGIN)),
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    user, token = await auth_service.authenticate(db, validated.body, settings)
    return {"statusCode": 200, "data": _auth_payload(user, token)}
