"""User Application Routes — the logged-in user's delegate/chair/delegation applications.

Invariants:
    - Every route requires a bearer token; the user id comes from it, never the body
    - PUT validates asynchronously: committee/country choices are checked against
      the reference tables before anything is written
    - At most one application per role per user (403 on a second PUT)
    - GET returns 404 until the user has applied
"""

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from munreg.api.dependencies import get_current_user
from munreg.api.request_validator import ValidatedRequest, validate
from munreg.core.domain_types import ApplicationRole
from munreg.core.errors import ResourceNotFoundError
from munreg.infrastructure.database import get_db
from munreg.models.user import User
from munreg.schemas.forms import CHAIR_APPLY, DELEGATE_APPLY, DELEGATION_APPLY
from munreg.schemas.responses import (
    ChairApplicationResponse, DelegateApplicationResponse, DelegationResponse,
    UserResponse,
)
from munreg.services import application_service

router = APIRouter(prefix="/api/v1/user", tags=["user"])


@router.get("/me")
async def get_me(user: User = Depends(get_current_user)):
    return {"statusCode": 200, "data": UserResponse.model_validate(user).to_json()}


@router.get("/application/delegate")
async def get_delegate_application(
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """Current user's delegate application, or 404."""
    application = await application_service.get_application(
        db, ApplicationRole.DELEGATE, user.id,
    )
    if not application:
        raise ResourceNotFoundError("DelegateApplication", f"user:{user.id}")
    return {
        "statusCode": 200,
        "data": DelegateApplicationResponse.model_validate(application).to_json(),
    }


@router.put("/application/delegate", status_code=status.HTTP_201_CREATED)
async def submit_delegate_application(
    user: User = Depends(get_current_user),
    validated: ValidatedRequest = Depends(validate(body=DELEGATE_APPLY, is_async=True)),
    db: AsyncSession = Depends(get_db),
):
    application = await application_service.submit_application(
        db, ApplicationRole.DELEGATE, user.id, validated.body,
    )
    return {
        "statusCode": 201,
        "data": DelegateApplicationResponse.model_validate(application).to_json(),
    }


@router.get("/application/chair")
async def get_chair_application(
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    application = await application_service.get_application(
        db, ApplicationRole.CHAIR, user.id,
    )
    if not application:
        raise ResourceNotFoundError("ChairApplication", f"user:{user.id}")
    return {
        "statusCode": 200,
        "data": ChairApplicationResponse.model_validate(application).to_json(),
    }


@router.put("/application/chair", status_code=status.HTTP_201_CREATED)
async def submit_chair_application(
    user: User = Depends(get_current_user),
    validated: ValidatedRequest = Depends(validate(body=CHAIR_APPLY, is_async=True)),
    db: AsyncSession = Depends(get_db),
):
    application = await application_service.submit_application(
        db, ApplicationRole.CHAIR, user.id, validated.body,
    )
    return {
        "statusCode": 201,
        "data": ChairApplicationResponse.model_validate(application).to_json(),
    }


@router.put("/application/delegation", status_code=status.HTTP_201_CREATED)
async def submit_delegation_application(
    user: User = Depends(get_current_user),
    validated: ValidatedRequest = Depends(validate(body=DELEGATION_APPLY)),
    db: AsyncSession = Depends(get_db),
):
    """Register a delegation led by the current user."""
    delegation = await application_service.submit_delegation(
        db, user.id, validated.body,
    )
    return {
        "statusCode": 201,
        "data": DelegationResponse.model_validate(delegation).to_json(),
    }
