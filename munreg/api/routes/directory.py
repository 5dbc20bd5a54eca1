"""Directory Routes — staff team page and delegation list.

Invariants:
    - Read-only, unauthenticated
"""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from munreg.infrastructure.database import get_db
from munreg.schemas.responses import DelegationResponse, StaffMemberResponse
from munreg.services import catalog_service

router = APIRouter(prefix="/api/v1", tags=["directory"])


@router.get("/staff")
async def list_staff(db: AsyncSession = Depends(get_db)):
    staff = await catalog_service.list_staff(db)
    return {
        "statusCode": 200,
        "data": [StaffMemberResponse.model_validate(s).to_json() for s in staff],
    }


@router.get("/staff/{staff_id}")
async def get_staff_member(staff_id: int, db: AsyncSession = Depends(get_db)):
    member = await catalog_service.get_staff_member(db, staff_id)
    return {"statusCode": 200, "data": StaffMemberResponse.model_validate(member).to_json()}


@router.get("/delegations")
async def list_delegations(db: AsyncSession = Depends(get_db)):
    """Delegations a user can name on an application form."""
    delegations = await catalog_service.list_delegations(db)
    return {
        "statusCode": 200,
        "data": [DelegationResponse.model_validate(d).to_json() for d in delegations],
    }
