"""Committee Routes — public committee browsing.

Invariants:
    - Read-only
    - List query (limit/offset/difficulty) validated through the request validator
"""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from munreg.api.request_validator import ValidatedRequest, validate
from munreg.infrastructure.database import get_db
from munreg.schemas.forms import COMMITTEE_LIST_QUERY
from munreg.schemas.responses import CommitteeDetailResponse, CommitteeResponse
from munreg.services import catalog_service

router = APIRouter(prefix="/api/v1/committees", tags=["committees"])


@router.get("")
async def list_committees(
    validated: ValidatedRequest = Depends(validate(query=COMMITTEE_LIST_QUERY)),
    db: AsyncSession = Depends(get_db),
):
    query = validated.query
    committees = await catalog_service.list_committees(db, query)
    return {
        "statusCode": 200,
        "data": [CommitteeResponse.model_validate(c).to_json() for c in committees],
        "pagination": {"limit": query.limit, "offset": query.offset},
    }


@router.get("/{committee_id}")
async def get_committee(committee_id: int, db: AsyncSession = Depends(get_db)):
    """Committee with the countries it seats."""
    committee = await catalog_service.get_committee(db, committee_id)
    detail = CommitteeDetailResponse(
        **CommitteeResponse.model_validate(committee).model_dump(),
        countries=[cc.country for cc in committee.countries],
    )
    return {"statusCode": 200, "data": detail.to_json()}
