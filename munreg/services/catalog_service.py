"""Catalog Service — read-only queries behind the public browsing pages.

Invariants:
    - Never writes
    - Unknown ids raise ResourceNotFoundError (404)
    - Lists ordered by primary key
"""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from munreg.core.errors import ResourceNotFoundError
from munreg.models.committee import Committee
from munreg.models.delegation import Delegation
from munreg.models.staff_member import StaffMember
from munreg.schemas.forms import CommitteeListQuery


async def list_committees(
    db: AsyncSession, query: CommitteeListQuery,
) -> list[Committee]:
    stmt = select(Committee).order_by(Committee.id)
    if query.difficulty:
        stmt = stmt.where(Committee.difficulty == query.difficulty.value)
    stmt = stmt.limit(query.limit).offset(query.offset)
    result = await db.execute(stmt)
    return list(result.scalars().all())


async def get_committee(db: AsyncSession, committee_id: int) -> Committee:
    result = await db.execute(
        select(Committee).where(Committee.id == committee_id),
    )
    committee = result.scalar_one_or_none()
    if not committee:
        raise ResourceNotFoundError("Committee", str(committee_id))
    return committee


async def list_delegations(db: AsyncSession) -> list[Delegation]:
    result = await db.execute(select(Delegation).order_by(Delegation.id))
    return list(result.scalars().all())


async def list_staff(db: AsyncSession) -> list[StaffMember]:
    result = await db.execute(select(StaffMember).order_by(StaffMember.id))
    return list(result.scalars().all())


async def get_staff_member(db: AsyncSession, staff_id: int) -> StaffMember:
    result = await db.execute(
        select(StaffMember).where(StaffMember.id == staff_id),
    )
    member = result.scalar_one_or_none()
    if not member:
        raise ResourceNotFoundError("StaffMember", str(staff_id))
    return member
