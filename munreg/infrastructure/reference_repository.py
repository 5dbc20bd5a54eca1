"""Reference Repository — live-fetch ReferenceProvider backed by the database.

Invariants:
    - Read-only: issues SELECTs only, never flushes or commits
    - One snapshot per get_snapshot() call; each call re-reads the tables
    - Rows ordered by primary key so option lists are deterministic

Design Decisions:
    - Holds the request's AsyncSession rather than opening its own: the
      snapshot is read inside the same transaction the handler writes in
    - Delegations included: application forms check delegationId against them
"""

import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from munreg.core.reference_data import (
    CommitteeCountryRef, CommitteeRef, DelegationRef, ReferenceSnapshot,
)
from munreg.models.committee import Committee, CommitteeCountry
from munreg.models.delegation import Delegation

logger = logging.getLogger(__name__)


class DatabaseReferenceProvider:
    """Fetches the committee/country/delegation tables on demand."""

    def __init__(self, db: AsyncSession):
        self._db = db

    async def get_snapshot(self) -> ReferenceSnapshot:
        committees = (
            await self._db.execute(select(Committee).order_by(Committee.id))
        ).scalars().all()
        countries = (
            await self._db.execute(
                select(CommitteeCountry).order_by(CommitteeCountry.id),
            )
        ).scalars().all()
        delegations = (
            await self._db.execute(select(Delegation).order_by(Delegation.id))
        ).scalars().all()
        logger.debug(
            f"Reference snapshot: {len(committees)} committees, "
            f"{len(countries)} committee countries, {len(delegations)} delegations",
        )
        return ReferenceSnapshot(
            committees=tuple(
                CommitteeRef(
                    id=c.id, name=c.name,
                    displayname=c.displayname, difficulty=c.difficulty,
                )
                for c in committees
            ),
            committee_countries=tuple(
                CommitteeCountryRef(committee_id=cc.committee_id, country=cc.country)
                for cc in countries
            ),
            delegations=tuple(
                DelegationRef(id=d.id, name=d.name) for d in delegations
            ),
        )
