"""Reference Data — point-in-time snapshot of the lookup tables forms refer to.

Invariants:
    - ReferenceSnapshot is immutable once built (tuples, frozen dataclasses)
    - Lookups preserve storage order: options lists come out in the order rows
      were loaded, so error payloads are deterministic
    - resolve_snapshot awaits a provider at most once per call

Design Decisions:
    - Snapshot or provider accepted interchangeably (ReferenceSource): the same
      form schema runs against a live DB in a request or a pre-fetched snapshot
      in tests and batch jobs
    - SnapshotReferenceProvider lives in core: it does no IO, it only hands back
      the snapshot it was built with
"""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from munreg.core.repository_protocols import ReferenceProvider


@dataclass(frozen=True)
class CommitteeRef:
    id: int
    name: str = ""
    displayname: str = ""
    difficulty: str = ""


@dataclass(frozen=True)
class CommitteeCountryRef:
    committee_id: int
    country: str


@dataclass(frozen=True)
class DelegationRef:
    id: int
    name: str = ""


@dataclass(frozen=True)
class ReferenceSnapshot:
    """Committees, committee countries and delegations as read at one instant."""
    committees: tuple[CommitteeRef, ...] = ()
    committee_countries: tuple[CommitteeCountryRef, ...] = ()
    delegations: tuple[DelegationRef, ...] = ()

    def committee_ids(self) -> list[int]:
        return [c.id for c in self.committees]

    def has_committee(self, committee_id: int) -> bool:
        return any(c.id == committee_id for c in self.committees)

    def countries_for(self, committee_id: int) -> list[str]:
        return [
            cc.country for cc in self.committee_countries
            if cc.committee_id == committee_id
        ]

    def has_country(self, committee_id: int, country: str) -> bool:
        return any(
            cc.committee_id == committee_id and cc.country == country
            for cc in self.committee_countries
        )

    def delegation_ids(self) -> list[int]:
        return [d.id for d in self.delegations]

    def has_delegation(self, delegation_id: int) -> bool:
        return any(d.id == delegation_id for d in self.delegations)


class SnapshotReferenceProvider:
    """Provider over an already-fetched snapshot."""

    def __init__(self, snapshot: ReferenceSnapshot):
        self._snapshot = snapshot

    async def get_snapshot(self) -> ReferenceSnapshot:
        return self._snapshot


ReferenceSource = (
    ReferenceSnapshot
    | ReferenceProvider
    | Callable[[], Awaitable[ReferenceSnapshot]]
)


async def resolve_snapshot(source: ReferenceSource) -> ReferenceSnapshot:
    """Turn any accepted reference source into a snapshot."""
    if isinstance(source, ReferenceSnapshot):
        return source
    if hasattr(source, "get_snapshot"):
        return await source.get_snapshot()
    if callable(source):
        return await source()
    raise TypeError(f"Unsupported reference source: {type(source).__name__}")
