"""Boundary Protocols — contracts between core and shell.

Invariants:
    - Core NEVER imports from shell; dependency arrows point inward only
    - Reference data is read through ReferenceProvider, never queried directly
    - Implementations provided by shell via dependency injection

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
    - Async in Protocol: implementations do IO, but the enforcement functions
      that consume the snapshot are plain synchronous functions
"""

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from munreg.core.reference_data import ReferenceSnapshot


class ReferenceProvider(Protocol):
    """Contract for "get the current reference snapshot"."""
    async def get_snapshot(self) -> "ReferenceSnapshot": ...
