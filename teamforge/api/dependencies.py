from __future__ import annotations

from teamforge.orchestration.allocation import AllocationCoordinator, allocation_coordinator
from teamforge.roster.store import RosterStore, roster_store


async def get_store() -> RosterStore:
    return roster_store


async def get_coordinator() -> AllocationCoordinator:
    return allocation_coordinator
