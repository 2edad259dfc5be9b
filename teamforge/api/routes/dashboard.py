"""Dashboard endpoints."""

from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends, Query

from teamforge.api.dependencies import get_store
from teamforge.models.person import Person
from teamforge.roster.dashboard import (
    DepartmentShare,
    RosterStats,
    department_allocation,
    recent_employees,
    roster_stats,
)
from teamforge.roster.store import RosterStore

router = APIRouter(prefix="/dashboard", tags=["dashboard"])


@router.get("/stats", response_model=RosterStats)
async def stats(store: RosterStore = Depends(get_store)) -> RosterStats:
    return roster_stats(store)


@router.get("/allocation", response_model=List[DepartmentShare])
async def allocation_by_department(store: RosterStore = Depends(get_store)) -> List[DepartmentShare]:
    return department_allocation(store)


@router.get("/recent", response_model=List[Person])
async def recent(limit: int = Query(5, ge=1, le=50), store: RosterStore = Depends(get_store)) -> List[Person]:
    return recent_employees(store, limit=limit)
