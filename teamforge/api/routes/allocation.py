"""Team generation, optimization and suggestion commit endpoints."""

from __future__ import annotations

from typing import List, Optional

from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field

from teamforge.api.dependencies import get_coordinator
from teamforge.core.config import settings
from teamforge.models.allocation import ApplyOutcome, GeneratedTeam, OptimizationResult
from teamforge.orchestration.allocation import AllocationCoordinator

router = APIRouter(prefix="/allocation", tags=["allocation"])


class BuildRequest(BaseModel):
    team_size: int = Field(settings.DEFAULT_TEAM_SIZE, ge=settings.MIN_TEAM_SIZE, le=settings.MAX_TEAM_SIZE)
    team_count: int = Field(settings.DEFAULT_TEAM_COUNT, ge=1, le=settings.MAX_TEAM_COUNT)
    employee_ids: Optional[List[int]] = Field(
        None, description="Candidate pool in priority order; defaults to every unallocated employee"
    )


class OptimizeRequest(BaseModel):
    team_ids: Optional[List[int]] = Field(None, description="Teams to optimize; defaults to all teams")


class ApplyRequest(BaseModel):
    employee_ids: List[int] = Field(..., min_length=1)


@router.post("/build", response_model=List[GeneratedTeam])
async def build_teams(
    payload: BuildRequest,
    coordinator: AllocationCoordinator = Depends(get_coordinator),
) -> List[GeneratedTeam]:
    """Propose teams led by the strongest Scrum Master and Product Owner available.

    Nothing is committed; the proposal can be turned into real teams through the
    team endpoints.
    """

    return coordinator.build(payload.team_size, payload.team_count, payload.employee_ids)


@router.post("/optimize", response_model=List[OptimizationResult])
async def optimize_teams(
    payload: OptimizeRequest,
    coordinator: AllocationCoordinator = Depends(get_coordinator),
) -> List[OptimizationResult]:
    """Rank available employees for every open seat. Advisory only."""

    return coordinator.optimize(payload.team_ids)


@router.post("/teams/{team_id}/apply", response_model=ApplyOutcome)
async def apply_suggestions(
    team_id: int,
    payload: ApplyRequest,
    coordinator: AllocationCoordinator = Depends(get_coordinator),
) -> ApplyOutcome:
    """Commit suggested employees; the ones that can no longer join are reported as skipped."""

    return coordinator.apply(team_id, payload.employee_ids)
