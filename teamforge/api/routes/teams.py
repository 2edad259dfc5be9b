"""Team management and membership endpoints."""

from __future__ import annotations

from typing import List, Optional

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, Field

from teamforge.api.dependencies import get_store
from teamforge.models.person import Person
from teamforge.models.team import Team, TeamStatus
from teamforge.roster.store import RosterStore

router = APIRouter(prefix="/teams", tags=["teams"])


class TeamCreateRequest(BaseModel):
    name: str = Field(..., min_length=3)
    project: str = Field(..., min_length=2)
    status: TeamStatus = TeamStatus.PLANNED
    max_members: int = Field(9, ge=1, le=9)
    description: Optional[str] = None
    required_skills: Optional[List[str]] = None


class TeamUpdateRequest(BaseModel):
    name: Optional[str] = Field(None, min_length=3)
    project: Optional[str] = Field(None, min_length=2)
    status: Optional[TeamStatus] = None
    max_members: Optional[int] = Field(None, ge=1, le=9)
    description: Optional[str] = None
    required_skills: Optional[List[str]] = None


class MemberAssignRequest(BaseModel):
    employee_id: int


@router.get("", response_model=List[Team])
async def list_teams(search: Optional[str] = None, store: RosterStore = Depends(get_store)) -> List[Team]:
    return store.list_teams(search=search)


@router.post("", response_model=Team, status_code=status.HTTP_201_CREATED)
async def create_team(payload: TeamCreateRequest, store: RosterStore = Depends(get_store)) -> Team:
    return store.create_team(payload.model_dump())


@router.get("/unallocated", response_model=List[Person])
async def list_unallocated(store: RosterStore = Depends(get_store)) -> List[Person]:
    """Available employees that are not in any team yet."""

    return store.unallocated_employees()


@router.get("/{team_id}", response_model=Team)
async def get_team(team_id: int, store: RosterStore = Depends(get_store)) -> Team:
    return store.get_team(team_id)


@router.put("/{team_id}", response_model=Team)
async def update_team(team_id: int, payload: TeamUpdateRequest, store: RosterStore = Depends(get_store)) -> Team:
    return store.update_team(team_id, payload.model_dump(exclude_unset=True))


@router.delete("/{team_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_team(team_id: int, store: RosterStore = Depends(get_store)) -> None:
    store.delete_team(team_id)


@router.post("/{team_id}/members", response_model=Team)
async def assign_member(
    team_id: int,
    payload: MemberAssignRequest,
    store: RosterStore = Depends(get_store),
) -> Team:
    """Move an employee into the team, taking them out of any other team."""

    return store.assign_member(team_id, payload.employee_id)


@router.delete("/{team_id}/members/{employee_id}", response_model=Team)
async def remove_member(team_id: int, employee_id: int, store: RosterStore = Depends(get_store)) -> Team:
    return store.remove_member(team_id, employee_id)
