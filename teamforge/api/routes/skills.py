"""Skill catalog endpoints."""

from __future__ import annotations

from typing import Dict, List, Optional

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, Field

from teamforge.api.dependencies import get_store
from teamforge.models.person import ScrumRole, SkillKind, SkillLevel
from teamforge.models.skill import Skill, catalog_skills
from teamforge.roster.store import RosterStore

router = APIRouter(prefix="/skills", tags=["skills"])


class SkillCreateRequest(BaseModel):
    name: str = Field(..., min_length=2)
    category: str = Field(..., min_length=1)
    level: SkillLevel = SkillLevel.BASIC
    description: Optional[str] = None
    is_core: bool = False


class SkillUpdateRequest(BaseModel):
    name: Optional[str] = Field(None, min_length=2)
    category: Optional[str] = Field(None, min_length=1)
    level: Optional[SkillLevel] = None
    description: Optional[str] = None
    is_core: Optional[bool] = None


@router.get("", response_model=List[Skill])
async def list_skills(
    search: Optional[str] = None,
    category: Optional[str] = None,
    store: RosterStore = Depends(get_store),
) -> List[Skill]:
    return store.list_skills(search=search, category=category)


@router.get("/categories", response_model=List[str])
async def list_categories(store: RosterStore = Depends(get_store)) -> List[str]:
    return store.skill_categories()


@router.get("/scrum-catalog")
async def scrum_catalog(
    role: Optional[ScrumRole] = None,
    kind: Optional[SkillKind] = None,
) -> Dict[str, List[str]]:
    """Skills an employee can declare at registration, keyed by Scrum role."""

    roles = [role] if role is not None else list(ScrumRole)
    return {item.value: catalog_skills(item, kind) for item in roles}


@router.post("", response_model=Skill, status_code=status.HTTP_201_CREATED)
async def create_skill(payload: SkillCreateRequest, store: RosterStore = Depends(get_store)) -> Skill:
    return store.create_skill(payload.model_dump())


@router.get("/{skill_id}", response_model=Skill)
async def get_skill(skill_id: int, store: RosterStore = Depends(get_store)) -> Skill:
    return store.get_skill(skill_id)


@router.put("/{skill_id}", response_model=Skill)
async def update_skill(skill_id: int, payload: SkillUpdateRequest, store: RosterStore = Depends(get_store)) -> Skill:
    return store.update_skill(skill_id, payload.model_dump(exclude_unset=True))


@router.delete("/{skill_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_skill(skill_id: int, store: RosterStore = Depends(get_store)) -> None:
    store.delete_skill(skill_id)
