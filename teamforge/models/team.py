"""Team data model definitions."""

from __future__ import annotations

from typing import Dict, List, Optional

from pydantic import BaseModel, Field, model_validator

from teamforge.models.person import Person, AliasedEnum


class TeamStatus(AliasedEnum):
    PLANNED = "Planned"
    ACTIVE = "Active"
    INACTIVE = "Inactive"

    @classmethod
    def _aliases(cls) -> Dict[str, str]:
        return {"planejado": "Planned", "ativo": "Active", "inativo": "Inactive"}


class Team(BaseModel):
    id: int
    name: str = Field(..., min_length=1)
    project: str = Field("", description="Project name, used to infer required skills")
    status: TeamStatus = TeamStatus.PLANNED
    members: List[Person] = Field(default_factory=list)
    max_members: int = Field(9, ge=1, le=9)
    description: Optional[str] = None
    required_skills: Optional[List[str]] = None

    @model_validator(mode="after")
    def _check_membership(self) -> "Team":
        seen = set()
        for member in self.members:
            if member.id in seen:
                raise ValueError(f"Person {member.id} appears more than once in team {self.id}")
            seen.add(member.id)
        if len(self.members) > self.max_members:
            raise ValueError(
                f"Team {self.id} has {len(self.members)} members but allows at most {self.max_members}"
            )
        return self

    @property
    def available_slots(self) -> int:
        return self.max_members - len(self.members)

    @property
    def member_ids(self) -> List[int]:
        return [member.id for member in self.members]

    @property
    def member_roles(self) -> List[str]:
        return [member.role for member in self.members]
