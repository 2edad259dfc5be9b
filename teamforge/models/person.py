"""Person and skill record definitions."""

from __future__ import annotations

from datetime import date
from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator


class AliasedEnum(str, Enum):
    """String enum that also accepts the labels used by the original HR front-end."""

    @classmethod
    def _aliases(cls) -> Dict[str, str]:
        return {}

    @classmethod
    def _missing_(cls, value: object) -> Any:
        if not isinstance(value, str):
            return None
        lowered = value.strip().lower()
        for member in cls:
            if member.value.lower() == lowered or member.name.lower() == lowered:
                return member
        alias = cls._aliases().get(lowered)
        return cls(alias) if alias else None


class SkillLevel(AliasedEnum):
    BASIC = "Basic"
    INTERMEDIATE = "Intermediate"
    ADVANCED = "Advanced"
    EXPERT = "Expert"

    @classmethod
    def _aliases(cls) -> Dict[str, str]:
        return {
            "básico": "Basic",
            "basico": "Basic",
            "intermediário": "Intermediate",
            "intermediario": "Intermediate",
            "avançado": "Advanced",
            "avancado": "Advanced",
        }


class SkillKind(AliasedEnum):
    SOFT = "Soft"
    HARD = "Hard"


class ScrumRole(AliasedEnum):
    SCRUM_MASTER = "Scrum Master"
    PRODUCT_OWNER = "Product Owner"
    DEVELOPER = "Developer"

    @classmethod
    def _aliases(cls) -> Dict[str, str]:
        return {"desenvolvedor": "Developer", "desenvolvedores": "Developer", "sm": "Scrum Master", "po": "Product Owner"}


class Availability(AliasedEnum):
    AVAILABLE = "Available"
    ALLOCATED = "Allocated"
    ON_LEAVE = "OnLeave"

    @classmethod
    def _aliases(cls) -> Dict[str, str]:
        return {"disponível": "Available", "disponivel": "Available", "alocado": "Allocated", "on leave": "OnLeave", "afastado": "OnLeave"}


class SkillRecord(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1)
    level: Optional[SkillLevel] = None
    kind: Optional[SkillKind] = None
    scrum_role: Optional[ScrumRole] = Field(None, description="Scrum role the skill was registered under")


class Person(BaseModel):
    """An employee as seen by the roster and the allocation engine."""

    id: int = Field(..., description="Unique, stable employee identifier")
    name: str = Field(..., min_length=1)
    role: str = Field("", description="Free-text job title, loosely categorized by keyword")
    skills: List[SkillRecord] = Field(default_factory=list)
    availability: Availability = Availability.AVAILABLE
    primary_skill: Optional[str] = None

    department: Optional[str] = None
    email: Optional[EmailStr] = None
    location: Optional[str] = None
    phone: Optional[str] = None
    start_date: Optional[date] = None
    avatar: Optional[str] = None

    @field_validator("skills", mode="before")
    def _coerce_plain_skills(cls, value: Any) -> Any:
        if isinstance(value, str):
            value = [item.strip() for item in value.split(",") if item.strip()]
        if isinstance(value, (list, tuple)):
            return [{"name": item} if isinstance(item, str) else item for item in value]
        return value

    @property
    def skill_names(self) -> List[str]:
        return [skill.name for skill in self.skills]

    def skills_for(self, scrum_role: ScrumRole) -> List[SkillRecord]:
        return [skill for skill in self.skills if skill.scrum_role == scrum_role]

    def has_scrum_role(self, scrum_role: ScrumRole) -> bool:
        return any(skill.scrum_role == scrum_role for skill in self.skills)
