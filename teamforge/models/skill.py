"""Skill catalog definitions."""

from __future__ import annotations

from typing import Dict, List, Optional

from pydantic import BaseModel, Field

from teamforge.models.person import ScrumRole, SkillKind, SkillLevel


class Skill(BaseModel):
    id: int
    name: str = Field(..., min_length=2)
    category: str = Field(..., min_length=1)
    level: SkillLevel = SkillLevel.BASIC
    description: Optional[str] = None
    is_core: bool = False


# Registration-time catalog: the soft and hard skills an employee may declare
# for each Scrum role.
SCRUM_SKILL_CATALOG: Dict[SkillKind, Dict[ScrumRole, List[str]]] = {
    SkillKind.SOFT: {
        ScrumRole.SCRUM_MASTER: [
            "Clear communication",
            "Facilitation",
            "Impediment removal",
            "Self-confidence",
            "Time management",
            "Fostering self-organization",
            "Resilience",
            "Agile mindset",
            "Negotiation",
        ],
        ScrumRole.PRODUCT_OWNER: [
            "Strategic business vision",
            "Prioritization",
            "Effective communication",
            "Autonomy",
            "Availability",
            "Metrics analysis",
            "Resilience",
            "Agile mindset",
            "Negotiation",
        ],
        ScrumRole.DEVELOPER: [
            "Cross-functionality",
            "Self-organization",
            "Collaboration",
            "Commitment",
            "Continuous improvement",
            "Adaptability",
            "Resilience",
            "Agile mindset",
        ],
    },
    SkillKind.HARD: {
        ScrumRole.SCRUM_MASTER: [
            "Advanced Scrum framework knowledge",
            "Agile tooling",
            "Agile metrics",
        ],
        ScrumRole.PRODUCT_OWNER: [
            "Backlog management",
            "Prioritization techniques",
            "UX/UI knowledge",
        ],
        ScrumRole.DEVELOPER: [
            "Relevant technical stack",
            "Code versioning",
            "Automated testing",
        ],
    },
}


def catalog_skills(scrum_role: ScrumRole, kind: Optional[SkillKind] = None) -> List[str]:
    """Return catalog skill names for a Scrum role, optionally narrowed to one kind."""

    kinds = [kind] if kind is not None else list(SkillKind)
    names: List[str] = []
    for item in kinds:
        names.extend(SCRUM_SKILL_CATALOG[item][scrum_role])
    return names
