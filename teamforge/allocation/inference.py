"""Required-skill inference from project names."""

from __future__ import annotations

from typing import List, Optional, Sequence

from teamforge.allocation.tables import PROJECT_SKILL_GROUPS, all_matches
from teamforge.models.team import Team


def infer_required_skills(project: str) -> List[str]:
    """Collect the skill lists of every project keyword group the name matches.

    Groups contribute in table order and a skill already collected is not
    repeated. A project that matches no group yields an empty list, which the
    optimizer treats as "no requirement".
    """

    skills: List[str] = []
    for group in all_matches(project or "", PROJECT_SKILL_GROUPS):
        for skill in group:
            if skill not in skills:
                skills.append(skill)
    return skills


def required_skills_for(team: Team, explicit: Optional[Sequence[str]] = None) -> List[str]:
    """Resolve the requirement for a team: caller override, team list, then inference."""

    if explicit:
        return list(explicit)
    if team.required_skills:
        return list(team.required_skills)
    return infer_required_skills(team.project)
