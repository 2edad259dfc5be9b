"""Builders for people and teams used across the test suite."""

from __future__ import annotations

from typing import Iterable, Optional

from teamforge.models import Availability, Person, ScrumRole, SkillKind, SkillLevel, SkillRecord, Team


def make_person(
    person_id: int,
    role: str = "Developer",
    skills: Iterable[str] = (),
    *,
    name: Optional[str] = None,
    availability: Availability = Availability.AVAILABLE,
) -> Person:
    return Person(
        id=person_id,
        name=name or f"Person {person_id}",
        role=role,
        skills=list(skills),
        availability=availability,
    )


def scrum_profile(person_id: int, scrum_role: ScrumRole, *levels: SkillLevel, name: Optional[str] = None) -> Person:
    """A person whose skills are all registered under one Scrum role."""

    skills = [
        SkillRecord(name=f"{scrum_role.value} skill {index}", level=level, kind=SkillKind.SOFT, scrum_role=scrum_role)
        for index, level in enumerate(levels or (SkillLevel.BASIC,), start=1)
    ]
    return Person(id=person_id, name=name or f"{scrum_role.value} {person_id}", role=scrum_role.value, skills=skills)


def make_team(team_id: int, members: Iterable[Person] = (), *, project: str = "", max_members: int = 9) -> Team:
    return Team(id=team_id, name=f"Team {team_id}", project=project, members=list(members), max_members=max_members)


