"""Greedy role-priority team builder."""

from __future__ import annotations

import logging
from typing import List, Optional, Sequence

from teamforge.allocation.scoring import level_weight
from teamforge.models.allocation import GeneratedTeam
from teamforge.models.person import Person, ScrumRole

logger = logging.getLogger(__name__)

DEFAULT_SKILLS_PER_SEAT = 3


class TeamBuilder:
    """Assemble teams seat by seat: Scrum Master, Product Owner, then developers.

    Chosen people leave the pool, so nobody lands in two teams of the same
    pass. Repeated ids in the pool count once. The input pool is never mutated.
    """

    def __init__(self, skills_per_seat: int = DEFAULT_SKILLS_PER_SEAT) -> None:
        self.skills_per_seat = skills_per_seat

    def build(self, pool: Sequence[Person], team_size: int, team_count: int) -> List[GeneratedTeam]:
        remaining = _unique_by_id(pool)
        teams: List[GeneratedTeam] = []

        for index in range(team_count):
            if not remaining:
                break

            members: List[Person] = []
            scrum_master = self._take_best(remaining, ScrumRole.SCRUM_MASTER, members, team_size)
            product_owner = self._take_best(remaining, ScrumRole.PRODUCT_OWNER, members, team_size)

            open_seats = max(0, team_size - len(members))
            developers = [person for person in remaining if person.has_scrum_role(ScrumRole.DEVELOPER)][:open_seats]
            for developer in developers:
                _discard(remaining, developer)
                members.append(developer)

            team = GeneratedTeam(
                id=f"team-{index + 1}",
                name=f"Team {index + 1}",
                members=members,
                scrum_master=scrum_master,
                product_owner=product_owner,
                developers=developers,
                skill_coverage=self._coverage(members, team_size),
            )
            logger.debug(
                "Built %s with %d member(s): scrum_master=%s product_owner=%s developers=%d",
                team.id,
                len(members),
                scrum_master.id if scrum_master else None,
                product_owner.id if product_owner else None,
                len(developers),
            )
            teams.append(team)

        return teams

    def _take_best(
        self,
        remaining: List[Person],
        scrum_role: ScrumRole,
        members: List[Person],
        team_size: int,
    ) -> Optional[Person]:
        if len(members) >= team_size:
            return None
        best = self.best_for_role(remaining, scrum_role)
        if best is not None:
            _discard(remaining, best)
            members.append(best)
        return best

    @staticmethod
    def role_strength(person: Person, scrum_role: ScrumRole) -> int:
        return sum(level_weight(skill.level) for skill in person.skills_for(scrum_role))

    def best_for_role(self, candidates: Sequence[Person], scrum_role: ScrumRole) -> Optional[Person]:
        """Highest summed level weight for the role; the first one seen wins ties."""

        best: Optional[Person] = None
        best_score = 0
        for candidate in candidates:
            if not candidate.has_scrum_role(scrum_role):
                continue
            score = self.role_strength(candidate, scrum_role)
            if best is None or score > best_score:
                best, best_score = candidate, score
        return best

    def _coverage(self, members: Sequence[Person], team_size: int) -> float:
        target = team_size * self.skills_per_seat
        if target <= 0:
            return 0.0
        total_skills = sum(len(member.skills) for member in members)
        return min(100.0, total_skills / target * 100)


def build_teams(
    pool: Sequence[Person],
    team_size: int,
    team_count: int,
    *,
    skills_per_seat: int = DEFAULT_SKILLS_PER_SEAT,
) -> List[GeneratedTeam]:
    """Build up to ``team_count`` teams of at most ``team_size`` people from ``pool``."""

    return TeamBuilder(skills_per_seat=skills_per_seat).build(pool, team_size, team_count)


def _unique_by_id(pool: Sequence[Person]) -> List[Person]:
    seen = set()
    unique: List[Person] = []
    for person in pool:
        if person.id in seen:
            continue
        seen.add(person.id)
        unique.append(person)
    return unique


def _discard(people: List[Person], person: Person) -> None:
    for index, candidate in enumerate(people):
        if candidate is person:
            del people[index]
            return
