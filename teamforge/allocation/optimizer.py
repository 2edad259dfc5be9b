"""Incremental team optimizer.

Scores every available employee against each team's open seats and returns
ranked, human-readable suggestions. Nothing is committed here: the same
candidate may be suggested to several teams in one call, and the caller decides
who actually goes where when a suggestion is applied.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence

from teamforge.allocation.inference import required_skills_for
from teamforge.allocation.scoring import role_bucket, role_gap_score, seniority_bonus, skill_match, team_balance
from teamforge.models.allocation import CandidateScore, OptimizationResult
from teamforge.models.person import Availability, Person
from teamforge.models.team import Team

logger = logging.getLogger(__name__)

TEAM_FULL_REASON = "Team is already complete"
NO_CANDIDATES_REASON = "No available candidates found"
DIVERSITY_REASON = "Suggestions include different specialties to balance the team"


@dataclass(frozen=True)
class ScoringWeights:
    skill_match: float = 0.4
    role_gap: float = 0.4
    seniority: float = 0.2


@dataclass(frozen=True)
class ReasoningThresholds:
    skill_match: float = 0.7
    role_gap: float = 0.8
    seniority: float = 0.7


class TeamOptimizer:
    """Rank available employees for the open seats of existing teams."""

    def __init__(
        self,
        weights: Optional[ScoringWeights] = None,
        thresholds: Optional[ReasoningThresholds] = None,
    ) -> None:
        self.weights = weights or ScoringWeights()
        self.thresholds = thresholds or ReasoningThresholds()

    def optimize(
        self,
        teams: Sequence[Team],
        available_pool: Sequence[Person],
        required_skills: Optional[Dict[int, Sequence[str]]] = None,
    ) -> List[OptimizationResult]:
        """Suggest members for every team independently against the same pool.

        ``required_skills`` optionally overrides the requirement per team id.
        """

        overrides = required_skills or {}
        results = []
        for team in teams:
            skills = required_skills_for(team, overrides.get(team.id))
            results.append(self.optimize_team(team, available_pool, skills))
        return results

    def optimize_team(
        self,
        team: Team,
        available_pool: Sequence[Person],
        required_skills: Sequence[str] = (),
    ) -> OptimizationResult:
        current_members = list(team.members)
        available_slots = team.max_members - len(current_members)

        if available_slots <= 0:
            return OptimizationResult(
                team=team,
                suggestions=[],
                score=team_balance(current_members),
                reasoning=[TEAM_FULL_REASON],
                required_skills=list(required_skills),
            )

        current_roles = [member.role for member in current_members]
        scored = [
            self.score_candidate(candidate, current_roles, required_skills)
            for candidate in available_pool
            if candidate.availability == Availability.AVAILABLE
        ]
        # sorted() is stable, so equal totals keep pool order.
        top = sorted(scored, key=lambda item: item.total, reverse=True)[:available_slots]
        suggestions = [item.candidate for item in top]

        result = OptimizationResult(
            team=team,
            suggestions=suggestions,
            score=team_balance(current_members + suggestions),
            reasoning=self.explain(top),
            required_skills=list(required_skills),
            candidate_scores=top,
        )
        logger.debug(
            "Optimized team %s: %d open slot(s), %d candidate(s) scored, %d suggested",
            team.id,
            available_slots,
            len(scored),
            len(suggestions),
        )
        return result

    def score_candidate(
        self,
        candidate: Person,
        current_roles: Sequence[str],
        required_skills: Sequence[str],
    ) -> CandidateScore:
        match = skill_match(candidate.skill_names, required_skills)
        gap = role_gap_score(candidate.role, current_roles)
        seniority = seniority_bonus(candidate.role)
        total = (
            match * self.weights.skill_match
            + gap * self.weights.role_gap
            + seniority * self.weights.seniority
        )
        return CandidateScore(
            candidate=candidate,
            total=total,
            skill_match=match,
            role_gap=gap,
            seniority=seniority,
        )

    def explain(self, ranked: Sequence[CandidateScore]) -> List[str]:
        """Reasoning lines derived from the top candidate and the suggestion mix."""

        if not ranked:
            return [NO_CANDIDATES_REASON]

        reasoning: List[str] = []
        top = ranked[0]
        name = top.candidate.name

        if top.skill_match > self.thresholds.skill_match:
            reasoning.append(f"{name} is a strong match for the required skills")

        if top.role_gap > self.thresholds.role_gap:
            bucket = role_bucket(top.candidate.role)
            reasoning.append(f"{name} fills an important gap in the team ({bucket})")

        if top.seniority > self.thresholds.seniority:
            reasoning.append(f"{name} brings seniority that can add technical leadership")

        if len({item.candidate.role for item in ranked}) > 1:
            reasoning.append(DIVERSITY_REASON)

        return reasoning


def optimize(teams: Sequence[Team], available_pool: Sequence[Person]) -> List[OptimizationResult]:
    """Suggest members for each team using default weights."""

    return TeamOptimizer().optimize(teams, available_pool)
