"""Skill and role scoring primitives shared by the builder and the optimizer."""

from __future__ import annotations

from typing import Iterable, Optional, Sequence, Union

from teamforge.allocation.tables import (
    BALANCE_ARCHETYPES,
    LEVEL_WEIGHTS,
    NEUTRAL_SENIORITY,
    ROLE_BUCKETS,
    SENIORITY_TIERS,
    contains_any,
    first_match,
)
from teamforge.models.person import Person, SkillLevel

NEUTRAL_SKILL_MATCH = 0.5
NEUTRAL_ROLE_GAP = 0.5
REDUNDANT_ROLE_GAP = 0.3
FILLED_ROLE_GAP = 1.0


def level_weight(level: Optional[Union[SkillLevel, str]]) -> int:
    """Map a proficiency level to its ordinal weight; unknown levels weigh 0."""

    if level is None:
        return 0
    if not isinstance(level, SkillLevel):
        try:
            level = SkillLevel(level)
        except ValueError:
            return 0
    return LEVEL_WEIGHTS.get(level, 0)


def skill_match(candidate_skills: Iterable[str], required_skills: Sequence[str]) -> float:
    """Fraction of required skills covered by the candidate.

    A required skill counts as covered when any candidate skill contains it, or
    is contained by it, ignoring case ("React" covers "react.js" and vice versa).
    With no requirement the score is a neutral 0.5.
    """

    if not required_skills:
        return NEUTRAL_SKILL_MATCH

    owned = [skill.lower() for skill in candidate_skills]
    matched = 0
    for required in required_skills:
        wanted = required.lower()
        if any(wanted in skill or skill in wanted for skill in owned):
            matched += 1
    return matched / len(required_skills)


def role_bucket(role: str) -> Optional[str]:
    return first_match(role, ROLE_BUCKETS)


def role_gap_score(candidate_role: str, current_team_roles: Iterable[str]) -> float:
    """Score how much a candidate's role bucket is missing from the team."""

    for keywords, _bucket in ROLE_BUCKETS:
        if not contains_any(candidate_role, keywords):
            continue
        team_has_bucket = any(contains_any(role, keywords) for role in current_team_roles)
        return REDUNDANT_ROLE_GAP if team_has_bucket else FILLED_ROLE_GAP
    return NEUTRAL_ROLE_GAP


def seniority_bonus(role: str) -> float:
    bonus = first_match(role, SENIORITY_TIERS)
    return NEUTRAL_SENIORITY if bonus is None else bonus


def team_balance(members: Sequence[Person]) -> float:
    """Role diversity plus archetype coverage, clamped to 1.0.

    An empty team scores 0.0.
    """

    if not members:
        return 0.0

    roles = [member.role for member in members]
    score = len(set(roles)) / len(roles)
    for keywords, bonus in BALANCE_ARCHETYPES:
        if any(contains_any(role, keywords) for role in roles):
            score += bonus
    return min(score, 1.0)
