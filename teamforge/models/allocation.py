"""Result models returned by the allocation engine."""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field

from teamforge.models.person import Person
from teamforge.models.team import Team


class GeneratedTeam(BaseModel):
    id: str
    name: str
    members: List[Person] = Field(default_factory=list)
    scrum_master: Optional[Person] = None
    product_owner: Optional[Person] = None
    developers: List[Person] = Field(default_factory=list)
    skill_coverage: float = Field(0.0, ge=0.0, le=100.0, description="Percentage of the skills-per-seat target")


class CandidateScore(BaseModel):
    """Score breakdown for one candidate against one team."""

    candidate: Person
    total: float
    skill_match: float
    role_gap: float
    seniority: float


class SkippedSuggestion(BaseModel):
    employee_id: int
    reason: str


class ApplyOutcome(BaseModel):
    """What happened when suggestions were committed to a team."""

    team: Team
    added: List[int] = Field(default_factory=list)
    skipped: List[SkippedSuggestion] = Field(default_factory=list)


class OptimizationResult(BaseModel):
    team: Team
    suggestions: List[Person] = Field(default_factory=list)
    score: float = 0.0
    reasoning: List[str] = Field(default_factory=list)
    required_skills: List[str] = Field(default_factory=list)
    candidate_scores: List[CandidateScore] = Field(default_factory=list)
