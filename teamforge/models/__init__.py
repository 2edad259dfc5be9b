from .allocation import ApplyOutcome, CandidateScore, GeneratedTeam, OptimizationResult, SkippedSuggestion
from .person import Availability, Person, ScrumRole, SkillKind, SkillLevel, SkillRecord
from .skill import SCRUM_SKILL_CATALOG, Skill, catalog_skills
from .team import Team, TeamStatus

__all__ = [
    "ApplyOutcome",
    "Availability",
    "CandidateScore",
    "GeneratedTeam",
    "OptimizationResult",
    "Person",
    "SCRUM_SKILL_CATALOG",
    "ScrumRole",
    "Skill",
    "SkillKind",
    "SkillLevel",
    "SkillRecord",
    "SkippedSuggestion",
    "Team",
    "TeamStatus",
    "catalog_skills",
]
