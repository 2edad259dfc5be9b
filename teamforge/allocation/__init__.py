from .builder import TeamBuilder, build_teams
from .inference import infer_required_skills, required_skills_for
from .optimizer import ReasoningThresholds, ScoringWeights, TeamOptimizer, optimize
from .scoring import level_weight, role_gap_score, seniority_bonus, skill_match, team_balance

__all__ = [
    "ReasoningThresholds",
    "ScoringWeights",
    "TeamBuilder",
    "TeamOptimizer",
    "build_teams",
    "infer_required_skills",
    "level_weight",
    "optimize",
    "required_skills_for",
    "role_gap_score",
    "seniority_bonus",
    "skill_match",
    "team_balance",
]
