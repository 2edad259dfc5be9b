"""Keyword lookup tables used by the allocation engine.

Every classifier in the engine is a list of ``(keywords, value)`` pairs that is
scanned in order; the first entry with a keyword contained in the lower-cased
input wins. Extending a classifier means adding a row here, scoring code does
not change.
"""

from __future__ import annotations

from typing import Dict, List, Optional, Sequence, Tuple, TypeVar

from teamforge.models.person import SkillLevel

T = TypeVar("T")

KeywordTable = Sequence[Tuple[Tuple[str, ...], T]]

LEVEL_WEIGHTS: Dict[SkillLevel, int] = {
    SkillLevel.BASIC: 1,
    SkillLevel.INTERMEDIATE: 2,
    SkillLevel.ADVANCED: 3,
    SkillLevel.EXPERT: 4,
}

ROLE_BUCKETS: KeywordTable[str] = (
    (("frontend", "front-end", "react", "vue", "angular"), "frontend"),
    (("backend", "back-end", "node", "python", "java"), "backend"),
    (("design", "ux", "ui", "designer"), "design"),
    (("qa", "test", "qualidade"), "qa"),
    (("devops", "infra", "cloud"), "devops"),
    (("scrum", "po", "product", "manager", "lead"), "management"),
)

SENIORITY_TIERS: KeywordTable[float] = (
    (("senior", "lead"), 0.8),
    (("pleno", "mid"), 0.6),
    (("junior", "jr"), 0.4),
)
NEUTRAL_SENIORITY = 0.5

# Archetype bonuses added on top of role diversity by `team_balance`.
BALANCE_ARCHETYPES: KeywordTable[float] = (
    (("lead", "senior", "scrum master", "po"), 0.3),
    (("desenvolvedor", "developer"), 0.2),
    (("design", "ux", "ui"), 0.2),
)

PROJECT_SKILL_GROUPS: KeywordTable[Tuple[str, ...]] = (
    (("mobile", "app"), ("React Native", "Flutter", "iOS", "Android")),
    (("web", "portal", "site"), ("React", "JavaScript", "HTML", "CSS")),
    (("api", "backend", "sistema"), ("Node.js", "Python", "Java", "API")),
    (("design", "ux", "ui"), ("Figma", "Adobe XD", "Design System")),
)


def contains_any(text: str, keywords: Sequence[str]) -> bool:
    lowered = text.lower()
    return any(keyword in lowered for keyword in keywords)


def first_match(text: str, table: KeywordTable[T]) -> Optional[T]:
    """Return the value of the first row whose keywords occur in ``text``."""

    for keywords, value in table:
        if contains_any(text, keywords):
            return value
    return None


def all_matches(text: str, table: KeywordTable[T]) -> List[T]:
    """Return the values of every row whose keywords occur in ``text``, in table order."""

    return [value for keywords, value in table if contains_any(text, keywords)]
