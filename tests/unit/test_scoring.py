import pytest

from helpers import make_person
from teamforge.allocation.scoring import (
    level_weight,
    role_bucket,
    role_gap_score,
    seniority_bonus,
    skill_match,
    team_balance,
)
from teamforge.models import SkillLevel


class TestLevelWeight:
    @pytest.mark.parametrize(
        "level, expected",
        [
            (SkillLevel.BASIC, 1),
            (SkillLevel.INTERMEDIATE, 2),
            (SkillLevel.ADVANCED, 3),
            (SkillLevel.EXPERT, 4),
        ],
    )
    def test_enum_levels_are_ordinal(self, level, expected):
        assert level_weight(level) == expected

    def test_accepts_labels(self):
        assert level_weight("Expert") == 4
        assert level_weight("Avançado") == 3

    @pytest.mark.parametrize("level", [None, "", "Legendary"])
    def test_unknown_level_weighs_nothing(self, level):
        assert level_weight(level) == 0


class TestSkillMatch:
    def test_no_requirement_is_neutral(self):
        assert skill_match(["React"], []) == 0.5
        assert skill_match([], []) == 0.5

    def test_candidate_without_skills_scores_zero(self):
        assert skill_match([], ["React", "CSS"]) == 0.0

    def test_case_insensitive(self):
        assert skill_match(["React", "TypeScript"], ["react"]) == 1.0

    def test_substring_in_either_direction(self):
        assert skill_match(["React.js"], ["React"]) == 1.0
        assert skill_match(["Java"], ["JavaScript", "Python"]) == 0.5

    def test_fraction_of_requirements(self):
        required = ["React Native", "Flutter", "iOS", "Android"]
        assert skill_match(["Flutter", "Kotlin"], required) == pytest.approx(0.25)


class TestRoleGapScore:
    def test_missing_bucket_fills_gap(self):
        assert role_gap_score("Frontend Developer", ["Backend Developer"]) == 1.0

    def test_bucket_already_present_is_redundant(self):
        assert role_gap_score("Frontend Developer", ["React Engineer"]) == 0.3
        assert role_gap_score("Product Owner", ["Scrum Master"]) == 0.3

    def test_unclassified_role_is_neutral(self):
        assert role_gap_score("Marketing Analyst", ["Frontend Developer"]) == 0.5

    def test_empty_team_needs_everything_classified(self):
        assert role_gap_score("DevOps Engineer", []) == 1.0

    def test_first_bucket_in_table_wins(self):
        # "Backend Lead" reads as backend before management.
        assert role_bucket("Backend Lead") == "backend"
        assert role_gap_score("Backend Lead", ["Tech Lead"]) == 1.0


class TestSeniorityBonus:
    @pytest.mark.parametrize(
        "role, expected",
        [
            ("Senior Backend Developer", 0.8),
            ("Tech Lead", 0.8),
            ("Mid-level Developer", 0.6),
            ("Desenvolvedor Pleno", 0.6),
            ("Junior QA", 0.4),
            ("Jr. Designer", 0.4),
            ("Designer", 0.5),
        ],
    )
    def test_keyword_tiers(self, role, expected):
        assert seniority_bonus(role) == expected


class TestTeamBalance:
    def test_empty_team_scores_zero(self):
        assert team_balance([]) == 0.0

    def test_diversity_only(self):
        members = [make_person(i, "Analyst") for i in range(4)]
        assert team_balance(members) == pytest.approx(0.25)

    def test_developer_bonus(self):
        members = [make_person(1, "Developer"), make_person(2, "Developer")]
        assert team_balance(members) == pytest.approx(0.7)

    def test_clamped_to_one(self):
        members = [
            make_person(1, "Scrum Master"),
            make_person(2, "Frontend Developer"),
            make_person(3, "UX Designer"),
        ]
        assert team_balance(members) == 1.0
