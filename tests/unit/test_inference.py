from helpers import make_person, make_team
from teamforge.allocation.inference import infer_required_skills, required_skills_for
from teamforge.allocation.optimizer import optimize
from teamforge.allocation.tables import PROJECT_SKILL_GROUPS, ROLE_BUCKETS, all_matches, first_match


def test_mobile_project():
    assert infer_required_skills("Mobile App") == ["React Native", "Flutter", "iOS", "Android"]


def test_groups_accumulate_in_table_order():
    skills = infer_required_skills("Portal API")

    assert skills == ["React", "JavaScript", "HTML", "CSS", "Node.js", "Python", "Java", "API"]


def test_no_duplicates_across_groups():
    skills = infer_required_skills("Web app with a UX refresh")

    assert len(skills) == len(set(skills))
    assert skills[:4] == ["React Native", "Flutter", "iOS", "Android"]
    assert "Figma" in skills


def test_unknown_project_has_no_requirement():
    assert infer_required_skills("Quarterly Budget") == []
    assert infer_required_skills("") == []


def test_explicit_requirement_wins_over_team_and_inference():
    team = make_team(1, project="Mobile App").model_copy(update={"required_skills": ["Kotlin"]})

    assert required_skills_for(team, ["Swift"]) == ["Swift"]
    assert required_skills_for(team) == ["Kotlin"]


def test_team_without_explicit_requirement_falls_back_to_project():
    team = make_team(1, project="Customer Portal")

    assert required_skills_for(team) == ["React", "JavaScript", "HTML", "CSS"]


def test_table_helpers_are_case_insensitive():
    assert first_match("Senior REACT Engineer", ROLE_BUCKETS) == "frontend"
    assert first_match("Accountant", ROLE_BUCKETS) is None
    assert all_matches("MOBILE", PROJECT_SKILL_GROUPS) == [("React Native", "Flutter", "iOS", "Android")]


def test_unrecognized_project_scores_every_candidate_neutrally():
    team = make_team(1, project="Internal Dashboard", max_members=3)
    pool = [
        make_person(1, "Frontend Developer", ["React"]),
        make_person(2, "Data Analyst", ["SQL", "Python"]),
        make_person(3, "Designer"),
    ]

    (result,) = optimize([team], pool)

    assert infer_required_skills("Internal Dashboard") == []
    assert result.required_skills == []
    assert [item.skill_match for item in result.candidate_scores] == [0.5, 0.5, 0.5]
