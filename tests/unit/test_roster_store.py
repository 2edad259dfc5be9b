import pytest

from helpers import make_person, make_team
from teamforge.core.exceptions import CapacityExceededError, ConflictError, NotFoundError, ValidationError
from teamforge.models import Availability, SkillLevel
from teamforge.roster.store import RosterStore


def test_seeded_memberships_mark_people_allocated(store):
    team = store.get_team(1)

    assert team.member_ids == [1, 3, 5]
    assert store.get_employee(1).availability == Availability.ALLOCATED
    assert store.team_of(6) == 2


def test_unallocated_employees_excludes_members_and_people_on_leave(store):
    assert [employee.id for employee in store.unallocated_employees()] == [2, 4, 7, 8, 9, 10, 11]


def test_filters(store):
    assert [e.id for e in store.list_employees(search="oliveira")] == [4, 9]
    assert {e.id for e in store.list_employees(department="Product")} == {3, 8}
    assert [e.id for e in store.list_employees(availability=Availability.ON_LEAVE)] == [12]
    assert [t.id for t in store.list_teams(search="mobile")] == [2]


def test_create_employee_assigns_next_id_and_coerces_skills(store):
    employee = store.create_employee({"name": "Nina", "role": "Data Engineer", "skills": "Spark, SQL"})

    assert employee.id == 13
    assert employee.skill_names == ["Spark", "SQL"]
    assert store.get_employee(13) == employee


def test_invalid_employee_payload_is_rejected(store):
    with pytest.raises(ValidationError) as excinfo:
        store.create_employee({"name": "", "email": "not-an-email"})

    assert excinfo.value.status_code == 422
    assert excinfo.value.details["errors"]


def test_edits_show_up_in_team_views(store):
    store.update_employee(1, {"role": "Staff Frontend Engineer"})

    assert store.get_team(1).members[0].role == "Staff Frontend Engineer"


def test_availability_follows_membership_on_update(store):
    member = store.update_employee(1, {"availability": "Available"})
    outsider = store.update_employee(2, {"availability": Availability.ALLOCATED})

    assert store.team_of(1) == 1
    assert member.availability == Availability.ALLOCATED
    assert outsider.availability == Availability.AVAILABLE
    assert 2 in [employee.id for employee in store.unallocated_employees()]


def test_member_going_on_leave_leaves_the_team(store):
    employee = store.update_employee(3, {"availability": Availability.ON_LEAVE})

    assert employee.availability == Availability.ON_LEAVE
    assert store.team_of(3) is None
    assert store.get_team(1).member_ids == [1, 5]


def test_returning_from_leave_makes_employee_available(store):
    employee = store.update_employee(12, {"availability": Availability.AVAILABLE})

    assert employee.availability == Availability.AVAILABLE
    assert 12 in [e.id for e in store.unallocated_employees()]


def test_new_employee_cannot_start_allocated():
    roster = RosterStore()

    employee = roster.add_employee(make_person(1, availability=Availability.ALLOCATED))

    assert employee.availability == Availability.AVAILABLE
    assert roster.unallocated_employees() == [employee]


def test_every_seeded_allocated_employee_has_a_team(store):
    allocated = store.list_employees(availability=Availability.ALLOCATED)

    assert [employee.id for employee in allocated] == [1, 3, 5, 6]
    assert all(store.team_of(employee.id) is not None for employee in allocated)


def test_delete_employee_leaves_their_team(store):
    store.delete_employee(3)

    assert store.get_team(1).member_ids == [1, 5]
    with pytest.raises(NotFoundError):
        store.get_employee(3)


def test_assign_moves_employee_between_teams(store):
    team = store.assign_member(3, 1)

    assert team.member_ids == [1]
    assert store.get_team(1).member_ids == [3, 5]
    assert store.team_of(1) == 3


def test_assign_is_idempotent_for_existing_members(store):
    assert store.assign_member(1, 1).member_ids == [1, 3, 5]


def test_assign_rejects_people_on_leave(store):
    with pytest.raises(ValidationError):
        store.assign_member(3, 12)


def test_assign_respects_capacity(store):
    for employee_id in (2, 4, 7, 8):
        store.assign_member(2, employee_id)

    with pytest.raises(CapacityExceededError) as excinfo:
        store.assign_member(2, 9)

    assert excinfo.value.code == "team_full"
    assert excinfo.value.status_code == 409
    assert store.get_employee(9).availability == Availability.AVAILABLE


def test_remove_member_makes_employee_available(store):
    team = store.remove_member(1, 3)

    assert team.member_ids == [1, 5]
    assert store.get_employee(3).availability == Availability.AVAILABLE
    with pytest.raises(NotFoundError):
        store.remove_member(1, 3)


def test_delete_team_releases_members(store):
    store.delete_team(1)

    assert store.team_of(1) is None
    assert store.get_employee(1).availability == Availability.AVAILABLE
    with pytest.raises(NotFoundError):
        store.get_team(1)


def test_update_team_cannot_shrink_below_member_count(store):
    with pytest.raises(ValidationError):
        store.update_team(1, {"max_members": 2})

    team = store.update_team(1, {"status": "Inativo", "max_members": 3})
    assert team.status.value == "Inactive"
    assert team.member_ids == [1, 3, 5]


def test_create_team_starts_empty(store):
    team = store.create_team({"name": "Team Delta", "project": "Design System", "max_members": 6})

    assert team.id == 4
    assert team.members == []
    assert team.available_slots == 6


def test_duplicate_ids_conflict():
    roster = RosterStore()
    roster.add_employee(make_person(1))

    with pytest.raises(ConflictError):
        roster.add_employee(make_person(1))


def test_apply_suggestions_skips_collisions(store):
    outcome = store.apply_suggestions(3, [4, 1, 999, 12, 4])

    assert outcome.added == [4]
    assert [(item.employee_id, item.reason) for item in outcome.skipped] == [
        (1, "allocated_elsewhere"),
        (999, "not_found"),
        (12, "on_leave"),
        (4, "already_member"),
    ]
    assert outcome.team.member_ids == [4]


def test_apply_suggestions_stops_at_capacity(store):
    outcome = store.apply_suggestions(3, [2, 4, 7, 8, 9])

    assert outcome.added == [2, 4, 7, 8]
    assert [(item.employee_id, item.reason) for item in outcome.skipped] == [(9, "team_full")]


def test_apply_suggestions_unknown_team(store):
    with pytest.raises(NotFoundError):
        store.apply_suggestions(42, [2])


def test_load_rebuilds_memberships():
    roster = RosterStore()
    people = [make_person(1), make_person(2)]

    roster.load(people, [make_team(1, people, max_members=2)])

    assert roster.get_team(1).member_ids == [1, 2]
    assert roster.unallocated_employees() == []


def test_skill_catalog(store):
    categories = store.skill_categories()
    skill = store.create_skill({"name": "Kanban", "category": "Agile Metrics", "level": SkillLevel.INTERMEDIATE})

    assert "Scrum" in categories
    assert skill in store.list_skills(category="Agile Metrics")
    assert store.update_skill(skill.id, {"is_core": True}).is_core is True

    store.delete_skill(skill.id)
    with pytest.raises(NotFoundError):
        store.get_skill(skill.id)
