"""In-memory roster of employees, teams and catalog skills.

The store owns all mutable state. Teams keep member ids and are materialized
with the current employee records on read, so an edited employee shows up
edited in every team view. Membership is globally exclusive: joining a team
removes the employee from any other team.
"""

from __future__ import annotations

import logging
import threading
from typing import Any, Dict, Iterable, List, Optional, Sequence

from pydantic import ValidationError as PydanticValidationError

from teamforge.core.exceptions import CapacityExceededError, ConflictError, NotFoundError, ValidationError
from teamforge.models.allocation import ApplyOutcome, SkippedSuggestion
from teamforge.models.person import Availability, Person
from teamforge.models.skill import Skill
from teamforge.models.team import Team

logger = logging.getLogger(__name__)


class RosterStore:
    """Thread-safe in-memory roster."""

    def __init__(self) -> None:
        self._lock = threading.RLock()
        self._employees: Dict[int, Person] = {}
        self._teams: Dict[int, Team] = {}
        self._memberships: Dict[int, List[int]] = {}
        self._skills: Dict[int, Skill] = {}

    # ------------------------------------------------------------------
    # Bulk loading
    # ------------------------------------------------------------------

    def load(
        self,
        employees: Iterable[Person] = (),
        teams: Iterable[Team] = (),
        skills: Iterable[Skill] = (),
    ) -> None:
        """Replace the whole roster; team members must reference loaded employees."""

        with self._lock:
            self.clear()
            for employee in employees:
                self.add_employee(employee)
            for skill in skills:
                self.add_skill(skill)
            for team in teams:
                self.add_team(team.model_copy(update={"members": []}))
                for member in team.members:
                    self.assign_member(team.id, member.id)
            logger.info(
                "Roster loaded",
                extra={"employees": len(self._employees), "teams": len(self._teams), "skills": len(self._skills)},
            )

    def clear(self) -> None:
        with self._lock:
            self._employees.clear()
            self._teams.clear()
            self._memberships.clear()
            self._skills.clear()

    # ------------------------------------------------------------------
    # Employees
    # ------------------------------------------------------------------

    def list_employees(
        self,
        *,
        search: Optional[str] = None,
        department: Optional[str] = None,
        availability: Optional[Availability] = None,
    ) -> List[Person]:
        with self._lock:
            employees = list(self._employees.values())

        if search:
            term = search.lower()
            employees = [e for e in employees if term in e.name.lower() or term in e.role.lower()]
        if department:
            employees = [e for e in employees if e.department == department]
        if availability is not None:
            employees = [e for e in employees if e.availability == availability]
        return employees

    def get_employee(self, employee_id: int) -> Person:
        with self._lock:
            employee = self._employees.get(employee_id)
        if employee is None:
            raise NotFoundError(f"Employee {employee_id} not found", details={"employee_id": employee_id})
        return employee

    def add_employee(self, employee: Person) -> Person:
        with self._lock:
            if employee.id in self._employees:
                raise ConflictError(f"Employee {employee.id} already exists", details={"employee_id": employee.id})
            # A new employee is in no team yet, so Allocated cannot hold.
            employee = _with_availability(employee, allocated=False)
            self._employees[employee.id] = employee
        return employee

    def create_employee(self, data: Dict[str, Any]) -> Person:
        with self._lock:
            employee = _validate(Person, {**data, "id": _next_id(self._employees)})
            return self.add_employee(employee)

    def update_employee(self, employee_id: int, changes: Dict[str, Any]) -> Person:
        """Apply field changes; availability always agrees with team membership.

        Putting a team member on leave takes them out of their team. Otherwise
        Available and Allocated follow whether the employee is in a team.
        """

        with self._lock:
            current = self.get_employee(employee_id)
            updated = _validate(Person, {**current.model_dump(), **changes, "id": employee_id})
            team_id = self.team_of(employee_id)
            if updated.availability == Availability.ON_LEAVE and team_id is not None:
                self._memberships[team_id].remove(employee_id)
                logger.info(
                    "Employee left team on leave",
                    extra={"employee_id": employee_id, "team_id": team_id},
                )
                team_id = None
            updated = _with_availability(updated, allocated=team_id is not None)
            self._employees[employee_id] = updated
        return updated

    def delete_employee(self, employee_id: int) -> None:
        with self._lock:
            self.get_employee(employee_id)
            team_id = self.team_of(employee_id)
            if team_id is not None:
                self._memberships[team_id].remove(employee_id)
            del self._employees[employee_id]
        logger.info("Employee %s deleted", employee_id)

    def unallocated_employees(self) -> List[Person]:
        """Available employees that are not a member of any team."""

        with self._lock:
            allocated = {member for members in self._memberships.values() for member in members}
            return [
                employee
                for employee in self._employees.values()
                if employee.id not in allocated and employee.availability == Availability.AVAILABLE
            ]

    # ------------------------------------------------------------------
    # Teams
    # ------------------------------------------------------------------

    def list_teams(self, *, search: Optional[str] = None) -> List[Team]:
        with self._lock:
            teams = [self._materialize(team_id) for team_id in self._teams]
        if search:
            term = search.lower()
            teams = [t for t in teams if term in t.name.lower() or term in t.project.lower()]
        return teams

    def get_team(self, team_id: int) -> Team:
        with self._lock:
            if team_id not in self._teams:
                raise NotFoundError(f"Team {team_id} not found", details={"team_id": team_id})
            return self._materialize(team_id)

    def get_teams(self, team_ids: Sequence[int]) -> List[Team]:
        return [self.get_team(team_id) for team_id in team_ids]

    def add_team(self, team: Team) -> Team:
        with self._lock:
            if team.id in self._teams:
                raise ConflictError(f"Team {team.id} already exists", details={"team_id": team.id})
            self._teams[team.id] = team.model_copy(update={"members": []})
            self._memberships[team.id] = []
            for member in team.members:
                self.assign_member(team.id, member.id)
            return self._materialize(team.id)

    def create_team(self, data: Dict[str, Any]) -> Team:
        with self._lock:
            team = _validate(Team, {**data, "id": _next_id(self._teams), "members": []})
            return self.add_team(team)

    def update_team(self, team_id: int, changes: Dict[str, Any]) -> Team:
        with self._lock:
            current = self.get_team(team_id)
            max_members = changes.get("max_members", current.max_members)
            if max_members is not None and max_members < len(current.members):
                raise ValidationError(
                    f"Team {team_id} already has {len(current.members)} members",
                    details={"team_id": team_id, "max_members": max_members},
                )
            fields = {**current.model_dump(exclude={"members"}), **changes, "id": team_id, "members": []}
            self._teams[team_id] = _validate(Team, fields)
            return self._materialize(team_id)

    def delete_team(self, team_id: int) -> None:
        with self._lock:
            self.get_team(team_id)
            released = self._memberships.pop(team_id)
            del self._teams[team_id]
            for employee_id in released:
                self._set_availability(employee_id, Availability.AVAILABLE)
        logger.info("Team %s deleted, %d member(s) released", team_id, len(released))

    def team_of(self, employee_id: int) -> Optional[int]:
        with self._lock:
            for team_id, members in self._memberships.items():
                if employee_id in members:
                    return team_id
        return None

    # ------------------------------------------------------------------
    # Membership
    # ------------------------------------------------------------------

    def assign_member(self, team_id: int, employee_id: int) -> Team:
        """Move an employee into a team, leaving whatever team they were in."""

        with self._lock:
            team = self.get_team(team_id)
            employee = self.get_employee(employee_id)
            if employee_id in self._memberships[team_id]:
                return team
            if employee.availability == Availability.ON_LEAVE:
                raise ValidationError(
                    f"Employee {employee_id} is on leave and cannot join a team",
                    details={"employee_id": employee_id},
                )
            if team.available_slots <= 0:
                raise CapacityExceededError(
                    f"Team {team_id} is full",
                    details={"team_id": team_id, "max_members": team.max_members},
                )

            previous = self.team_of(employee_id)
            if previous is not None:
                self._memberships[previous].remove(employee_id)
            self._memberships[team_id].append(employee_id)
            self._set_availability(employee_id, Availability.ALLOCATED)
            logger.info(
                "Employee assigned",
                extra={"employee_id": employee_id, "team_id": team_id, "previous_team_id": previous},
            )
            return self._materialize(team_id)

    def remove_member(self, team_id: int, employee_id: int) -> Team:
        with self._lock:
            self.get_team(team_id)
            if employee_id not in self._memberships[team_id]:
                raise NotFoundError(
                    f"Employee {employee_id} is not a member of team {team_id}",
                    details={"team_id": team_id, "employee_id": employee_id},
                )
            self._memberships[team_id].remove(employee_id)
            self._set_availability(employee_id, Availability.AVAILABLE)
            return self._materialize(team_id)

    def apply_suggestions(self, team_id: int, employee_ids: Sequence[int]) -> ApplyOutcome:
        """Commit suggested employees to a team, skipping the ones that cannot join.

        Suggestions are advisory and may collide across teams, so an employee
        already placed in another team is skipped rather than moved.
        """

        added: List[int] = []
        skipped: List[SkippedSuggestion] = []
        with self._lock:
            self.get_team(team_id)
            for employee_id in employee_ids:
                reason = self._rejection_reason(team_id, employee_id)
                if reason is not None:
                    skipped.append(SkippedSuggestion(employee_id=employee_id, reason=reason))
                    continue
                self.assign_member(team_id, employee_id)
                added.append(employee_id)
            team = self._materialize(team_id)

        if skipped:
            logger.info(
                "Suggestions partially applied",
                extra={"team_id": team_id, "added": added, "skipped": [item.employee_id for item in skipped]},
            )
        return ApplyOutcome(team=team, added=added, skipped=skipped)

    def _rejection_reason(self, team_id: int, employee_id: int) -> Optional[str]:
        employee = self._employees.get(employee_id)
        if employee is None:
            return "not_found"
        if employee_id in self._memberships[team_id]:
            return "already_member"
        current = self.team_of(employee_id)
        if current is not None:
            return "allocated_elsewhere"
        if employee.availability == Availability.ON_LEAVE:
            return "on_leave"
        if len(self._memberships[team_id]) >= self._teams[team_id].max_members:
            return "team_full"
        return None

    # ------------------------------------------------------------------
    # Skills catalog
    # ------------------------------------------------------------------

    def list_skills(self, *, search: Optional[str] = None, category: Optional[str] = None) -> List[Skill]:
        with self._lock:
            skills = list(self._skills.values())
        if search:
            term = search.lower()
            skills = [s for s in skills if term in s.name.lower() or term in s.category.lower()]
        if category:
            skills = [s for s in skills if s.category == category]
        return skills

    def skill_categories(self) -> List[str]:
        categories: List[str] = []
        for skill in self.list_skills():
            if skill.category not in categories:
                categories.append(skill.category)
        return categories

    def get_skill(self, skill_id: int) -> Skill:
        with self._lock:
            skill = self._skills.get(skill_id)
        if skill is None:
            raise NotFoundError(f"Skill {skill_id} not found", details={"skill_id": skill_id})
        return skill

    def add_skill(self, skill: Skill) -> Skill:
        with self._lock:
            if skill.id in self._skills:
                raise ConflictError(f"Skill {skill.id} already exists", details={"skill_id": skill.id})
            self._skills[skill.id] = skill
        return skill

    def create_skill(self, data: Dict[str, Any]) -> Skill:
        with self._lock:
            return self.add_skill(_validate(Skill, {**data, "id": _next_id(self._skills)}))

    def update_skill(self, skill_id: int, changes: Dict[str, Any]) -> Skill:
        with self._lock:
            current = self.get_skill(skill_id)
            updated = _validate(Skill, {**current.model_dump(), **changes, "id": skill_id})
            self._skills[skill_id] = updated
        return updated

    def delete_skill(self, skill_id: int) -> None:
        with self._lock:
            self.get_skill(skill_id)
            del self._skills[skill_id]

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _materialize(self, team_id: int) -> Team:
        members = [self._employees[employee_id] for employee_id in self._memberships[team_id]]
        return self._teams[team_id].model_copy(update={"members": members})

    def _set_availability(self, employee_id: int, availability: Availability) -> None:
        employee = self._employees.get(employee_id)
        if employee is None or employee.availability == Availability.ON_LEAVE:
            return
        if employee.availability != availability:
            self._employees[employee_id] = employee.model_copy(update={"availability": availability})


def _with_availability(employee: Person, *, allocated: bool) -> Person:
    if employee.availability == Availability.ON_LEAVE:
        return employee
    availability = Availability.ALLOCATED if allocated else Availability.AVAILABLE
    if employee.availability == availability:
        return employee
    return employee.model_copy(update={"availability": availability})


def _next_id(records: Dict[int, Any]) -> int:
    return max(records, default=0) + 1


def _validate(model: Any, payload: Dict[str, Any]) -> Any:
    try:
        return model.model_validate(payload)
    except PydanticValidationError as exc:
        raise ValidationError(
            f"Invalid {model.__name__.lower()} data",
            details={"errors": exc.errors(include_url=False, include_context=False)},
        ) from exc


roster_store = RosterStore()
