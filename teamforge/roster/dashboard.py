"""Dashboard figures computed from the live roster."""

from __future__ import annotations

from collections import Counter
from datetime import date
from typing import List

from pydantic import BaseModel

from teamforge.models.person import Availability, Person
from teamforge.models.team import TeamStatus
from teamforge.roster.store import RosterStore

UNASSIGNED_DEPARTMENT = "Unassigned"


class RosterStats(BaseModel):
    total_employees: int
    allocated: int
    available: int
    on_leave: int
    team_count: int
    active_teams: int
    allocated_percent: float
    available_percent: float


class DepartmentShare(BaseModel):
    department: str
    count: int
    percent: float


def roster_stats(store: RosterStore) -> RosterStats:
    employees = store.list_employees()
    teams = store.list_teams()
    counts = Counter(employee.availability for employee in employees)
    total = len(employees)

    return RosterStats(
        total_employees=total,
        allocated=counts[Availability.ALLOCATED],
        available=counts[Availability.AVAILABLE],
        on_leave=counts[Availability.ON_LEAVE],
        team_count=len(teams),
        active_teams=sum(1 for team in teams if team.status == TeamStatus.ACTIVE),
        allocated_percent=_percent(counts[Availability.ALLOCATED], total),
        available_percent=_percent(counts[Availability.AVAILABLE], total),
    )


def department_allocation(store: RosterStore) -> List[DepartmentShare]:
    """Share of employees per department, largest first."""

    employees = store.list_employees()
    counts = Counter(employee.department or UNASSIGNED_DEPARTMENT for employee in employees)
    return [
        DepartmentShare(department=department, count=count, percent=_percent(count, len(employees)))
        for department, count in counts.most_common()
    ]


def recent_employees(store: RosterStore, limit: int = 5) -> List[Person]:
    """Employees ordered by start date, newest first; undated records go last."""

    employees = store.list_employees()
    return sorted(employees, key=lambda employee: employee.start_date or date.min, reverse=True)[:limit]


def _percent(part: int, whole: int) -> float:
    if not whole:
        return 0.0
    return round(part / whole * 100, 1)
