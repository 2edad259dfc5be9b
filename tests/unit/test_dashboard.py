from teamforge.roster.dashboard import department_allocation, recent_employees, roster_stats
from teamforge.roster.store import RosterStore


def test_roster_stats(store):
    stats = roster_stats(store)

    assert stats.total_employees == 12
    assert stats.allocated == 4
    assert stats.available == 7
    assert stats.on_leave == 1
    assert stats.team_count == 3
    assert stats.active_teams == 2
    assert stats.allocated_percent == 33.3
    assert stats.available_percent == 58.3


def test_stats_follow_membership_changes(store):
    store.assign_member(3, 4)

    stats = roster_stats(store)

    assert stats.allocated == 5
    assert stats.available == 6


def test_department_allocation_largest_first(store):
    shares = department_allocation(store)

    assert [(share.department, share.count) for share in shares[:2]] == [("Development", 7), ("Product", 2)]
    assert shares[0].percent == 58.3
    assert sum(share.count for share in shares) == 12


def test_recent_employees(store):
    assert [employee.id for employee in recent_employees(store, limit=3)] == [4, 5, 2]


def test_empty_roster():
    stats = roster_stats(RosterStore())

    assert stats.total_employees == 0
    assert stats.allocated_percent == 0.0
    assert department_allocation(RosterStore()) == []
