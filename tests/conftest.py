"""Shared fixtures for TeamForge tests.

Everything runs against the in-memory roster; no server process is needed.
"""

from __future__ import annotations

import pytest

from teamforge.roster.seed import seed_demo_roster
from teamforge.roster.store import RosterStore


@pytest.fixture
def store() -> RosterStore:
    roster = RosterStore()
    seed_demo_roster(roster)
    return roster
