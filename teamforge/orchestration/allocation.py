"""Coordinates the allocation engine with the roster it reads from and writes to."""

from __future__ import annotations

import logging
import time
from typing import List, Optional, Sequence

from teamforge.allocation.builder import TeamBuilder
from teamforge.allocation.optimizer import ReasoningThresholds, ScoringWeights, TeamOptimizer
from teamforge.core.config import Settings, settings
from teamforge.core.observability import get_tracer
from teamforge.models.allocation import ApplyOutcome, GeneratedTeam, OptimizationResult
from teamforge.models.person import Person
from teamforge.roster.store import RosterStore, roster_store
from teamforge.utils.monitoring import observe_allocation

logger = logging.getLogger(__name__)
tracer = get_tracer(__name__)


class AllocationCoordinator:
    """Feed roster snapshots to the engine and commit suggestions on request.

    The engine itself never touches the roster; this class is the only place
    where its output turns into membership changes.
    """

    def __init__(
        self,
        store: Optional[RosterStore] = None,
        *,
        config: Optional[Settings] = None,
        builder: Optional[TeamBuilder] = None,
        optimizer: Optional[TeamOptimizer] = None,
    ) -> None:
        config = config or settings
        self.store = store or roster_store
        self.builder = builder or TeamBuilder(skills_per_seat=config.SKILLS_PER_SEAT_TARGET)
        self.optimizer = optimizer or TeamOptimizer(
            weights=ScoringWeights(
                skill_match=config.SKILL_MATCH_WEIGHT,
                role_gap=config.ROLE_GAP_WEIGHT,
                seniority=config.SENIORITY_WEIGHT,
            ),
            thresholds=ReasoningThresholds(
                skill_match=config.REASONING_SKILL_THRESHOLD,
                role_gap=config.REASONING_GAP_THRESHOLD,
                seniority=config.REASONING_SENIORITY_THRESHOLD,
            ),
        )

    def build(
        self,
        team_size: int,
        team_count: int,
        employee_ids: Optional[Sequence[int]] = None,
    ) -> List[GeneratedTeam]:
        """Propose new teams from the given employees, or from everyone unallocated."""

        pool = self._pool(employee_ids)
        with tracer.start_as_current_span("allocation.build") as span:
            span.set_attribute("allocation.pool_size", len(pool))
            span.set_attribute("allocation.team_size", team_size)
            span.set_attribute("allocation.team_count", team_count)

            started = time.perf_counter()
            teams = self.builder.build(pool, team_size, team_count)
            placed = sum(len(team.members) for team in teams)
            observe_allocation("build", placed, time.perf_counter() - started)

        logger.info(
            "allocation.build",
            extra={"pool_size": len(pool), "requested": team_count, "built": len(teams), "placed": placed},
        )
        return teams

    def optimize(self, team_ids: Optional[Sequence[int]] = None) -> List[OptimizationResult]:
        """Suggest members for the given teams, or for every team, from the whole roster."""

        teams = self.store.get_teams(team_ids) if team_ids else self.store.list_teams()
        pool = self.store.list_employees()
        with tracer.start_as_current_span("allocation.optimize") as span:
            span.set_attribute("allocation.pool_size", len(pool))
            span.set_attribute("allocation.team_count", len(teams))

            started = time.perf_counter()
            results = self.optimizer.optimize(teams, pool)
            suggested = sum(len(result.suggestions) for result in results)
            observe_allocation("optimize", suggested, time.perf_counter() - started)

        logger.info(
            "allocation.optimize",
            extra={"pool_size": len(pool), "teams": len(teams), "suggested": suggested},
        )
        return results

    def apply(self, team_id: int, employee_ids: Sequence[int]) -> ApplyOutcome:
        outcome = self.store.apply_suggestions(team_id, employee_ids)
        logger.info(
            "allocation.apply",
            extra={"team_id": team_id, "added": len(outcome.added), "skipped": len(outcome.skipped)},
        )
        return outcome

    def _pool(self, employee_ids: Optional[Sequence[int]]) -> List[Person]:
        if employee_ids:
            return [self.store.get_employee(employee_id) for employee_id in dict.fromkeys(employee_ids)]
        return self.store.unallocated_employees()


allocation_coordinator = AllocationCoordinator()
