"""
Period + checkpoint rotation schedule builder.

Each period starts with the goalie in goal, any pre-assigned sit-outs on the
bench and the players who most need minutes on the field. At the in-period
checkpoints (5, 10 and 15 minutes of a 20-minute period) bench players who have
fallen behind are swapped in for the field players furthest ahead.

"Behind" and "ahead" are measured with *slack*: the non-goalie minutes a player
could still play, minus the minutes still needed to reach their quota. Sitting
burns slack, playing keeps it constant, so swapping the lowest-slack bench
player for the highest-slack field player steers everyone toward the quota.
"""
from __future__ import annotations

import logging
from fractions import Fraction
from typing import Iterable, List, Mapping, Optional

from ..models import (
    DEFAULT_CONFIG, GoalieMode, PeriodPlan, Roster, RotationConfig, ScheduleResult, Substitution
)
from .roster_service import build_roster, validate_bench_assignment
from .target_minutes import (
    calculate_target_field_minutes, fair_share_quotas, initialize_field_minutes
)

logger = logging.getLogger(__name__)


class RotationScheduleBuilder:
    """
    Builds a :class:`ScheduleResult` for one validated roster.

    A builder holds the running minute tables of a single scheduling call;
    create a new one per call.
    """

    def __init__(self, roster: Roster, config: RotationConfig,
                 bench_assignment: Optional[Mapping[str, int]] = None):
        """
        Initialize the builder.

        Args:
            roster: Validated roster
            config: Validated match configuration
            bench_assignment: Optional forced sit-out period per player
        """
        self.roster = roster
        self.config = config
        self.bench_assignment = dict(bench_assignment or {})

        self._order = {player: idx for idx, player in enumerate(roster.players)}
        self._goalies = [roster.goalie_for_period(i) for i in range(1, config.num_periods + 1)]
        self._pool = roster.field_pool
        self._threshold = config.effective_threshold()

        availability = {player: self._future_minutes(player, 0) for player in self._pool}
        self._quotas = fair_share_quotas(availability, config.total_field_minutes)
        self._field_minutes = initialize_field_minutes(self._pool)
        self._goalie_minutes = initialize_field_minutes(roster.players)

    # ---------- Slack bookkeeping ---------- #

    def _future_minutes(self, player: str, after_period: int) -> int:
        """Non-goalie minutes left for ``player`` in periods after ``after_period``."""
        return sum(
            self.config.period_length
            for goalie in self._goalies[after_period:]
            if goalie != player
        )

    def _slack(self, player: str, period: int, minute: int) -> Fraction:
        opportunity = self._future_minutes(player, period)
        if self._goalies[period - 1] != player:
            opportunity += self.config.period_length - minute
        still_needed = self._quotas[player] - self._field_minutes[player]
        return opportunity - still_needed

    # ---------- Period planning ---------- #

    def build(self) -> ScheduleResult:
        """Plan every period in order and return the finished schedule."""
        schedule = []
        for period in range(1, self.config.num_periods + 1):
            schedule.append(self._plan_period(period))

        target = calculate_target_field_minutes(
            self.config, self.roster.size, self.roster.goalie_mode is GoalieMode.FIXED
        )
        return ScheduleResult(
            schedule=tuple(schedule),
            field_minutes=dict(self._field_minutes),
            target_field_minutes=target,
            goalie_mode=self.roster.goalie_mode,
            goalie_minutes=dict(self._goalie_minutes),
        )

    def _plan_period(self, period: int) -> PeriodPlan:
        goalie = self._goalies[period - 1]
        sitting_out = [
            player for player in self._pool
            if player != goalie and self.bench_assignment.get(player) == period
        ]
        candidates = [
            player for player in self._pool
            if player != goalie and player not in sitting_out
        ]
        candidates.sort(key=lambda p: (self._slack(p, period, 0), self._order[p]))

        field_players = candidates[:self.config.field_players_on_pitch]
        bench_players = candidates[self.config.field_players_on_pitch:] + sitting_out
        starting_field = self._in_roster_order(field_players)
        starting_bench = self._in_roster_order(bench_players)

        substitutions: List[Substitution] = []
        checkpoints = list(self.config.checkpoints())
        for start, end in zip([0] + checkpoints, checkpoints + [self.config.period_length]):
            if start:
                self._substitute(period, start, field_players, bench_players, substitutions)
            elapsed = end - start
            for player in field_players:
                self._field_minutes[player] += elapsed
            self._goalie_minutes[goalie] += elapsed

        logger.debug("Period %d: goalie=%s, field=%s, bench=%s, %d substitution(s)",
                     period, goalie, starting_field, starting_bench, len(substitutions))
        return PeriodPlan(
            index=period,
            goalie=goalie,
            field_players=self._in_roster_order(field_players),
            bench_players=self._in_roster_order(bench_players),
            substitutions=tuple(substitutions),
            starting_field_players=starting_field,
            starting_bench_players=starting_bench,
        )

    def _substitute(self, period: int, minute: int, field_players: List[str],
                    bench_players: List[str], substitutions: List[Substitution]) -> None:
        """Swap bench players in at a checkpoint while the slack gap is large enough."""
        waiting = sorted(bench_players, key=lambda p: (self._slack(p, period, minute), self._order[p]))
        for candidate in waiting:
            if len(substitutions) >= self.config.max_substitutions_per_period:
                return
            outgoing = max(field_players, key=lambda p: (self._slack(p, period, minute), -self._order[p]))
            gap = self._slack(outgoing, period, minute) - self._slack(candidate, period, minute)
            if gap < self._threshold:
                return
            field_players[field_players.index(outgoing)] = candidate
            bench_players[bench_players.index(candidate)] = outgoing
            substitutions.append(Substitution(minute=minute, player_out=outgoing, player_in=candidate))
            logger.debug("Period %d minute %d: %s on for %s (gap %s)",
                         period, minute, candidate, outgoing, gap)

    def _in_roster_order(self, players: Iterable[str]) -> tuple:
        return tuple(sorted(players, key=self._order.__getitem__))


def build_rotation_schedule(players: Iterable[str], goalies: Iterable[str],
                            config: RotationConfig = DEFAULT_CONFIG,
                            bench_assignment: Optional[Mapping[str, int]] = None) -> ScheduleResult:
    """
    Build a fair rotation plan for one match.

    Args:
        players: Player names in roster order
        goalies: One fixed goalie, or two to three rotating goalies
        config: Match configuration
        bench_assignment: Optional forced sit-out period per player (see
            :func:`assign_bench_periods`)

    Returns:
        ScheduleResult with one PeriodPlan per period and final field minutes

    Raises:
        RotationError: On any invalid input, before any planning happens
    """
    roster = build_roster(players, goalies, config)
    assignment = validate_bench_assignment(roster, config, bench_assignment)
    return RotationScheduleBuilder(roster, config, assignment).build()
