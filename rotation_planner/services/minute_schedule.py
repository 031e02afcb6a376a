"""
Minute-by-minute rotation variant.

Players hold numbered pitch positions (1 is the goalie). Each period is cut at
the same checkpoints as the period model. At every checkpoint but the last,
bench players are swapped in one by one when the busiest field player is ahead
of them by at least the fairness threshold. At the last checkpoint the whole
bench comes on at once, replacing the busiest field players.
"""
import logging
from typing import Dict, Iterable, List, Mapping, Optional, Sequence, Tuple

from ..models import (
    DEFAULT_CONFIG, MinuteRecord, MinuteSchedule, PlayerStats, Roster, RotationConfig
)
from ..utils import GOALIE_POSITION, MINUTE_MODEL_FAIRNESS_THRESHOLD_MIN
from .errors import InvalidConfigError
from .roster_service import build_roster

logger = logging.getLogger(__name__)


def perform_substitution_event(assignment: Mapping[int, str], bench: Sequence[str],
                               stats: Mapping[str, PlayerStats], force_all: bool,
                               threshold: int,
                               order: Optional[Mapping[str, int]] = None
                               ) -> Tuple[Dict[int, str], List[str]]:
    """
    Perform one substitution event.

    Args:
        assignment: Current outfield positions (position -> player)
        bench: Current bench players
        stats: Running player statistics
        force_all: Bring every bench player on, replacing the busiest field players
        threshold: When not forced, swap only if the busiest field player's total
            exceeds the bench candidate's by at least this many minutes
        order: Roster index per player, used to break ties

    Returns:
        New ``(assignment, bench)``; the inputs are left untouched
    """
    order = order or {}
    new_assignment = dict(assignment)
    new_bench = list(bench)

    def minutes(player: str) -> Tuple[int, int]:
        return stats[player].total_minutes, order.get(player, 0)

    if force_all:
        busiest = sorted(new_assignment.items(), key=lambda item: (-stats[item[1]].total_minutes, item[0]))
        incoming = sorted(new_bench, key=minutes)
        swapped_out = []
        for (position, field_player), bench_player in zip(busiest, incoming):
            new_assignment[position] = bench_player
            swapped_out.append(field_player)
        new_bench = swapped_out + incoming[len(swapped_out):]
        return new_assignment, new_bench

    for candidate in sorted(new_bench, key=minutes):
        if not new_assignment:
            break
        position, field_player = max(
            new_assignment.items(),
            key=lambda item: (stats[item[1]].total_minutes, -item[0]),
        )
        if stats[field_player].total_minutes - stats[candidate].total_minutes >= threshold:
            new_assignment[position] = candidate
            new_bench.remove(candidate)
            new_bench.append(field_player)
    return new_assignment, new_bench


class MinuteScheduleBuilder:
    """Builds a :class:`MinuteSchedule` for one validated roster."""

    def __init__(self, roster: Roster, config: RotationConfig,
                 fairness_threshold: int = MINUTE_MODEL_FAIRNESS_THRESHOLD_MIN):
        self.roster = roster
        self.config = config
        self.fairness_threshold = fairness_threshold
        self.positions = list(range(GOALIE_POSITION + 1,
                                    GOALIE_POSITION + 1 + config.field_players_on_pitch))
        self._order = {player: idx for idx, player in enumerate(roster.players)}
        self.stats = {
            player: PlayerStats(name=player, field_positions={pos: 0 for pos in self.positions})
            for player in roster.players
        }

    def build(self, initial_positions: Optional[Mapping[int, str]] = None) -> MinuteSchedule:
        records: List[MinuteRecord] = []
        checkpoints = list(self.config.checkpoints())
        for period in range(1, self.config.num_periods + 1):
            goalie = self.roster.goalie_for_period(period)
            if period == 1 and initial_positions:
                assignment, bench = self._seed_lineup(goalie, initial_positions)
            else:
                assignment, bench = self._fresh_lineup(goalie)

            period_start = (period - 1) * self.config.period_length
            for start, end in zip([0] + checkpoints, checkpoints + [self.config.period_length]):
                if start:
                    force_all = start == checkpoints[-1]
                    assignment, bench = perform_substitution_event(
                        assignment, bench, self.stats, force_all, self.fairness_threshold, self._order
                    )
                for minute in range(start, end):
                    records.append(MinuteRecord(
                        minute=period_start + minute,
                        period=period,
                        goalie=goalie,
                        field=dict(assignment),
                        bench=tuple(bench),
                    ))
                self._accrue(goalie, assignment, bench, end - start)
            logger.debug("Minute model period %d done, goalie=%s", period, goalie)

        return MinuteSchedule(records=tuple(records), summary=dict(self.stats))

    def _fresh_lineup(self, goalie: str) -> Tuple[Dict[int, str], List[str]]:
        available = sorted(
            (p for p in self.roster.players if p != goalie),
            key=lambda p: (self.stats[p].total_minutes, self._order[p]),
        )
        assignment = dict(zip(self.positions, available))
        return assignment, available[len(self.positions):]

    def _seed_lineup(self, goalie: str,
                     initial_positions: Mapping[int, str]) -> Tuple[Dict[int, str], List[str]]:
        """
        Start period 1 from a coach-provided lineup.

        The period goalie always takes position 1. If the lineup put the goalie
        at an outfield position, whoever was listed at position 1 moves there.
        Empty positions are filled with the remaining players in roster order.
        """
        displaced = initial_positions.get(GOALIE_POSITION)
        if displaced is not None and displaced not in self._order:
            raise InvalidConfigError(f"Initial lineup names unknown player '{displaced}'")
        assignment: Dict[int, str] = {}
        for position, player in sorted(initial_positions.items()):
            if position == GOALIE_POSITION:
                continue
            if position not in self.positions:
                raise InvalidConfigError(
                    f"Initial position {position} is outside 1..{self.positions[-1]}"
                )
            if player not in self._order:
                raise InvalidConfigError(f"Initial lineup names unknown player '{player}'")
            if player == goalie:
                if displaced and displaced != goalie:
                    assignment[position] = displaced
                continue
            assignment[position] = player

        placed = list(assignment.values())
        if len(set(placed)) != len(placed):
            raise InvalidConfigError("Initial lineup places a player in more than one position")

        remaining = [p for p in self.roster.players if p != goalie and p not in placed]
        for position in self.positions:
            if position not in assignment and remaining:
                assignment[position] = remaining.pop(0)
        return assignment, remaining

    def _accrue(self, goalie: str, assignment: Mapping[int, str],
                bench: Iterable[str], minutes: int) -> None:
        self.stats[goalie].record_position(GOALIE_POSITION, minutes)
        for position, player in assignment.items():
            self.stats[player].record_position(position, minutes)
        for player in bench:
            self.stats[player].bench_minutes += minutes


def generate_minute_schedule(players: Iterable[str], goalies: Iterable[str],
                             config: RotationConfig = DEFAULT_CONFIG,
                             initial_positions: Optional[Mapping[int, str]] = None,
                             fairness_threshold: int = MINUTE_MODEL_FAIRNESS_THRESHOLD_MIN
                             ) -> MinuteSchedule:
    """
    Generate a minute-by-minute schedule and a per-player summary.

    Args:
        players: Player names in roster order
        goalies: One fixed goalie, or two to three rotating goalies
        config: Match configuration
        initial_positions: Optional period-1 lineup (position -> player)
        fairness_threshold: Minutes a field player must be ahead of a bench
            player before a non-forced swap happens

    Returns:
        MinuteSchedule with one record per match minute

    Raises:
        RotationError: On any invalid input
    """
    if fairness_threshold < 0:
        raise InvalidConfigError(f"fairness_threshold cannot be negative, got {fairness_threshold}")
    roster = build_roster(players, goalies, config)
    return MinuteScheduleBuilder(roster, config, fairness_threshold).build(initial_positions)
