"""Bench period allocation for rotating-goalie matches."""

import logging
from typing import Dict, Iterable, Sequence

from .errors import InvalidConfigError

logger = logging.getLogger(__name__)


def assign_bench_periods(players: Sequence[str], goalies: Iterable[str], total_players: int,
                         field_players_on_pitch: int, num_periods: int) -> Dict[str, int]:
    """
    Pick the period in which each non-goalie starts on the bench.

    Non-goalies are dealt round-robin over the periods in roster order, one
    sit-out each, until every candidate has one or every bench seat is taken.
    Per-period counts therefore differ by at most one.

    Args:
        players: Roster in canonical order
        goalies: Goalies (never pre-assigned to the bench)
        total_players: Roster size
        field_players_on_pitch: Outfield slots per period
        num_periods: Number of periods

    Returns:
        Mapping of player to 1-based period; unassigned players are absent

    Raises:
        InvalidConfigError: If num_periods is not positive
    """
    if num_periods < 1:
        raise InvalidConfigError(f"num_periods must be at least 1, got {num_periods}")

    bench_per_period = max(0, total_players - 1 - field_players_on_pitch)
    total_bench_slots = num_periods * bench_per_period
    goalie_set = set(goalies)
    candidates = [player for player in players if player not in goalie_set]

    assignment: Dict[str, int] = {}
    for position, player in enumerate(candidates[:total_bench_slots]):
        assignment[player] = position % num_periods + 1

    logger.debug("Bench assignment (%d seats per period): %s", bench_per_period, assignment)
    return assignment
