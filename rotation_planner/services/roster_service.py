"""
Roster service for the Rotation Planner.

Validates and normalizes the player list, the goalie subset and the match
configuration before any scheduling work begins.
"""
import logging
from typing import Dict, Iterable, List, Mapping, Optional, Sequence

from ..models import Roster, RotationConfig
from ..utils import MAX_GOALIES, MIN_GOALIES, PLAYER_NAME_PREFIX
from .errors import (
    InsufficientRosterError, InvalidBenchAssignmentError, InvalidConfigError,
    InvalidGoalieCountError, InvalidPlayerError, UnknownGoalieError
)

logger = logging.getLogger(__name__)


def generate_player_list(count: int) -> List[str]:
    """
    Generate placeholder player names.

    Args:
        count: Number of players

    Returns:
        ``["Player 1", ..., "Player <count>"]``

    Raises:
        InvalidConfigError: If count is negative
    """
    if count < 0:
        raise InvalidConfigError(f"Player count cannot be negative, got {count}")
    return [f"{PLAYER_NAME_PREFIX} {i}" for i in range(1, count + 1)]


def validate_config(config: RotationConfig) -> None:
    """
    Check that every config value is usable.

    Raises:
        InvalidConfigError: If any count or length is out of range
    """
    errors = []
    if config.num_periods < 1:
        errors.append(f"num_periods must be at least 1, got {config.num_periods}")
    if config.period_length < 1:
        errors.append(f"period_length must be at least 1 minute, got {config.period_length}")
    if config.field_players_on_pitch < 1:
        errors.append(
            f"field_players_on_pitch must be at least 1, got {config.field_players_on_pitch}"
        )
    if config.max_substitutions_per_period < 0:
        errors.append(
            "max_substitutions_per_period cannot be negative, "
            f"got {config.max_substitutions_per_period}"
        )
    if config.substitution_threshold is not None and config.substitution_threshold < 1:
        errors.append(
            f"substitution_threshold must be at least 1 minute, got {config.substitution_threshold}"
        )
    if errors:
        raise InvalidConfigError("Invalid rotation config: " + "; ".join(errors))


def normalize_players(players: Iterable[str]) -> List[str]:
    """
    Strip names and reject empty or duplicate entries, keeping roster order.

    Raises:
        InvalidPlayerError: On an empty or repeated name
    """
    normalized: List[str] = []
    seen = set()
    for raw in players:
        name = str(raw).strip() if raw is not None else ""
        if not name:
            raise InvalidPlayerError("Player names cannot be empty")
        if name in seen:
            raise InvalidPlayerError(f"Player '{name}' appears more than once in the roster")
        seen.add(name)
        normalized.append(name)
    return normalized


def validate_goalies(players: Sequence[str], goalies: Iterable[str]) -> List[str]:
    """
    Check the goalie subset against the roster.

    Returns:
        Normalized goalie names in the order given

    Raises:
        InvalidGoalieCountError: If the count is outside 1..3 or a goalie repeats
        UnknownGoalieError: If a goalie is not in the roster
    """
    normalized = [str(g).strip() for g in goalies]
    if not MIN_GOALIES <= len(normalized) <= MAX_GOALIES:
        raise InvalidGoalieCountError(
            f"Between {MIN_GOALIES} and {MAX_GOALIES} goalies are required, got {len(normalized)}"
        )
    if len(set(normalized)) != len(normalized):
        raise InvalidGoalieCountError("Each goalie may only be listed once")
    roster = set(players)
    for goalie in normalized:
        if goalie not in roster:
            raise UnknownGoalieError(f"Goalie '{goalie}' is not in the players list")
    return normalized


def build_roster(players: Iterable[str], goalies: Iterable[str],
                 config: RotationConfig) -> Roster:
    """
    Validate all inputs of a scheduling call and return the match roster.

    Args:
        players: Player names in roster order
        goalies: Eligible goalies (1 fixed, 2-3 rotating)
        config: Match configuration

    Returns:
        Validated Roster

    Raises:
        RotationError: Any of its subclasses, before any schedule work happens
    """
    validate_config(config)
    roster_players = normalize_players(players)
    roster_goalies = validate_goalies(roster_players, goalies)
    required = config.field_players_on_pitch + 1
    if len(roster_players) < required:
        raise InsufficientRosterError(
            f"{config.field_players_on_pitch} field players plus a goalie need at least "
            f"{required} players, roster has {len(roster_players)}"
        )
    roster = Roster(players=tuple(roster_players), goalies=tuple(roster_goalies))
    logger.debug("Roster of %d players, %s goalies: %s",
                 roster.size, roster.goalie_mode.value, ", ".join(roster.goalies))
    return roster


def validate_bench_assignment(roster: Roster, config: RotationConfig,
                              bench_assignment: Optional[Mapping[str, int]]) -> Dict[str, int]:
    """
    Check a pre-computed bench assignment against the roster and config.

    Returns:
        A plain copy of the assignment

    Raises:
        InvalidBenchAssignmentError: Unknown player, period out of range, or
            more forced sit-outs in a period than there are bench seats
    """
    assignment = dict(bench_assignment or {})
    bench_seats = roster.size - 1 - config.field_players_on_pitch
    per_period: Dict[int, int] = {}
    for player, period in assignment.items():
        if player not in roster.players:
            raise InvalidBenchAssignmentError(f"Bench assignment names unknown player '{player}'")
        if (isinstance(period, bool) or not isinstance(period, int)
                or not 1 <= period <= config.num_periods):
            raise InvalidBenchAssignmentError(
                f"Bench period for '{player}' must be between 1 and {config.num_periods}, got {period!r}"
            )
        if player == roster.goalie_for_period(period):
            continue
        per_period[period] = per_period.get(period, 0) + 1
    for period, count in sorted(per_period.items()):
        if count > bench_seats:
            raise InvalidBenchAssignmentError(
                f"Period {period} has {count} forced bench players but only {bench_seats} bench seats"
            )
    return assignment
