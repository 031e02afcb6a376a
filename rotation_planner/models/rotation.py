"""
Rotation models for the Rotation Planner.

This module contains the dataclasses describing a match configuration, the
roster taking part in it, and the period-by-period plan produced by the
schedule builder. Every result object is frozen: a plan never changes after
it has been handed back to the caller.
"""
from dataclasses import dataclass, field, replace
from enum import Enum
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Tuple

from ..utils import (
    CHECKPOINT_DIVISIONS, DEFAULT_FIELD_PLAYERS_ON_PITCH, DEFAULT_NUM_PERIODS,
    DEFAULT_PERIOD_LENGTH_MIN, MAX_SUBSTITUTIONS_PER_PERIOD
)


class GoalieMode(Enum):
    """How goalkeeping duty is shared across the match."""
    FIXED = "fixed"
    ROTATING = "rotating"

    @classmethod
    def for_goalies(cls, goalies: Tuple[str, ...]) -> "GoalieMode":
        """One goalie keeps goal all match; two or three take turns per period."""
        return cls.FIXED if len(goalies) == 1 else cls.ROTATING


# Accepted spellings for RotationConfig.from_dict (front-end payloads are camelCase)
_CONFIG_KEY_ALIASES = {
    "numPeriods": "num_periods",
    "periodLength": "period_length",
    "fieldPlayersOnPitch": "field_players_on_pitch",
    "maxSubstitutionsPerPeriod": "max_substitutions_per_period",
    "substitutionThreshold": "substitution_threshold",
}


@dataclass(frozen=True)
class RotationConfig:
    """
    Period and pitch configuration for a single match.

    Attributes:
        num_periods: Number of periods in the match
        period_length: Length of each period in minutes
        field_players_on_pitch: Outfield slots (the goalie is not counted)
        max_substitutions_per_period: Cap on mid-period swaps
        substitution_threshold: Minimum slack gap (minutes) that triggers a swap;
            ``None`` means one checkpoint interval
    """
    num_periods: int = DEFAULT_NUM_PERIODS
    period_length: int = DEFAULT_PERIOD_LENGTH_MIN
    field_players_on_pitch: int = DEFAULT_FIELD_PLAYERS_ON_PITCH
    max_substitutions_per_period: int = MAX_SUBSTITUTIONS_PER_PERIOD
    substitution_threshold: Optional[int] = None

    @property
    def total_field_minutes(self) -> int:
        """Field minutes available across the whole match."""
        return self.num_periods * self.period_length * self.field_players_on_pitch

    def checkpoints(self) -> Tuple[int, ...]:
        """
        In-period minutes at which substitutions may happen.

        Quarter marks excluding the final one, so a 20-minute period yields
        ``(5, 10, 15)``. Short periods collapse duplicate or zero marks.
        """
        marks = {
            self.period_length * k // CHECKPOINT_DIVISIONS
            for k in range(1, CHECKPOINT_DIVISIONS)
        }
        return tuple(sorted(mark for mark in marks if 0 < mark < self.period_length))

    def effective_threshold(self) -> int:
        if self.substitution_threshold is not None:
            return self.substitution_threshold
        return max(1, self.period_length // CHECKPOINT_DIVISIONS)

    def with_overrides(self, **overrides: Any) -> "RotationConfig":
        """Return a copy with the given fields replaced."""
        return replace(self, **overrides)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "num_periods": self.num_periods,
            "period_length": self.period_length,
            "field_players_on_pitch": self.field_players_on_pitch,
            "max_substitutions_per_period": self.max_substitutions_per_period,
            "substitution_threshold": self.substitution_threshold,
            "checkpoints": list(self.checkpoints()),
        }

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]],
                  base: Optional["RotationConfig"] = None) -> "RotationConfig":
        """
        Create a config from a dictionary, falling back to ``base`` for missing keys.

        Args:
            data: Mapping with snake_case or camelCase keys
            base: Config supplying defaults (``DEFAULT_CONFIG`` when omitted)

        Returns:
            New RotationConfig instance

        Raises:
            ValueError: If a value cannot be converted to an integer
        """
        base = base or DEFAULT_CONFIG
        if not data:
            return base
        overrides: Dict[str, Any] = {}
        for key, value in data.items():
            name = _CONFIG_KEY_ALIASES.get(key, key)
            if name not in cls.__dataclass_fields__:
                continue
            if name == "substitution_threshold" and value is None:
                overrides[name] = None
            else:
                overrides[name] = int(value)
        return base.with_overrides(**overrides)


DEFAULT_CONFIG = RotationConfig()


@dataclass(frozen=True)
class Roster:
    """
    Validated roster for one match.

    ``players`` is the canonical order: it drives tie-breaks and display.
    Use :func:`rotation_planner.services.build_roster` to create one.
    """
    players: Tuple[str, ...]
    goalies: Tuple[str, ...]

    @property
    def size(self) -> int:
        return len(self.players)

    @property
    def goalie_mode(self) -> GoalieMode:
        return GoalieMode.for_goalies(self.goalies)

    @property
    def non_goalies(self) -> Tuple[str, ...]:
        goalie_set = set(self.goalies)
        return tuple(p for p in self.players if p not in goalie_set)

    @property
    def field_pool(self) -> Tuple[str, ...]:
        """Players that accrue field minutes (everyone but a fixed goalie)."""
        if self.goalie_mode is GoalieMode.FIXED:
            return self.non_goalies
        return self.players

    def goalie_for_period(self, period: int) -> str:
        """Active goalie for a 1-based period index."""
        return self.goalies[(period - 1) % len(self.goalies)]


@dataclass(frozen=True)
class Substitution:
    """A bench player replacing a field player at an in-period minute."""
    minute: int
    player_out: str
    player_in: str

    def to_dict(self) -> Dict[str, Any]:
        return {"minute": self.minute, "player_out": self.player_out, "player_in": self.player_in}


@dataclass(frozen=True)
class PeriodPlan:
    """
    Roles for one period.

    Attributes:
        index: 1-based period number
        goalie: Active goalie for the whole period
        field_players: Field occupants at the end of the period (roster order)
        bench_players: Bench occupants at the end of the period (roster order)
        substitutions: Swaps in chronological order
        starting_field_players: Field occupants at kick-off of the period
        starting_bench_players: Bench occupants at kick-off of the period
    """
    index: int
    goalie: str
    field_players: Tuple[str, ...]
    bench_players: Tuple[str, ...]
    substitutions: Tuple[Substitution, ...] = ()
    starting_field_players: Tuple[str, ...] = ()
    starting_bench_players: Tuple[str, ...] = ()

    def lineup_at(self, minute: int) -> Tuple[Tuple[str, ...], Tuple[str, ...]]:
        """
        Reconstruct ``(field, bench)`` in effect at an in-period minute.

        Substitutions recorded at ``minute`` are already applied.
        """
        field_players = list(self.starting_field_players)
        bench_players = list(self.starting_bench_players)
        for sub in self.substitutions:
            if sub.minute > minute:
                break
            field_players[field_players.index(sub.player_out)] = sub.player_in
            bench_players[bench_players.index(sub.player_in)] = sub.player_out
        return tuple(field_players), tuple(bench_players)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "index": self.index,
            "goalie": self.goalie,
            "field_players": list(self.field_players),
            "bench_players": list(self.bench_players),
            "substitutions": [sub.to_dict() for sub in self.substitutions],
            "starting_field_players": list(self.starting_field_players),
            "starting_bench_players": list(self.starting_bench_players),
        }


@dataclass(frozen=True)
class ScheduleResult:
    """
    Complete rotation plan for a match.

    Attributes:
        schedule: One PeriodPlan per period, in order
        field_minutes: Accumulated field minutes per field-pool player (roster order)
        target_field_minutes: Fair share each player should reach
        goalie_mode: Fixed or rotating goalies
        goalie_minutes: Minutes spent in goal per player (roster order)

    Both minute tables are read-only views over private copies.
    """
    schedule: Tuple[PeriodPlan, ...]
    field_minutes: Mapping[str, int]
    target_field_minutes: float
    goalie_mode: GoalieMode = GoalieMode.FIXED
    goalie_minutes: Mapping[str, int] = field(default_factory=dict)

    def __post_init__(self):
        object.__setattr__(self, "field_minutes", MappingProxyType(dict(self.field_minutes)))
        object.__setattr__(self, "goalie_minutes", MappingProxyType(dict(self.goalie_minutes)))

    @property
    def total_field_minutes(self) -> int:
        return sum(self.field_minutes.values())

    @property
    def minutes_spread(self) -> int:
        """Difference between the busiest and the least used field-pool player."""
        if not self.field_minutes:
            return 0
        values = self.field_minutes.values()
        return max(values) - min(values)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "goalie_mode": self.goalie_mode.value,
            "target_field_minutes": self.target_field_minutes,
            "schedule": [period.to_dict() for period in self.schedule],
            "field_minutes": dict(self.field_minutes),
            "goalie_minutes": dict(self.goalie_minutes),
            "total_field_minutes": self.total_field_minutes,
            "minutes_spread": self.minutes_spread,
        }
