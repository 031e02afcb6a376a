"""
Minute-by-minute schedule models for the Rotation Planner.

These dataclasses back the finer-grained rotation variant, where every match
minute is recorded together with the numbered pitch position each player holds.
"""
from dataclasses import dataclass, field
from typing import Any, Dict, List, Tuple

from ..utils import GOALIE_POSITION, POSITION_LABELS


def position_label(position: int) -> str:
    """Human-readable label for a pitch position number."""
    return POSITION_LABELS.get(position, f"Position {position}")


@dataclass
class PlayerStats:
    """
    Running totals for one player in the minute-by-minute model.

    Attributes:
        name: Player name
        total_minutes: Minutes on the pitch, goal included
        goalie_minutes: Minutes spent in goal
        bench_minutes: Minutes spent on the bench
        field_positions: Minutes spent at each outfield position number
    """
    name: str
    total_minutes: int = 0
    goalie_minutes: int = 0
    bench_minutes: int = 0
    field_positions: Dict[int, int] = field(default_factory=dict)

    @property
    def field_minutes(self) -> int:
        return self.total_minutes - self.goalie_minutes

    def record_position(self, position: int, minutes: int) -> None:
        self.total_minutes += minutes
        if position == GOALIE_POSITION:
            self.goalie_minutes += minutes
        else:
            self.field_positions[position] = self.field_positions.get(position, 0) + minutes

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "total_minutes": self.total_minutes,
            "goalie_minutes": self.goalie_minutes,
            "bench_minutes": self.bench_minutes,
            "field_minutes": self.field_minutes,
            "field_positions": {str(pos): mins for pos, mins in self.field_positions.items()},
        }


@dataclass(frozen=True)
class MinuteRecord:
    """Who is where during a single match minute."""
    minute: int
    period: int
    goalie: str
    field: Dict[int, str]
    bench: Tuple[str, ...]

    def players_on_pitch(self) -> List[str]:
        return [self.goalie] + [self.field[pos] for pos in sorted(self.field)]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "minute": self.minute,
            "period": self.period,
            "goalie": self.goalie,
            "field": {str(pos): name for pos, name in sorted(self.field.items())},
            "bench": list(self.bench),
            "position_labels": {str(pos): position_label(pos) for pos in sorted(self.field)},
        }


@dataclass(frozen=True)
class MinuteSchedule:
    """Minute records for the whole match plus the per-player summary."""
    records: Tuple[MinuteRecord, ...]
    summary: Dict[str, PlayerStats]

    def period_records(self, period: int) -> List[MinuteRecord]:
        return [record for record in self.records if record.period == period]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "schedule": [record.to_dict() for record in self.records],
            "summary": {name: stats.to_dict() for name, stats in self.summary.items()},
        }
