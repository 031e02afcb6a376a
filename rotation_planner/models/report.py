"""Dataclasses representing fairness reports for a rotation plan."""

from dataclasses import dataclass, field
from typing import Dict, List


@dataclass
class PlayerMinutesSummary:
    """Field time for a single player compared with the fair share."""

    name: str
    field_minutes: int
    goalie_minutes: int
    target_minutes: float
    delta_minutes: float
    periods_in_goal: int
    fairness: str


@dataclass
class FairnessReport:
    """Snapshot of how evenly a plan distributes field time."""

    goalie_mode: str
    target_minutes: float
    total_field_minutes: int
    players: List[PlayerMinutesSummary] = field(default_factory=list)
    average_minutes: float = 0.0
    median_minutes: float = 0.0
    min_minutes: int = 0
    max_minutes: int = 0
    spread_minutes: int = 0
    fairness_counts: Dict[str, int] = field(default_factory=dict)

    def to_dict(self) -> Dict:
        return {
            "goalie_mode": self.goalie_mode,
            "target_minutes": self.target_minutes,
            "total_field_minutes": self.total_field_minutes,
            "average_minutes": self.average_minutes,
            "median_minutes": self.median_minutes,
            "min_minutes": self.min_minutes,
            "max_minutes": self.max_minutes,
            "spread_minutes": self.spread_minutes,
            "fairness_counts": dict(self.fairness_counts),
            "players": [
                {
                    "name": p.name,
                    "field_minutes": p.field_minutes,
                    "goalie_minutes": p.goalie_minutes,
                    "target_minutes": p.target_minutes,
                    "delta_minutes": p.delta_minutes,
                    "periods_in_goal": p.periods_in_goal,
                    "fairness": p.fairness,
                }
                for p in self.players
            ],
        }
