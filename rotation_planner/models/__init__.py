"""
Models package for the Rotation Planner.

This package contains the data models produced and consumed by the rotation engine.
"""
from .rotation import (
    DEFAULT_CONFIG, GoalieMode, PeriodPlan, Roster, RotationConfig,
    ScheduleResult, Substitution
)
from .minute_schedule import MinuteRecord, MinuteSchedule, PlayerStats, position_label
from .report import FairnessReport, PlayerMinutesSummary

__all__ = [
    "DEFAULT_CONFIG", "GoalieMode", "PeriodPlan", "Roster", "RotationConfig",
    "ScheduleResult", "Substitution", "MinuteRecord", "MinuteSchedule",
    "PlayerStats", "position_label", "FairnessReport", "PlayerMinutesSummary"
]
