"""
Rotation Planner

Plans fair substitution rotations for youth soccer matches: who keeps goal,
who starts on the field and who sits, period by period, so every player
ends the match with about the same field time.

This package provides the rotation engine and a Flask JSON API around it.
"""
from .models import DEFAULT_CONFIG, GoalieMode, RotationConfig, ScheduleResult
from .services import (
    RotationError, RotationService, assign_bench_periods, build_rotation_schedule,
    calculate_target_field_minutes, format_schedule, generate_minute_schedule,
    generate_player_list, initialize_field_minutes, summarize_fairness
)
from .ui import create_app, run_web_app
from .utils import APP_TITLE

__version__ = "1.0.0"

__all__ = [
    "DEFAULT_CONFIG", "GoalieMode", "RotationConfig", "ScheduleResult",
    "RotationError", "RotationService", "assign_bench_periods", "build_rotation_schedule",
    "calculate_target_field_minutes", "format_schedule", "generate_minute_schedule",
    "generate_player_list", "initialize_field_minutes", "summarize_fairness",
    "create_app", "run_web_app", "APP_TITLE"
]
