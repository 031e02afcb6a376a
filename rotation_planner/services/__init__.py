"""
Services package for the Rotation Planner.

This package contains the rotation engine: roster validation, fair-share
targets, bench allocation, the two schedule builders and report rendering.
"""
from .errors import (
    RotationError, InvalidConfigError, InsufficientRosterError, UnknownGoalieError,
    InvalidGoalieCountError, InvalidPlayerError, InvalidBenchAssignmentError
)
from .roster_service import (
    generate_player_list, validate_config, normalize_players, validate_goalies,
    build_roster, validate_bench_assignment
)
from .target_minutes import (
    calculate_target_field_minutes, initialize_field_minutes, fair_share_quotas
)
from .bench_allocator import assign_bench_periods
from .schedule_builder import RotationScheduleBuilder, build_rotation_schedule
from .minute_schedule import (
    MinuteScheduleBuilder, generate_minute_schedule, perform_substitution_event
)
from .schedule_formatter import (
    ScheduleReportExporter, classify_fairness, format_minute_schedule, format_schedule,
    summarize_fairness
)
from .rotation_service import RotationService, STRATEGIES, STRATEGY_CHECKPOINT, STRATEGY_MINUTE

__all__ = [
    "RotationError", "InvalidConfigError", "InsufficientRosterError", "UnknownGoalieError",
    "InvalidGoalieCountError", "InvalidPlayerError", "InvalidBenchAssignmentError",
    "generate_player_list", "validate_config", "normalize_players", "validate_goalies",
    "build_roster", "validate_bench_assignment",
    "calculate_target_field_minutes", "initialize_field_minutes", "fair_share_quotas",
    "assign_bench_periods", "RotationScheduleBuilder", "build_rotation_schedule",
    "MinuteScheduleBuilder", "generate_minute_schedule", "perform_substitution_event",
    "ScheduleReportExporter", "classify_fairness", "format_minute_schedule", "format_schedule",
    "summarize_fairness", "RotationService", "STRATEGIES", "STRATEGY_CHECKPOINT", "STRATEGY_MINUTE"
]
