"""
Utilities package for the Rotation Planner.

This package contains formatting helpers and configuration constants.
"""
from .time_utils import fmt_mmss, fmt_minute_mark, fmt_minutes
from .constants import (
    APP_TITLE, DEFAULT_NUM_PERIODS, DEFAULT_PERIOD_LENGTH_MIN,
    DEFAULT_FIELD_PLAYERS_ON_PITCH, MIN_GOALIES, MAX_GOALIES,
    CHECKPOINT_DIVISIONS, MAX_SUBSTITUTIONS_PER_PERIOD,
    MINUTE_MODEL_FAIRNESS_THRESHOLD_MIN, FAIRNESS_THRESHOLD_MIN,
    PLAYER_NAME_PREFIX, GOALIE_POSITION, POSITION_LABELS
)

__all__ = [
    "fmt_mmss", "fmt_minute_mark", "fmt_minutes", "APP_TITLE",
    "DEFAULT_NUM_PERIODS", "DEFAULT_PERIOD_LENGTH_MIN", "DEFAULT_FIELD_PLAYERS_ON_PITCH",
    "MIN_GOALIES", "MAX_GOALIES", "CHECKPOINT_DIVISIONS", "MAX_SUBSTITUTIONS_PER_PERIOD",
    "MINUTE_MODEL_FAIRNESS_THRESHOLD_MIN", "FAIRNESS_THRESHOLD_MIN",
    "PLAYER_NAME_PREFIX", "GOALIE_POSITION", "POSITION_LABELS"
]
