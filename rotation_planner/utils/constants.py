"""
Constants for the Rotation Planner.

This module contains configuration defaults and limits used throughout the
rotation engine.
"""

# Application metadata
APP_TITLE = "Rotation Planner"

# Match structure defaults (3 x 20 minutes, 7v7 with one goalie)
DEFAULT_NUM_PERIODS = 3
DEFAULT_PERIOD_LENGTH_MIN = 20
DEFAULT_FIELD_PLAYERS_ON_PITCH = 6

# Goalie configuration
MIN_GOALIES = 1
MAX_GOALIES = 3

# Substitution checkpoints sit on the quarter marks of a period, minus the last
CHECKPOINT_DIVISIONS = 4
MAX_SUBSTITUTIONS_PER_PERIOD = 2

# Minute-by-minute model: gap (minutes) needed before a bench player is swapped in
MINUTE_MODEL_FAIRNESS_THRESHOLD_MIN = 2

# +/- 5 minutes from target regarded as notable variance
FAIRNESS_THRESHOLD_MIN = 5

# Placeholder names for generated rosters
PLAYER_NAME_PREFIX = "Player"

GOALIE_POSITION = 1

# Position labels for pitch display (position 1 is always the goalie)
POSITION_LABELS = {
    1: "Goalie",
    2: "Defender (L)",
    3: "Defender (R)",
    4: "Midfielder (L)",
    5: "Midfielder (R)",
    6: "Forward",
    7: "Sweeper",
}
