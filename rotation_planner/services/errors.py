"""
Exceptions raised by the rotation engine.

Every error is a caller input-contract violation detected before any schedule
is built. They all derive from :class:`RotationError`, itself a ``ValueError``.
"""


class RotationError(ValueError):
    """Base class for rotation planning errors."""
    pass


class InvalidConfigError(RotationError):
    """Non-positive period count, period length or field size."""
    pass


class InsufficientRosterError(RotationError):
    """Roster too small for the configured field size plus a goalie."""
    pass


class UnknownGoalieError(RotationError):
    """A goalie name that is not in the roster."""
    pass


class InvalidGoalieCountError(RotationError):
    """Zero goalies, or more than the supported maximum."""
    pass


class InvalidPlayerError(RotationError):
    """Empty or duplicate player names."""
    pass


class InvalidBenchAssignmentError(RotationError):
    """Bench assignment naming unknown players, bad periods or overfull benches."""
    pass
