"""
Time formatting helpers for the Rotation Planner.
"""
from numbers import Real


def fmt_mmss(seconds: int) -> str:
    """
    Format seconds as MM:SS string.

    Args:
        seconds: Number of seconds to format

    Returns:
        Formatted time string in MM:SS format

    Example:
        >>> fmt_mmss(300)
        '05:00'
        >>> fmt_mmss(3661)
        '61:01'
    """
    m = seconds // 60
    s = seconds % 60
    return f"{m:02d}:{s:02d}"


def fmt_minute_mark(minute: int) -> str:
    """Format an in-period minute offset as a match clock, e.g. ``10`` -> ``'10:00'``."""
    return fmt_mmss(int(minute) * 60)


def fmt_minutes(value: Real) -> str:
    """
    Format a minute quantity, dropping the decimal for whole numbers.

    Example:
        >>> fmt_minutes(45.0)
        '45'
        >>> fmt_minutes(360 / 7)
        '51.4'
    """
    if float(value).is_integer():
        return str(int(value))
    return f"{float(value):.1f}"
