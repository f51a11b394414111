"""Remaining-time calculations for countdown cards."""
import datetime

MINUTE = 60
HOUR = 3600
DAY = 86400

NOW_LABEL = "Now!"


def seconds_remaining(now: datetime.datetime, target: datetime.datetime) -> int:
    """Whole seconds from now until target, truncated toward zero."""
    return int((target - now).total_seconds())


def format_remaining(now: datetime.datetime, target: datetime.datetime) -> str:
    """
    Compact remaining-time label using the largest whole unit.

    Returns:
        "Now!" once the target is reached, otherwise "{n}s", "{n}m",
        "{n}h" or "{n}d"
    """
    seconds = seconds_remaining(now, target)
    if seconds <= 0:
        return NOW_LABEL
    if seconds < MINUTE:
        return f"{seconds}s"
    if seconds < HOUR:
        return f"{seconds // MINUTE}m"
    if seconds < DAY:
        return f"{seconds // HOUR}h"
    return f"{seconds // DAY}d"


def days_remaining(now: datetime.datetime, target: datetime.datetime) -> int:
    """Whole days until target, truncated toward zero (negative when past)."""
    return int((target - now).total_seconds() / DAY)


def card_label(now: datetime.datetime, target: datetime.datetime, mode: str = "compact") -> str:
    """Label shown on a card for the configured display mode."""
    if mode == "days":
        return f"{days_remaining(now, target)}d"
    return format_remaining(now, target)
