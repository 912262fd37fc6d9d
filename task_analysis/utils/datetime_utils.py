"""Date and time utilities."""

from datetime import datetime, timedelta
from typing import Sequence


def to_minutes(span: timedelta) -> int:
    """Whole minutes in a duration, truncated toward zero."""
    return int(span / timedelta(minutes=1))


def minutes_between(begin: datetime, end: datetime) -> int:
    """Whole minutes from begin to end (negative when end precedes begin)."""
    return to_minutes(end - begin)


def is_working_day(date: datetime, working_days: Sequence[int]) -> bool:
    """Check if a date is a working day."""
    return date.weekday() in working_days
