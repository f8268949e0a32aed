"""Calendar-day helpers shared by assignments and the weekly planner."""
from datetime import date, datetime, timedelta
from typing import Union

DayLike = Union[date, datetime]


def normalize_to_day(value: DayLike) -> date:
    """Truncate a timestamp to its calendar day in the local timezone.

    Naive datetimes are read as local wall-clock time; aware datetimes are
    converted to the local timezone first. A plain ``date`` is returned as is,
    so normalizing twice is a no-op.
    """
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone()
        return value.date()
    if isinstance(value, date):
        return value
    raise TypeError(f"Expected date or datetime, got {type(value).__name__}")


def add_days(value: DayLike, days: int) -> date:
    return normalize_to_day(value) + timedelta(days=days)


def day_name(value: DayLike) -> str:
    """English weekday name, e.g. 'Monday'."""
    return normalize_to_day(value).strftime("%A")
