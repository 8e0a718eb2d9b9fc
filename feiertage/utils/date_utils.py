"""
Date utility functions for feiertage.

Provides calendar-day arithmetic and the normalization used to compare
dates regardless of time of day or timezone offset.

All helpers return new values; ``date`` and ``datetime`` are immutable, so
nothing here can change a date another caller still holds.
"""

from datetime import date, datetime, timedelta, timezone
from typing import Union

DateLike = Union[date, datetime]

SUNDAY = 6  # date.weekday(): Monday=0, Sunday=6


def make_date(year: int, natural_month: int, day: int) -> date:
    """
    Create a calendar date from a natural (1-12) month.

    Examples:
        >>> make_date(2025, 12, 25)
        datetime.date(2025, 12, 25)
    """
    return date(year, natural_month, day)


def add_days(value: date, days: int) -> date:
    """
    Return the date ``days`` calendar days after ``value``.

    ``days`` may be negative. Works on calendar fields, so month and year
    boundaries roll over and daylight-saving changes have no effect.

    Examples:
        >>> add_days(date(2024, 2, 28), 1)
        datetime.date(2024, 2, 29)
        >>> add_days(date(2025, 1, 1), -1)
        datetime.date(2024, 12, 31)
    """
    return to_calendar_date(value) + timedelta(days=days)


def to_canonical_date_token(value: DateLike) -> str:
    """
    Return the ``YYYY-MM-DD`` token of the calendar day ``value`` falls on.

    Datetimes are normalized in two steps: the instant is shifted by its
    UTC offset (giving the wall-clock time) and then truncated to a
    UTC-midnight day. Naive datetimes are wall-clock values already, so the
    shift is zero. Plain dates are formatted as they are.

    Examples:
        >>> to_canonical_date_token(datetime(2020, 12, 25, 23, 59))
        '2020-12-25'
        >>> to_canonical_date_token(date(2020, 12, 25))
        '2020-12-25'
    """
    if isinstance(value, datetime):
        offset = value.utcoffset() or timedelta(0)
        instant = value.replace(tzinfo=None) - offset
        shifted = (instant + offset).replace(tzinfo=timezone.utc)
        midnight = shifted.replace(hour=0, minute=0, second=0, microsecond=0)
        return midnight.date().isoformat()

    if isinstance(value, date):
        return value.isoformat()

    raise TypeError(f"Expected date or datetime, got {type(value).__name__}")


def to_calendar_date(value: DateLike) -> date:
    """
    Return the calendar date ``value`` falls on, dropping any time of day.

    The result is the date whose ISO form is the canonical token.
    """
    if isinstance(value, datetime):
        return date.fromisoformat(to_canonical_date_token(value))
    if isinstance(value, date):
        return value
    raise TypeError(f"Expected date or datetime, got {type(value).__name__}")


def to_normalized_day_key(value: DateLike) -> int:
    """
    Return an integer key for the calendar day ``value`` falls on.

    Two values share a key exactly when they fall on the same calendar day.
    Keys sort in date order.

    Examples:
        >>> to_normalized_day_key(datetime(2020, 12, 25, 8)) == to_normalized_day_key(date(2020, 12, 25))
        True
    """
    return to_calendar_date(value).toordinal()


def is_sunday(value: DateLike) -> bool:
    """Check if the calendar day of ``value`` is a Sunday."""
    return to_calendar_date(value).weekday() == SUNDAY


def get_weekday_name(value: DateLike) -> str:
    """
    Get the English name of the weekday for a given date.

    Examples:
        >>> get_weekday_name(date(2025, 1, 6))
        'Monday'
    """
    weekdays = ["Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday"]
    return weekdays[to_calendar_date(value).weekday()]


def parse_date(date_str: str) -> date | None:
    """
    Parse a date string in common formats.

    Supports formats:
    - YYYY-MM-DD
    - DD.MM.YYYY
    - DD/MM/YYYY

    Args:
        date_str: Date string to parse

    Returns:
        Parsed date object or None if parsing fails

    Examples:
        >>> parse_date("2025-08-15")
        datetime.date(2025, 8, 15)
        >>> parse_date("15.08.2025")
        datetime.date(2025, 8, 15)
        >>> parse_date("invalid") is None
        True
    """
    if not date_str or not isinstance(date_str, str):
        return None

    date_str = date_str.strip()

    formats = [
        "%Y-%m-%d",  # 2025-08-15
        "%d.%m.%Y",  # 15.08.2025
        "%d/%m/%Y",  # 15/08/2025
    ]

    for fmt in formats:
        try:
            return datetime.strptime(date_str, fmt).date()
        except ValueError:
            continue

    return None
