"""
Date Key Codec

Converts between calendar dates and the two string identifiers used as
map keys and persisted identifiers across the charges, stock and
statistics domains:

- month key: "YYYY-MM"
- week key:  "YYYY-MM-DD" (the Monday of the week)
"""
import calendar
import re
from datetime import date, datetime, timedelta
from typing import List, Tuple

from calendar_app.exceptions import InvalidKeyFormat


MONTH_KEY_PATTERN = re.compile(r'^[0-9]{4}-[0-9]{2}$')
WEEK_KEY_PATTERN = re.compile(r'^[0-9]{4}-[0-9]{2}-[0-9]{2}$')

# Last Sunday representable by datetime.date; later weeks cannot be closed
LAST_SUPPORTED_DAY = date.max - timedelta(days=date.max.isoweekday() % 7)
LAST_SUPPORTED_MONDAY = LAST_SUPPORTED_DAY - timedelta(days=6)


def to_calendar_date(value) -> date:
    """
    Normalize a date-like value to a naive calendar date.

    datetime values lose their time of day so that week arithmetic never
    drifts across midnight.

    Args:
        value: date or datetime

    Returns:
        date instance

    Raises:
        TypeError: If value is not a date or datetime
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    raise TypeError(f"Expected date or datetime, got {type(value).__name__}")


def month_key(value) -> str:
    """
    Format the month of a date as "YYYY-MM".

    Example:
        >>> month_key(date(2024, 1, 29))
        '2024-01'
    """
    d = to_calendar_date(value)
    return f"{d.year:04d}-{d.month:02d}"


def parse_month_key(key: str) -> Tuple[int, int]:
    """
    Parse a month key into (year, month).

    Args:
        key: Month key in YYYY-MM format

    Returns:
        (year, month) tuple

    Raises:
        InvalidKeyFormat: If the format is wrong, month is outside 1-12, or
            the month's last week ends after LAST_SUPPORTED_DAY
    """
    if not isinstance(key, str) or not MONTH_KEY_PATTERN.fullmatch(key):
        raise InvalidKeyFormat(key, key_kind="month")

    year, month = (int(part) for part in key.split('-'))
    if not (1 <= month <= 12) or year < 1:
        raise InvalidKeyFormat(key, key_kind="month")

    if date(year, month, calendar.monthrange(year, month)[1]) > LAST_SUPPORTED_DAY:
        raise InvalidKeyFormat(
            key,
            key_kind="month",
            message=f"Month key {key!r} has weeks ending after {LAST_SUPPORTED_DAY.isoformat()}"
        )

    return year, month


def week_key(monday) -> str:
    """
    Format a Monday as a week key "YYYY-MM-DD".

    The date is not checked for being a Monday; use monday_of_week first.
    """
    d = to_calendar_date(monday)
    return f"{d.year:04d}-{d.month:02d}-{d.day:02d}"


def parse_week_key(key: str) -> date:
    """
    Parse a week key back to its date.

    Args:
        key: Week key in YYYY-MM-DD format

    Returns:
        date of the key (a Monday for every valid week key)

    Raises:
        InvalidKeyFormat: If the format is wrong, the date does not exist, or
            its week ends after LAST_SUPPORTED_DAY
    """
    if not isinstance(key, str) or not WEEK_KEY_PATTERN.fullmatch(key):
        raise InvalidKeyFormat(key, key_kind="week")

    year, month, day = (int(part) for part in key.split('-'))
    try:
        parsed = date(year, month, day)
    except ValueError:
        raise InvalidKeyFormat(
            key,
            key_kind="week",
            message=f"Invalid week key date: {key!r}"
        )

    if parsed > LAST_SUPPORTED_DAY:
        raise InvalidKeyFormat(
            key,
            key_kind="week",
            message=f"Week key {key!r} ends after {LAST_SUPPORTED_DAY.isoformat()}"
        )
    return parsed


def month_bounds(key: str) -> Tuple[date, date]:
    """
    First and last day of a month.

    Example:
        >>> month_bounds('2024-02')
        (datetime.date(2024, 2, 1), datetime.date(2024, 2, 29))
    """
    year, month = parse_month_key(key)
    return date(year, month, 1), date(year, month, calendar.monthrange(year, month)[1])


def month_keys_between(start, end) -> List[str]:
    """
    Sorted distinct month keys touched by the inclusive span [start, end].

    Returns an empty list when start is after end.
    """
    current = to_calendar_date(start)
    last = to_calendar_date(end)

    keys = []
    while current <= last:
        key = month_key(current)
        if not keys or keys[-1] != key:
            keys.append(key)
        if current.year == date.max.year and current.month == 12:
            break
        # Jump to the first day of the next month
        days_in_month = calendar.monthrange(current.year, current.month)[1]
        current = current.replace(day=1) + timedelta(days=days_in_month)
    return keys
