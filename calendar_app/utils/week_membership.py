"""
Week Membership & Validation

Point queries on week keys. A week belongs to the month where its Monday
falls, regardless of how many days extend into the next month.

The validate_* predicates never raise: they turn parse failures into
False so callers can use them as guards before the parsing functions.
"""
import logging

from calendar_app.exceptions import InvalidKeyFormat, WeekNotInMonth
from calendar_app.utils.date_keys import month_key, parse_month_key, parse_week_key, to_calendar_date
from calendar_app.utils.week_bounds import is_monday, monday_of_week, sunday_of_week

logger = logging.getLogger(__name__)

DAYS_PER_WEEK = 7


def month_for_week(week_key: str) -> str:
    """
    Month key the week is attributed to (the month of its Monday).

    Example:
        >>> month_for_week('2024-01-29')
        '2024-01'

    Raises:
        InvalidKeyFormat: If week_key cannot be parsed
    """
    return month_key(parse_week_key(week_key))


def days_in_month_for_week(week_key: str, key: str) -> int:
    """
    Days of the week counted towards a month: 7 if the week is attributed
    to it, 0 otherwise. Never a partial count.

    Raises:
        InvalidKeyFormat: If week_key cannot be parsed
    """
    if month_for_week(week_key) == key:
        return DAYS_PER_WEEK
    return 0


def is_date_in_week(value, week_key: str) -> bool:
    """
    Check if a date falls within a week (Monday to Sunday inclusive).

    Raises:
        InvalidKeyFormat: If week_key cannot be parsed
    """
    anchor = parse_week_key(week_key)
    day = to_calendar_date(value)
    return monday_of_week(anchor) <= day <= sunday_of_week(anchor)


def validate_week_key(week_key: str) -> bool:
    """
    True if the key parses and is a Monday.

    Example:
        >>> validate_week_key('2024-01-29')
        True
        >>> validate_week_key('2024-01-30')   # Tuesday
        False
    """
    try:
        return is_monday(parse_week_key(week_key))
    except InvalidKeyFormat:
        return False


def validate_week_month(week_key: str, key: str) -> bool:
    """True if the week is attributed to the month. False on any parse failure."""
    try:
        parse_month_key(key)
        return month_for_week(week_key) == key
    except InvalidKeyFormat:
        return False


def require_week_in_month(week_key: str, key: str) -> None:
    """
    Raising counterpart of validate_week_key + validate_week_month.

    Raises:
        InvalidKeyFormat: If either key is malformed or week_key is not a Monday
        WeekNotInMonth: If the week is attributed to another month
    """
    parse_month_key(key)
    monday = parse_week_key(week_key)
    if not is_monday(monday):
        raise InvalidKeyFormat(
            week_key,
            key_kind="week",
            message=f"Week key {week_key!r} is not a Monday"
        )

    attributed = month_key(monday)
    if attributed != key:
        logger.info(f"[Week Membership] Rejected week {week_key}: belongs to {attributed}, not {key}")
        raise WeekNotInMonth(week_key=week_key, month_key=key, attributed_month=attributed)
