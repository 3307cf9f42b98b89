"""
Week Boundary Calculator

Weeks run Monday to Sunday (ISO 8601). Every week is identified by its
Monday, see date_keys.week_key.
"""
import calendar
from datetime import date, timedelta
from typing import Optional

from calendar_app.models import WeekInfo
from calendar_app.utils.date_keys import LAST_SUPPORTED_DAY, LAST_SUPPORTED_MONDAY, to_calendar_date


def month_abbr(month: int) -> str:
    """
    Return 3-letter month abbreviation for a given month number (1-12).

    Args:
        month: Month number (1-12)

    Returns:
        3-letter abbreviation, e.g. 'Jan', 'Feb', 'Dec'
    """
    return calendar.month_abbr[month]


def monday_of_week(value) -> date:
    """
    Monday on or before the given date.

    Sunday is the last day of its week, so it steps back six days
    rather than forward one.

    Example:
        >>> monday_of_week(date(2024, 2, 4))   # Sunday
        datetime.date(2024, 1, 29)
    """
    d = to_calendar_date(value)
    # Sunday-as-0 numbering, Monday=1 ... Saturday=6
    day = d.isoweekday() % 7
    if day == 0:
        return d - timedelta(days=6)
    return d - timedelta(days=day - 1)


def sunday_of_week(value) -> date:
    """
    Sunday closing the week that contains the given date.

    Raises:
        ValueError: If the week ends after LAST_SUPPORTED_DAY
    """
    monday = monday_of_week(value)
    if monday > LAST_SUPPORTED_MONDAY:
        raise ValueError(f"Week of {monday.isoformat()} ends after {LAST_SUPPORTED_DAY.isoformat()}")
    return monday + timedelta(days=6)


def is_monday(value) -> bool:
    return to_calendar_date(value).isoweekday() == 1


def format_week_label(monday, sunday) -> str:
    """
    Short display label for a week.

    Examples:
        "Mar 4-10" when both ends share a month
        "Jan 29 - Feb 4" when the week spans two months
    """
    start = to_calendar_date(monday)
    end = to_calendar_date(sunday)
    start_month = month_abbr(start.month)
    end_month = month_abbr(end.month)

    if start_month == end_month:
        return f"{start_month} {start.day}-{end.day}"
    return f"{start_month} {start.day} - {end_month} {end.day}"


def week_info_for_date(value, as_of: Optional[date] = None) -> WeekInfo:
    """
    WeekInfo of the week containing the given date.

    Args:
        value: Any date inside the week
        as_of: Reference "today" for is_complete (defaults to date.today())
    """
    as_of = to_calendar_date(as_of) if as_of is not None else date.today()
    return WeekInfo.from_monday(monday_of_week(value), as_of)
