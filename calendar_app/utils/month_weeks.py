"""
Month-Week Attribution Resolver

Lists the weeks of a calendar month in two different ways:

- weeks_belonging_to_month: weeks whose Monday falls inside the month.
  Every week belongs to exactly one month, so this is the listing to use
  for payroll and any other monthly rollup.
- weeks_overlapping_month: weeks with at least one day inside the month.
  Display only (week pickers, carousels). When the 1st is not a Monday it
  also returns the week that started in the previous month, which that
  previous month already owns.

Mixing the two up double-counts or drops the boundary week, so the two
listings are separate types (AttributedWeeks, OverlappingWeeks).
"""
import logging
from datetime import date, timedelta
from typing import Optional

from core.config import WeekAttributionConfig
from calendar_app.exceptions import WeekNotInMonth
from calendar_app.models import AttributedWeeks, OverlappingWeeks, WeekInfo
from calendar_app.utils.date_keys import LAST_SUPPORTED_MONDAY, month_bounds, month_key, to_calendar_date
from calendar_app.utils.log_decorators import log_query
from calendar_app.utils.week_bounds import monday_of_week

logger = logging.getLogger(__name__)

ONE_WEEK = timedelta(days=7)


def _resolve_as_of(as_of: Optional[date]) -> date:
    # Read the clock once per query
    return to_calendar_date(as_of) if as_of is not None else date.today()


@log_query(operation_name='weeks_belonging_to_month')
def weeks_belonging_to_month(key: str, as_of: Optional[date] = None) -> AttributedWeeks:
    """
    Weeks attributed to a month (Monday inside the month), ascending.

    A week starting Jan 29 and ending Feb 4 is returned for "2024-01" only,
    never for "2024-02".

    Args:
        key: Month key in YYYY-MM format
        as_of: Reference "today" for WeekInfo.is_complete (defaults to date.today())

    Returns:
        AttributedWeeks listing (4 or 5 weeks)

    Raises:
        InvalidKeyFormat: If key is not a valid month key
    """
    first_day, last_day = month_bounds(key)
    as_of = _resolve_as_of(as_of)

    current_monday = monday_of_week(first_day)
    # Week containing the 1st started last month, so it belongs there
    if current_monday < first_day:
        current_monday += ONE_WEEK

    weeks = []
    iterations = 0
    while current_monday <= last_day and current_monday <= LAST_SUPPORTED_MONDAY:
        if iterations >= WeekAttributionConfig.MAX_MONTH_WEEK_ITERATIONS:
            logger.error(
                f"[Week Attribution] Safety cap of {WeekAttributionConfig.MAX_MONTH_WEEK_ITERATIONS} "
                f"iterations reached for month {key}; listing truncated"
            )
            break
        iterations += 1

        if month_key(current_monday) == key:
            weeks.append(WeekInfo.from_monday(current_monday, as_of))
        current_monday += ONE_WEEK

    return AttributedWeeks(month_key=key, weeks=tuple(weeks))


@log_query(operation_name='weeks_overlapping_month')
def weeks_overlapping_month(key: str, as_of: Optional[date] = None) -> OverlappingWeeks:
    """
    Weeks with at least one day inside a month, ascending.

    Includes the week that starts in the previous month and bleeds into
    this one. Use for week selection only; rollups must use
    weeks_belonging_to_month.

    Args:
        key: Month key in YYYY-MM format
        as_of: Reference "today" for WeekInfo.is_complete (defaults to date.today())

    Returns:
        OverlappingWeeks listing (4 to 6 weeks)

    Raises:
        InvalidKeyFormat: If key is not a valid month key
    """
    first_day, last_day = month_bounds(key)
    as_of = _resolve_as_of(as_of)

    # Monday on or before the 1st: the leading week when the month starts mid-week
    current_monday = monday_of_week(first_day)

    weeks = []
    iterations = 0
    while current_monday <= last_day and current_monday <= LAST_SUPPORTED_MONDAY:
        if iterations >= WeekAttributionConfig.MAX_MONTH_WEEK_ITERATIONS:
            logger.error(
                f"[Week Attribution] Safety cap of {WeekAttributionConfig.MAX_MONTH_WEEK_ITERATIONS} "
                f"iterations reached for month {key} (overlap); listing truncated"
            )
            break
        iterations += 1

        sunday = current_monday + timedelta(days=6)
        if sunday >= first_day:
            weeks.append(WeekInfo.from_monday(current_monday, as_of))
        current_monday += ONE_WEEK

    return OverlappingWeeks(month_key=key, weeks=tuple(weeks))


def week_number_in_month(week_key: str, key: str, strict: Optional[bool] = None) -> int:
    """
    1-based position of a week among the weeks attributed to a month.

    Args:
        week_key: Week key (Monday date in YYYY-MM-DD format)
        key: Month key in YYYY-MM format
        strict: Raise instead of falling back when the week is not in the
            month (defaults to WeekAttributionConfig.STRICT_WEEK_NUMBER)

    Returns:
        Position starting at 1. Falls back to 1 when the week does not
        belong to the month and strict mode is off.

    Raises:
        InvalidKeyFormat: If key is not a valid month key
        WeekNotInMonth: In strict mode, if the week is not attributed to the month
    """
    if strict is None:
        strict = WeekAttributionConfig.STRICT_WEEK_NUMBER

    # as_of only affects is_complete, which is not used here
    weeks = weeks_belonging_to_month(key, as_of=date.min)
    index = weeks.index_of(week_key)
    if index >= 0:
        return index + 1

    if strict:
        raise WeekNotInMonth(week_key=week_key, month_key=key)

    logger.warning(
        f"[Week Attribution] Week {week_key!r} is not attributed to {key}; "
        f"defaulting week number to 1"
    )
    return 1
