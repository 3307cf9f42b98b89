"""
Week Range Enumerator

Lists every Monday-Sunday week overlapping an arbitrary date range,
used for multi-month listings.
"""
import logging
from datetime import date, timedelta
from typing import List, Optional

from core.config import WeekAttributionConfig
from calendar_app.models import WeekInfo
from calendar_app.utils.date_keys import LAST_SUPPORTED_DAY, LAST_SUPPORTED_MONDAY, to_calendar_date
from calendar_app.utils.log_decorators import log_query
from calendar_app.utils.week_bounds import monday_of_week

logger = logging.getLogger(__name__)


@log_query(operation_name='weeks_for_date_range')
def weeks_for_date_range(start, end, as_of: Optional[date] = None) -> List[WeekInfo]:
    """
    Weeks whose Monday-Sunday span intersects [start, end], ascending.

    Each WeekInfo.month_keys lists every month touched by the week; this is
    for display, attribution still goes to the Monday's month alone.

    Args:
        start: First day of the range (date or datetime)
        end: Last day of the range, inclusive
        as_of: Reference "today" for WeekInfo.is_complete (defaults to date.today())

    Returns:
        List of WeekInfo; empty when start is after end. Truncated (and an
        error logged) after MAX_RANGE_ITERATIONS weeks. Weeks ending after
        LAST_SUPPORTED_DAY are never listed.
    """
    start_day = to_calendar_date(start)
    end_day = to_calendar_date(end)
    as_of = to_calendar_date(as_of) if as_of is not None else date.today()

    if start_day > end_day:
        return []

    if end_day > LAST_SUPPORTED_DAY:
        logger.warning(
            f"[Week Range] Range end {end_day.isoformat()} is past the last complete week "
            f"({LAST_SUPPORTED_DAY.isoformat()}); later days are not listed"
        )

    max_iterations = WeekAttributionConfig.MAX_RANGE_ITERATIONS
    current_monday = monday_of_week(start_day)

    weeks = []
    iterations = 0
    while current_monday <= end_day and current_monday <= LAST_SUPPORTED_MONDAY:
        if iterations >= max_iterations:
            logger.error(
                f"[Week Range] Safety cap of {max_iterations} weeks reached for range "
                f"{start_day.isoformat()}..{end_day.isoformat()}; listing truncated"
            )
            break
        iterations += 1

        sunday = current_monday + timedelta(days=6)
        if sunday >= start_day and current_monday <= end_day:
            weeks.append(WeekInfo.from_monday(current_monday, as_of))
        current_monday += timedelta(days=7)

    return weeks
