"""
Period Selection Service Layer

Month and week choices offered by the charges and statistics date
selectors. Builds on the attribution engine; the caller passes the
reference date so that one selector render sees one "today".
"""

import logging
from datetime import date
from typing import Iterable, List, Optional

from core.config import WeekAttributionConfig
from calendar_app.exceptions import InvalidKeyFormat
from calendar_app.models import WeekInfo
from calendar_app.utils.date_keys import (
    MONTH_KEY_PATTERN,
    month_key,
    parse_month_key,
    parse_week_key,
    to_calendar_date,
)
from calendar_app.utils.month_weeks import weeks_overlapping_month
from calendar_app.utils.week_bounds import format_week_label, sunday_of_week

logger = logging.getLogger(__name__)


class PeriodService:
    """
    Service class for period selector logic.

    Stateless; every method is a pure function of its arguments.
    """

    @staticmethod
    def shift_month_key(key: str, delta: int) -> str:
        """
        Move a month key forwards or backwards.

        Example:
            >>> PeriodService.shift_month_key('2024-01', -1)
            '2023-12'

        Raises:
            InvalidKeyFormat: If key is not a valid month key, or the
                shifted month is outside the supported calendar
        """
        year, month = parse_month_key(key)
        index = year * 12 + (month - 1) + delta
        shifted = f"{index // 12:04d}-{index % 12 + 1:02d}"
        try:
            parse_month_key(shifted)
        except InvalidKeyFormat:
            raise InvalidKeyFormat(
                key,
                key_kind="month",
                message=f"Shifting month key {key!r} by {delta} leaves the supported calendar"
            )
        return shifted

    @staticmethod
    def recent_month_keys(count: Optional[int] = None, as_of: Optional[date] = None) -> List[str]:
        """
        Month keys offered by the month selector, current month first.

        Args:
            count: Number of months (defaults to WeekAttributionConfig.RECENT_MONTHS_COUNT)
            as_of: Reference "today" (defaults to date.today())

        Returns:
            e.g. ['2024-03', '2024-02', '2024-01', ...]
        """
        if count is None:
            count = WeekAttributionConfig.RECENT_MONTHS_COUNT
        if count < 0:
            raise ValueError(f"count must not be negative, got {count}")

        as_of = to_calendar_date(as_of) if as_of is not None else date.today()
        current = month_key(as_of)
        return [PeriodService.shift_month_key(current, -offset) for offset in range(count)]

    @staticmethod
    def started_weeks(weeks: Iterable[WeekInfo], as_of) -> List[WeekInfo]:
        """Keep the weeks whose Monday is on or before as_of (including the current week)."""
        as_of = to_calendar_date(as_of)
        return [w for w in weeks if w.start_date <= as_of]

    @staticmethod
    def selectable_weeks(key: str, as_of: Optional[date] = None) -> List[WeekInfo]:
        """
        Weeks shown in a month's week carousel: overlapping weeks that have started.

        Display only; the list may contain the week owned by the previous month.
        """
        as_of = to_calendar_date(as_of) if as_of is not None else date.today()
        weeks = weeks_overlapping_month(key, as_of=as_of)
        return PeriodService.started_weeks(weeks, as_of)

    @staticmethod
    def default_week_key(key: str, as_of: Optional[date] = None) -> Optional[str]:
        """First selectable week of a month, or None when no week has started yet."""
        weeks = PeriodService.selectable_weeks(key, as_of=as_of)
        if not weeks:
            logger.debug(f"[Period Selector] No started week in {key}")
            return None
        return weeks[0].week_key

    @staticmethod
    def format_week_key_for_display(week_key: str) -> str:
        """
        Display label for a stored week key.

        Falls back to the raw key when it cannot be parsed, so a corrupt
        record still renders.

        Example:
            >>> PeriodService.format_week_key_for_display('2024-01-29')
            'Jan 29 - Feb 4'
        """
        try:
            anchor = parse_week_key(week_key)
        except InvalidKeyFormat:
            logger.debug(f"[Period Selector] Unparseable week key {week_key!r}, showing raw value")
            return str(week_key)
        return format_week_label(anchor, sunday_of_week(anchor))

    @staticmethod
    def month_for_selection(selected_key: str) -> str:
        """
        Month key for a selector value that is either a month key or a week key.

        Keeps a month header in sync with a week chosen elsewhere.

        Raises:
            InvalidKeyFormat: If the value is neither
        """
        if isinstance(selected_key, str) and MONTH_KEY_PATTERN.fullmatch(selected_key):
            parse_month_key(selected_key)
            return selected_key
        return month_key(parse_week_key(selected_key))
