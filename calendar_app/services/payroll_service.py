"""
Payroll Attribution Service Layer

Personnel salaries are entered per week (keyed by week key) but reported
per month. A week's salary counts entirely towards the month containing
its Monday, even when the week ends in the following month.

Formulas:
- Weekly share = round(monthly_salary / attributed_weeks, SALARY_DECIMAL_PLACES)
- First week absorbs the rounding remainder so the shares add up to the monthly salary
"""

import logging
import math
from collections import defaultdict
from typing import Dict, Mapping

from core.config import WeekAttributionConfig
from calendar_app.models import AttributedWeeks
from calendar_app.utils.date_keys import parse_month_key
from calendar_app.utils.week_membership import month_for_week, require_week_in_month, validate_week_key

logger = logging.getLogger(__name__)


class PayrollService:
    """
    Service class for weekly salary attribution.

    Week salary maps are plain {week_key: amount} dicts as persisted by the
    charges domain; methods never mutate their input.
    """

    @staticmethod
    def distribute_monthly_salary(amount: float, weeks: AttributedWeeks) -> Dict[str, float]:
        """
        Spread a monthly salary evenly across the weeks attributed to the month.

        Args:
            amount: Monthly salary
            weeks: Result of weeks_belonging_to_month for the month

        Returns:
            {week_key: weekly_share}, summing to amount

        Raises:
            TypeError: If weeks is not an AttributedWeeks listing (e.g. an
                OverlappingWeeks display listing)
            ValueError: If amount is negative, NaN or infinite, or the month has no weeks

        Example:
            >>> PayrollService.distribute_monthly_salary(1000, weeks_belonging_to_month('2024-01'))
            {'2024-01-01': 200.0, '2024-01-08': 200.0, ...}
        """
        if not isinstance(weeks, AttributedWeeks):
            raise TypeError(
                f"Salary distribution needs AttributedWeeks, got {type(weeks).__name__}; "
                f"use weeks_belonging_to_month"
            )
        PayrollService._check_amount(amount)
        if not weeks:
            raise ValueError(f"No weeks found for month {weeks.month_key}")

        places = WeekAttributionConfig.SALARY_DECIMAL_PLACES
        share = round(amount / len(weeks), places)

        week_salaries = {week.week_key: share for week in weeks}

        # Adjust first week to account for rounding differences
        difference = round(amount - share * len(weeks), places)
        if difference:
            first_key = weeks[0].week_key
            week_salaries[first_key] = round(week_salaries[first_key] + difference, places)

        logger.debug(
            f"[Payroll] Distributed {amount} over {len(weeks)} weeks of {weeks.month_key} "
            f"(share={share}, adjustment={difference})"
        )
        return week_salaries

    @staticmethod
    def set_week_salary(
        week_salaries: Mapping[str, float],
        week_key: str,
        key: str,
        amount: float
    ) -> Dict[str, float]:
        """
        Record the salary of one week within a month.

        Entries attributed to other months are dropped so a month's map
        never mixes data from different months.

        Args:
            week_salaries: Existing {week_key: amount} map
            week_key: Week being edited (must be a Monday)
            key: Month being edited
            amount: Salary for the week

        Returns:
            New {week_key: amount} map

        Raises:
            InvalidKeyFormat: If week_key is malformed or not a Monday, or key is malformed
            WeekNotInMonth: If the week belongs to another month
            ValueError: If amount is negative, NaN or infinite
        """
        require_week_in_month(week_key, key)
        PayrollService._check_amount(amount)

        updated = {
            existing_key: value
            for existing_key, value in week_salaries.items()
            if PayrollService._attributed_month(existing_key) == key
        }
        dropped = len(week_salaries) - len(updated)
        if dropped:
            logger.info(f"[Payroll] Dropped {dropped} week salaries not attributed to {key}")

        updated[week_key] = amount
        return updated

    @staticmethod
    def monthly_total(week_salaries: Mapping[str, float], key: str) -> float:
        """
        Total of the week salaries attributed to a month.

        Raises:
            InvalidKeyFormat: If key is malformed
        """
        parse_month_key(key)
        return sum(
            amount
            for week_key, amount in week_salaries.items()
            if PayrollService._attributed_month(week_key) == key
        )

    @staticmethod
    def rollup_by_month(week_salaries: Mapping[str, float]) -> Dict[str, float]:
        """
        Monthly totals of a week salary map, sorted by month key.

        Unparseable or non-Monday week keys are skipped with a warning.
        """
        totals = defaultdict(float)
        for week_key, amount in week_salaries.items():
            attributed = PayrollService._attributed_month(week_key)
            if attributed is None:
                continue
            totals[attributed] += amount
        return dict(sorted(totals.items()))

    @staticmethod
    def _attributed_month(week_key: str):
        # Same acceptance rule as set_week_salary: a parseable Monday
        if not validate_week_key(week_key):
            logger.warning(f"[Payroll] Ignoring salary entry with invalid week key: {week_key!r}")
            return None
        return month_for_week(week_key)

    @staticmethod
    def _check_amount(amount: float) -> None:
        if math.isnan(amount) or math.isinf(amount) or amount < 0:
            raise ValueError(f"Salary must be a finite, non-negative number, got {amount}")
