"""
Unit tests for calendar_app.utils.week_membership.
"""
from datetime import date, datetime

import pytest

from calendar_app.exceptions import InvalidKeyFormat, WeekNotInMonth
from calendar_app.utils.date_keys import week_key
from calendar_app.utils.week_bounds import monday_of_week
from calendar_app.utils.week_membership import (
    days_in_month_for_week,
    is_date_in_week,
    month_for_week,
    require_week_in_month,
    validate_week_key,
    validate_week_month,
)


# ---------------------------------------------------------------------------
# month_for_week
# ---------------------------------------------------------------------------

class TestMonthForWeek:

    def test_week_spanning_two_months(self):
        assert month_for_week("2024-01-29") == "2024-01"

    def test_week_spanning_two_years(self):
        assert month_for_week("2024-12-30") == "2024-12"

    def test_invalid_key_raises(self):
        with pytest.raises(InvalidKeyFormat) as exc_info:
            month_for_week("2024-02-30")
        assert exc_info.value.raw_value == "2024-02-30"


# ---------------------------------------------------------------------------
# days_in_month_for_week
# ---------------------------------------------------------------------------

class TestDaysInMonthForWeek:

    def test_whole_week_to_monday_month(self):
        assert days_in_month_for_week("2024-01-29", "2024-01") == 7

    def test_nothing_to_following_month(self):
        # Feb 1-4 fall in February but the week belongs to January
        assert days_in_month_for_week("2024-01-29", "2024-02") == 0

    def test_unrelated_month(self):
        assert days_in_month_for_week("2024-01-29", "2023-01") == 0

    def test_span_preserving_over_three_years(self, all_days):
        for day in all_days:
            key = week_key(monday_of_week(day))
            owner = month_for_week(key)
            assert days_in_month_for_week(key, owner) == 7
            other = "2022-06" if owner != "2022-06" else "2022-07"
            assert days_in_month_for_week(key, other) == 0


# ---------------------------------------------------------------------------
# is_date_in_week
# ---------------------------------------------------------------------------

class TestIsDateInWeek:

    def test_monday(self):
        assert is_date_in_week(date(2024, 1, 29), "2024-01-29") is True

    def test_sunday_in_next_month(self):
        assert is_date_in_week(date(2024, 2, 4), "2024-01-29") is True

    def test_sunday_late_evening(self):
        assert is_date_in_week(datetime(2024, 2, 4, 23, 59, 59), "2024-01-29") is True

    def test_next_monday(self):
        assert is_date_in_week(date(2024, 2, 5), "2024-01-29") is False

    def test_previous_sunday(self):
        assert is_date_in_week(date(2024, 1, 28), "2024-01-29") is False

    def test_bounds_follow_week_of_key(self):
        # Non-Monday key: bounds are those of the week containing it
        assert is_date_in_week(date(2024, 1, 29), "2024-01-31") is True

    def test_invalid_key_raises(self):
        with pytest.raises(InvalidKeyFormat):
            is_date_in_week(date(2024, 1, 29), "29/01/2024")


# ---------------------------------------------------------------------------
# Validators (never raise)
# ---------------------------------------------------------------------------

class TestValidateWeekKey:

    def test_monday_is_valid(self):
        assert validate_week_key("2024-01-29") is True

    def test_tuesday_is_invalid(self):
        assert validate_week_key("2024-01-30") is False

    def test_sunday_is_invalid(self):
        assert validate_week_key("2024-02-04") is False

    @pytest.mark.parametrize("raw", ["2024-02-30", "2024-01", "", "garbage", None, 20240129])
    def test_malformed_is_invalid(self, raw):
        assert validate_week_key(raw) is False


class TestValidateWeekMonth:

    def test_matching_month(self):
        assert validate_week_month("2024-01-29", "2024-01") is True

    def test_following_month(self):
        assert validate_week_month("2024-01-29", "2024-02") is False

    def test_malformed_week_key(self):
        assert validate_week_month("2024-01-32", "2024-01") is False

    def test_malformed_month_key(self):
        assert validate_week_month("2024-01-29", "2024-1") is False


# ---------------------------------------------------------------------------
# require_week_in_month (raising counterpart)
# ---------------------------------------------------------------------------

class TestRequireWeekInMonth:

    def test_accepts_attributed_week(self):
        require_week_in_month("2024-01-29", "2024-01")

    def test_rejects_other_month(self):
        with pytest.raises(WeekNotInMonth) as exc_info:
            require_week_in_month("2024-01-29", "2024-02")
        assert exc_info.value.attributed_month == "2024-01"
        assert exc_info.value.to_dict()["error_code"] == "WEEK_NOT_IN_MONTH"

    def test_rejects_non_monday(self):
        with pytest.raises(InvalidKeyFormat) as exc_info:
            require_week_in_month("2024-01-30", "2024-01")
        assert "not a Monday" in exc_info.value.message

    def test_rejects_malformed_month(self):
        with pytest.raises(InvalidKeyFormat) as exc_info:
            require_week_in_month("2024-01-29", "2024-001")
        assert exc_info.value.key_kind == "month"


class TestEndOfCalendar:

    def test_last_week_key_is_invalid(self):
        assert validate_week_key("9999-12-27") is False

    def test_last_complete_week_is_valid(self):
        assert validate_week_key("9999-12-20") is True

    def test_is_date_in_last_week_rejects_key(self):
        with pytest.raises(InvalidKeyFormat):
            is_date_in_week(date(9999, 12, 28), "9999-12-27")

    def test_december_9999_is_not_a_valid_month(self):
        assert validate_week_month("9999-12-20", "9999-12") is False
