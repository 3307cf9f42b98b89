"""
Unit tests for calendar_app.utils.week_ranges.
"""
import logging
from datetime import date, datetime, timedelta

from calendar_app.utils.week_ranges import weeks_for_date_range


class TestMidWeekRange:
    # Wednesday Jan 31 to Wednesday Feb 14, 2024
    weeks = weeks_for_date_range(date(2024, 1, 31), date(2024, 2, 14), as_of=date(2024, 2, 10))

    def test_week_keys(self):
        assert [w.week_key for w in self.weeks] == ["2024-01-29", "2024-02-05", "2024-02-12"]

    def test_first_week_starts_before_range(self):
        assert self.weeks[0].start_date < date(2024, 1, 31)

    def test_month_keys_for_display(self):
        assert self.weeks[0].month_keys == ("2024-01", "2024-02")
        assert self.weeks[1].month_keys == ("2024-02",)

    def test_attribution_still_monday_month(self):
        assert self.weeks[0].attributed_month_key == "2024-01"

    def test_is_complete(self):
        assert [w.is_complete for w in self.weeks] == [True, False, False]


def test_single_day_range():
    weeks = weeks_for_date_range(date(2024, 2, 4), date(2024, 2, 4), as_of=date(2024, 2, 10))
    assert [w.week_key for w in weeks] == ["2024-01-29"]


def test_range_ending_on_monday_includes_that_week():
    weeks = weeks_for_date_range(date(2024, 2, 4), date(2024, 2, 5), as_of=date(2024, 2, 10))
    assert [w.week_key for w in weeks] == ["2024-01-29", "2024-02-05"]


def test_datetime_bounds():
    weeks = weeks_for_date_range(
        datetime(2024, 3, 4, 18, 0),
        datetime(2024, 3, 10, 23, 59),
        as_of=date(2024, 3, 1),
    )
    assert [w.label for w in weeks] == ["Mar 4-10"]


def test_reversed_range_is_empty():
    assert weeks_for_date_range(date(2024, 2, 14), date(2024, 1, 31), as_of=date(2024, 2, 10)) == []


def test_full_year_is_contiguous():
    weeks = weeks_for_date_range(date(2024, 1, 1), date(2024, 12, 31), as_of=date(2025, 1, 1))
    assert len(weeks) == 53
    assert weeks[0].week_key == "2024-01-01"
    assert weeks[-1].week_key == "2024-12-30"
    for previous, current in zip(weeks, weeks[1:]):
        assert current.start_date == previous.end_date + timedelta(days=1)


class TestSafetyCap:

    def test_two_year_range_is_truncated(self, caplog):
        with caplog.at_level(logging.ERROR, logger="calendar_app.utils.week_ranges"):
            weeks = weeks_for_date_range(date(2023, 1, 2), date(2024, 12, 31), as_of=date(2025, 1, 1))

        assert len(weeks) == 100
        assert weeks[-1].week_key == (date(2023, 1, 2) + timedelta(weeks=99)).isoformat()
        assert "Safety cap" in caplog.text

    def test_one_year_range_stays_below_cap(self, caplog):
        with caplog.at_level(logging.ERROR, logger="calendar_app.utils.week_ranges"):
            weeks = weeks_for_date_range(date(2023, 1, 1), date(2023, 12, 31), as_of=date(2025, 1, 1))
        assert len(weeks) < 60
        assert "Safety cap" not in caplog.text

    def test_configurable_cap(self, config_override):
        config_override(MAX_RANGE_ITERATIONS=3)
        weeks = weeks_for_date_range(date(2024, 1, 1), date(2024, 3, 31), as_of=date(2025, 1, 1))
        assert [w.week_key for w in weeks] == ["2024-01-01", "2024-01-08", "2024-01-15"]


class TestEndOfCalendar:

    def test_range_after_last_complete_week_is_empty(self, caplog):
        with caplog.at_level(logging.WARNING, logger="calendar_app.utils.week_ranges"):
            weeks = weeks_for_date_range(date(9999, 12, 28), date(9999, 12, 31), as_of=date(2024, 1, 1))

        assert weeks == []
        assert "past the last complete week" in caplog.text

    def test_range_to_date_max_stops_at_last_complete_week(self):
        weeks = weeks_for_date_range(date(9999, 12, 14), date.max, as_of=date(2024, 1, 1))
        assert [w.week_key for w in weeks] == ["9999-12-13", "9999-12-20"]
        assert weeks[-1].end_date == date(9999, 12, 26)
