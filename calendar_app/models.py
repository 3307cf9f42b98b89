"""
Pydantic Models for the Week Attribution Engine
Value objects describing a Monday-Sunday week and the two month listings
(strict attribution vs display overlap).
"""
from dataclasses import dataclass
from datetime import date
from typing import Iterator, List, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator


class WeekInfo(BaseModel):
    """
    Derived description of one Monday-Sunday week.

    Every field is a pure function of the anchoring Monday (and of the
    reference date for is_complete), so instances are rebuilt on demand
    instead of being stored.
    """
    model_config = ConfigDict(frozen=True)

    week_key: str = Field(description="Monday date in YYYY-MM-DD format")
    start_date: date = Field(description="Monday of the week")
    end_date: date = Field(description="Sunday of the week")
    label: str = Field(description="Display label like 'Jan 29 - Feb 4'")
    month_keys: Tuple[str, ...] = Field(description="Months touched by the 7 days, sorted")
    is_complete: bool = Field(default=False, description="Week has fully elapsed")

    @field_validator('start_date')
    @classmethod
    def validate_start_is_monday(cls, v):
        """Week must be anchored on a Monday"""
        if v.isoweekday() != 1:
            raise ValueError(f"Week start {v.isoformat()} is not a Monday")
        return v

    @classmethod
    def from_monday(cls, monday: date, as_of: date) -> "WeekInfo":
        """
        Build the WeekInfo of the week starting on `monday`.

        Args:
            monday: Monday of the week
            as_of: Reference "today" used for is_complete

        Returns:
            WeekInfo instance

        Raises:
            ValueError: If the week ends after the last representable Sunday
        """
        # Local imports: the utils modules import this one for their return types
        from calendar_app.utils.date_keys import month_keys_between, week_key
        from calendar_app.utils.week_bounds import format_week_label, sunday_of_week

        sunday = sunday_of_week(monday)
        return cls(
            week_key=week_key(monday),
            start_date=monday,
            end_date=sunday,
            label=format_week_label(monday, sunday),
            month_keys=tuple(month_keys_between(monday, sunday)),
            is_complete=sunday < as_of,
        )

    @property
    def attributed_month_key(self) -> str:
        """Month the whole week is attributed to (the month of its Monday)."""
        return self.week_key[:7]

    @property
    def spans_months(self) -> bool:
        return len(self.month_keys) > 1

    def contains(self, day: date) -> bool:
        return self.start_date <= day <= self.end_date


@dataclass(frozen=True)
class _MonthWeekListing:
    """Ordered, read-only list of weeks computed for one month."""
    month_key: str
    weeks: Tuple[WeekInfo, ...]

    def __iter__(self) -> Iterator[WeekInfo]:
        return iter(self.weeks)

    def __len__(self) -> int:
        return len(self.weeks)

    def __getitem__(self, index):
        return self.weeks[index]

    def __bool__(self) -> bool:
        return bool(self.weeks)

    def week_keys(self) -> List[str]:
        return [w.week_key for w in self.weeks]

    def index_of(self, week_key: str) -> int:
        """
        Zero-based position of a week key in the listing.

        Returns:
            Index, or -1 when the week is not listed
        """
        for idx, week in enumerate(self.weeks):
            if week.week_key == week_key:
                return idx
        return -1


@dataclass(frozen=True)
class AttributedWeeks(_MonthWeekListing):
    """
    Weeks whose Monday falls inside month_key.

    The only listing suitable for monthly rollups: every week appears in
    exactly one month's AttributedWeeks.
    """


@dataclass(frozen=True)
class OverlappingWeeks(_MonthWeekListing):
    """
    Weeks with at least one day inside month_key.

    Display-only (week pickers, carousels). Includes the week that starts
    in the previous month when the 1st is not a Monday, so summing over
    consecutive months double-counts that week.
    """
