"""
Core Configuration Module

Configuration for the calendar week-attribution engine.
Kept separate from the calendar_app package so limits can be tuned and
tested without touching the calculation code.
"""


class WeekAttributionConfig:
    """
    Week Attribution Engine Configuration

    Safety limits and defaults used by the week/month resolvers,
    the range enumerator and the payroll helpers.
    """

    # Safety Limits
    MAX_MONTH_WEEK_ITERATIONS: int = 7
    """
    Maximum number of Monday steps taken when listing the weeks of one month.
    Default: 7

    A month never has more than 6 overlapping weeks (5 attributed weeks),
    so reaching this limit means a calendar arithmetic defect.
    """

    MAX_RANGE_ITERATIONS: int = 100
    """
    Maximum number of Monday steps taken when listing the weeks of a date range.
    Default: 100 (roughly 23 months)

    Ranges longer than this are truncated and an error is logged.
    """

    # Period Selector Defaults
    RECENT_MONTHS_COUNT: int = 6
    """
    Number of months offered by the month selector.
    Default: 6 (current month and the 5 previous ones)
    Range: 1-24
    """

    # Payroll Configuration
    SALARY_DECIMAL_PLACES: int = 2
    """
    Rounding applied when a monthly salary is spread across weeks.
    Default: 2 (cents)
    """

    STRICT_WEEK_NUMBER: bool = False
    """
    When True, asking for the position of a week inside a month it does not
    belong to raises WeekNotInMonth instead of returning 1.
    Default: False
    """

    @classmethod
    def validate(cls) -> None:
        """
        Validate configuration values.
        Raises ValueError if any configuration is invalid.
        """
        if not isinstance(cls.MAX_MONTH_WEEK_ITERATIONS, int):
            raise ValueError(
                f"MAX_MONTH_WEEK_ITERATIONS must be an integer, got {type(cls.MAX_MONTH_WEEK_ITERATIONS)}"
            )

        if not (6 <= cls.MAX_MONTH_WEEK_ITERATIONS <= 10):
            raise ValueError(
                f"MAX_MONTH_WEEK_ITERATIONS must be between 6 and 10, got {cls.MAX_MONTH_WEEK_ITERATIONS}"
            )

        if not isinstance(cls.MAX_RANGE_ITERATIONS, int):
            raise ValueError(
                f"MAX_RANGE_ITERATIONS must be an integer, got {type(cls.MAX_RANGE_ITERATIONS)}"
            )

        if cls.MAX_RANGE_ITERATIONS < 1:
            raise ValueError(
                f"MAX_RANGE_ITERATIONS must be positive, got {cls.MAX_RANGE_ITERATIONS}"
            )

        if not isinstance(cls.RECENT_MONTHS_COUNT, int):
            raise ValueError(
                f"RECENT_MONTHS_COUNT must be an integer, got {type(cls.RECENT_MONTHS_COUNT)}"
            )

        if not (1 <= cls.RECENT_MONTHS_COUNT <= 24):
            raise ValueError(
                f"RECENT_MONTHS_COUNT must be between 1 and 24, got {cls.RECENT_MONTHS_COUNT}"
            )

        if not (0 <= cls.SALARY_DECIMAL_PLACES <= 4):
            raise ValueError(
                f"SALARY_DECIMAL_PLACES must be between 0 and 4, got {cls.SALARY_DECIMAL_PLACES}"
            )

    @classmethod
    def get_config_dict(cls) -> dict:
        """
        Get all configuration as a dictionary.

        Returns:
            Dictionary of all configuration values
        """
        return {
            'max_month_week_iterations': cls.MAX_MONTH_WEEK_ITERATIONS,
            'max_range_iterations': cls.MAX_RANGE_ITERATIONS,
            'recent_months_count': cls.RECENT_MONTHS_COUNT,
            'salary_decimal_places': cls.SALARY_DECIMAL_PLACES,
            'strict_week_number': cls.STRICT_WEEK_NUMBER,
        }


# Validate configuration on module import
try:
    WeekAttributionConfig.validate()
except ValueError as e:
    raise RuntimeError(f"Invalid WeekAttributionConfig: {e}")
