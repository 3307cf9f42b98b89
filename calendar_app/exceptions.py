"""
Custom exceptions for calendar_app with error codes and user-friendly messages.

Exception Hierarchy:
- CalendarAppError (base)
  - InvalidKeyFormat (malformed month/week key - caller decides whether to fall back)
  - WeekNotInMonth (week attributed to another month)
"""
from typing import Optional, Dict, Any


class CalendarAppError(Exception):
    """
    Base exception for all calendar_app errors.

    Provides standardized error handling with:
    - error_code: Machine-readable identifier for filtering/alerting
    - user_message: Safe, user-friendly message to display
    - details: Additional context for logging (not shown to users)
    """

    error_code: str = "CALENDAR_ERROR"
    user_message: str = "A calendar error occurred. Please try again."

    def __init__(
        self,
        message: str = None,
        error_code: str = None,
        user_message: str = None,
        details: Dict[str, Any] = None
    ):
        """
        Initialize CalendarAppError.

        Args:
            message: Technical error message for logging
            error_code: Override default error code
            user_message: Override default user message
            details: Additional context for logging
        """
        self.message = message or self.__class__.__doc__ or "A calendar error occurred"
        if error_code is not None:
            self.error_code = error_code
        if user_message is not None:
            self.user_message = user_message
        self.details = details or {}

        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for logging/serialization."""
        return {
            "error_code": self.error_code,
            "message": self.message,
            "user_message": self.user_message,
            "details": self.details,
            "exception_type": self.__class__.__name__
        }

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(code={self.error_code}, message={self.message!r})"


class InvalidKeyFormat(CalendarAppError, ValueError):
    """
    Month or week key could not be parsed.

    Carries the offending raw value so callers can log it or fall back
    (e.g. a date selector reverting to the current month).
    """

    error_code = "INVALID_KEY_FORMAT"

    EXPECTED_FORMATS = {
        "month": "YYYY-MM",
        "week": "YYYY-MM-DD",
    }

    def __init__(
        self,
        raw_value: Any = None,
        key_kind: str = "week",
        message: str = None,
        **kwargs
    ):
        """
        Initialize InvalidKeyFormat.

        Args:
            raw_value: The value that failed to parse
            key_kind: "month" or "week"
            message: Error message (generated when omitted)
            **kwargs: Additional arguments for parent
        """
        self.raw_value = raw_value
        self.key_kind = key_kind
        expected = self.EXPECTED_FORMATS.get(key_kind, "YYYY-MM-DD")

        if not message:
            message = f"Invalid {key_kind} key format: {raw_value!r}. Expected {expected}"

        user_msg = f"'{raw_value}' is not a valid {key_kind} ({expected})."
        super().__init__(message=message, user_message=user_msg, **kwargs)
        self.details["raw_value"] = raw_value
        self.details["key_kind"] = key_kind


class WeekNotInMonth(CalendarAppError):
    """Week is attributed to a different month than the one requested."""

    error_code = "WEEK_NOT_IN_MONTH"

    def __init__(
        self,
        week_key: str = None,
        month_key: str = None,
        attributed_month: Optional[str] = None,
        message: str = None,
        **kwargs
    ):
        """
        Initialize WeekNotInMonth.

        Args:
            week_key: Week key (Monday date)
            month_key: Month the caller expected
            attributed_month: Month the week actually belongs to
            message: Error message (generated when omitted)
            **kwargs: Additional arguments for parent
        """
        self.week_key = week_key
        self.month_key = month_key
        self.attributed_month = attributed_month

        if not message:
            message = f"Week {week_key} does not belong to month {month_key}"
            if attributed_month:
                message += f" (belongs to {attributed_month})"

        user_msg = "Selected week does not belong to the selected month."
        super().__init__(message=message, user_message=user_msg, **kwargs)
        self.details["week_key"] = week_key
        self.details["month_key"] = month_key
        self.details["attributed_month"] = attributed_month
