"""
Logging Decorators for Calendar Queries

Provides a decorator that wraps week/month queries with timing and
failure logging:
- @log_query: DEBUG started/completed records with duration, failures
  logged with the error code and re-raised
"""

import functools
import logging
import time
from typing import Any, Callable, Optional, TypeVar

from calendar_app.exceptions import CalendarAppError


F = TypeVar('F', bound=Callable[..., Any])

logger = logging.getLogger(__name__)


def _summarize_result(result: Any) -> dict:
    """Small, log-safe description of a query result."""
    summary = {'type': type(result).__name__}
    if hasattr(result, '__len__') and not isinstance(result, str):
        summary['count'] = len(result)
    elif isinstance(result, (str, int, bool)):
        summary['value'] = result
    return summary


def log_query(
    operation_name: Optional[str] = None,
    log_args: bool = True,
    log_result: bool = True
) -> Callable[[F], F]:
    """
    Decorator to wrap engine queries with timing and error logging.

    Args:
        operation_name: Name of the operation for logging (defaults to function name)
        log_args: Whether to log positional/keyword arguments
        log_result: Whether to log a summary of the result

    Usage:
        @log_query(operation_name='weeks_belonging_to_month')
        def weeks_belonging_to_month(month_key, as_of=None):
            ...
    """
    def decorator(func: F) -> F:
        @functools.wraps(func)
        def wrapper(*args, **kwargs) -> Any:
            op_name = operation_name or func.__name__
            debug_enabled = logger.isEnabledFor(logging.DEBUG)
            start_time = time.perf_counter()

            if debug_enabled and log_args:
                logger.debug(f"[Calendar Query] {op_name}_started args={args!r} kwargs={kwargs!r}")

            try:
                result = func(*args, **kwargs)
            except CalendarAppError as e:
                duration_ms = (time.perf_counter() - start_time) * 1000
                logger.info(
                    f"[Calendar Query] {op_name}_failed code={e.error_code} "
                    f"duration_ms={duration_ms:.2f} message={e.message}"
                )
                raise
            except Exception:
                duration_ms = (time.perf_counter() - start_time) * 1000
                logger.exception(f"[Calendar Query] {op_name}_error duration_ms={duration_ms:.2f}")
                raise

            if debug_enabled and log_result:
                duration_ms = (time.perf_counter() - start_time) * 1000
                logger.debug(
                    f"[Calendar Query] {op_name}_completed duration_ms={duration_ms:.2f} "
                    f"result={_summarize_result(result)}"
                )

            return result

        return wrapper

    return decorator
