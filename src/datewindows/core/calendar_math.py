"""Calendar arithmetic shared by the window functions.

Every helper is a pure function over immutable date/datetime values: nothing
here holds or mutates calendar state, so the helpers are safe to call from
any number of threads.

Months are 1-based in this module (datetime convention). Quarter month
indexes are converted at the call site.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import calendar
import logging
from datetime import date, datetime, timedelta, tzinfo

from datewindows.constants import DAYS_PER_WEEK, END_OF_DAY, MAX_YEAR, MIN_YEAR, START_OF_DAY
from datewindows.diagnostics import ErrorTemplate, InvalidArgumentError, InvalidReferenceError
from datewindows.enums import DayRollback

__all__ = [
    "beginning_of_day",
    "check_year",
    "day_of_year",
    "end_of_day",
    "last_day_of_month",
    "require_int",
    "require_reference",
    "roll_back_one_day",
    "shift_days",
    "shift_years",
    "start_of_week",
    "truncate_to_millisecond",
]

logger = logging.getLogger(__name__)


def truncate_to_millisecond(value: datetime) -> datetime:
    """Drop sub-millisecond precision; returns value itself when already whole."""
    sub_ms = value.microsecond % 1000
    if sub_ms == 0:
        return value
    return value.replace(microsecond=value.microsecond - sub_ms)


def require_reference(value: object, function_name: str) -> datetime:
    """Validate a reference instant argument.

    Instants are millisecond-granular, matching END_OF_DAY: microseconds
    below the millisecond are truncated so that 23:59:59.999500 still
    belongs to its own day.

    Args:
        value: Caller-supplied reference
        function_name: Name reported in the diagnostic

    Returns:
        The value as a datetime truncated to the millisecond

    Raises:
        InvalidReferenceError: If value is None or not a datetime
    """
    if value is None:
        raise InvalidReferenceError(ErrorTemplate.reference_missing(function_name))
    if not isinstance(value, datetime):
        raise InvalidReferenceError(ErrorTemplate.reference_type_invalid(function_name, value))
    return truncate_to_millisecond(value)


def require_int(value: object, name: str) -> int:
    """Reject non-int (and bool) scalar arguments with TypeError."""
    if isinstance(value, bool) or not isinstance(value, int):
        msg = f"{name} must be int, got {type(value).__name__}"
        raise TypeError(msg)
    return value


def check_year(year: int, function_name: str) -> int:
    """Raise InvalidArgumentError unless MIN_YEAR <= year <= MAX_YEAR."""
    if not MIN_YEAR <= year <= MAX_YEAR:
        raise InvalidArgumentError(ErrorTemplate.year_out_of_range(year, function_name))
    return year


def beginning_of_day(day: date, tz: tzinfo | None) -> datetime:
    """Return 00:00:00.000 on day."""
    return datetime.combine(day, START_OF_DAY, tzinfo=tz)


def end_of_day(day: date, tz: tzinfo | None) -> datetime:
    """Return 23:59:59.999 on day."""
    return datetime.combine(day, END_OF_DAY, tzinfo=tz)


def last_day_of_month(year: int, month: int) -> int:
    """Return the number of days in a month (28-31)."""
    return calendar.monthrange(year, month)[1]


def day_of_year(day: date) -> int:
    """Return the 1-based ordinal of day within its year."""
    return day.timetuple().tm_yday


def shift_days(day: date, days: int, function_name: str) -> date:
    """Add days to a date, reporting year overflow as InvalidArgumentError."""
    try:
        return day + timedelta(days=days)
    except OverflowError as e:
        year = day.year - 1 if days < 0 else day.year + 1
        raise InvalidArgumentError(ErrorTemplate.year_out_of_range(year, function_name)) from e


def shift_years(day: date, years: int, function_name: str) -> date:
    """Move a date by whole years, keeping month and day.

    February 29 clamps to February 28 when the target year is not a leap year.

    Raises:
        InvalidArgumentError: If the target year is outside 1..9999
    """
    year = check_year(day.year + years, function_name)
    return day.replace(year=year, day=min(day.day, last_day_of_month(year, day.month)))


def roll_back_one_day(day: date, policy: DayRollback, function_name: str) -> date:
    """Step back one day according to a rollback policy.

    DayRollback.CALENDAR returns the preceding calendar day.

    DayRollback.LEGACY decrements day-of-year inside the current year
    (day 1 wraps to the year's last day) and then, only when the result
    is day 365, moves back one year keeping month and day. That rule gives
    the right answer for Jan 1 after a common year and is off by a year
    on Jan 1 of a leap year and on Dec 31 of a leap year.

    Args:
        day: Day to step back from
        policy: Rollback policy
        function_name: Name reported if the year leaves 1..9999

    Returns:
        The rolled-back day
    """
    if policy is DayRollback.CALENDAR:
        return shift_days(day, -1, function_name)

    if day_of_year(day) > 1:
        rolled = day - timedelta(days=1)
    else:
        rolled = date(day.year, 12, 31)

    if day_of_year(rolled) == 365:
        logger.debug("Legacy rollback of %s landed on day 365; moving back one year", day)
        rolled = shift_years(rolled, -1, function_name)
    return rolled


def start_of_week(day: date, first_weekday: int, function_name: str) -> date:
    """Return the first day of day's week, on or before day.

    Args:
        day: Any day in the week
        first_weekday: 0=Monday .. 6=Sunday
        function_name: Name reported if the week starts before year 1

    Returns:
        The day the week starts on
    """
    return shift_days(day, -((day.weekday() - first_weekday) % DAYS_PER_WEEK), function_name)
