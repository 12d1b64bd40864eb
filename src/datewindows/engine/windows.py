"""Relative date windows anchored at a reference instant.

Each function takes a reference instant and returns a new DateRange whose
endpoints are computed from it. Functions are pure: the reference is never
modified (datetime is immutable) and no calendar state is shared between
calls, so every function is safe to call concurrently.

Boundary convention:
    beginning of day = 00:00:00.000
    end of day       = 23:59:59.999
Both are built in the reference instant's tzinfo (naive stays naive).
Windows ending "to date" end at the reference instant, truncated to the
millisecond like every reference.

Example:
    >>> ref = datetime(2006, 10, 10, 10, 14, 34, 956000)
    >>> print(month_to_date(ref))
    [DateRange: start='2006-10-01T00:00:00' end='2006-10-10T10:14:34.956000']
    >>> print(previous_quarter(ref))
    [DateRange: start='2006-07-01T00:00:00' end='2006-09-30T23:59:59.999000']

Python 3.13+.
"""

from __future__ import annotations

from datetime import date, datetime, timedelta, tzinfo

from datewindows.constants import DAYS_PER_WEEK, UNREACHABLE_INSTANT
from datewindows.core.calendar_math import (
    beginning_of_day,
    check_year,
    end_of_day,
    last_day_of_month,
    require_int,
    require_reference,
    roll_back_one_day,
    shift_days,
    start_of_week,
)
from datewindows.core.daterange import DateRange
from datewindows.core.quarter import Quarter
from datewindows.diagnostics import ErrorTemplate, InvalidArgumentError
from datewindows.engine.config import DEFAULT_CONFIG, WindowConfig

__all__ = [
    "last_n_days",
    "month_to_date",
    "previous_month",
    "previous_quarter",
    "previous_week",
    "previous_year",
    "quarter",
    "quarter_to_date",
    "this_month_last_year",
    "today",
    "unreachable_instant",
    "year_to_date",
    "yesterday",
]


def unreachable_instant() -> datetime:
    """Return an instant so far in the future it is never reached.

    The same object is returned on every call (datetime.max, created once
    at import), so it can be compared by identity as a sentinel.
    """
    return UNREACHABLE_INSTANT


def _whole_days(first: date, last: date, tz: tzinfo | None) -> DateRange:
    return DateRange(beginning_of_day(first, tz), end_of_day(last, tz))


def _whole_month(year: int, month: int, tz: tzinfo | None) -> DateRange:
    return _whole_days(
        date(year, month, 1), date(year, month, last_day_of_month(year, month)), tz
    )


def _quarter_range(year: int, q: Quarter, tz: tzinfo | None) -> DateRange:
    end_month = q.end_month + 1
    return _whole_days(
        date(year, q.start_month + 1, 1),
        date(year, end_month, last_day_of_month(year, end_month)),
        tz,
    )


def today(reference: datetime) -> DateRange:
    """Return the whole day containing the reference instant."""
    ref = require_reference(reference, "today")
    return _whole_days(ref.date(), ref.date(), ref.tzinfo)


def yesterday(reference: datetime, *, config: WindowConfig | None = None) -> DateRange:
    """Return the whole day before the reference instant.

    The step back follows config.day_rollback; see DayRollback for the
    legacy day-of-year behavior around leap years.

    Args:
        reference: Reference instant
        config: Calendar conventions (default: DEFAULT_CONFIG)

    Returns:
        00:00:00.000 through 23:59:59.999 of the previous day
    """
    ref = require_reference(reference, "yesterday")
    config = config or DEFAULT_CONFIG
    day = roll_back_one_day(ref.date(), config.day_rollback, "yesterday")
    return _whole_days(day, day, ref.tzinfo)


def last_n_days(
    reference: datetime,
    days: int,
    *,
    config: WindowConfig | None = None,
) -> DateRange:
    """Return the `days` whole days before the reference day.

    The reference day itself is excluded: for a reference on Oct 1 and
    days=4 the window is Sep 27 00:00:00.000 through Sep 30 23:59:59.999.

    Args:
        reference: Reference instant
        days: Number of days in the window (>= 1)
        config: Calendar conventions (default: DEFAULT_CONFIG)

    Returns:
        Inclusive window of `days` whole days ending the day before reference

    Raises:
        TypeError: If days is not an int
        InvalidArgumentError: If days < 1 or the window leaves years 1..9999
    """
    ref = require_reference(reference, "last_n_days")
    require_int(days, "days")
    if days < 1:
        raise InvalidArgumentError(ErrorTemplate.day_count_invalid(days))
    config = config or DEFAULT_CONFIG

    last = roll_back_one_day(ref.date(), config.day_rollback, "last_n_days")
    first = shift_days(last, -(days - 1), "last_n_days")
    return _whole_days(first, last, ref.tzinfo)


def month_to_date(reference: datetime) -> DateRange:
    """Return the start of the reference month through the reference instant."""
    ref = require_reference(reference, "month_to_date")
    return DateRange(beginning_of_day(ref.date().replace(day=1), ref.tzinfo), ref)


def year_to_date(reference: datetime) -> DateRange:
    """Return January 1 of the reference year through the reference instant."""
    ref = require_reference(reference, "year_to_date")
    return DateRange(beginning_of_day(date(ref.year, 1, 1), ref.tzinfo), ref)


def quarter_to_date(reference: datetime) -> DateRange:
    """Return the start of the reference quarter through the reference instant."""
    ref = require_reference(reference, "quarter_to_date")
    q = Quarter.containing(ref)
    return DateRange(beginning_of_day(date(ref.year, q.start_month + 1, 1), ref.tzinfo), ref)


def quarter(year: int, q: Quarter, *, tz: tzinfo | None = None) -> DateRange:
    """Return a whole quarter of a given year.

    Args:
        year: Calendar year (1..9999)
        q: Quarter to return
        tz: tzinfo for the endpoints (default: naive)

    Returns:
        First day of q.start_month 00:00:00.000 through the last day of
        q.end_month 23:59:59.999

    Raises:
        TypeError: If year is not an int or q is not a Quarter
        InvalidArgumentError: If year is outside 1..9999

    Example:
        >>> print(quarter(2005, Quarter.FIRST))
        [DateRange: start='2005-01-01T00:00:00' end='2005-03-31T23:59:59.999000']
    """
    check_year(require_int(year, "year"), "quarter")
    if not isinstance(q, Quarter):
        msg = f"q must be Quarter, got {type(q).__name__}"
        raise TypeError(msg)
    return _quarter_range(year, q, tz)


def previous_quarter(reference: datetime) -> DateRange:
    """Return the whole quarter before the reference quarter.

    From the first quarter this is the fourth quarter of the previous year.
    """
    ref = require_reference(reference, "previous_quarter")
    q = Quarter.containing(ref).previous()
    year = ref.year - 1 if q is Quarter.FOURTH else ref.year
    return _quarter_range(check_year(year, "previous_quarter"), q, ref.tzinfo)


def previous_week(reference: datetime, *, config: WindowConfig | None = None) -> DateRange:
    """Return the whole week before the reference week.

    Weeks start on config.first_weekday (Sunday by default). For a
    reference on Tuesday Apr 18 2006 the window is Sunday Apr 9 through
    Saturday Apr 15.

    Args:
        reference: Reference instant
        config: Calendar conventions (default: DEFAULT_CONFIG)

    Returns:
        Seven whole days, beginning of the first through end of the last
    """
    ref = require_reference(reference, "previous_week")
    config = config or DEFAULT_CONFIG
    current = start_of_week(ref.date(), config.first_weekday, "previous_week")
    first = shift_days(current, -DAYS_PER_WEEK, "previous_week")
    return _whole_days(first, first + timedelta(days=DAYS_PER_WEEK - 1), ref.tzinfo)


def previous_month(reference: datetime) -> DateRange:
    """Return the whole calendar month before the reference month.

    January rolls back to December of the previous year.
    """
    ref = require_reference(reference, "previous_month")
    if ref.month == 1:
        return _whole_month(check_year(ref.year - 1, "previous_month"), 12, ref.tzinfo)
    return _whole_month(ref.year, ref.month - 1, ref.tzinfo)


def previous_year(reference: datetime) -> DateRange:
    """Return January 1 through December 31 of the year before the reference."""
    ref = require_reference(reference, "previous_year")
    year = check_year(ref.year - 1, "previous_year")
    return _whole_days(date(year, 1, 1), date(year, 12, 31), ref.tzinfo)


def this_month_last_year(reference: datetime) -> DateRange:
    """Return the reference month, one year earlier, as whole days."""
    ref = require_reference(reference, "this_month_last_year")
    year = check_year(ref.year - 1, "this_month_last_year")
    return _whole_month(year, ref.month, ref.tzinfo)
