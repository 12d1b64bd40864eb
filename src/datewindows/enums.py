"""Enumerations for datewindows type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, so configuration read from text
(environment, JSON, query strings) compares equal without conversion.

Python 3.13+.
"""

from enum import StrEnum

__all__ = [
    "DayRollback",
    "RangeKind",
]


class DayRollback(StrEnum):
    """How the engine steps back one day for yesterday/last-N-days windows.

    StrEnum provides automatic string conversion: str(DayRollback.LEGACY) == "legacy"
    """

    LEGACY = "legacy"
    """Roll day-of-year within the year, then drop a year if it lands on 365.

    Matches historical report output, including two known off-by-a-year
    results: Jan 1 of a leap year yields Dec 31 of the same year, and
    Dec 31 of a leap year yields Dec 30 of the previous year.
    """

    CALENDAR = "calendar"
    """Plain calendar subtraction: always the preceding calendar day."""


class RangeKind(StrEnum):
    """Named relative windows accepted by resolve().

    StrEnum provides automatic string conversion: str(RangeKind.TODAY) == "today"
    """

    TODAY = "today"
    YESTERDAY = "yesterday"
    LAST_N_DAYS = "last_n_days"
    MONTH_TO_DATE = "month_to_date"
    QUARTER_TO_DATE = "quarter_to_date"
    YEAR_TO_DATE = "year_to_date"
    PREVIOUS_WEEK = "previous_week"
    PREVIOUS_MONTH = "previous_month"
    PREVIOUS_QUARTER = "previous_quarter"
    PREVIOUS_YEAR = "previous_year"
    THIS_MONTH_LAST_YEAR = "this_month_last_year"
