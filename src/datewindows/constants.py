"""Shared constants for datewindows.

This module provides centralized calendar constants used across the core
and engine packages. Placing constants here avoids circular imports and
provides a single source of truth.

Constants are grouped by domain:
- Day boundaries: wall-clock times for beginning and end of day
- Calendar limits: year range supported by datetime.date
- Week conventions: default first day of the week
- Sentinels: the "unreachable" far-future instant
- Cache limits: memory bounds for locale lookups

Python 3.13+. Zero external dependencies.
"""

from datetime import datetime, time
from typing import Final

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Day boundaries
    "START_OF_DAY",
    "END_OF_DAY",
    # Calendar limits
    "MIN_YEAR",
    "MAX_YEAR",
    "MONTHS_PER_QUARTER",
    "DAYS_PER_WEEK",
    # Week conventions
    "DEFAULT_FIRST_WEEKDAY",
    # Sentinels
    "UNREACHABLE_INSTANT",
    # Cache limits
    "LOCALE_CACHE_SIZE",
]

# ============================================================================
# DAY BOUNDARIES
# ============================================================================
#
# Ranges are millisecond-granular: the last instant of a day is
# 23:59:59.999, not 23:59:59.999999. Reference instants carrying
# sub-millisecond precision inside the final millisecond of a day fall
# after END_OF_DAY.

START_OF_DAY: Final[time] = time(0, 0, 0, 0)
END_OF_DAY: Final[time] = time(23, 59, 59, 999000)

# ============================================================================
# CALENDAR LIMITS
# ============================================================================

MIN_YEAR: Final[int] = datetime.min.year
MAX_YEAR: Final[int] = datetime.max.year

MONTHS_PER_QUARTER: Final[int] = 3
DAYS_PER_WEEK: Final[int] = 7

# ============================================================================
# WEEK CONVENTIONS
# ============================================================================

# Weekday numbering follows datetime.weekday() and Babel: 0=Monday..6=Sunday.
# Sunday matches the en_US convention.
DEFAULT_FIRST_WEEKDAY: Final[int] = 6

# ============================================================================
# SENTINELS
# ============================================================================

# Created once at import; every caller receives this same object.
UNREACHABLE_INSTANT: Final[datetime] = datetime.max

# ============================================================================
# CACHE LIMITS
# ============================================================================

# Maximum parsed Babel locales kept by locale_utils.get_babel_locale().
LOCALE_CACHE_SIZE: Final[int] = 128
