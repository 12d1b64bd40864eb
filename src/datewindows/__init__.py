"""datewindows - Relative calendar date windows for reporting.

Computes canonical start/end boundaries for relative time windows anchored
at a reference instant: today, yesterday, the last N days, month/quarter/
year to date, the previous week/month/quarter/year, this month last year,
and any explicit quarter of a year. All functions are pure and thread-safe.

Public API:
    DateRange - Immutable inclusive range of instants
    Quarter - The four calendar quarters with cyclic navigation
    WindowConfig - Calendar conventions (rollback policy, week start)
    DayRollback - One-day rollback policies
    RangeKind - Names accepted by resolve()
    resolve - Compute a window by name
    today, yesterday, last_n_days, month_to_date, quarter_to_date,
    year_to_date, quarter, previous_quarter, previous_week,
    previous_month, previous_year, this_month_last_year - Window functions
    unreachable_instant - Far-future sentinel instant

Exceptions:
    DateWindowError - Base exception class
    InvalidArgumentError - Argument outside its accepted domain
    InvalidReferenceError - Missing or non-datetime reference instant
    InvalidRangeError - DateRange invariant violated
    UnboundedRangeError - Bounded operation on an open range

Submodules:
    datewindows.core - DateRange, Quarter and calendar arithmetic
    datewindows.engine - Window functions, resolver, configuration
    datewindows.diagnostics - Error types and structured diagnostics
    datewindows.locale_utils - CLDR week conventions via Babel
"""

from .core import DateRange, Quarter
from .diagnostics import (
    DateWindowError,
    InvalidArgumentError,
    InvalidRangeError,
    InvalidReferenceError,
    UnboundedRangeError,
)
from .engine import (
    WindowConfig,
    last_n_days,
    month_to_date,
    previous_month,
    previous_quarter,
    previous_week,
    previous_year,
    quarter,
    quarter_to_date,
    resolve,
    this_month_last_year,
    today,
    unreachable_instant,
    year_to_date,
    yesterday,
)
from .enums import DayRollback, RangeKind

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("datewindows")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "DateRange",
    "DateWindowError",
    "DayRollback",
    "InvalidArgumentError",
    "InvalidRangeError",
    "InvalidReferenceError",
    "Quarter",
    "RangeKind",
    "UnboundedRangeError",
    "WindowConfig",
    "__version__",
    "last_n_days",
    "month_to_date",
    "previous_month",
    "previous_quarter",
    "previous_week",
    "previous_year",
    "quarter",
    "quarter_to_date",
    "resolve",
    "this_month_last_year",
    "today",
    "unreachable_instant",
    "year_to_date",
    "yesterday",
]
