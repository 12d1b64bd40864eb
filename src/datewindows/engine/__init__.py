"""Window computation engine.

Exports every window function, the named-window resolver and the
configuration type.

Python 3.13+.
"""

from .config import DEFAULT_CONFIG, WindowConfig
from .resolve import resolve
from .windows import (
    last_n_days,
    month_to_date,
    previous_month,
    previous_quarter,
    previous_week,
    previous_year,
    quarter,
    quarter_to_date,
    this_month_last_year,
    today,
    unreachable_instant,
    year_to_date,
    yesterday,
)

__all__ = [
    "DEFAULT_CONFIG",
    "WindowConfig",
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
