"""Hypothesis strategies for datewindows property-based testing.

Strategies are organized by domain:

- calendar: reference instants, boundary dates, quarters, window configs

Usage:
    from tests.strategies import reference_instants, day_counts
    from tests.strategies.calendar import reference_by_boundary

Event-Emitting Strategies (HypoFuzz-Optimized):
    These strategies emit hypothesis.event() calls for coverage-guided fuzzing:
    - reference_by_boundary
"""

from .calendar import (
    aware_reference_instants,
    day_counts,
    instant_in_month,
    is_legacy_rollback_quirk,
    quarters,
    reasonable_dates,
    reference_by_boundary,
    reference_instants,
    weekdays,
    window_configs,
    years,
    zero_based_months,
)

__all__ = [
    "aware_reference_instants",
    "day_counts",
    "instant_in_month",
    "is_legacy_rollback_quirk",
    "quarters",
    "reasonable_dates",
    "reference_by_boundary",
    "reference_instants",
    "weekdays",
    "window_configs",
    "years",
    "zero_based_months",
]
