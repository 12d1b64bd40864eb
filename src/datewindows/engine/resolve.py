"""Resolve named relative windows.

Report and scheduling code usually stores the *name* of a window
("previous_month", "last_n_days") rather than calling a function directly.
resolve() maps those names onto the window functions.

Python 3.13+.
"""

from __future__ import annotations

import logging
from datetime import datetime

from datewindows.core.daterange import DateRange
from datewindows.diagnostics import ErrorTemplate, InvalidArgumentError
from datewindows.engine import windows
from datewindows.engine.config import WindowConfig
from datewindows.enums import RangeKind

__all__ = ["resolve"]

logger = logging.getLogger(__name__)


def _coerce_kind(kind: RangeKind | str) -> RangeKind:
    if isinstance(kind, RangeKind):
        return kind
    if not isinstance(kind, str):
        msg = f"kind must be RangeKind or str, got {type(kind).__name__}"
        raise TypeError(msg)
    try:
        return RangeKind(kind)
    except ValueError as e:
        raise InvalidArgumentError(ErrorTemplate.range_kind_unknown(kind)) from e


def resolve(
    kind: RangeKind | str,
    reference: datetime,
    *,
    days: int | None = None,
    config: WindowConfig | None = None,
) -> DateRange:
    """Compute the window named by kind, anchored at reference.

    Args:
        kind: Window name (RangeKind member or its string value)
        reference: Reference instant
        days: Day count, required for last_n_days and rejected otherwise
        config: Calendar conventions passed to functions that use them

    Returns:
        The computed DateRange

    Raises:
        InvalidArgumentError: If kind is unknown, or days is missing for
            last_n_days or given for any other kind

    Example:
        >>> resolve("previous_month", datetime(2006, 10, 10)).start
        datetime.datetime(2006, 9, 1, 0, 0)
        >>> resolve(RangeKind.LAST_N_DAYS, datetime(2006, 10, 1), days=4).start
        datetime.datetime(2006, 9, 27, 0, 0)
    """
    range_kind = _coerce_kind(kind)

    if range_kind is RangeKind.LAST_N_DAYS:
        if days is None:
            raise InvalidArgumentError(ErrorTemplate.day_count_required(range_kind))
        result = windows.last_n_days(reference, days, config=config)
    else:
        if days is not None:
            raise InvalidArgumentError(ErrorTemplate.day_count_unexpected(range_kind, days))
        match range_kind:
            case RangeKind.TODAY:
                result = windows.today(reference)
            case RangeKind.YESTERDAY:
                result = windows.yesterday(reference, config=config)
            case RangeKind.MONTH_TO_DATE:
                result = windows.month_to_date(reference)
            case RangeKind.QUARTER_TO_DATE:
                result = windows.quarter_to_date(reference)
            case RangeKind.YEAR_TO_DATE:
                result = windows.year_to_date(reference)
            case RangeKind.PREVIOUS_WEEK:
                result = windows.previous_week(reference, config=config)
            case RangeKind.PREVIOUS_MONTH:
                result = windows.previous_month(reference)
            case RangeKind.PREVIOUS_QUARTER:
                result = windows.previous_quarter(reference)
            case RangeKind.PREVIOUS_YEAR:
                result = windows.previous_year(reference)
            case RangeKind.THIS_MONTH_LAST_YEAR:
                result = windows.this_month_last_year(reference)

    logger.debug("Resolved %s at %s: %s", range_kind, reference, result)
    return result
