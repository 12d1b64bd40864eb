"""Calendar quarters of the year.

Quarter is a closed enumeration: four members, each carrying the zero-based
index of its first and last month (January=0). Month indexes are zero-based
so they line up with list/array indexing of month tables; Quarter.containing()
accepts ordinary date objects for callers working with 1-based months.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from datetime import date
from enum import Enum

from datewindows.constants import MONTHS_PER_QUARTER
from datewindows.diagnostics import ErrorTemplate, InvalidArgumentError

__all__ = ["Quarter"]


class Quarter(Enum):
    """The four quarters of a calendar year.

    Example:
        >>> Quarter.of(4)
        <Quarter.SECOND: (3, 5)>
        >>> Quarter.FIRST.previous()
        <Quarter.FOURTH: (9, 11)>
        >>> Quarter.FOURTH.end_month
        11
    """

    FIRST = (0, 2)
    SECOND = (3, 5)
    THIRD = (6, 8)
    FOURTH = (9, 11)

    def __init__(self, start_month: int, end_month: int) -> None:
        self._start_month = start_month
        self._end_month = end_month

    @property
    def start_month(self) -> int:
        """Zero-based index of the first month of the quarter."""
        return self._start_month

    @property
    def end_month(self) -> int:
        """Zero-based index of the last month of the quarter."""
        return self._end_month

    @property
    def number(self) -> int:
        """Quarter number as used in reports (1-4)."""
        return self._start_month // MONTHS_PER_QUARTER + 1

    @classmethod
    def of(cls, month: int) -> Quarter:
        """Classify a zero-based month index into its quarter.

        Args:
            month: Month index, 0 (January) through 11 (December)

        Returns:
            The quarter containing the month

        Raises:
            TypeError: If month is not an int (bool is rejected)
            InvalidArgumentError: If month is outside 0..11
        """
        if isinstance(month, bool) or not isinstance(month, int):
            msg = f"month must be int, got {type(month).__name__}"
            raise TypeError(msg)
        if not 0 <= month <= 11:
            raise InvalidArgumentError(ErrorTemplate.month_out_of_range(month))
        return _ORDER[month // MONTHS_PER_QUARTER]

    @classmethod
    def containing(cls, moment: date) -> Quarter:
        """Return the quarter containing a date or datetime."""
        return cls.of(moment.month - 1)

    def previous(self) -> Quarter:
        """Return the preceding quarter; FIRST wraps around to FOURTH."""
        return _ORDER[(_ORDER.index(self) - 1) % len(_ORDER)]

    def next(self) -> Quarter:
        """Return the following quarter; FOURTH wraps around to FIRST."""
        return _ORDER[(_ORDER.index(self) + 1) % len(_ORDER)]


_ORDER: tuple[Quarter, ...] = tuple(Quarter)
