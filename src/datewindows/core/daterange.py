"""Immutable inclusive date range value type.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta

from datewindows.core.calendar_math import truncate_to_millisecond
from datewindows.diagnostics import (
    ErrorTemplate,
    InvalidRangeError,
    UnboundedRangeError,
)

__all__ = ["DateRange"]


@dataclass(frozen=True, slots=True)
class DateRange:
    """A span of time from start to end, both endpoints inclusive.

    Either endpoint may be None, meaning the range is unbounded in that
    direction. Equality and hashing are structural over (start, end).

    Ranges are millisecond-granular: endpoints are truncated to the
    millisecond at construction, and is_within() truncates the instant it
    tests the same way.

    Attributes:
        start: First instant in the range, or None for no lower bound
        end: Last instant in the range, or None for no upper bound

    Example:
        >>> r = DateRange(datetime(2006, 1, 1), datetime(2006, 3, 31, 23, 59, 59, 999000))
        >>> r.is_within(datetime(2006, 2, 14, 12, 0))
        True
        >>> datetime(2006, 3, 31, 23, 59, 59, 999999) in r
        True
        >>> DateRange(start=datetime(2006, 1, 1)).is_within(datetime(9999, 1, 1))
        True
    """

    start: datetime | None = None
    end: datetime | None = None

    def __post_init__(self) -> None:
        """Validate endpoint types and ordering.

        Raises:
            TypeError: If an endpoint is neither datetime nor None
            InvalidRangeError: If start is after end, or the endpoints mix
                naive and aware datetimes
        """
        for name in ("start", "end"):
            value = getattr(self, name)
            if value is None:
                continue
            if not isinstance(value, datetime):
                msg = f"{name} must be datetime or None, got {type(value).__name__}"
                raise TypeError(msg)
            object.__setattr__(self, name, truncate_to_millisecond(value))
        if self.start is None or self.end is None:
            return
        if (self.start.tzinfo is None) != (self.end.tzinfo is None):
            raise InvalidRangeError(
                ErrorTemplate.range_mixed_tz_awareness(self.start, self.end)
            )
        if self.start > self.end:
            raise InvalidRangeError(ErrorTemplate.range_start_after_end(self.start, self.end))

    @property
    def is_bounded(self) -> bool:
        """True when both endpoints are set."""
        return self.start is not None and self.end is not None

    def _endpoint_awareness_differs(self, instant: datetime) -> datetime | None:
        for endpoint in (self.start, self.end):
            if endpoint is not None and (endpoint.tzinfo is None) != (instant.tzinfo is None):
                return endpoint
        return None

    def is_within(self, instant: datetime) -> bool:
        """Check whether an instant falls inside the range.

        Both endpoints are part of the range. A None endpoint admits every
        instant on its side. The instant is compared at millisecond
        resolution.

        Args:
            instant: Instant to test

        Returns:
            True if start <= instant <= end (ignoring None endpoints)

        Raises:
            InvalidRangeError: If instant is naive and an endpoint is aware,
                or the reverse
        """
        endpoint = self._endpoint_awareness_differs(instant)
        if endpoint is not None:
            raise InvalidRangeError(ErrorTemplate.instant_tz_awareness_mismatch(instant, endpoint))
        instant = truncate_to_millisecond(instant)
        if self.start is not None and instant < self.start:
            return False
        return self.end is None or instant <= self.end

    def __contains__(self, instant: object) -> bool:
        """Membership test; never raises.

        Non-datetime values and instants whose tz awareness differs from
        the endpoints are not members.
        """
        if not isinstance(instant, datetime):
            return False
        if self._endpoint_awareness_differs(instant) is not None:
            return False
        return self.is_within(instant)

    def duration(self) -> timedelta:
        """Return the absolute time between start and end.

        Raises:
            UnboundedRangeError: If either endpoint is None
        """
        if self.start is None or self.end is None:
            raise UnboundedRangeError(ErrorTemplate.range_unbounded(self.start, self.end))
        return abs(self.end - self.start)

    def as_tuple(self) -> tuple[datetime | None, datetime | None]:
        """Return (start, end)."""
        return (self.start, self.end)

    def __str__(self) -> str:
        start = "unbounded" if self.start is None else self.start.isoformat()
        end = "unbounded" if self.end is None else self.end.isoformat()
        return f"[DateRange: start='{start}' end='{end}']"
