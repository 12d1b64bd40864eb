"""Configuration for window computations.

Provides a single frozen dataclass carrying the calendar conventions the
window functions depend on. Every engine function accepts
``config=WindowConfig(...)``; omitting it uses DEFAULT_CONFIG.

Python 3.13+.
"""

from __future__ import annotations

from dataclasses import dataclass

from datewindows.constants import DEFAULT_FIRST_WEEKDAY
from datewindows.diagnostics import ErrorTemplate, InvalidArgumentError
from datewindows.enums import DayRollback
from datewindows.locale_utils import get_first_weekday

__all__ = ["DEFAULT_CONFIG", "WindowConfig"]


@dataclass(frozen=True, slots=True)
class WindowConfig:
    """Immutable calendar conventions for window functions.

    All fields have defaults matching historical report output;
    constructing ``WindowConfig()`` with no arguments is equivalent to
    DEFAULT_CONFIG.

    Attributes:
        day_rollback: How yesterday() and last_n_days() step back one day
            (default: DayRollback.LEGACY).
        first_weekday: Weekday that starts a week for previous_week(),
            0=Monday .. 6=Sunday (default: 6, Sunday).

    Example:
        >>> config = WindowConfig(day_rollback=DayRollback.CALENDAR)
        >>> yesterday(datetime(2008, 1, 1, 9, 30), config=config).start
        datetime.datetime(2007, 12, 31, 0, 0)

    Example - Locale week conventions:
        >>> WindowConfig.for_locale("de-DE").first_weekday
        0
    """

    day_rollback: DayRollback = DayRollback.LEGACY
    first_weekday: int = DEFAULT_FIRST_WEEKDAY

    def __post_init__(self) -> None:
        """Validate configuration values at construction time.

        Raises:
            TypeError: If day_rollback is not a DayRollback or first_weekday
                is not an int.
            InvalidArgumentError: If first_weekday is outside 0..6.
        """
        if not isinstance(self.day_rollback, DayRollback):
            msg = f"day_rollback must be DayRollback, got {type(self.day_rollback).__name__}"
            raise TypeError(msg)
        if isinstance(self.first_weekday, bool) or not isinstance(self.first_weekday, int):
            msg = f"first_weekday must be int, got {type(self.first_weekday).__name__}"
            raise TypeError(msg)
        if not 0 <= self.first_weekday <= 6:
            raise InvalidArgumentError(ErrorTemplate.weekday_out_of_range(self.first_weekday))

    @classmethod
    def for_locale(
        cls,
        locale_code: str,
        *,
        day_rollback: DayRollback = DayRollback.LEGACY,
    ) -> WindowConfig:
        """Build a config whose week start follows a locale's CLDR data.

        Args:
            locale_code: Locale code (BCP-47 or POSIX format accepted)
            day_rollback: Rollback policy to carry along

        Returns:
            WindowConfig with first_weekday taken from the locale
        """
        return cls(day_rollback=day_rollback, first_weekday=get_first_weekday(locale_code))


DEFAULT_CONFIG: WindowConfig = WindowConfig()
