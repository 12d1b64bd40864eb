"""Locale utilities for week conventions.

Centralizes locale normalization and CLDR week-data lookups. Only the
calendar convention (which weekday starts a week) is taken from the locale;
nothing here formats dates for display.

Python 3.13+. Uses Babel for CLDR data.
"""

from __future__ import annotations

import functools
import logging
from typing import TYPE_CHECKING

from babel import UnknownLocaleError

from datewindows.constants import DEFAULT_FIRST_WEEKDAY, LOCALE_CACHE_SIZE

if TYPE_CHECKING:
    from babel import Locale

__all__ = [
    "clear_locale_cache",
    "get_babel_locale",
    "get_first_weekday",
    "normalize_locale",
]

logger = logging.getLogger(__name__)


def normalize_locale(locale_code: str) -> str:
    """Convert BCP-47 locale code to POSIX format for Babel.

    BCP-47 uses hyphens (en-US), while Babel/POSIX uses underscores (en_US).

    Args:
        locale_code: BCP-47 locale code (e.g., "en-US", "pt-BR")

    Returns:
        POSIX-formatted locale code (e.g., "en_US", "pt_BR")

    Example:
        >>> normalize_locale("en-US")
        'en_US'
        >>> normalize_locale("en")
        'en'
    """
    return locale_code.replace("-", "_")


@functools.lru_cache(maxsize=LOCALE_CACHE_SIZE)
def get_babel_locale(locale_code: str) -> Locale:
    """Get a Babel Locale object with caching.

    Thread-safe via lru_cache internal locking.

    Args:
        locale_code: Locale code (BCP-47 or POSIX format accepted)

    Returns:
        Babel Locale object

    Raises:
        babel.core.UnknownLocaleError: If locale is not recognized
        ValueError: If locale format is invalid
    """
    # Lazy import: Babel loads CLDR data at import time; defer until needed
    from babel import Locale  # noqa: PLC0415

    return Locale.parse(normalize_locale(locale_code))


def get_first_weekday(locale_code: str) -> int:
    """Return the weekday a locale starts its weeks on.

    Unknown or malformed locales fall back to Sunday (the en_US
    convention) with a warning logged.

    Args:
        locale_code: Locale code (BCP-47 or POSIX format accepted)

    Returns:
        Weekday number, 0=Monday .. 6=Sunday

    Example:
        >>> get_first_weekday("en-US")
        6
        >>> get_first_weekday("de-DE")
        0
    """
    try:
        locale = get_babel_locale(locale_code)
    except (UnknownLocaleError, ValueError) as e:
        logger.warning(
            "Unknown locale '%s': %s. Falling back to first weekday %d",
            locale_code,
            e,
            DEFAULT_FIRST_WEEKDAY,
        )
        return DEFAULT_FIRST_WEEKDAY
    return locale.first_week_day


def clear_locale_cache() -> None:
    """Clear the parsed-locale cache (for tests and long-running processes)."""
    get_babel_locale.cache_clear()
