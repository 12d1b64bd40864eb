"""datewindows exception hierarchy with structured diagnostics.

Every exception carries an optional Diagnostic for rich error information.
Concrete classes also inherit from the matching builtin (ValueError or
TypeError) so callers that only know the builtin contract still catch them.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic

__all__ = [
    "DateWindowError",
    "InvalidArgumentError",
    "InvalidRangeError",
    "InvalidReferenceError",
    "UnboundedRangeError",
]


class DateWindowError(Exception):
    """Base exception for all datewindows errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize DateWindowError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class InvalidArgumentError(DateWindowError, ValueError):
    """A scalar argument is outside its accepted domain.

    Examples:
    - Month index 12 passed to Quarter.of()
    - Day count 0 passed to last_n_days()
    - Window would cross year 1 or year 9999
    """


class InvalidReferenceError(DateWindowError, TypeError):
    """The reference instant is missing or is not a datetime."""


class InvalidRangeError(DateWindowError, ValueError):
    """A DateRange would violate start <= end, or mixes naive and aware endpoints."""


class UnboundedRangeError(DateWindowError, ValueError):
    """A bounded-range operation was applied to a range with a None endpoint.

    Example:
        DateRange(start=some_instant).duration()
    """
