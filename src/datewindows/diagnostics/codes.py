"""Diagnostic codes and data structures.

Defines error codes and diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Argument errors (months, quarters, years, day counts)
        2000-2999: Reference instant errors
        3000-3999: Range errors (ordering, boundedness)
        4000-4999: Configuration errors
    """

    # Argument errors (1000-1999)
    MONTH_OUT_OF_RANGE = 1001
    YEAR_OUT_OF_RANGE = 1002
    DAY_COUNT_INVALID = 1003
    RANGE_KIND_UNKNOWN = 1004
    DAY_COUNT_REQUIRED = 1005
    DAY_COUNT_UNEXPECTED = 1006

    # Reference instant errors (2000-2999)
    REFERENCE_MISSING = 2001
    REFERENCE_TYPE_INVALID = 2002

    # Range errors (3000-3999)
    RANGE_START_AFTER_END = 3001
    RANGE_MIXED_TZ_AWARENESS = 3002
    RANGE_UNBOUNDED = 3003

    # Configuration errors (4000-4999)
    WEEKDAY_OUT_OF_RANGE = 4001


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Inspired by Rust compiler diagnostics. Provides rich error information
    for both humans and tools (log aggregation, API error payloads).

    Attributes:
        code: Unique error code
        message: Human-readable error description
        hint: Suggestion for fixing the error
        function_name: Engine function where the error occurred
        argument_name: Argument name that caused the error
        expected: Description of the accepted values
        received: repr() of the rejected value
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    hint: str | None = None
    function_name: str | None = None
    argument_name: str | None = None
    expected: str | None = None
    received: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like Rust compiler.

        Example output:
            error[MONTH_OUT_OF_RANGE]: Month index 12 is outside 0-11
              = argument: month
              = expected: int in 0..11 (January=0)
              = received: 12
              = help: Month indexes are zero-based; subtract 1 from calendar months

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
