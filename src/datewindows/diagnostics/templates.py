"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from datetime import datetime

from .codes import Diagnostic, DiagnosticCode

__all__ = ["ErrorTemplate"]


def _iso(value: datetime | None) -> str:
    return "unbounded" if value is None else value.isoformat()


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    This keeps messages testable and documents every error case in one place.
    """

    @staticmethod
    def month_out_of_range(month: int) -> Diagnostic:
        """Zero-based month index outside 0..11.

        Args:
            month: The rejected month index

        Returns:
            Diagnostic for MONTH_OUT_OF_RANGE
        """
        msg = f"Month index {month} is outside 0-11"
        return Diagnostic(
            code=DiagnosticCode.MONTH_OUT_OF_RANGE,
            message=msg,
            hint="Month indexes are zero-based; subtract 1 from calendar months",
            argument_name="month",
            expected="int in 0..11 (January=0)",
            received=repr(month),
        )

    @staticmethod
    def year_out_of_range(year: int, function_name: str) -> Diagnostic:
        """Year outside the range supported by datetime.

        Args:
            year: The rejected (or computed) year
            function_name: Engine function that produced the year

        Returns:
            Diagnostic for YEAR_OUT_OF_RANGE
        """
        msg = f"Year {year} is outside 1-9999"
        return Diagnostic(
            code=DiagnosticCode.YEAR_OUT_OF_RANGE,
            message=msg,
            hint="Windows cannot start before year 1 or end after year 9999",
            function_name=function_name,
            argument_name="year",
            expected="int in 1..9999",
            received=repr(year),
        )

    @staticmethod
    def day_count_invalid(days: int) -> Diagnostic:
        """Day count below one.

        Args:
            days: The rejected day count

        Returns:
            Diagnostic for DAY_COUNT_INVALID
        """
        msg = f"Day count must be at least 1, got {days}"
        return Diagnostic(
            code=DiagnosticCode.DAY_COUNT_INVALID,
            message=msg,
            hint="Use today() for a window covering only the reference day",
            function_name="last_n_days",
            argument_name="days",
            expected="int >= 1",
            received=repr(days),
        )

    @staticmethod
    def range_kind_unknown(kind: str) -> Diagnostic:
        """Unrecognized window name passed to resolve().

        Args:
            kind: The rejected window name

        Returns:
            Diagnostic for RANGE_KIND_UNKNOWN
        """
        msg = f"Unknown date range kind: {kind!r}"
        return Diagnostic(
            code=DiagnosticCode.RANGE_KIND_UNKNOWN,
            message=msg,
            hint="See datewindows.RangeKind for the accepted names",
            function_name="resolve",
            argument_name="kind",
            received=repr(kind),
        )

    @staticmethod
    def day_count_required(kind: str) -> Diagnostic:
        """Window kind needs a day count but none was given."""
        msg = f"Range kind '{kind}' requires days"
        return Diagnostic(
            code=DiagnosticCode.DAY_COUNT_REQUIRED,
            message=msg,
            hint="Pass days=N",
            function_name="resolve",
            argument_name="days",
        )

    @staticmethod
    def day_count_unexpected(kind: str, days: int) -> Diagnostic:
        """Day count given for a window kind that does not use one."""
        msg = f"Range kind '{kind}' does not accept days"
        return Diagnostic(
            code=DiagnosticCode.DAY_COUNT_UNEXPECTED,
            message=msg,
            hint="Drop the days argument or use 'last_n_days'",
            function_name="resolve",
            argument_name="days",
            received=repr(days),
        )

    @staticmethod
    def reference_missing(function_name: str) -> Diagnostic:
        """Reference instant is None.

        Args:
            function_name: Engine function that required the reference

        Returns:
            Diagnostic for REFERENCE_MISSING
        """
        msg = f"{function_name}() requires a reference instant, got None"
        return Diagnostic(
            code=DiagnosticCode.REFERENCE_MISSING,
            message=msg,
            hint="Pass datetime.now(tz) to anchor the window at the current time",
            function_name=function_name,
            argument_name="reference",
            expected="datetime",
        )

    @staticmethod
    def reference_type_invalid(function_name: str, value: object) -> Diagnostic:
        """Reference instant is not a datetime.

        Args:
            function_name: Engine function that required the reference
            value: The rejected value

        Returns:
            Diagnostic for REFERENCE_TYPE_INVALID
        """
        received_type = type(value).__name__
        msg = f"{function_name}() requires a datetime reference, got {received_type}"
        return Diagnostic(
            code=DiagnosticCode.REFERENCE_TYPE_INVALID,
            message=msg,
            hint="Convert dates with datetime.combine(day, time())",
            function_name=function_name,
            argument_name="reference",
            expected="datetime",
            received=received_type,
        )

    @staticmethod
    def range_start_after_end(start: datetime, end: datetime) -> Diagnostic:
        """DateRange constructed with start later than end."""
        msg = f"DateRange start {_iso(start)} is after end {_iso(end)}"
        return Diagnostic(
            code=DiagnosticCode.RANGE_START_AFTER_END,
            message=msg,
            hint="Swap the endpoints",
        )

    @staticmethod
    def range_mixed_tz_awareness(start: datetime, end: datetime) -> Diagnostic:
        """DateRange endpoints mix naive and aware datetimes."""
        msg = f"DateRange endpoints mix naive and aware datetimes: {_iso(start)}, {_iso(end)}"
        return Diagnostic(
            code=DiagnosticCode.RANGE_MIXED_TZ_AWARENESS,
            message=msg,
            hint="Attach the same tzinfo to both endpoints",
        )

    @staticmethod
    def instant_tz_awareness_mismatch(instant: datetime, endpoint: datetime) -> Diagnostic:
        """Instant tested against a range of the other tz awareness."""
        msg = (
            f"Cannot test {'naive' if instant.tzinfo is None else 'aware'} instant "
            f"{_iso(instant)} against range endpoint {_iso(endpoint)}"
        )
        return Diagnostic(
            code=DiagnosticCode.RANGE_MIXED_TZ_AWARENESS,
            message=msg,
            hint="Attach the range's tzinfo to the instant, or remove it",
            function_name="is_within",
            argument_name="instant",
        )

    @staticmethod
    def range_unbounded(start: datetime | None, end: datetime | None) -> Diagnostic:
        """Duration requested for a range with a None endpoint."""
        msg = f"Cannot compute duration of unbounded range [{_iso(start)}, {_iso(end)}]"
        return Diagnostic(
            code=DiagnosticCode.RANGE_UNBOUNDED,
            message=msg,
            hint="Only ranges with both start and end set have a duration",
            function_name="duration",
        )

    @staticmethod
    def weekday_out_of_range(weekday: int) -> Diagnostic:
        """First weekday outside 0..6."""
        msg = f"first_weekday must be 0-6, got {weekday}"
        return Diagnostic(
            code=DiagnosticCode.WEEKDAY_OUT_OF_RANGE,
            message=msg,
            hint="Weekdays follow datetime.weekday(): 0=Monday, 6=Sunday",
            argument_name="first_weekday",
            expected="int in 0..6",
            received=repr(weekday),
        )
