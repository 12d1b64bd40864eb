"""Tests for the DateRange value type.

Tests cover:
- Inclusive containment with bounded and open endpoints
- Structural equality and hashing
- Construction invariants (ordering, tz awareness, endpoint types)
- Duration, tuple and string forms
"""

from __future__ import annotations

import dataclasses
from datetime import UTC, datetime, timedelta

import pytest
from hypothesis import event, given

from datewindows import DateRange, InvalidRangeError, UnboundedRangeError
from datewindows.diagnostics import DiagnosticCode
from tests.helpers.equality import assert_valid_equals_and_hash
from tests.strategies import reference_instants

JAN_1 = datetime(2006, 1, 1)
MAR_31 = datetime(2006, 3, 31, 23, 59, 59, 999000)


class TestIsWithin:
    """Tests for is_within() and the in operator."""

    def test_endpoints_are_inclusive(self) -> None:
        """Both start and end are inside the range."""
        r = DateRange(JAN_1, MAR_31)
        assert r.is_within(JAN_1)
        assert r.is_within(MAR_31)

    def test_outside(self) -> None:
        """One millisecond either side is outside."""
        r = DateRange(JAN_1, MAR_31)
        assert not r.is_within(JAN_1 - timedelta(milliseconds=1))
        assert not r.is_within(MAR_31 + timedelta(milliseconds=1))

    def test_open_start(self) -> None:
        """A None start admits everything up to end."""
        r = DateRange(end=MAR_31)
        assert r.is_within(datetime(1, 1, 1))
        assert not r.is_within(datetime(2006, 4, 1))

    def test_open_end(self) -> None:
        """A None end admits everything from start on."""
        r = DateRange(start=JAN_1)
        assert r.is_within(datetime(9999, 12, 31))
        assert not r.is_within(datetime(2005, 12, 31))

    def test_fully_open(self) -> None:
        """A range with no endpoints contains every instant."""
        assert DateRange().is_within(datetime(2006, 6, 6))

    def test_contains_operator(self) -> None:
        """The in operator mirrors is_within for datetimes."""
        r = DateRange(JAN_1, MAR_31)
        assert datetime(2006, 2, 14) in r
        assert datetime(2006, 4, 1) not in r

    def test_contains_rejects_other_types(self) -> None:
        """Non-datetime values are never in a range."""
        assert "2006-02-14" not in DateRange()
        assert None not in DateRange()

    @given(instant=reference_instants)
    def test_range_contains_its_endpoints(self, instant: datetime) -> None:
        """A degenerate range contains exactly its single instant."""
        r = DateRange(instant, instant)
        event(f"hour_bucket={instant.hour // 6}")
        assert r.is_within(instant)
        assert not r.is_within(instant + timedelta(milliseconds=1))


class TestEquality:
    """DateRange equality and hashing are structural."""

    def test_equals_and_hash_contract(self) -> None:
        """Equal endpoints give equal ranges with equal hashes."""
        assert_valid_equals_and_hash(
            DateRange(datetime(2006, 1, 1), datetime(2006, 3, 31)),
            DateRange(datetime(2006, 1, 1), datetime(2006, 3, 31)),
            DateRange(datetime(2006, 1, 1), datetime(2006, 3, 31)),
            DateRange(datetime(2006, 1, 1), datetime(2006, 4, 1)),
        )

    def test_open_ranges_compare_by_none(self) -> None:
        """A None endpoint only equals another None endpoint."""
        assert DateRange(start=JAN_1) == DateRange(start=JAN_1)
        assert DateRange(start=JAN_1) != DateRange(end=JAN_1)
        assert DateRange() == DateRange(None, None)

    def test_usable_as_dict_key(self) -> None:
        """Equal ranges collapse to one dictionary entry."""
        totals = {DateRange(JAN_1, MAR_31): 1}
        totals[DateRange(JAN_1, MAR_31)] = 2
        assert len(totals) == 1

    def test_not_equal_to_tuple(self) -> None:
        """A range is not equal to its tuple form."""
        r = DateRange(JAN_1, MAR_31)
        assert r != (JAN_1, MAR_31)


class TestImmutability:
    """DateRange instances cannot be modified."""

    def test_frozen(self) -> None:
        """Assigning an endpoint raises FrozenInstanceError."""
        r = DateRange(JAN_1, MAR_31)
        with pytest.raises(dataclasses.FrozenInstanceError):
            r.start = MAR_31  # type: ignore[misc]

    def test_no_instance_dict(self) -> None:
        """Slotted instances carry no __dict__."""
        assert not hasattr(DateRange(JAN_1, MAR_31), "__dict__")


class TestConstruction:
    """Construction invariants."""

    def test_start_after_end(self) -> None:
        """start > end is rejected."""
        with pytest.raises(InvalidRangeError) as exc_info:
            DateRange(MAR_31, JAN_1)
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code == DiagnosticCode.RANGE_START_AFTER_END

    def test_mixed_tz_awareness(self) -> None:
        """Naive and aware endpoints cannot be mixed."""
        with pytest.raises(InvalidRangeError, match="mix naive and aware"):
            DateRange(JAN_1, MAR_31.replace(tzinfo=UTC))

    def test_single_open_endpoint_any_awareness(self) -> None:
        """Awareness is only compared when both endpoints are set."""
        assert DateRange(start=JAN_1.replace(tzinfo=UTC)).end is None

    @pytest.mark.parametrize("bad", ["2006-01-01", 20060101, JAN_1.date()])
    def test_endpoint_type(self, bad: object) -> None:
        """Endpoints must be datetime or None."""
        with pytest.raises(TypeError, match="start must be datetime or None"):
            DateRange(bad, MAR_31)  # type: ignore[arg-type]


class TestDuration:
    """Tests for duration()."""

    def test_bounded(self) -> None:
        """Duration is end minus start."""
        assert DateRange(JAN_1, MAR_31).duration() == MAR_31 - JAN_1

    def test_degenerate(self) -> None:
        """A single-instant range has zero duration."""
        assert DateRange(JAN_1, JAN_1).duration() == timedelta(0)

    @pytest.mark.parametrize(
        "r",
        [DateRange(start=JAN_1), DateRange(end=MAR_31), DateRange()],
    )
    def test_unbounded(self, r: DateRange) -> None:
        """Open ranges have no duration."""
        assert not r.is_bounded
        with pytest.raises(UnboundedRangeError):
            r.duration()


class TestRendering:
    """Tests for as_tuple() and __str__."""

    def test_as_tuple(self) -> None:
        """as_tuple() returns (start, end)."""
        assert DateRange(JAN_1, MAR_31).as_tuple() == (JAN_1, MAR_31)
        assert DateRange(start=JAN_1).as_tuple() == (JAN_1, None)

    def test_str(self) -> None:
        """__str__ shows ISO endpoints."""
        assert str(DateRange(JAN_1, MAR_31)) == (
            "[DateRange: start='2006-01-01T00:00:00' end='2006-03-31T23:59:59.999000']"
        )

    def test_str_unbounded(self) -> None:
        """Missing endpoints render as unbounded."""
        assert str(DateRange(end=MAR_31)) == (
            "[DateRange: start='unbounded' end='2006-03-31T23:59:59.999000']"
        )


class TestMillisecondGranularity:
    """Endpoints and tested instants are compared at millisecond resolution."""

    def test_endpoints_truncated(self) -> None:
        """Sub-millisecond endpoint precision is dropped at construction."""
        r = DateRange(datetime(2006, 1, 1, 0, 0, 0, 500), datetime(2006, 1, 1, 0, 0, 0, 1999))
        assert r.start == datetime(2006, 1, 1)
        assert r.end == datetime(2006, 1, 1, 0, 0, 0, 1000)

    def test_last_millisecond_instant_inside(self) -> None:
        """An instant in the final millisecond of the end is inside."""
        assert DateRange(JAN_1, MAR_31).is_within(datetime(2006, 3, 31, 23, 59, 59, 999999))

    def test_equal_after_truncation(self) -> None:
        """Ranges differing only below the millisecond are equal."""
        assert DateRange(JAN_1, MAR_31) == DateRange(JAN_1, MAR_31.replace(microsecond=999999))

    @given(instant=reference_instants)
    def test_instant_within_its_own_millisecond(self, instant: datetime) -> None:
        """Every instant lies in the range spanning its millisecond."""
        floor = instant.replace(microsecond=instant.microsecond // 1000 * 1000)
        event(f"sub_millisecond={floor != instant}")
        assert DateRange(floor, floor).is_within(instant)


class TestTimeZoneAwarenessMismatch:
    """Testing an instant of the other tz awareness."""

    def test_is_within_naive_instant_aware_range(self) -> None:
        """is_within reports the mismatch with a diagnostic."""
        r = DateRange(JAN_1.replace(tzinfo=UTC), MAR_31.replace(tzinfo=UTC))
        with pytest.raises(InvalidRangeError) as exc_info:
            r.is_within(datetime(2006, 2, 1))
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code == DiagnosticCode.RANGE_MIXED_TZ_AWARENESS
        assert exc_info.value.diagnostic.function_name == "is_within"

    def test_is_within_aware_instant_naive_open_range(self) -> None:
        """A single set endpoint is enough to detect the mismatch."""
        with pytest.raises(InvalidRangeError, match="aware instant"):
            DateRange(start=JAN_1).is_within(datetime(2006, 2, 1, tzinfo=UTC))

    def test_fully_open_range_accepts_either(self) -> None:
        """With no endpoints there is nothing to mismatch."""
        assert DateRange().is_within(datetime(2006, 2, 1, tzinfo=UTC))
        assert DateRange().is_within(datetime(2006, 2, 1))

    def test_contains_returns_false(self) -> None:
        """The in operator treats a mismatch as not a member."""
        r = DateRange(JAN_1, MAR_31)
        assert datetime(2006, 2, 1, tzinfo=UTC) not in r
