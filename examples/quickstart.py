"""Quickstart example for datewindows.

This example demonstrates computing relative report windows from a
reference instant, by function and by name.

Note: Examples use a fixed reference instant so the output is reproducible.
In production, anchor windows at datetime.now(tz).
"""

from datetime import UTC, datetime

from datewindows import (
    DayRollback,
    InvalidArgumentError,
    Quarter,
    WindowConfig,
    last_n_days,
    month_to_date,
    previous_month,
    previous_quarter,
    previous_week,
    quarter,
    resolve,
    yesterday,
)

REF = datetime(2006, 10, 10, 10, 14, 34, 956000)

# Example 1: Windows by function
print("=" * 50)
print("Example 1: Windows by Function")
print("=" * 50)

print(yesterday(REF))
# Output: [DateRange: start='2006-10-09T00:00:00' end='2006-10-09T23:59:59.999000']

print(last_n_days(REF, 7))
# Output: [DateRange: start='2006-10-03T00:00:00' end='2006-10-09T23:59:59.999000']

print(month_to_date(REF))
# Output: [DateRange: start='2006-10-01T00:00:00' end='2006-10-10T10:14:34.956000']

print(previous_quarter(REF))
# Output: [DateRange: start='2006-07-01T00:00:00' end='2006-09-30T23:59:59.999000']

# Example 2: Windows by name
print("\n" + "=" * 50)
print("Example 2: Windows by Name")
print("=" * 50)

for name in ("previous_month", "year_to_date", "this_month_last_year"):
    print(f"{name:22} {resolve(name, REF)}")

print(resolve("last_n_days", REF, days=30))

# Example 3: Membership and duration
print("\n" + "=" * 50)
print("Example 3: Membership and Duration")
print("=" * 50)

window = previous_month(REF)
print(datetime(2006, 9, 15, 12, 0) in window)
# Output: True
print(window.duration())
# Output: 29 days, 23:59:59.999000

# Example 4: Explicit quarters, time zones
print("\n" + "=" * 50)
print("Example 4: Explicit Quarters")
print("=" * 50)

for q in Quarter:
    print(f"Q{q.number}", quarter(2005, q, tz=UTC))

# Example 5: Calendar conventions
print("\n" + "=" * 50)
print("Example 5: Calendar Conventions")
print("=" * 50)

print("Sunday weeks:", previous_week(REF))
print("de-DE weeks: ", previous_week(REF, config=WindowConfig.for_locale("de-DE")))

leap_new_year = datetime(2008, 1, 1, 9, 0)
print("legacy:  ", yesterday(leap_new_year))
# Output: legacy:   [DateRange: start='2008-12-31T00:00:00' end='2008-12-31T23:59:59.999000']
calendar_config = WindowConfig(day_rollback=DayRollback.CALENDAR)
print("calendar:", yesterday(leap_new_year, config=calendar_config))
# Output: calendar: [DateRange: start='2007-12-31T00:00:00' end='2007-12-31T23:59:59.999000']

# Example 6: Errors carry structured diagnostics
print("\n" + "=" * 50)
print("Example 6: Diagnostics")
print("=" * 50)

try:
    last_n_days(REF, 0)
except InvalidArgumentError as e:
    print(e)
    # Output:
    # error[DAY_COUNT_INVALID]: Day count must be at least 1, got 0
    #   = function: last_n_days
    #   = argument: days
    #   = expected: int >= 1
    #   = received: 0
    #   = help: Use today() for a window covering only the reference day
