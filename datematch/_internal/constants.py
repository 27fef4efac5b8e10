"""Internal constants for Datematch.

Message templates and the designators used when rendering values and
tolerances. This module is not part of the public API.
"""

from __future__ import annotations

# Variant names, as shown in error messages
CALENDAR_DATE: str = "calendar date"
LOCAL_TIMESTAMP: str = "local timestamp"
ZONED_TIMESTAMP: str = "zoned timestamp"
OFFSET_TIMESTAMP: str = "offset timestamp"

# Field-equality messages
SAME_YEAR_FAILURE: str = "{value} should have year {expected}"
SAME_YEAR_NEGATED: str = "{value} should not have year {expected}"
SAME_MONTH_FAILURE: str = "{value} should have month {expected}"
SAME_MONTH_NEGATED: str = "{value} should not have month {expected}"
SAME_DAY_FAILURE: str = "{value} should have day {expected} but had {actual}"
SAME_DAY_NEGATED: str = "{value} should not have day {expected}"

# Ordering messages
BEFORE_FAILURE: str = "{value} should be before {expected}"
BEFORE_NEGATED: str = "{value} should not be before {expected}"
AFTER_FAILURE: str = "{value} should be after {expected}"
AFTER_NEGATED: str = "{value} should not be after {expected}"

# Proximity messages
WITHIN_FAILURE: str = "{value} should be within {tolerance} of {anchor}"
WITHIN_NEGATED: str = "{value} should not be within {tolerance} of {anchor}"

# relativedelta fields, split by kind
RELATIVE_DATE_FIELDS: tuple[str, ...] = ("years", "months", "days", "leapdays")
RELATIVE_TIME_FIELDS: tuple[str, ...] = (
    "hours",
    "minutes",
    "seconds",
    "microseconds",
)
ABSOLUTE_FIELDS: tuple[str, ...] = (
    "year",
    "month",
    "day",
    "weekday",
    "hour",
    "minute",
    "second",
    "microsecond",
)

# Unit conversions for rendering durations
SECONDS_PER_MINUTE: int = 60
SECONDS_PER_HOUR: int = 60 * SECONDS_PER_MINUTE
MICROS_PER_SECOND: int = 1_000_000


__all__ = [
    "CALENDAR_DATE",
    "LOCAL_TIMESTAMP",
    "ZONED_TIMESTAMP",
    "OFFSET_TIMESTAMP",
    "SAME_YEAR_FAILURE",
    "SAME_YEAR_NEGATED",
    "SAME_MONTH_FAILURE",
    "SAME_MONTH_NEGATED",
    "SAME_DAY_FAILURE",
    "SAME_DAY_NEGATED",
    "BEFORE_FAILURE",
    "BEFORE_NEGATED",
    "AFTER_FAILURE",
    "AFTER_NEGATED",
    "WITHIN_FAILURE",
    "WITHIN_NEGATED",
    "RELATIVE_DATE_FIELDS",
    "RELATIVE_TIME_FIELDS",
    "ABSOLUTE_FIELDS",
    "SECONDS_PER_MINUTE",
    "SECONDS_PER_HOUR",
    "MICROS_PER_SECOND",
]
