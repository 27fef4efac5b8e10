"""Datematch: date/time matchers and assertions for Python test suites.

Datematch checks whether two dates or timestamps share a year, month or
day, or occur before, after, or within a tolerance of one another, and
reports failures with readable messages.

Variants:
    datetime.date: Calendar date
    naive datetime.datetime: Local timestamp
    datetime.datetime with datetime.timezone: Offset timestamp
    datetime.datetime with zoneinfo/dateutil zone: Zoned timestamp

Tolerances:
    relativedelta: Calendar amount (years, months, days)
    timedelta: Exact duration (timestamps only)

Matchers:
    have_same_year, have_same_month, have_same_day
    before, after
    within

Assertions:
    should, should_not
    should_have_same_year_as, should_be_before, should_be_within, ...

Exceptions:
    DateMatchError: Base exception for misuse
    UnsupportedValueError: Not a date or datetime
    VariantMismatchError: Operands of different variants
    ToleranceError: Unusable tolerance
    DateAssertionError: A failed assertion (an AssertionError)

Example:
    >>> from datetime import date
    >>> from dateutil.relativedelta import relativedelta
    >>> from datematch import should_be_within
    >>> should_be_within(date(1998, 2, 9), relativedelta(days=3), date(1998, 2, 10))
"""

from __future__ import annotations

__version__ = "0.1.0"

# Core types
from datematch.core.result import Matcher, MatchResult
from datematch.core.variants import Variant, variant_of

# Matchers
from datematch.matchers import (
    after,
    before,
    have_same_day,
    have_same_month,
    have_same_year,
    within,
)

# Assertions
from datematch.assertions import (
    CollectingReporter,
    RaisingReporter,
    Reporter,
    get_reporter,
    reset_reporter,
    set_reporter,
    should,
    should_be_after,
    should_be_before,
    should_be_within,
    should_have_same_day_as,
    should_have_same_month_as,
    should_have_same_year_as,
    should_not,
    should_not_be_after,
    should_not_be_before,
    should_not_be_within,
    should_not_have_same_day_as,
    should_not_have_same_month_as,
    should_not_have_same_year_as,
    use_reporter,
)

# Exceptions
from datematch.errors import (
    DateAssertionError,
    DateMatchError,
    ToleranceError,
    UnsupportedValueError,
    VariantMismatchError,
)

__all__: list[str] = [
    "__version__",
    # Core types
    "Matcher",
    "MatchResult",
    "Variant",
    "variant_of",
    # Matchers
    "have_same_year",
    "have_same_month",
    "have_same_day",
    "before",
    "after",
    "within",
    # Assertions
    "Reporter",
    "RaisingReporter",
    "CollectingReporter",
    "get_reporter",
    "set_reporter",
    "reset_reporter",
    "use_reporter",
    "should",
    "should_not",
    "should_have_same_year_as",
    "should_not_have_same_year_as",
    "should_have_same_month_as",
    "should_not_have_same_month_as",
    "should_have_same_day_as",
    "should_not_have_same_day_as",
    "should_be_before",
    "should_not_be_before",
    "should_be_after",
    "should_not_be_after",
    "should_be_within",
    "should_not_be_within",
    # Exceptions
    "DateMatchError",
    "UnsupportedValueError",
    "VariantMismatchError",
    "ToleranceError",
    "DateAssertionError",
]
