"""Field-equality matchers: same year, same month, same day.

Each matcher compares one calendar field of two values of the same
variant and ignores every other field, including the zone or offset of
aware datetimes. The comparison is symmetric and reflexive.

Examples:
    >>> from datetime import date
    >>> have_same_year(date(1998, 3, 10)).test(date(1998, 2, 9)).passed
    True
    >>> have_same_month(date(1998, 3, 10)).test(date(1998, 2, 9)).failure_message
    '1998-02-09 should have month 3'
"""

from __future__ import annotations

from datetime import date
from typing import Callable

from datematch._internal.constants import (
    SAME_DAY_FAILURE,
    SAME_DAY_NEGATED,
    SAME_MONTH_FAILURE,
    SAME_MONTH_NEGATED,
    SAME_YEAR_FAILURE,
    SAME_YEAR_NEGATED,
)
from datematch.core.result import Matcher, MatchResult
from datematch.core.variants import TemporalAdapter, adapter_for, adapter_of


def _field_matcher(
    expected: date,
    field: Callable[[TemporalAdapter, date], int],
    name: str,
    failure: str,
    negated: str,
) -> Matcher[date]:
    expected_field = field(adapter_of(expected), expected)

    def test(value: date) -> MatchResult:
        adapter = adapter_for(value, expected)
        actual = field(adapter, value)
        rendered = adapter.render(value)
        return MatchResult(
            actual == expected_field,
            failure.format(value=rendered, expected=expected_field, actual=actual),
            negated.format(value=rendered, expected=expected_field, actual=actual),
        )

    return Matcher(test, f"{name} {expected_field}")


def have_same_year(expected: date) -> Matcher[date]:
    """Build a matcher passing when a value has the same year as expected.

    Args:
        expected: The date or datetime whose year is wanted.

    Returns:
        A Matcher over values of the same variant as expected.

    Raises:
        UnsupportedValueError: If expected is not a date or datetime.
    """
    return _field_matcher(
        expected,
        TemporalAdapter.year,
        "has year",
        SAME_YEAR_FAILURE,
        SAME_YEAR_NEGATED,
    )


def have_same_month(expected: date) -> Matcher[date]:
    """Build a matcher passing when a value has the same month as expected.

    Only the month number is compared; February 1998 and February 2018
    have the same month.
    """
    return _field_matcher(
        expected,
        TemporalAdapter.month,
        "has month",
        SAME_MONTH_FAILURE,
        SAME_MONTH_NEGATED,
    )


def have_same_day(expected: date) -> Matcher[date]:
    """Build a matcher passing when a value has the same day of month.

    The failure message also names the day the value actually had.
    """
    return _field_matcher(
        expected,
        TemporalAdapter.day,
        "has day",
        SAME_DAY_FAILURE,
        SAME_DAY_NEGATED,
    )


__all__ = [
    "have_same_year",
    "have_same_month",
    "have_same_day",
]
