"""Ordering matchers: strictly before, strictly after.

Calendar dates and local timestamps are ordered field by field; zoned and
offset timestamps are ordered by instant. Equal values pass neither
matcher, so for any two values exactly one of ``before``, same point and
``after`` holds. Same point means same instant for aware values, not
Python's ``==``.
"""

from __future__ import annotations

from datetime import date

from datematch._internal.constants import (
    AFTER_FAILURE,
    AFTER_NEGATED,
    BEFORE_FAILURE,
    BEFORE_NEGATED,
)
from datematch.core.result import Matcher, MatchResult
from datematch.core.variants import adapter_for, adapter_of


def before(expected: date) -> Matcher[date]:
    """Build a matcher passing when a value is strictly earlier than expected.

    Zoned and offset timestamps are compared by instant, including two
    readings of the same wall-clock time inside a DST overlap. Python's own
    ``==`` treats those two readings as equal when they share a tzinfo;
    here the ``fold=0`` reading is before the ``fold=1`` one.

    Args:
        expected: The date or datetime the value must precede.

    Returns:
        A Matcher over values of the same variant as expected.

    Raises:
        UnsupportedValueError: If expected is not a date or datetime.

    Examples:
        >>> from datetime import date
        >>> before(date(1998, 2, 10)).test(date(1998, 2, 9)).passed
        True
        >>> before(date(1998, 2, 9)).test(date(1998, 2, 10)).failure_message
        '1998-02-10 should be before 1998-02-09'
    """
    rendered_expected = adapter_of(expected).render(expected)

    def test(value: date) -> MatchResult:
        adapter = adapter_for(value, expected)
        rendered = adapter.render(value)
        return MatchResult(
            adapter.precedes(value, expected),
            BEFORE_FAILURE.format(value=rendered, expected=rendered_expected),
            BEFORE_NEGATED.format(value=rendered, expected=rendered_expected),
        )

    return Matcher(test, f"before {rendered_expected}")


def after(expected: date) -> Matcher[date]:
    """Build a matcher passing when a value is strictly later than expected.

    ``after(b).test(a)`` passes exactly when ``before(a).test(b)`` does.
    Equality is the same instant-based rule ``before`` uses.

    Examples:
        >>> from datetime import date
        >>> after(date(1998, 2, 9)).test(date(1998, 2, 10)).passed
        True
    """
    rendered_expected = adapter_of(expected).render(expected)

    def test(value: date) -> MatchResult:
        adapter = adapter_for(value, expected)
        rendered = adapter.render(value)
        return MatchResult(
            adapter.precedes(expected, value),
            AFTER_FAILURE.format(value=rendered, expected=rendered_expected),
            AFTER_NEGATED.format(value=rendered, expected=rendered_expected),
        )

    return Matcher(test, f"after {rendered_expected}")


__all__ = [
    "before",
    "after",
]
