"""Proximity matcher: within a tolerance of an anchor.

The tolerance spans a closed interval around the anchor:

    start = anchor - tolerance
    end   = anchor + tolerance
    pass  = value == start or value == end or start < value < end

Equality and ordering follow the variant's rules, so for zoned and offset
timestamps the interval bounds are compared by instant. The bounds come
from ordinary relativedelta/timedelta arithmetic; Jan 31 + 1 month lands
on the last day of February, as relativedelta defines. A bound that would fall
outside the representable range clamps to the earliest or latest value
of the variant, so an anchor near date.min or date.max still matches
itself.
"""

from __future__ import annotations

from datetime import date

from datematch._internal.constants import WITHIN_FAILURE, WITHIN_NEGATED
from datematch.core.result import Matcher, MatchResult
from datematch.core.variants import adapter_for, adapter_of
from datematch.format.iso8601 import render_amount


def within(tolerance: object, anchor: date) -> Matcher[date]:
    """Build a matcher passing when a value lies within tolerance of anchor.

    Args:
        tolerance: A ``relativedelta`` calendar amount, or for timestamps
            also a ``timedelta`` (or time-only ``relativedelta``).
        anchor: The date or datetime at the centre of the interval.

    Returns:
        A Matcher over values of the same variant as anchor.

    Raises:
        UnsupportedValueError: If anchor is not a date or datetime.
        ToleranceError: If the tolerance does not suit the anchor's variant,
            mixes calendar and time fields, or is negative.

    Examples:
        >>> from datetime import date
        >>> from dateutil.relativedelta import relativedelta
        >>> within(relativedelta(days=3), date(1998, 2, 10)).test(date(1998, 2, 9)).passed
        True
        >>> within(relativedelta(days=3), date(1998, 2, 25)).test(date(1998, 2, 9)).failure_message
        '1998-02-09 should be within P3D of 1998-02-25'
    """
    anchor_adapter = adapter_of(anchor)
    amount = anchor_adapter.tolerance(tolerance)
    start = anchor_adapter.minus(anchor, amount)
    end = anchor_adapter.plus(anchor, amount)

    rendered_tolerance = render_amount(tolerance)
    rendered_anchor = anchor_adapter.render(anchor)

    def test(value: date) -> MatchResult:
        adapter = adapter_for(value, anchor)
        passed = (
            adapter.same_point(value, start)
            or adapter.same_point(value, end)
            or (adapter.precedes(start, value) and adapter.precedes(value, end))
        )
        rendered = adapter.render(value)
        return MatchResult(
            passed,
            WITHIN_FAILURE.format(
                value=rendered, tolerance=rendered_tolerance, anchor=rendered_anchor
            ),
            WITHIN_NEGATED.format(
                value=rendered, tolerance=rendered_tolerance, anchor=rendered_anchor
            ),
        )

    return Matcher(test, f"within {rendered_tolerance} of {rendered_anchor}")


__all__ = ["within"]
