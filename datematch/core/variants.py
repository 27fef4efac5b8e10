"""Date/time variants and the adapters the matchers are written against.

Every matcher is written once, against TemporalAdapter. Each of the four
variants gets a thin adapter that supplies its field access, ordering
rule and arithmetic:

    CALENDAR_DATE     datetime.date
    LOCAL_TIMESTAMP   naive datetime.datetime
    OFFSET_TIMESTAMP  datetime.datetime with a datetime.timezone offset
    ZONED_TIMESTAMP   datetime.datetime with any other tzinfo (zoneinfo, dateutil)

Comparison Rules:
    - Calendar dates and local timestamps: field by field, down to
      microseconds.
    - Offset and zoned timestamps: by instant. Both sides are converted
      to UTC first, so values in different zones order correctly and two
      wall-clock readings inside a DST overlap (fold=0 / fold=1) still
      order by the moment they denote.

Arithmetic Rules:
    - Calendar amounts (relativedelta) move the wall-clock fields of the
      value in its own zone. For zoned values the result is re-resolved
      through UTC, so a result inside a DST gap moves forward by the gap.
    - Exact durations (timedelta) move the instant. For zoned values the
      value is converted to UTC, shifted, and converted back.
"""

from __future__ import annotations

import abc
import enum
from datetime import date, datetime, timedelta, timezone
from typing import Any, ClassVar

from datematch._internal.constants import (
    CALENDAR_DATE,
    LOCAL_TIMESTAMP,
    OFFSET_TIMESTAMP,
    ZONED_TIMESTAMP,
)
from datematch._internal.validation import (
    Tolerance,
    calendar_tolerance,
    timestamp_tolerance,
)
from datematch.errors import UnsupportedValueError, VariantMismatchError
from datematch.format.iso8601 import render_value


class Variant(enum.Enum):
    """The four kinds of date/time value the matchers accept."""

    CALENDAR_DATE = CALENDAR_DATE
    LOCAL_TIMESTAMP = LOCAL_TIMESTAMP
    ZONED_TIMESTAMP = ZONED_TIMESTAMP
    OFFSET_TIMESTAMP = OFFSET_TIMESTAMP


def variant_of(value: object) -> Variant:
    """Classify a date/time value.

    Args:
        value: The value to classify.

    Returns:
        The variant of the value.

    Raises:
        UnsupportedValueError: If value is not a date or datetime.

    Examples:
        >>> from datetime import date, datetime, timezone
        >>> variant_of(date(1998, 2, 9))
        <Variant.CALENDAR_DATE: 'calendar date'>
        >>> variant_of(datetime(1998, 2, 9, 10, 0))
        <Variant.LOCAL_TIMESTAMP: 'local timestamp'>
        >>> variant_of(datetime(1998, 2, 9, 10, 0, tzinfo=timezone.utc))
        <Variant.OFFSET_TIMESTAMP: 'offset timestamp'>
    """
    # datetime subclasses date, so it must be checked first
    if isinstance(value, datetime):
        if value.tzinfo is None or value.utcoffset() is None:
            return Variant.LOCAL_TIMESTAMP
        if isinstance(value.tzinfo, timezone):
            return Variant.OFFSET_TIMESTAMP
        return Variant.ZONED_TIMESTAMP
    if isinstance(value, date):
        return Variant.CALENDAR_DATE
    raise UnsupportedValueError(
        f"expected a date or datetime, got {type(value).__name__}: {value!r}"
    )


class TemporalAdapter(abc.ABC):
    """Field access, ordering and arithmetic for one variant.

    Adapters are stateless; one shared instance exists per variant.
    ``lowest`` and ``highest`` are the earliest and latest representable
    values of the variant.
    """

    variant: ClassVar[Variant]
    lowest: ClassVar[Any]
    highest: ClassVar[Any]

    def year(self, value: Any) -> int:
        return value.year

    def month(self, value: Any) -> int:
        return value.month

    def day(self, value: Any) -> int:
        return value.day

    @abc.abstractmethod
    def sort_key(self, value: Any) -> Any:
        """Return the value this variant orders and compares by."""

    def precedes(self, left: Any, right: Any) -> bool:
        """Test if left is strictly earlier than right."""
        return self.sort_key(left) < self.sort_key(right)

    def same_point(self, left: Any, right: Any) -> bool:
        """Test if left and right denote the same point in time."""
        return self.sort_key(left) == self.sort_key(right)

    @abc.abstractmethod
    def tolerance(self, amount: object) -> Tolerance:
        """Validate a proximity tolerance for this variant.

        Raises:
            ToleranceError: If the amount is not usable with this variant.
        """

    def _add(self, value: Any, amount: Tolerance) -> Any:
        return value + amount

    def plus(self, value: Any, amount: Tolerance) -> Any:
        """Return value moved forward by amount.

        A result past the latest representable value clamps to ``highest``.
        """
        try:
            return self._add(value, amount)
        except (OverflowError, ValueError):
            return self.highest

    def minus(self, value: Any, amount: Tolerance) -> Any:
        """Return value moved back by amount.

        A result before the earliest representable value clamps to ``lowest``.
        """
        try:
            return self._add(value, -amount)
        except (OverflowError, ValueError):
            return self.lowest

    def render(self, value: Any) -> str:
        return render_value(value)

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class CalendarDateAdapter(TemporalAdapter):
    """Adapter for ``datetime.date``."""

    variant = Variant.CALENDAR_DATE
    lowest = date.min
    highest = date.max

    def sort_key(self, value: date) -> date:
        return value

    def tolerance(self, amount: object) -> Tolerance:
        return calendar_tolerance(amount)


class LocalTimestampAdapter(TemporalAdapter):
    """Adapter for naive ``datetime.datetime``."""

    variant = Variant.LOCAL_TIMESTAMP
    lowest = datetime.min
    highest = datetime.max

    def sort_key(self, value: datetime) -> datetime:
        return value

    def tolerance(self, amount: object) -> Tolerance:
        return timestamp_tolerance(amount)


class _InstantAdapter(TemporalAdapter):
    """Shared ordering for aware datetimes: compare as UTC instants."""

    lowest = datetime.min.replace(tzinfo=timezone.utc)
    highest = datetime.max.replace(tzinfo=timezone.utc)

    def sort_key(self, value: datetime) -> datetime:
        return value.astimezone(timezone.utc)

    def tolerance(self, amount: object) -> Tolerance:
        return timestamp_tolerance(amount)


class OffsetTimestampAdapter(_InstantAdapter):
    """Adapter for ``datetime.datetime`` with a fixed UTC offset.

    With a fixed offset, wall-clock and instant arithmetic agree, so the
    inherited ``value + amount`` serves both kinds of tolerance.
    """

    variant = Variant.OFFSET_TIMESTAMP


class ZonedTimestampAdapter(_InstantAdapter):
    """Adapter for ``datetime.datetime`` in a geographic time zone."""

    variant = Variant.ZONED_TIMESTAMP

    def _add(self, value: datetime, amount: Tolerance) -> datetime:
        if isinstance(amount, timedelta):
            moved = value.astimezone(timezone.utc) + amount
            return moved.astimezone(value.tzinfo)
        moved = value + amount
        return moved.astimezone(timezone.utc).astimezone(value.tzinfo)


_ADAPTERS: dict[Variant, TemporalAdapter] = {
    adapter.variant: adapter
    for adapter in (
        CalendarDateAdapter(),
        LocalTimestampAdapter(),
        ZonedTimestampAdapter(),
        OffsetTimestampAdapter(),
    )
}


def adapter_of(value: object) -> TemporalAdapter:
    """Return the adapter for a single value's variant.

    Raises:
        UnsupportedValueError: If value is not a date or datetime.
    """
    return _ADAPTERS[variant_of(value)]


def adapter_for(value: object, other: object) -> TemporalAdapter:
    """Return the adapter shared by two operands.

    Args:
        value: The value under test.
        other: The expected value or anchor.

    Returns:
        The adapter for the common variant.

    Raises:
        UnsupportedValueError: If either operand is not a date or datetime.
        VariantMismatchError: If the operands are of different variants.

    Examples:
        >>> from datetime import date, datetime
        >>> adapter_for(date(1998, 2, 9), date(1998, 2, 10))
        CalendarDateAdapter()
        >>> adapter_for(date(1998, 2, 9), datetime(1998, 2, 10, 0, 0))
        Traceback (most recent call last):
        ...
        datematch.errors.VariantMismatchError: cannot compare calendar date 1998-02-09 with local timestamp 1998-02-10T00:00:00
    """
    left = variant_of(value)
    right = variant_of(other)
    if left is not right:
        raise VariantMismatchError(
            f"cannot compare {left.value} {render_value(value)} "
            f"with {right.value} {render_value(other)}"
        )
    return _ADAPTERS[left]


__all__ = [
    "Variant",
    "variant_of",
    "TemporalAdapter",
    "CalendarDateAdapter",
    "LocalTimestampAdapter",
    "ZonedTimestampAdapter",
    "OffsetTimestampAdapter",
    "adapter_of",
    "adapter_for",
]
