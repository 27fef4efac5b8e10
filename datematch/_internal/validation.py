"""Tolerance validation for proximity checks.

A tolerance is either a calendar amount (a relativedelta with relative
date fields only) or an exact duration (a timedelta, or a relativedelta
with relative time fields only). The two kinds never mix within one
comparison.

This module is not part of the public API.
"""

from __future__ import annotations

from datetime import timedelta
from typing import Union

from dateutil.relativedelta import relativedelta

from datematch._internal.constants import (
    ABSOLUTE_FIELDS,
    RELATIVE_DATE_FIELDS,
    RELATIVE_TIME_FIELDS,
)
from datematch.errors import ToleranceError

Tolerance = Union[relativedelta, timedelta]


def _set_fields(amount: relativedelta, fields: tuple[str, ...]) -> list[str]:
    return [name for name in fields if getattr(amount, name)]


def _check_relativedelta(amount: relativedelta) -> None:
    """Reject absolute fields and negative components.

    Raises:
        ToleranceError: If the relativedelta is not a plain amount.
    """
    absolute = [name for name in ABSOLUTE_FIELDS if getattr(amount, name) is not None]
    if absolute:
        raise ToleranceError(
            f"tolerance must be a relative amount, got absolute field(s) "
            f"{', '.join(absolute)} in {amount!r}"
        )

    negative = [
        name
        for name in RELATIVE_DATE_FIELDS + RELATIVE_TIME_FIELDS
        if getattr(amount, name) < 0
    ]
    if negative:
        raise ToleranceError(
            f"tolerance must not be negative, got {amount!r}"
        )


def calendar_tolerance(amount: object) -> relativedelta:
    """Validate a tolerance for calendar dates.

    Calendar dates only accept calendar amounts: a relativedelta with
    years, months, weeks or days.

    Args:
        amount: The tolerance to validate.

    Returns:
        The tolerance, unchanged.

    Raises:
        ToleranceError: If the amount is not a non-negative calendar amount.

    Examples:
        >>> calendar_tolerance(relativedelta(days=3))
        relativedelta(days=+3)
        >>> calendar_tolerance(timedelta(days=3))
        Traceback (most recent call last):
        ...
        datematch.errors.ToleranceError: calendar dates need a relativedelta tolerance, got timedelta
    """
    if not isinstance(amount, relativedelta):
        raise ToleranceError(
            f"calendar dates need a relativedelta tolerance, got {type(amount).__name__}"
        )

    _check_relativedelta(amount)

    time_fields = _set_fields(amount, RELATIVE_TIME_FIELDS)
    if time_fields:
        raise ToleranceError(
            f"calendar dates cannot use time field(s) {', '.join(time_fields)} "
            f"in a tolerance, got {amount!r}"
        )

    return amount


def timestamp_tolerance(amount: object) -> Tolerance:
    """Validate a tolerance for timestamps.

    A relativedelta holding only time fields is an exact duration and is
    converted to a timedelta. A relativedelta holding only date fields
    stays a calendar amount. Mixing both is rejected; note that
    relativedelta itself carries 24 hours over into days, so use a
    timedelta for exact durations of a day or more.

    Args:
        amount: The tolerance to validate.

    Returns:
        A relativedelta for calendar amounts, a timedelta for exact ones.

    Raises:
        ToleranceError: If the amount is mixed, negative, or not an amount.
    """
    if isinstance(amount, timedelta):
        if amount < timedelta(0):
            raise ToleranceError(f"tolerance must not be negative, got {amount!r}")
        return amount

    if not isinstance(amount, relativedelta):
        raise ToleranceError(
            f"tolerance must be a relativedelta or timedelta, got {type(amount).__name__}"
        )

    _check_relativedelta(amount)

    date_fields = _set_fields(amount, RELATIVE_DATE_FIELDS)
    time_fields = _set_fields(amount, RELATIVE_TIME_FIELDS)
    if date_fields and time_fields:
        raise ToleranceError(
            f"tolerance mixes calendar field(s) {', '.join(date_fields)} with "
            f"time field(s) {', '.join(time_fields)}: {amount!r}"
        )

    if time_fields:
        return timedelta(
            hours=amount.hours,
            minutes=amount.minutes,
            seconds=amount.seconds,
            microseconds=amount.microseconds,
        )
    return amount


__all__ = [
    "Tolerance",
    "calendar_tolerance",
    "timestamp_tolerance",
]
