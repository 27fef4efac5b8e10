"""Datematch exception hierarchy.

Misuse of the library (unsupported values, mismatched variants, bad
tolerances) raises a DateMatchError subclass. A comparison that simply
does not hold is not an error: it is reported as a DateAssertionError.
"""

from __future__ import annotations


class DateMatchError(Exception):
    """Base exception for all Datematch usage errors."""

    pass


class UnsupportedValueError(DateMatchError, TypeError):
    """Value is not a date/time the matchers understand.

    Raised when a matcher is given something other than a
    ``datetime.date`` or ``datetime.datetime``.

    Examples:
        - A string such as ``"2024-01-15"``
        - A ``datetime.time`` without a date
    """

    pass


class VariantMismatchError(DateMatchError, TypeError):
    """Operands belong to different date/time variants.

    Raised when the tested value and the expected value are not the same
    kind of date/time.

    Examples:
        - A ``date`` compared with a ``datetime``
        - A naive ``datetime`` compared with an aware one
        - A zoned ``datetime`` compared with a fixed-offset one
    """

    pass


class ToleranceError(DateMatchError, ValueError):
    """Invalid tolerance for a proximity check.

    Examples:
        - A ``timedelta`` tolerance for a calendar date
        - A ``relativedelta`` mixing days and hours
        - A ``relativedelta`` with absolute fields (``year=2024``)
        - A negative tolerance
    """

    pass


class DateAssertionError(AssertionError):
    """A date/time assertion did not hold.

    Subclasses AssertionError so test runners report it as an ordinary
    test failure rather than an error.
    """

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


__all__ = [
    "DateMatchError",
    "UnsupportedValueError",
    "VariantMismatchError",
    "ToleranceError",
    "DateAssertionError",
]
