"""Assertions: feed matcher results to the host test framework.

``should`` and ``should_not`` evaluate a matcher and hand the MatchResult
to the active Reporter. The default reporter raises DateAssertionError,
an AssertionError, which pytest and unittest report as an ordinary test
failure. A different reporter can be installed for a block of code with
``use_reporter``, e.g. a CollectingReporter for soft assertions.

Named assertions take both operands explicitly:

    should_have_same_year_as(value, expected)
    should_be_before(value, expected)
    should_be_within(value, tolerance, anchor)

Examples:
    >>> from datetime import date
    >>> should_be_before(date(1998, 2, 9), date(1998, 2, 10))
    >>> should_be_before(date(1998, 2, 10), date(1998, 2, 9))
    Traceback (most recent call last):
    ...
    datematch.errors.DateAssertionError: 1998-02-10 should be before 1998-02-09
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from contextvars import ContextVar, Token
from datetime import date
from typing import Iterator, Protocol, TypeVar

from datematch.core.result import Matcher, MatchResult
from datematch.errors import DateAssertionError
from datematch.matchers import (
    after,
    before,
    have_same_day,
    have_same_month,
    have_same_year,
    within,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Reporter(Protocol):
    """The pass/fail capability the assertions depend on."""

    def assert_match(self, result: MatchResult) -> None:
        """Stay silent if the result passed, report failure_message otherwise."""
        ...

    def assert_not_match(self, result: MatchResult) -> None:
        """Stay silent if the result failed, report negated_failure_message otherwise."""
        ...


class RaisingReporter:
    """Report failures by raising DateAssertionError."""

    def assert_match(self, result: MatchResult) -> None:
        __tracebackhide__ = True
        if not result.passed:
            raise DateAssertionError(result.failure_message)

    def assert_not_match(self, result: MatchResult) -> None:
        __tracebackhide__ = True
        if result.passed:
            raise DateAssertionError(result.negated_failure_message)

    def __repr__(self) -> str:
        return "RaisingReporter()"


class CollectingReporter:
    """Record failures instead of raising, for soft assertions.

    Every failing check in a block is kept; ``raise_if_failed`` reports
    them together once the block is done.

    Examples:
        >>> from datetime import date
        >>> collector = CollectingReporter()
        >>> with use_reporter(collector):
        ...     should_be_before(date(1998, 2, 10), date(1998, 2, 9))
        ...     should_have_same_day_as(date(1998, 2, 9), date(1998, 3, 10))
        >>> len(collector.failures)
        2
    """

    def __init__(self) -> None:
        self.failures: list[str] = []

    def assert_match(self, result: MatchResult) -> None:
        if not result.passed:
            self.failures.append(result.failure_message)

    def assert_not_match(self, result: MatchResult) -> None:
        if result.passed:
            self.failures.append(result.negated_failure_message)

    def raise_if_failed(self) -> None:
        """Raise one DateAssertionError listing every recorded failure.

        Raises:
            DateAssertionError: If any failure was recorded.
        """
        __tracebackhide__ = True
        if not self.failures:
            return
        count = len(self.failures)
        lines = "\n".join(f"  {message}" for message in self.failures)
        raise DateAssertionError(f"{count} date assertion(s) failed:\n{lines}")


_DEFAULT_REPORTER = RaisingReporter()
_reporter: ContextVar[Reporter] = ContextVar("datematch_reporter", default=_DEFAULT_REPORTER)


def get_reporter() -> Reporter:
    """Return the reporter active in the current context."""
    return _reporter.get()


def set_reporter(reporter: Reporter) -> Token[Reporter]:
    """Install a reporter for the current context.

    Returns:
        A token that ``reset_reporter`` accepts to restore the previous one.
    """
    return _reporter.set(reporter)


def reset_reporter(token: Token[Reporter]) -> None:
    """Restore the reporter that was active before ``set_reporter``."""
    _reporter.reset(token)


@contextmanager
def use_reporter(reporter: Reporter) -> Iterator[Reporter]:
    """Use a reporter for the duration of a with block."""
    token = _reporter.set(reporter)
    try:
        yield reporter
    finally:
        _reporter.reset(token)


def should(value: T, matcher: Matcher[T]) -> None:
    """Assert that value matches.

    Raises:
        DateAssertionError: With the default reporter, if value does not match.
    """
    __tracebackhide__ = True
    result = matcher.test(value)
    if not result.passed:
        logger.debug("date assertion failed: %s", result.failure_message)
    get_reporter().assert_match(result)


def should_not(value: T, matcher: Matcher[T]) -> None:
    """Assert that value does not match.

    Raises:
        DateAssertionError: With the default reporter, if value matches.
    """
    __tracebackhide__ = True
    result = matcher.test(value)
    if result.passed:
        logger.debug("negated date assertion failed: %s", result.negated_failure_message)
    get_reporter().assert_not_match(result)


# ---------------------------------------------------------------------------
# Named assertions
# ---------------------------------------------------------------------------


def should_have_same_year_as(value: date, expected: date) -> None:
    """Assert that value has the same year as expected, ignoring other fields."""
    __tracebackhide__ = True
    should(value, have_same_year(expected))


def should_not_have_same_year_as(value: date, expected: date) -> None:
    __tracebackhide__ = True
    should_not(value, have_same_year(expected))


def should_have_same_month_as(value: date, expected: date) -> None:
    """Assert that value has the same month as expected, ignoring other fields."""
    __tracebackhide__ = True
    should(value, have_same_month(expected))


def should_not_have_same_month_as(value: date, expected: date) -> None:
    __tracebackhide__ = True
    should_not(value, have_same_month(expected))


def should_have_same_day_as(value: date, expected: date) -> None:
    """Assert that value has the same day of month as expected."""
    __tracebackhide__ = True
    should(value, have_same_day(expected))


def should_not_have_same_day_as(value: date, expected: date) -> None:
    __tracebackhide__ = True
    should_not(value, have_same_day(expected))


def should_be_before(value: date, expected: date) -> None:
    """Assert that value is strictly earlier than expected."""
    __tracebackhide__ = True
    should(value, before(expected))


def should_not_be_before(value: date, expected: date) -> None:
    __tracebackhide__ = True
    should_not(value, before(expected))


def should_be_after(value: date, expected: date) -> None:
    """Assert that value is strictly later than expected."""
    __tracebackhide__ = True
    should(value, after(expected))


def should_not_be_after(value: date, expected: date) -> None:
    __tracebackhide__ = True
    should_not(value, after(expected))


def should_be_within(value: date, tolerance: object, anchor: date) -> None:
    """Assert that value lies within tolerance of anchor, bounds included."""
    __tracebackhide__ = True
    should(value, within(tolerance, anchor))


def should_not_be_within(value: date, tolerance: object, anchor: date) -> None:
    __tracebackhide__ = True
    should_not(value, within(tolerance, anchor))


__all__ = [
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
]
