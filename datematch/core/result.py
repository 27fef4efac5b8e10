"""MatchResult and Matcher: the values every date matcher produces.

A Matcher wraps a pure test function. Testing a value yields a fresh
MatchResult carrying the outcome and both messages, so the same result
can drive a positive assertion or a negated one.

Examples:
    >>> result = MatchResult(False, "a should be b", "a should not be b")
    >>> bool(result)
    False
    >>> result.negate().failure_message
    'a should not be b'
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class MatchResult:
    """Outcome of testing one value against a matcher.

    Attributes:
        passed: Whether the value matched.
        failure_message: Explains a failed positive assertion.
        negated_failure_message: Explains a failed negated assertion,
            i.e. a match where none was wanted.
    """

    passed: bool
    failure_message: str
    negated_failure_message: str

    def __bool__(self) -> bool:
        return self.passed

    def negate(self) -> MatchResult:
        """Return the result of the inverse test.

        The outcome flips and the two messages swap roles.
        """
        return MatchResult(
            not self.passed,
            self.negated_failure_message,
            self.failure_message,
        )


class Matcher(Generic[T]):
    """A reusable, pure test over values of one date/time variant.

    Matchers are built by the constructors in ``datematch.matchers`` and
    hold no state beyond their expected value, so they can be shared
    across tests and threads.

    Examples:
        >>> from datetime import date
        >>> from datematch.matchers import have_same_year
        >>> have_same_year(date(1998, 3, 10)).test(date(1998, 2, 9)).passed
        True
        >>> (~have_same_year(date(1998, 3, 10)))(date(1998, 2, 9)).passed
        False
    """

    __slots__ = ("_test", "_description")

    def __init__(self, test: Callable[[T], MatchResult], description: str) -> None:
        self._test = test
        self._description = description

    @property
    def description(self) -> str:
        """Short human-readable description, e.g. ``before 1998-02-10``."""
        return self._description

    def test(self, value: T) -> MatchResult:
        """Test a value and return a fresh MatchResult."""
        return self._test(value)

    def __call__(self, value: T) -> MatchResult:
        return self._test(value)

    def invert(self) -> Matcher[T]:
        """Return a matcher that passes exactly when this one fails."""
        return Matcher(lambda value: self._test(value).negate(), f"not {self._description}")

    def __invert__(self) -> Matcher[T]:
        return self.invert()

    def __and__(self, other: Matcher[T]) -> Matcher[T]:
        """Both matchers must pass; the first failure is reported."""

        def test(value: T) -> MatchResult:
            first = self._test(value)
            if not first.passed:
                return first
            return other.test(value)

        return Matcher(test, f"{self._description} and {other.description}")

    def __or__(self, other: Matcher[T]) -> Matcher[T]:
        """Either matcher may pass; the second result is reported otherwise."""

        def test(value: T) -> MatchResult:
            first = self._test(value)
            if first.passed:
                return first
            return other.test(value)

        return Matcher(test, f"{self._description} or {other.description}")

    def __repr__(self) -> str:
        return f"Matcher({self._description!r})"


__all__ = [
    "MatchResult",
    "Matcher",
]
