"""Tests for MatchResult and Matcher composition."""

from __future__ import annotations

import dataclasses
from datetime import date

import pytest

from datematch.core.result import Matcher, MatchResult
from datematch.matchers import after, before, have_same_month, have_same_year


class TestMatchResult:
    """Tests for the MatchResult value."""

    def test_bool_follows_passed(self) -> None:
        assert MatchResult(True, "a", "b")
        assert not MatchResult(False, "a", "b")

    def test_negate_swaps_outcome_and_messages(self) -> None:
        """negate() flips passed and swaps the two messages."""
        result = MatchResult(False, "should", "should not").negate()

        assert result == MatchResult(True, "should not", "should")

    def test_immutable(self) -> None:
        """Results cannot be modified after creation."""
        result = MatchResult(True, "a", "b")

        with pytest.raises(dataclasses.FrozenInstanceError):
            result.passed = False  # type: ignore[misc]

    def test_fresh_result_per_test(self) -> None:
        """Testing twice yields equal but distinct results."""
        matcher = have_same_year(date(1998, 3, 10))

        first = matcher.test(date(1998, 2, 9))
        second = matcher.test(date(1998, 2, 9))

        assert first == second
        assert first is not second


class TestMatcher:
    """Tests for Matcher behaviour shared by every constructor."""

    def test_call_is_test(self) -> None:
        matcher = before(date(1998, 2, 10))

        assert matcher(date(1998, 2, 9)) == matcher.test(date(1998, 2, 9))

    def test_description(self) -> None:
        assert before(date(1998, 2, 10)).description == "before 1998-02-10"
        assert have_same_year(date(1998, 2, 10)).description == "has year 1998"
        assert repr(after(date(1998, 2, 10))) == "Matcher('after 1998-02-10')"

    def test_invert(self) -> None:
        """An inverted matcher passes when the original fails."""
        matcher = before(date(1998, 2, 10)).invert()
        result = matcher.test(date(1998, 2, 9))

        assert not result.passed
        assert result.failure_message == "1998-02-09 should not be before 1998-02-10"
        assert matcher.description == "not before 1998-02-10"

    def test_tilde_inverts(self) -> None:
        assert (~before(date(1998, 2, 10))).test(date(1998, 2, 11)).passed

    def test_and_reports_first_failure(self) -> None:
        """Both sides must pass; the first failing result is returned."""
        matcher = have_same_year(date(1998, 3, 10)) & have_same_month(date(1998, 3, 10))

        assert matcher.test(date(1998, 3, 1)).passed

        result = matcher.test(date(1998, 2, 9))
        assert not result.passed
        assert result.failure_message == "1998-02-09 should have month 3"

    def test_or_passes_on_either(self) -> None:
        """Either side may pass."""
        matcher = before(date(1998, 2, 1)) | after(date(1998, 2, 28))

        assert matcher.test(date(1998, 1, 15)).passed
        assert matcher.test(date(1998, 3, 15)).passed

        result = matcher.test(date(1998, 2, 9))
        assert not result.passed
        assert result.failure_message == "1998-02-09 should be after 1998-02-28"
        assert matcher.description == "before 1998-02-01 or after 1998-02-28"

    def test_custom_test_function(self) -> None:
        """A Matcher can wrap any function returning a MatchResult."""
        weekend = Matcher(
            lambda value: MatchResult(
                value.weekday() >= 5,
                f"{value} should be a weekend day",
                f"{value} should not be a weekend day",
            ),
            "weekend day",
        )

        assert weekend.test(date(1998, 2, 7)).passed
        assert not weekend.test(date(1998, 2, 9)).passed
