"""Tests for ISO 8601 rendering of values and tolerances."""

from __future__ import annotations

from datetime import date, datetime, timedelta, timezone
from zoneinfo import ZoneInfo

import pytest
from dateutil.relativedelta import relativedelta

from datematch.format import render_amount, render_value, zone_name


class TestRenderValue:
    """Tests for render_value()."""

    def test_date(self) -> None:
        assert render_value(date(1998, 2, 9)) == "1998-02-09"

    def test_local_timestamp(self) -> None:
        assert render_value(datetime(1998, 2, 9, 10, 0)) == "1998-02-09T10:00:00"

    def test_local_timestamp_microseconds(self) -> None:
        assert render_value(datetime(1998, 2, 9, 10, 0, 0, 1500)) == "1998-02-09T10:00:00.001500"

    def test_offset_timestamp(self, minus_three: timezone) -> None:
        value = datetime(1998, 2, 9, 10, 0, tzinfo=minus_three)
        assert render_value(value) == "1998-02-09T10:00:00-03:00"

    def test_utc_timestamp(self) -> None:
        value = datetime(1998, 2, 9, 10, 0, tzinfo=timezone.utc)
        assert render_value(value) == "1998-02-09T10:00:00+00:00"

    def test_zoned_timestamp(self, paris: ZoneInfo) -> None:
        value = datetime(1998, 7, 9, 10, 0, tzinfo=paris)
        assert render_value(value) == "1998-07-09T10:00:00+02:00[Europe/Paris]"

    def test_zone_name(self, paris: ZoneInfo, minus_three: timezone) -> None:
        assert zone_name(datetime(1998, 2, 9, tzinfo=paris)) == "Europe/Paris"
        assert zone_name(datetime(1998, 2, 9, tzinfo=minus_three)) is None
        assert zone_name(datetime(1998, 2, 9)) is None


class TestRenderAmount:
    """Tests for render_amount()."""

    @pytest.mark.parametrize(
        "amount,expected",
        [
            (relativedelta(days=3), "P3D"),
            (relativedelta(weeks=2), "P14D"),
            (relativedelta(years=1, months=2), "P1Y2M"),
            (relativedelta(years=1, months=2, days=3), "P1Y2M3D"),
            (relativedelta(), "P0D"),
            (relativedelta(hours=2), "PT2H"),
            (relativedelta(months=1, days=2, hours=4), "P1M2DT4H"),
        ],
    )
    def test_calendar(self, amount: relativedelta, expected: str) -> None:
        assert render_amount(amount) == expected

    @pytest.mark.parametrize(
        "amount,expected",
        [
            (timedelta(hours=2, minutes=30), "PT2H30M"),
            (timedelta(days=3), "PT72H"),
            (timedelta(minutes=90), "PT1H30M"),
            (timedelta(seconds=1, milliseconds=500), "PT1.5S"),
            (timedelta(microseconds=1), "PT0.000001S"),
            (timedelta(0), "PT0S"),
            (timedelta(hours=-2), "-PT2H"),
        ],
    )
    def test_exact(self, amount: timedelta, expected: str) -> None:
        assert render_amount(amount) == expected

    def test_absolute_relativedelta_falls_back_to_repr(self) -> None:
        amount = relativedelta(year=2020)
        assert render_amount(amount) == repr(amount)

    def test_negative_relativedelta_falls_back_to_repr(self) -> None:
        amount = relativedelta(days=-3)
        assert render_amount(amount) == repr(amount)
