"""ISO 8601 rendering for failure messages.

This module renders the values and tolerances that appear in matcher
messages:

Values:
    - date:                 1998-02-09
    - naive datetime:       1998-02-09T10:00:00
    - fixed-offset datetime: 1998-02-09T10:00:00-03:00
    - zoned datetime:       1998-02-09T10:00:00-02:00[America/Sao_Paulo]

Tolerances:
    - relativedelta(days=3):             P3D
    - relativedelta(years=1, months=2):  P1Y2M
    - timedelta(hours=2, minutes=30):    PT2H30M
    - timedelta(days=3):                 PT72H

Examples:
    >>> from datetime import date, timedelta
    >>> render_value(date(1998, 2, 9))
    '1998-02-09'
    >>> render_amount(timedelta(minutes=90))
    'PT1H30M'
"""

from __future__ import annotations

from datetime import date, datetime, timedelta, timezone

from dateutil.relativedelta import relativedelta

from datematch._internal.constants import (
    ABSOLUTE_FIELDS,
    MICROS_PER_SECOND,
    RELATIVE_DATE_FIELDS,
    RELATIVE_TIME_FIELDS,
    SECONDS_PER_HOUR,
    SECONDS_PER_MINUTE,
)


def zone_name(value: datetime) -> str | None:
    """Return the zone identifier of a zoned datetime, if it has one.

    IANA zones (zoneinfo) expose their key; other tzinfo implementations
    fall back to the abbreviation for the value's wall-clock time.
    Fixed-offset and naive datetimes return None.
    """
    tzinfo = value.tzinfo
    if tzinfo is None or isinstance(tzinfo, timezone):
        return None
    key = getattr(tzinfo, "key", None)
    if key:
        return str(key)
    return value.tzname()


def render_value(value: object) -> str:
    """Render a date or datetime as ISO 8601.

    Zoned datetimes carry their zone identifier in brackets after the
    offset, so two values with the same offset but different zones read
    differently.

    Args:
        value: The date or datetime to render.

    Returns:
        The ISO 8601 text.

    Examples:
        >>> from datetime import datetime, timezone, timedelta
        >>> render_value(datetime(1998, 2, 9, 10, 0, tzinfo=timezone(timedelta(hours=-3))))
        '1998-02-09T10:00:00-03:00'
    """
    if isinstance(value, datetime):
        text = value.isoformat()
        name = zone_name(value)
        if name is not None:
            text = f"{text}[{name}]"
        return text
    if isinstance(value, date):
        return value.isoformat()
    return repr(value)


def _render_exact(amount: timedelta) -> str:
    total = amount // timedelta(microseconds=1)
    sign = "-" if total < 0 else ""
    total = abs(total)

    hours, rest = divmod(total, SECONDS_PER_HOUR * MICROS_PER_SECOND)
    minutes, rest = divmod(rest, SECONDS_PER_MINUTE * MICROS_PER_SECOND)
    seconds, micros = divmod(rest, MICROS_PER_SECOND)

    parts = []
    if hours:
        parts.append(f"{hours}H")
    if minutes:
        parts.append(f"{minutes}M")
    if micros:
        parts.append(f"{seconds}.{micros:06d}".rstrip("0") + "S")
    elif seconds:
        parts.append(f"{seconds}S")

    if not parts:
        return "PT0S"
    return f"{sign}PT" + "".join(parts)


def _render_calendar(amount: relativedelta) -> str:
    parts = []
    if amount.years:
        parts.append(f"{amount.years}Y")
    if amount.months:
        parts.append(f"{amount.months}M")
    if amount.days:
        parts.append(f"{amount.days}D")
    return "".join(parts)


def render_amount(amount: object) -> str:
    """Render a tolerance as an ISO 8601 duration.

    Calendar fields render in the date part (``P1Y2M3D``) and exact time
    in the time part (``PT2H30M``). A timedelta always renders in hours,
    since its days are exact 24-hour days. A relativedelta carrying
    leapdays, absolute fields or negative components has no ISO 8601
    form here and renders as its repr.

    Args:
        amount: A relativedelta or timedelta.

    Returns:
        The ISO 8601 duration text.

    Examples:
        >>> render_amount(relativedelta(days=3))
        'P3D'
        >>> render_amount(relativedelta(months=1, days=2, hours=4))
        'P1M2DT4H'
    """
    if isinstance(amount, timedelta):
        return _render_exact(amount)

    if isinstance(amount, relativedelta):
        if (
            amount.leapdays
            or any(getattr(amount, name) is not None for name in ABSOLUTE_FIELDS)
            or any(getattr(amount, name) < 0 for name in RELATIVE_DATE_FIELDS + RELATIVE_TIME_FIELDS)
        ):
            return repr(amount)

        date_part = _render_calendar(amount)
        exact = timedelta(
            hours=amount.hours,
            minutes=amount.minutes,
            seconds=amount.seconds,
            microseconds=amount.microseconds,
        )
        if not exact:
            return "P" + (date_part or "0D")
        return "P" + date_part + _render_exact(exact)[1:]

    return str(amount)


__all__ = [
    "render_amount",
    "render_value",
    "zone_name",
]
