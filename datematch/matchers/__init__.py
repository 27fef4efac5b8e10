"""Date/time matchers.

Each constructor takes the expected value (and, for ``within``, a
tolerance) and returns a Matcher; testing a value returns a MatchResult.
The same constructors serve all four variants: calendar dates, local,
zoned and offset timestamps.

Field Matchers (from datematch.matchers.fields):
    - have_same_year: Same year, other fields ignored
    - have_same_month: Same month number, other fields ignored
    - have_same_day: Same day of month, other fields ignored

Ordering Matchers (from datematch.matchers.ordering):
    - before: Strictly earlier
    - after: Strictly later

Proximity Matchers (from datematch.matchers.proximity):
    - within: Inside the closed interval anchor +/- tolerance
"""

from __future__ import annotations

from datematch.matchers.fields import have_same_day, have_same_month, have_same_year
from datematch.matchers.ordering import after, before
from datematch.matchers.proximity import within

__all__: list[str] = [
    "have_same_year",
    "have_same_month",
    "have_same_day",
    "before",
    "after",
    "within",
]
