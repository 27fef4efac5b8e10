"""Core types for Datematch.

This module exports the result types and the variant adapters the
matchers are built on:
    - MatchResult: Outcome of one comparison plus both messages
    - Matcher: Reusable pure test producing MatchResults
    - Variant: Calendar date, local, zoned or offset timestamp
    - TemporalAdapter: Field access, ordering and arithmetic per variant
"""

from __future__ import annotations

from datematch.core.result import Matcher, MatchResult
from datematch.core.variants import (
    TemporalAdapter,
    Variant,
    adapter_for,
    adapter_of,
    variant_of,
)

__all__: list[str] = [
    "MatchResult",
    "Matcher",
    "TemporalAdapter",
    "Variant",
    "adapter_for",
    "adapter_of",
    "variant_of",
]
