"""Internal utilities for Datematch.

This module contains private implementation details:
    - Message templates and constants
    - Tolerance validation

Note: This module is not part of the public API.
"""

from __future__ import annotations

from datematch._internal.validation import (
    Tolerance,
    calendar_tolerance,
    timestamp_tolerance,
)

__all__: list[str] = [
    "Tolerance",
    "calendar_tolerance",
    "timestamp_tolerance",
]
