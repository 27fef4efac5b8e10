"""Rendering of date/time values and tolerances for matcher messages.

Functions:
    render_value: Render a date or datetime as ISO 8601 text.
    render_amount: Render a tolerance as an ISO 8601 duration.
    zone_name: Zone identifier of a zoned datetime.
"""

from __future__ import annotations

from datematch.format.iso8601 import render_amount, render_value, zone_name

__all__: list[str] = [
    "render_amount",
    "render_value",
    "zone_name",
]
