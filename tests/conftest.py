"""Pytest configuration and fixtures for Datematch tests."""

from __future__ import annotations

import sys
from datetime import timedelta, timezone
from pathlib import Path
from zoneinfo import ZoneInfo

import pytest

# Add the parent directory to sys.path so datematch can be imported
# without needing to install the package
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))


@pytest.fixture
def paris() -> ZoneInfo:
    return ZoneInfo("Europe/Paris")


@pytest.fixture
def london() -> ZoneInfo:
    return ZoneInfo("Europe/London")


@pytest.fixture
def tokyo() -> ZoneInfo:
    return ZoneInfo("Asia/Tokyo")


@pytest.fixture
def minus_three() -> timezone:
    """Fixed UTC-03:00 offset."""
    return timezone(timedelta(hours=-3))


@pytest.fixture
def plus_five() -> timezone:
    """Fixed UTC+05:00 offset."""
    return timezone(timedelta(hours=5))
