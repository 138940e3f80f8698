"""Pytest configuration and fixtures for timevalue tests."""

from __future__ import annotations

import os
import sys
import time
from pathlib import Path
from typing import Callable, Iterator

import pytest

# Add the parent directory to sys.path so timevalue can be imported
# without needing to install the package
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from timevalue._internal import clock  # noqa: E402

# POSIX TZ strings need no tz database
UTC_PLUS_8 = "CST-8"
UTC_MINUS_5 = "EST5"
US_EASTERN = "EST5EDT,M3.2.0,M11.1.0"

# 2018-10-01 12:30:00.123 at UTC+8
FROZEN_NOW = 1_538_368_200_123


@pytest.fixture
def local_timezone() -> Iterator[Callable[[str], None]]:
    """Pin the process timezone to a POSIX TZ string for one test."""
    if not hasattr(time, "tzset"):
        pytest.skip("time.tzset is not available on this platform")

    original = os.environ.get("TZ")

    def pin(tz: str) -> None:
        os.environ["TZ"] = tz
        time.tzset()

    yield pin

    if original is None:
        os.environ.pop("TZ", None)
    else:
        os.environ["TZ"] = original
    time.tzset()


@pytest.fixture
def utc8(local_timezone: Callable[[str], None]) -> None:
    """Run the test at UTC+8, the zone of the 1538368200000 literals."""
    local_timezone(UTC_PLUS_8)


@pytest.fixture
def frozen_now(monkeypatch: pytest.MonkeyPatch) -> int:
    """Freeze the wall clock at FROZEN_NOW."""
    monkeypatch.setattr(clock, "now_millis", lambda: FROZEN_NOW)
    return FROZEN_NOW
