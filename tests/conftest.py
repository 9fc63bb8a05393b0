"""Pytest configuration and fixtures for format_date_time tests."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Optional

import pytest

# Add the parent directory to sys.path so format_date_time can be imported
# without needing to install the package
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))


@pytest.fixture
def sample_datetime() -> datetime:
    """The reference value used by the ISO 8601 scenarios (a Friday)."""
    return datetime(2024, 1, 26, 11, 57, 23, 723615)


@pytest.fixture
def whole_second_datetime() -> datetime:
    """A value with no sub-second part."""
    return datetime(2024, 1, 26, 11, 57, 23)


@dataclass(frozen=True)
class SimpleDateTime:
    """Minimal date-time value, free of datetime's year and precision limits."""

    year: int
    month: int = 1
    day: int = 1
    hour: int = 0
    minute: int = 0
    second: int = 0
    microsecond: int = 0
    nanosecond: Optional[int] = None

    def weekday(self) -> int:
        return 0


@pytest.fixture
def simple_datetime() -> type[SimpleDateTime]:
    """Factory for values outside datetime's range or precision."""
    return SimpleDateTime
