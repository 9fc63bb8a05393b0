"""Internal utilities for format_date_time.

This module contains private implementation details:
    - Sub-second scale constants and English month/weekday names
    - Component extraction and padding helpers

Note: This module is not part of the public API.
"""

from __future__ import annotations

from format_date_time._internal.components import (
    floor_millis,
    minimal_fraction,
    pad_magnitude,
    subsecond_nanos,
)

__all__: list[str] = [
    "floor_millis",
    "minimal_fraction",
    "pad_magnitude",
    "subsecond_nanos",
]
