"""Internal constants for format_date_time.

These constants define the sub-second scales and the fixed English names
used by the field formatters. This module is not part of the public API.
"""

from __future__ import annotations

# Sub-second conversions
NANOS_PER_MICROSECOND: int = 1_000
NANOS_PER_MILLISECOND: int = 1_000_000
NANOS_PER_SECOND: int = 1_000_000_000

# Month names, indexed by month number
MONTH_NAMES: tuple[str, ...] = (
    "",  # Placeholder for 1-indexed access
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)

SHORT_MONTH_NAMES: tuple[str, ...] = tuple(name[:3] for name in MONTH_NAMES)

# Weekday names, indexed by weekday() (0=Monday, 6=Sunday)
DAY_NAMES: tuple[str, ...] = (
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
    "Sunday",
)

SHORT_DAY_NAMES: tuple[str, ...] = tuple(name[:3] for name in DAY_NAMES)


__all__ = [
    "NANOS_PER_MICROSECOND",
    "NANOS_PER_MILLISECOND",
    "NANOS_PER_SECOND",
    "MONTH_NAMES",
    "SHORT_MONTH_NAMES",
    "DAY_NAMES",
    "SHORT_DAY_NAMES",
]
