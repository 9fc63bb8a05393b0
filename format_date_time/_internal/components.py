"""Component extraction helpers shared by the field formatters.

This module is not part of the public API.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from format_date_time._internal.constants import (
    NANOS_PER_MICROSECOND,
    NANOS_PER_MILLISECOND,
)

if TYPE_CHECKING:
    from format_date_time.types import DateTimeLike


def subsecond_nanos(value: DateTimeLike) -> int:
    """Return the sub-second part of a date-time value in nanoseconds.

    Values that carry a ``nanosecond`` attribute keep their full precision;
    everything else (``datetime.datetime`` included) is read through
    ``microsecond``.

    Examples:
        >>> from datetime import datetime
        >>> subsecond_nanos(datetime(2024, 1, 26, 11, 57, 23, 723615))
        723615000
    """
    nanosecond = getattr(value, "nanosecond", None)
    if nanosecond is not None:
        return nanosecond
    return value.microsecond * NANOS_PER_MICROSECOND


def floor_millis(value: DateTimeLike) -> int:
    """Return the sub-second part floored to whole milliseconds."""
    return subsecond_nanos(value) // NANOS_PER_MILLISECOND


def minimal_fraction(nanos: int) -> str:
    """Return the fractional-second suffix with minimal digits.

    An empty string is returned when there is no sub-second part, so whole
    seconds never print a trailing ``.0``.

    Examples:
        >>> minimal_fraction(723_615_000)
        '.723615'
        >>> minimal_fraction(500_000_000)
        '.5'
        >>> minimal_fraction(0)
        ''
    """
    if nanos == 0:
        return ""
    return "." + f"{nanos:09d}".rstrip("0")


def pad_magnitude(number: int, width: int) -> str:
    """Zero-pad the magnitude of ``number`` to ``width`` digits.

    The sign of negative numbers is kept in front of the padding, and
    numbers wider than ``width`` are never truncated.

    Examples:
        >>> pad_magnitude(2024, 4)
        '2024'
        >>> pad_magnitude(-44, 4)
        '-0044'
        >>> pad_magnitude(12345, 4)
        '12345'
    """
    if number < 0:
        return f"-{-number:0{width}d}"
    return f"{number:0{width}d}"


__all__ = [
    "subsecond_nanos",
    "floor_millis",
    "minimal_fraction",
    "pad_magnitude",
]
