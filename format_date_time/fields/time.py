"""Time field formatters.

Each function formats one time-of-day component of a DateTimeLike value.

Hours:
    hours, two_digit_hours: 24-hour clock (0-23)
    hours12, two_digit_hours12: 12-hour clock (1-12)
    am_pm, lower_am_pm: Meridiem indicator

Minutes:
    minutes, two_digit_minutes

Seconds:
    seconds, two_digit_seconds: Full available precision, minimal digits
    floor_seconds, two_digit_floor_seconds: Truncated to whole seconds
    floor_seconds_ms, two_digit_floor_seconds_ms: Truncated to milliseconds,
        always three fractional digits
    milliseconds: The truncated millisecond as three digits

Truncation always rounds toward zero; 23.9999 seconds is never shown as 24.

Examples:
    >>> from datetime import datetime
    >>> dt = datetime(2024, 1, 26, 11, 57, 23, 723615)
    >>> two_digit_seconds(dt)
    '23.723615'
    >>> two_digit_floor_seconds(dt)
    '23'
    >>> two_digit_floor_seconds_ms(dt)
    '23.723'
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from format_date_time._internal.components import (
    floor_millis,
    minimal_fraction,
    subsecond_nanos,
)

if TYPE_CHECKING:
    from format_date_time.types import DateTimeLike


def hours(value: DateTimeLike) -> str:
    """Format the hour on the 24-hour clock without padding (0-23)."""
    return str(value.hour)


def two_digit_hours(value: DateTimeLike) -> str:
    """Format the hour on the 24-hour clock as two digits (00-23)."""
    return f"{value.hour:02d}"


def _hour12(value: DateTimeLike) -> int:
    return value.hour % 12 or 12


def hours12(value: DateTimeLike) -> str:
    """Format the hour on the 12-hour clock without padding (1-12).

    Midnight and noon are both 12.

    Examples:
        >>> from datetime import datetime
        >>> hours12(datetime(2024, 1, 26, 0, 30)), hours12(datetime(2024, 1, 26, 13))
        ('12', '1')
    """
    return str(_hour12(value))


def two_digit_hours12(value: DateTimeLike) -> str:
    """Format the hour on the 12-hour clock as two digits (01-12)."""
    return f"{_hour12(value):02d}"


def am_pm(value: DateTimeLike) -> str:
    """Format 'AM' before noon and 'PM' from noon onwards."""
    return "AM" if value.hour < 12 else "PM"


def lower_am_pm(value: DateTimeLike) -> str:
    """Format 'am' before noon and 'pm' from noon onwards."""
    return am_pm(value).lower()


def minutes(value: DateTimeLike) -> str:
    """Format the minute without padding (0-59)."""
    return str(value.minute)


def two_digit_minutes(value: DateTimeLike) -> str:
    """Format the minute as two digits (00-59)."""
    return f"{value.minute:02d}"


def seconds(value: DateTimeLike) -> str:
    """Format the second with its full available fractional precision.

    No rounding is applied. The fraction uses as few digits as represent
    it exactly and is omitted entirely when the sub-second part is zero.

    Examples:
        >>> from datetime import datetime
        >>> seconds(datetime(2024, 1, 26, 11, 57, 3, 500000))
        '3.5'
        >>> seconds(datetime(2024, 1, 26, 11, 57, 3))
        '3'
    """
    return f"{value.second}{minimal_fraction(subsecond_nanos(value))}"


def two_digit_seconds(value: DateTimeLike) -> str:
    """Format the second like seconds(), with the integer part padded to two digits."""
    return f"{value.second:02d}{minimal_fraction(subsecond_nanos(value))}"


def floor_seconds(value: DateTimeLike) -> str:
    """Format the second truncated to a whole number, without padding."""
    return str(value.second)


def two_digit_floor_seconds(value: DateTimeLike) -> str:
    """Format the second truncated to a whole number, as two digits."""
    return f"{value.second:02d}"


def milliseconds(value: DateTimeLike) -> str:
    """Format the sub-second part truncated to milliseconds (000-999)."""
    return f"{floor_millis(value):03d}"


def floor_seconds_ms(value: DateTimeLike) -> str:
    """Format the second truncated to milliseconds (e.g., '3.005').

    Exactly three fractional digits are always present.
    """
    return f"{value.second}.{milliseconds(value)}"


def two_digit_floor_seconds_ms(value: DateTimeLike) -> str:
    """Format the second truncated to milliseconds, padded (e.g., '03.005')."""
    return f"{value.second:02d}.{milliseconds(value)}"


__all__ = [
    "hours",
    "two_digit_hours",
    "hours12",
    "two_digit_hours12",
    "am_pm",
    "lower_am_pm",
    "minutes",
    "two_digit_minutes",
    "seconds",
    "two_digit_seconds",
    "floor_seconds",
    "two_digit_floor_seconds",
    "milliseconds",
    "floor_seconds_ms",
    "two_digit_floor_seconds_ms",
]
