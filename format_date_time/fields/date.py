"""Date field formatters.

Each function formats one date component of a DateTimeLike value.

Functions:
    year, four_digit_year, short_year, two_digit_year
    month, two_digit_month, month_name, short_month_name
    day, two_digit_day
    day_of_week, short_day_of_week

Examples:
    >>> from datetime import datetime
    >>> dt = datetime(2024, 1, 26)
    >>> four_digit_year(dt), two_digit_month(dt), short_day_of_week(dt)
    ('2024', '01', 'Fri')
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from format_date_time._internal.components import pad_magnitude
from format_date_time._internal.constants import (
    DAY_NAMES,
    MONTH_NAMES,
    SHORT_DAY_NAMES,
    SHORT_MONTH_NAMES,
)

if TYPE_CHECKING:
    from format_date_time.types import DateTimeLike


def year(value: DateTimeLike) -> str:
    """Format the year without padding (e.g., '2024', '-44')."""
    return str(value.year)


def four_digit_year(value: DateTimeLike) -> str:
    """Format the year with its magnitude zero-padded to four digits.

    Negative years keep their sign and years past 9999 keep every digit.

    Examples:
        >>> from datetime import datetime
        >>> four_digit_year(datetime(33, 6, 15))
        '0033'
    """
    return pad_magnitude(value.year, 4)


def short_year(value: DateTimeLike) -> str:
    """Format the last two digits of the year (e.g., '24', '05')."""
    return f"{abs(value.year) % 100:02d}"


two_digit_year = short_year


def month(value: DateTimeLike) -> str:
    """Format the month number without padding (1-12)."""
    return str(value.month)


def two_digit_month(value: DateTimeLike) -> str:
    """Format the month number as two digits (01-12)."""
    return f"{value.month:02d}"


def month_name(value: DateTimeLike) -> str:
    """Format the English month name (e.g., 'January')."""
    return MONTH_NAMES[value.month]


def short_month_name(value: DateTimeLike) -> str:
    """Format the abbreviated English month name (e.g., 'Jan')."""
    return SHORT_MONTH_NAMES[value.month]


def day(value: DateTimeLike) -> str:
    """Format the day of the month without padding (1-31)."""
    return str(value.day)


def two_digit_day(value: DateTimeLike) -> str:
    """Format the day of the month as two digits (01-31)."""
    return f"{value.day:02d}"


def day_of_week(value: DateTimeLike) -> str:
    """Format the English weekday name (e.g., 'Friday')."""
    return DAY_NAMES[value.weekday()]


def short_day_of_week(value: DateTimeLike) -> str:
    """Format the abbreviated English weekday name (e.g., 'Fri')."""
    return SHORT_DAY_NAMES[value.weekday()]


__all__ = [
    "year",
    "four_digit_year",
    "short_year",
    "two_digit_year",
    "month",
    "two_digit_month",
    "month_name",
    "short_month_name",
    "day",
    "two_digit_day",
    "day_of_week",
    "short_day_of_week",
]
