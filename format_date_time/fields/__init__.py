"""Single-field date and time formatters.

Every function here is a DateTimeFormatter: it takes a DateTimeLike value
and returns the text for one component. They are the building blocks
passed to compose() and template().

Submodules:
    date: Year, month, day and weekday fields
    time: Hour, minute, second and meridiem fields
"""

from __future__ import annotations

from format_date_time.fields.date import (
    day,
    day_of_week,
    four_digit_year,
    month,
    month_name,
    short_day_of_week,
    short_month_name,
    short_year,
    two_digit_day,
    two_digit_month,
    two_digit_year,
    year,
)
from format_date_time.fields.time import (
    am_pm,
    floor_seconds,
    floor_seconds_ms,
    hours,
    hours12,
    lower_am_pm,
    milliseconds,
    minutes,
    seconds,
    two_digit_floor_seconds,
    two_digit_floor_seconds_ms,
    two_digit_hours,
    two_digit_hours12,
    two_digit_minutes,
    two_digit_seconds,
)

__all__: list[str] = [
    # Date fields
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
    # Time fields
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
