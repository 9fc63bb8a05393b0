"""format_date_time: Convert date-time values to text in a variety of formats.

Formats are built from small pieces. A field formatter turns a date-time
value into the text of one component; templates splice literal text and
field formatters together into a new formatter, which can itself be used
inside another template.

Composition:
    compose: Build a formatter from literal and formatter sequences
    template: Build a formatter from one interleaved argument list

ISO 8601:
    iso8601: Date-time formatter with basic/extended punctuation,
        seconds/ms truncation and "T" or " " time delimiter
    iso8601_date, iso8601_time: Date-only and time-only formatters
    Iso8601Options: Options record (Iso8601Format, Rounding, TimeDelimiter)

Field Formatters:
    Date: year, four_digit_year, short_year, month, two_digit_month,
        month_name, short_month_name, day, two_digit_day, day_of_week,
        short_day_of_week
    Time: hours, two_digit_hours, hours12, two_digit_hours12, am_pm,
        lower_am_pm, minutes, two_digit_minutes, seconds,
        two_digit_seconds, floor_seconds, two_digit_floor_seconds,
        milliseconds, floor_seconds_ms, two_digit_floor_seconds_ms

Types:
    DateTimeLike: Structural type of formattable values (datetime.datetime)
    DateTimeFormatter: Callable[[DateTimeLike], str]

Exceptions:
    FormatDateTimeError: Base exception
    TemplateError: Strict template with mismatched literals and formatters

Example:
    >>> from datetime import datetime
    >>> from format_date_time import template, day_of_week, iso8601
    >>> log_stamp = template(day_of_week, " ", iso8601({"round": "seconds"}))
    >>> log_stamp(datetime(2024, 1, 26, 11, 57, 23, 723615))
    'Friday 2024-01-26T11:57:23'
"""

from __future__ import annotations

import logging

__version__ = "0.1.0"

# Composition
from format_date_time.composer import compose, template

# ISO 8601
from format_date_time.iso8601 import (
    DEFAULT_ISO8601_OPTIONS,
    Iso8601Format,
    Iso8601Options,
    Rounding,
    TimeDelimiter,
    iso8601,
    iso8601_date,
    iso8601_time,
)

# Field formatters
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

# Types
from format_date_time.types import DateTimeFormatter, DateTimeLike

# Exceptions
from format_date_time.errors import FormatDateTimeError, TemplateError

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__: list[str] = [
    "__version__",
    # Composition
    "compose",
    "template",
    # ISO 8601
    "iso8601",
    "iso8601_date",
    "iso8601_time",
    "Iso8601Options",
    "Iso8601Format",
    "Rounding",
    "TimeDelimiter",
    "DEFAULT_ISO8601_OPTIONS",
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
    # Types
    "DateTimeFormatter",
    "DateTimeLike",
    # Exceptions
    "FormatDateTimeError",
    "TemplateError",
]
