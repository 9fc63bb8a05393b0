"""ISO 8601 formatters built from templates.

This module builds ready-made formatters for the ISO 8601 date-time text
representation out of the field formatters and compose().

Functions:
    iso8601: Build a date-time formatter (YYYY-MM-DDTHH:MM:SS.f).
    iso8601_date: Build a date-only formatter (YYYY-MM-DD).
    iso8601_time: Build a time-only formatter (HH:MM:SS.f).

Options:
    format: "extended" (default) separates date components with '-' and
        time components with ':'; "basic" uses no separators.
    round: "none" (default) keeps the full sub-second precision;
        "seconds" truncates to whole seconds; "ms" truncates to
        milliseconds and always prints three fractional digits.
    time_delimiter: "T" (default) or " " between the date and the time.

Examples:
    >>> from datetime import datetime
    >>> dt = datetime(2024, 1, 26, 11, 57, 23, 723615)

    >>> iso8601()(dt)
    '2024-01-26T11:57:23.723615'

    >>> iso8601(Iso8601Options(format="basic"))(dt)
    '20240126T115723.723615'

    >>> iso8601({"round": "ms", "time_delimiter": " "})(dt)
    '2024-01-26 11:57:23.723'
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any, Mapping, TypeVar, Union

from format_date_time.composer import compose
from format_date_time.fields.date import (
    four_digit_year,
    two_digit_day,
    two_digit_month,
)
from format_date_time.fields.time import (
    two_digit_floor_seconds,
    two_digit_floor_seconds_ms,
    two_digit_hours,
    two_digit_minutes,
    two_digit_seconds,
)

if TYPE_CHECKING:
    from format_date_time.types import DateTimeFormatter

logger = logging.getLogger(__name__)

E = TypeVar("E", bound=Enum)


class Iso8601Format(Enum):
    """Punctuation profile of ISO 8601 text."""

    BASIC = "basic"  # 20240126T115723
    EXTENDED = "extended"  # 2024-01-26T11:57:23


class Rounding(Enum):
    """Sub-second granularity of the seconds field.

    Rounding always truncates toward zero.
    """

    NONE = "none"
    SECONDS = "seconds"
    MS = "ms"


class TimeDelimiter(Enum):
    """Character separating the date portion from the time portion."""

    T = "T"
    SPACE = " "


def _coerce(enum_type: type[E], value: Any, default: E, name: str) -> E:
    """Normalize an option value to its enum member, falling back to default."""
    if value is None:
        return default
    if isinstance(value, enum_type):
        return value
    try:
        return enum_type(value)
    except (ValueError, TypeError):
        logger.warning(
            "Unrecognized ISO 8601 %s option %r, using %r",
            name,
            value,
            default.value,
        )
        return default


@dataclass(frozen=True)
class Iso8601Options:
    """Options for the ISO 8601 formatters.

    Every field is independent and optional. Fields accept either the enum
    member or its string value; strings are normalized to the enum on
    construction, and unrecognized values fall back to the default with a
    logged warning.

    Attributes:
        format: Punctuation profile, basic or extended.
        round: Truncation applied to the seconds field.
        time_delimiter: Character between date and time.

    Examples:
        >>> Iso8601Options(format="basic").format
        <Iso8601Format.BASIC: 'basic'>

        >>> Iso8601Options().time_delimiter.value
        'T'
    """

    format: Iso8601Format | str | None = Iso8601Format.EXTENDED
    round: Rounding | str | None = Rounding.NONE
    time_delimiter: TimeDelimiter | str | None = TimeDelimiter.T

    def __post_init__(self) -> None:
        object.__setattr__(
            self,
            "format",
            _coerce(Iso8601Format, self.format, Iso8601Format.EXTENDED, "format"),
        )
        object.__setattr__(
            self,
            "round",
            _coerce(Rounding, self.round, Rounding.NONE, "round"),
        )
        object.__setattr__(
            self,
            "time_delimiter",
            _coerce(
                TimeDelimiter,
                self.time_delimiter,
                TimeDelimiter.T,
                "time_delimiter",
            ),
        )

    @property
    def date_separator(self) -> str:
        """Return the separator between date components."""
        return "" if self.format is Iso8601Format.BASIC else "-"

    @property
    def time_separator(self) -> str:
        """Return the separator between time components."""
        return "" if self.format is Iso8601Format.BASIC else ":"


DEFAULT_ISO8601_OPTIONS = Iso8601Options()

OptionsType = Union[Iso8601Options, Mapping[str, Any], None]

_OPTION_KEYS = frozenset({"format", "round", "time_delimiter", "timeDelimiter"})

_SECONDS_FORMATTERS: dict[Rounding, DateTimeFormatter] = {
    Rounding.NONE: two_digit_seconds,
    Rounding.SECONDS: two_digit_floor_seconds,
    Rounding.MS: two_digit_floor_seconds_ms,
}


def resolve_options(options: OptionsType = None) -> Iso8601Options:
    """Normalize the accepted option forms to an Iso8601Options.

    Args:
        options: None for all defaults, an Iso8601Options, or a mapping with
            any of the keys "format", "round" and "time_delimiter"
            ("timeDelimiter" is accepted as an alias).

    Returns:
        The resolved Iso8601Options.

    Examples:
        >>> resolve_options({"timeDelimiter": " "}).time_delimiter
        <TimeDelimiter.SPACE: ' '>
    """
    if options is None:
        return DEFAULT_ISO8601_OPTIONS
    if isinstance(options, Iso8601Options):
        return options
    if not isinstance(options, Mapping):
        logger.warning(
            "Ignoring ISO 8601 options of type %s, using defaults",
            type(options).__name__,
        )
        return DEFAULT_ISO8601_OPTIONS

    unknown = sorted(str(key) for key in options if key not in _OPTION_KEYS)
    if unknown:
        logger.warning("Ignoring unknown ISO 8601 options: %s", ", ".join(unknown))

    time_delimiter = options.get("time_delimiter")
    if time_delimiter is None:
        time_delimiter = options.get("timeDelimiter")
    return Iso8601Options(
        format=options.get("format"),
        round=options.get("round"),
        time_delimiter=time_delimiter,
    )


def iso8601(options: OptionsType = None) -> DateTimeFormatter:
    """Build a formatter for ISO 8601 date-time text.

    The output is a four-digit year, two-digit month and day, the time
    delimiter, then two-digit hour, minute and second, with separators and
    sub-second digits chosen by the options.

    Args:
        options: None, an Iso8601Options, or a mapping of option values.

    Returns:
        A DateTimeFormatter producing ISO 8601 text.

    Examples:
        >>> from datetime import datetime
        >>> dt = datetime(2024, 1, 26, 11, 57, 23, 723615)

        >>> iso8601(Iso8601Options(round="seconds"))(dt)
        '2024-01-26T11:57:23'

        >>> iso8601(Iso8601Options(time_delimiter=" "))(dt)
        '2024-01-26 11:57:23.723615'
    """
    resolved = resolve_options(options)
    date_separator = resolved.date_separator
    time_separator = resolved.time_separator
    logger.debug("Building ISO 8601 formatter with %s", resolved)

    return compose(
        [
            "",
            date_separator,
            date_separator,
            resolved.time_delimiter.value,
            time_separator,
            time_separator,
            "",
        ],
        [
            four_digit_year,
            two_digit_month,
            two_digit_day,
            two_digit_hours,
            two_digit_minutes,
            _SECONDS_FORMATTERS[resolved.round],
        ],
    )


def iso8601_date(options: OptionsType = None) -> DateTimeFormatter:
    """Build a formatter for ISO 8601 date text (YYYY-MM-DD or YYYYMMDD).

    Only the format option has an effect.
    """
    date_separator = resolve_options(options).date_separator
    return compose(
        ["", date_separator, date_separator, ""],
        [four_digit_year, two_digit_month, two_digit_day],
    )


def iso8601_time(options: OptionsType = None) -> DateTimeFormatter:
    """Build a formatter for ISO 8601 time text (HH:MM:SS.f or HHMMSS.f).

    The format and round options have an effect; the time delimiter does
    not.

    Examples:
        >>> from datetime import datetime
        >>> iso8601_time({"format": "basic", "round": "ms"})(
        ...     datetime(2024, 1, 26, 11, 57, 23, 5000)
        ... )
        '115723.005'
    """
    resolved = resolve_options(options)
    time_separator = resolved.time_separator
    return compose(
        ["", time_separator, time_separator, ""],
        [two_digit_hours, two_digit_minutes, _SECONDS_FORMATTERS[resolved.round]],
    )


__all__ = [
    "Iso8601Format",
    "Rounding",
    "TimeDelimiter",
    "Iso8601Options",
    "DEFAULT_ISO8601_OPTIONS",
    "resolve_options",
    "iso8601",
    "iso8601_date",
    "iso8601_time",
]
