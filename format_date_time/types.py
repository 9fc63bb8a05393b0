"""Type contracts shared by every formatter.

Types:
    DateTimeLike: Structural type for the date-time values being formatted.
    DateTimeFormatter: A function that formats a date-time value, or part
        of one, as a string.

Any object with the attributes below can be formatted; in particular
``datetime.datetime`` satisfies DateTimeLike without adaptation.

Examples:
    >>> from datetime import datetime
    >>> from format_date_time import two_digit_hours
    >>> formatter: DateTimeFormatter = two_digit_hours
    >>> formatter(datetime(2024, 1, 26, 9, 5))
    '09'
"""

from __future__ import annotations

from typing import Callable, Protocol


class DateTimeLike(Protocol):
    """A calendar date plus time of day.

    Values may additionally expose a ``nanosecond`` attribute holding the
    whole sub-second part (0-999_999_999); when present it takes precedence
    over ``microsecond``.
    """

    @property
    def year(self) -> int: ...

    @property
    def month(self) -> int: ...

    @property
    def day(self) -> int: ...

    @property
    def hour(self) -> int: ...

    @property
    def minute(self) -> int: ...

    @property
    def second(self) -> int: ...

    @property
    def microsecond(self) -> int: ...

    def weekday(self) -> int:
        """Return the day of the week, 0 for Monday through 6 for Sunday."""
        ...


# A function that formats a DateTimeLike, or part of one, as a string
DateTimeFormatter = Callable[[DateTimeLike], str]


__all__ = ["DateTimeLike", "DateTimeFormatter"]
