"""Template composition for date-time formatters.

A template is literal text interleaved with field formatters. Composing one
yields a new DateTimeFormatter, so templates nest inside other templates.

Functions:
    compose: Build a formatter from parallel literal and formatter sequences.
    template: Build a formatter from one interleaved argument list.

Examples:
    >>> from datetime import datetime
    >>> from format_date_time import two_digit_day, two_digit_month, year
    >>> dmy = template(two_digit_day, "/", two_digit_month, "/", year)
    >>> dmy(datetime(2024, 1, 26))
    '26/01/2024'

    >>> stamp = compose(["[", "] "], [dmy])
    >>> stamp(datetime(2024, 1, 26))
    '[26/01/2024] '
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional, Sequence, Union

from format_date_time.errors import TemplateError

if TYPE_CHECKING:
    from format_date_time.types import DateTimeFormatter, DateTimeLike

logger = logging.getLogger(__name__)

TemplatePart = Union[str, "DateTimeFormatter"]


def compose(
    literals: Sequence[str],
    formatters: Sequence[DateTimeFormatter],
    *,
    strict: bool = False,
) -> DateTimeFormatter:
    """Compose literal text and field formatters into one formatter.

    The returned formatter emits ``literals[0]``, then the output of
    ``formatters[0]``, then ``literals[1]``, and so on, ending with the last
    literal. Every field formatter is re-evaluated on every call.

    Args:
        literals: Literal text fragments, one more than there are formatters.
        formatters: Field formatters filling the slots between literals.
        strict: Raise instead of degrading when the lengths do not
            interleave.

    Returns:
        A DateTimeFormatter producing the concatenated text.

    Raises:
        TemplateError: If strict is true and
            ``len(literals) != len(formatters) + 1``.

    Notes:
        Without ``strict``, a slot with no formatter contributes an empty
        string, and formatters beyond the last literal are never called.
        A formatter returning ``None`` also contributes an empty string.
        Exceptions raised by a formatter propagate unchanged.

    Examples:
        >>> from datetime import datetime
        >>> from format_date_time import two_digit_hours, two_digit_minutes
        >>> hm = compose(["", "h", "m"], [two_digit_hours, two_digit_minutes])
        >>> hm(datetime(2024, 1, 26, 9, 5))
        '09h05m'

        >>> compose(["a", "b", "c"], [two_digit_hours])(datetime(2024, 1, 26, 9))
        'a09bc'
    """
    literals = tuple(literals)
    formatters = tuple(formatters)

    if len(literals) != len(formatters) + 1:
        if strict:
            raise TemplateError(
                f"template needs {len(formatters) + 1} literals for "
                f"{len(formatters)} formatters, got {len(literals)}"
            )
        logger.debug(
            "Composing template with %d literals and %d formatters",
            len(literals),
            len(formatters),
        )

    slots: tuple[tuple[str, Optional[DateTimeFormatter]], ...] = tuple(
        (literal, formatters[index] if index < len(formatters) else None)
        for index, literal in enumerate(literals)
    )

    def format_template(value: DateTimeLike) -> str:
        result = []
        for literal, formatter in slots:
            result.append(literal)
            if formatter is not None:
                result.append(formatter(value) or "")
        return "".join(result)

    return format_template


def template(*parts: TemplatePart) -> DateTimeFormatter:
    """Build a formatter from literals and formatters in reading order.

    Adjacent literals are joined, and adjacent formatters get an empty
    literal between them, so any interleaving is accepted.

    Args:
        *parts: Literal strings and DateTimeFormatters, in output order.

    Returns:
        A DateTimeFormatter producing the concatenated text.

    Raises:
        TypeError: If a part is neither a string nor callable.

    Examples:
        >>> from datetime import datetime
        >>> from format_date_time import day, month_name, year
        >>> long_date = template(day, " ", month_name, " ", year)
        >>> long_date(datetime(2024, 1, 26))
        '26 January 2024'

        >>> template("Year ", year, "!")(datetime(2024, 1, 26))
        'Year 2024!'
    """
    literals = [""]
    formatters: list[DateTimeFormatter] = []

    for position, part in enumerate(parts):
        if isinstance(part, str):
            literals[-1] += part
        elif callable(part):
            formatters.append(part)
            literals.append("")
        else:
            raise TypeError(
                f"template part {position} must be a str or a formatter, "
                f"got {type(part).__name__}"
            )

    return compose(literals, formatters)


__all__ = ["compose", "template"]
