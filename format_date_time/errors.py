"""format_date_time exception hierarchy.

All format_date_time-specific exceptions inherit from FormatDateTimeError.
Exceptions raised by field formatters themselves are never wrapped; they
reach the caller of the composed formatter unchanged.
"""

from __future__ import annotations


class FormatDateTimeError(Exception):
    """Base exception for all format_date_time errors."""

    pass


class TemplateError(FormatDateTimeError, ValueError):
    """Invalid template construction.

    Raised only when a template is composed with ``strict=True`` and the
    literal and formatter sequences do not interleave.

    Examples:
        - Two literals with two formatters (needs three literals)
        - Three literals with one formatter
    """

    pass


__all__ = [
    "FormatDateTimeError",
    "TemplateError",
]
