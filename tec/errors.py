"""TEC exception hierarchy.

All TEC-specific exceptions inherit from TecError. Every parse failure is a
ParseError, so callers that only care whether text was understood can catch
that one class.
"""

from __future__ import annotations


class TecError(Exception):
    """Base exception for all TEC errors.

    Also raised directly for failures that fit no narrower category.
    """

    pass


class ValidationError(TecError):
    """A value cannot be mapped onto the Gregorian calendar.

    Construction of TEC values is never validated; this is raised only by
    conversions that need a real calendar day.

    Examples:
        - Date(0, 10, 9).to_gregorian() (day 369 of a 365 day year)
    """

    pass


class OverflowError(TecError):
    """Arithmetic on an unsigned unit went below zero.

    Examples:
        - Month(1) - Month(2)
        - Duration(5) - Duration(10)
    """

    pass


class ParseError(TecError):
    """Failed to parse a string representation."""

    pass


class MalformedNumberError(ParseError):
    """A numeric field is not a valid integer.

    Examples:
        - "83.B.5" (month is neither a number nor "A")
        - "83.1.x"
        - Duration text "12q"
    """

    pass


class MalformedOffsetError(ParseError):
    """The text after '@' is not a valid offset in minutes.

    Examples:
        - "83.1.5@east"
        - "83.1.5@1440" (a full day or more)
    """

    pass


class GregorianParseError(ParseError):
    """The Gregorian free-text fallback could not read the input."""

    pass


class UnderspecifiedFieldError(ParseError):
    """The input has fewer fields than the grammar requires.

    Examples:
        - "83.5" (a date needs three dot-separated fields)
    """

    pass


__all__ = [
    "TecError",
    "ValidationError",
    "OverflowError",
    "ParseError",
    "MalformedNumberError",
    "MalformedOffsetError",
    "GregorianParseError",
    "UnderspecifiedFieldError",
]
