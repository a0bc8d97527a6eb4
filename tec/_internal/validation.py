"""Parsing and validation utilities for TEC.

Every textual field goes through these helpers so that malformed or
missing fields surface as ParseError subclasses instead of IndexError or
ValueError.

This module is not part of the public API.
"""

from __future__ import annotations

import re

from tec.errors import (
    MalformedNumberError,
    UnderspecifiedFieldError,
    ValidationError,
)

_UNSIGNED_PATTERN = re.compile(r"^\+?[0-9]+$")
_SIGNED_PATTERN = re.compile(r"^[+-]?[0-9]+$")


def parse_unsigned(text: str, field: str) -> int:
    """Parse a non-negative integer field.

    Only ASCII digits with an optional leading '+' are accepted. Unlike
    int(), surrounding whitespace and '_' separators are rejected.

    Args:
        text: The field text.
        field: Field name used in the error message.

    Returns:
        The parsed value.

    Raises:
        MalformedNumberError: If text is not an unsigned integer.

    Examples:
        >>> parse_unsigned("083", "day")
        83
        >>> parse_unsigned("-1", "day")
        Traceback (most recent call last):
        ...
        MalformedNumberError: day must be an unsigned integer, got '-1'
    """
    if not _UNSIGNED_PATTERN.match(text):
        raise MalformedNumberError(f"{field} must be an unsigned integer, got {text!r}")
    return int(text)


def parse_signed(text: str, field: str) -> int:
    """Parse an integer field with an optional sign.

    Raises:
        MalformedNumberError: If text is not an integer.

    Examples:
        >>> parse_signed("-11", "year")
        -11
    """
    if not _SIGNED_PATTERN.match(text):
        raise MalformedNumberError(f"{field} must be an integer, got {text!r}")
    return int(text)


def split_fields(text: str, sep: str, count: int, what: str) -> list[str]:
    """Split text on sep and require at least count fields.

    Fields beyond count are returned untouched; callers index only the
    first count entries.

    Args:
        text: The text to split.
        sep: The separator.
        count: Minimum number of fields.
        what: Name of the value being parsed, for the error message.

    Returns:
        The list of fields.

    Raises:
        UnderspecifiedFieldError: If there are fewer than count fields.

    Examples:
        >>> split_fields("83.A.5", ".", 3, "date")
        ['83', 'A', '5']
        >>> split_fields("83.5", ".", 3, "date")
        Traceback (most recent call last):
        ...
        UnderspecifiedFieldError: date needs 3 '.'-separated fields, got 2 in '83.5'
    """
    fields = text.split(sep)
    if len(fields) < count:
        raise UnderspecifiedFieldError(
            f"{what} needs {count} {sep!r}-separated fields, "
            f"got {len(fields)} in {text!r}"
        )
    return fields


def validate_ordinal(ordinal: int, days: int) -> None:
    """Validate that a day-of-year ordinal fits in a year of the given length.

    Raises:
        ValidationError: If ordinal is outside 1-days.
    """
    if ordinal < 1 or ordinal > days:
        raise ValidationError(
            f"day of year must be between 1 and {days}, got {ordinal}"
        )


__all__ = [
    "parse_unsigned",
    "parse_signed",
    "split_fields",
    "validate_ordinal",
]
