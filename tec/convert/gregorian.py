"""Gregorian conversion utilities for TEC values.

This module provides functions for converting between TEC values and the
standard library's Gregorian date and datetime types.

Functions:
    from_gregorian: Create a Date or DateTime from a Gregorian value.
    to_gregorian: Convert a Date or DateTime to a Gregorian value.

Examples:
    >>> import datetime
    >>> from tec.convert import from_gregorian, to_gregorian

    >>> tec_dt = from_gregorian(
    ...     datetime.datetime(2084, 12, 30, 20, 1, tzinfo=datetime.timezone.utc)
    ... )
    >>> str(tec_dt.date)
    '83.A.5'
    >>> to_gregorian(tec_dt.date)
    datetime.date(2084, 12, 30)
"""

from __future__ import annotations

import datetime as _datetime
from typing import TYPE_CHECKING, Union, overload

if TYPE_CHECKING:
    from tec.core.date import Date
    from tec.core.datetime import DateTime


@overload
def from_gregorian(value: _datetime.datetime) -> "DateTime": ...


@overload
def from_gregorian(value: _datetime.date) -> "Date": ...


def from_gregorian(value: _datetime.date) -> Union["Date", "DateTime"]:
    """Convert a Gregorian date or datetime to its TEC equivalent.

    A datetime.datetime becomes a DateTime (keeping its offset, or the
    local offset when naive); a plain datetime.date becomes a Date.

    Raises:
        TypeError: If value is not a date or datetime.
    """
    from tec.core.date import Date
    from tec.core.datetime import DateTime

    if isinstance(value, _datetime.datetime):
        return DateTime.from_instant(value)
    if isinstance(value, _datetime.date):
        return Date.from_instant(
            _datetime.datetime.combine(value, _datetime.time(0))
        )
    raise TypeError(f"expected date or datetime, got {type(value).__name__}")


@overload
def to_gregorian(value: "DateTime") -> _datetime.datetime: ...


@overload
def to_gregorian(value: "Date") -> _datetime.date: ...


def to_gregorian(value: Union["Date", "DateTime"]) -> _datetime.date:
    """Convert a TEC Date or DateTime to its Gregorian equivalent.

    Raises:
        ValidationError: If the date does not fall inside its year.
        TypeError: If value is not a Date or DateTime.
    """
    from tec.core.date import Date
    from tec.core.datetime import DateTime

    if isinstance(value, DateTime):
        return value.to_instant()
    if isinstance(value, Date):
        return value.to_gregorian()
    raise TypeError(f"expected Date or DateTime, got {type(value).__name__}")


__all__ = ["from_gregorian", "to_gregorian"]
