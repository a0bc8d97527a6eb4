"""TEC: the Triangular Earth Calendar.

TEC is a decimal calendar and clock. A year starts on Gregorian January 1st
and is split into ten 36-day decans plus a short remainder decan written
"A"; a day is split into 100000 fracs. Year 0 is Gregorian 2001.

Core Types:
    Year, Month, Day: Calendar units
    Time: Time of day in fracs
    Duration: Span of time in fracs
    Date: TEC calendar date
    DateTime: Date and time with a fixed UTC offset

Units:
    Offset: Fixed UTC offset

Format Functions:
    parse_tec: Parse TEC notation (or Gregorian free text)
    format_tec: Format a value as TEC notation

Exceptions:
    TecError: Base exception
    ParseError: Failed to parse a string
    MalformedNumberError, MalformedOffsetError, GregorianParseError,
    UnderspecifiedFieldError: Specific parse failures
    ValidationError: Value has no Gregorian equivalent
    OverflowError: Unsigned unit went below zero

Example:
    >>> from tec import DateTime, Duration
    >>> str(DateTime.epoch().date)
    '0.0.0'
    >>> Duration.from_text("60s").fracs
    69
"""

from __future__ import annotations

__version__ = "0.1.0"

# Core types
from tec.core.date import Date
from tec.core.datetime import DateTime
from tec.core.day import Day
from tec.core.duration import Duration
from tec.core.month import Month
from tec.core.time import Time
from tec.core.year import Year

# Units
from tec.units.offset import Offset

# Exceptions
from tec.errors import (
    GregorianParseError,
    MalformedNumberError,
    MalformedOffsetError,
    OverflowError,
    ParseError,
    TecError,
    UnderspecifiedFieldError,
    ValidationError,
)

# Format functions
from tec.format import format_tec, parse_tec

__all__: list[str] = [
    "__version__",
    # Core types
    "Date",
    "DateTime",
    "Day",
    "Duration",
    "Month",
    "Time",
    "Year",
    # Units
    "Offset",
    # Exceptions
    "TecError",
    "ParseError",
    "MalformedNumberError",
    "MalformedOffsetError",
    "GregorianParseError",
    "UnderspecifiedFieldError",
    "ValidationError",
    "OverflowError",
    # Format functions
    "parse_tec",
    "format_tec",
]
