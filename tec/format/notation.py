"""TEC notation formatting and parsing.

This module provides functions for converting TEC values to and from the
compact TEC notation.

Functions:
    parse_tec: Parse TEC notation (or Gregorian free text) into a DateTime.
    format_tec: Format a Date, Time or DateTime as TEC notation.

Grammar:
    - Y.M.D            date only, time defaults to midday (50000 fracs)
    - Y.M.D:F          date and time, F in fracs
    - ...@O            optional offset suffix, O in minutes west of UTC

Anything else, such as "2024-01-15 14:30" or "Jan 15 2024", is handed to
the Gregorian free-text parser and converted.

Examples:
    >>> from tec.format import parse_tec, format_tec
    >>> dt = parse_tec("83.A.5:83402")
    >>> format_tec(dt.date)
    '83.A.5'
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Union

from tec._internal import clock
from tec._internal.constants import MIDDAY_FRACS
from tec.format.gregorian import parse_gregorian
from tec.units.offset import Offset

if TYPE_CHECKING:
    from tec.core.date import Date
    from tec.core.datetime import DateTime
    from tec.core.time import Time

logger = logging.getLogger(__name__)

# Type alias for TEC values with a notation
TecType = Union["Date", "Time", "DateTime"]


def parse_tec(s: str) -> DateTime:
    """Parse TEC notation into a DateTime.

    Detection rules, in order:
        - An '@' splits off an offset (text after the first '@'); without
          one the current local offset is used.
        - Remainder contains ':' and no '-' -> date and time, split on the
          first ':'.
        - Remainder contains '.' -> date only, time is midday.
        - Otherwise -> Gregorian free text.

    A '-' anywhere in the remainder disables the date-and-time rule so
    that Gregorian text like "2024-01-15 14:30" reaches the fallback.

    Args:
        s: The text to parse.

    Returns:
        The parsed DateTime.

    Raises:
        MalformedOffsetError: If the offset is not a number of minutes.
        UnderspecifiedFieldError: If a date has fewer than three fields.
        MalformedNumberError: If a date or time field is not a number.
        GregorianParseError: If the fallback cannot read the text.

    Examples:
        >>> parse_tec("83.A.5:83402@0")
        DateTime(Date(83, 10, 5), Time(83402), Offset(offset_seconds=0))

        >>> parse_tec("83.A.5@0").time
        Time(50000)
    """
    from tec.core.date import Date
    from tec.core.datetime import DateTime
    from tec.core.time import Time

    if "@" in s:
        rest, offset_text = s.split("@", 1)
        offset = Offset.from_text(offset_text)
    else:
        rest = s
        offset = clock.local_offset()

    if ":" in rest and "-" not in rest:
        date_text, time_text = rest.split(":", 1)
        logger.debug("parsing %r as TEC date and time", s)
        return DateTime(Date.from_text(date_text), Time.from_text(time_text), offset)

    if "." in rest:
        logger.debug("parsing %r as TEC date at midday", s)
        return DateTime(Date.from_text(rest), Time(MIDDAY_FRACS), offset)

    logger.debug("%r is not TEC notation, trying gregorian", s)
    return DateTime.from_instant(parse_gregorian(rest))


def format_tec(value: TecType) -> str:
    """Format a Date, Time or DateTime as TEC notation.

    Raises:
        TypeError: If value is not a Date, Time or DateTime.

    Examples:
        >>> from tec import Date, Time
        >>> format_tec(Date(83, 10, 5))
        '83.A.5'
        >>> format_tec(Time(50000))
        '5000'
    """
    from tec.core.date import Date
    from tec.core.datetime import DateTime
    from tec.core.time import Time

    if isinstance(value, (DateTime, Date, Time)):
        return str(value)
    raise TypeError(f"expected Date, Time, or DateTime, got {type(value).__name__}")


__all__ = ["parse_tec", "format_tec"]
