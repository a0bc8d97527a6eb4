"""Gregorian free-text parsing.

This module reads Gregorian dates and times written in any of the common
human formats ("2024-01-15 14:30", "Jan 15 2024 2pm", RFC 2822, ...) by
delegating to python-dateutil.

Functions:
    parse_gregorian: Parse Gregorian free text into an aware UTC datetime.
"""

from __future__ import annotations

import datetime as _datetime
import logging

from dateutil import parser as _dateutil_parser

from tec._internal import clock
from tec.errors import GregorianParseError

logger = logging.getLogger(__name__)


def parse_gregorian(s: str) -> _datetime.datetime:
    """Parse Gregorian free text into an instant.

    Text without an explicit offset is read as local time in the current
    local offset. The result is always converted to UTC.

    Args:
        s: The text to parse.

    Returns:
        An aware datetime in UTC.

    Raises:
        GregorianParseError: If the text is not a recognisable date/time.

    Examples:
        >>> parse_gregorian("1990-02-13T09:11:33-07:00").isoformat()
        '1990-02-13T16:11:33+00:00'
    """
    try:
        dt = _dateutil_parser.parse(s)
    except (ValueError, OverflowError) as e:
        raise GregorianParseError(f"{s} is not a gregorian datetime") from e

    if dt.tzinfo is None or dt.utcoffset() is None:
        dt = dt.replace(tzinfo=clock.local_offset().to_tzinfo())
    logger.debug("parsed %r as gregorian %s", s, dt.isoformat())

    # Shifting to UTC can leave the datetime range at year 1 and 9999
    try:
        return dt.astimezone(_datetime.timezone.utc)
    except OverflowError as e:
        raise GregorianParseError(f"{s} is not a gregorian datetime") from e


__all__ = ["parse_gregorian"]
