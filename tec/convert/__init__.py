"""TEC conversion utilities.

This module provides functions for converting TEC values to and from the
standard library's Gregorian types.

Examples:
    >>> import datetime
    >>> from tec.convert import from_gregorian, to_gregorian
    >>> d = from_gregorian(datetime.date(1990, 2, 13))
    >>> str(d)
    '-11.1.8'
    >>> to_gregorian(d)
    datetime.date(1990, 2, 13)
"""

from __future__ import annotations

from tec.convert.gregorian import from_gregorian, to_gregorian

__all__ = [
    "from_gregorian",
    "to_gregorian",
]
