"""TEC formatting and parsing.

This module provides functions for converting TEC values to and from
string representations:
    - TEC notation ("83.A.5:83402@420")
    - Gregorian free text, used as a fallback by parse_tec

Functions:
    parse_tec: Parse TEC notation into a DateTime.
    format_tec: Format a Date, Time or DateTime as TEC notation.
    parse_gregorian: Parse Gregorian free text into a UTC datetime.
"""

from __future__ import annotations

from tec.format.gregorian import parse_gregorian
from tec.format.notation import format_tec, parse_tec

__all__: list[str] = [
    # TEC notation
    "parse_tec",
    "format_tec",
    # Gregorian
    "parse_gregorian",
]
