"""Year class representing a TEC year.

This module provides the Year class, a signed count of years from the
TEC epoch (Gregorian 2001).
"""

from __future__ import annotations

import datetime as _datetime
from typing import ClassVar

from tec._internal.calendar import is_leap_year, tec_year
from tec._internal.validation import parse_signed
from tec.core._scalar import Scalar


class Year(Scalar):
    """A TEC year.

    Year 0 is Gregorian 2001; earlier years are negative.

    Examples:
        >>> Year.from_instant(_datetime.datetime(1990, 2, 13))
        Year(-11)
        >>> Year(3).is_leap_year
        True
        >>> str(Year(-11))
        '-11'
    """

    __slots__ = ()

    unsigned: ClassVar[bool] = False

    @classmethod
    def from_instant(cls, dt: _datetime.datetime) -> Year:
        """Return the TEC year of a Gregorian instant."""
        return cls(tec_year(dt.year))

    @classmethod
    def from_text(cls, s: str) -> Year:
        """Parse a signed decimal year.

        Raises:
            MalformedNumberError: If s is not an integer.
        """
        return cls(parse_signed(s, "year"))

    @property
    def is_leap_year(self) -> bool:
        """Return True if the underlying Gregorian year is a leap year."""
        return is_leap_year(self._value)


__all__ = ["Year"]
