"""Day class representing a day within a TEC decan."""

from __future__ import annotations

import datetime as _datetime

from tec._internal.calendar import ordinal_to_decan
from tec._internal.validation import parse_unsigned
from tec.core._scalar import Scalar


class Day(Scalar):
    """A day within a decan, counted from 0.

    Examples:
        >>> Day.from_instant(_datetime.datetime(2001, 1, 1))
        Day(0)
        >>> Day.from_instant(_datetime.datetime(1990, 2, 13))
        Day(8)
    """

    __slots__ = ()

    @classmethod
    def from_instant(cls, dt: _datetime.datetime) -> Day:
        """Return the day within its decan of a Gregorian instant."""
        _, day = ordinal_to_decan(dt.timetuple().tm_yday)
        return cls(day)

    @classmethod
    def from_text(cls, s: str) -> Day:
        """Parse an unsigned day number.

        Raises:
            MalformedNumberError: If s is not an unsigned integer.
        """
        return cls(parse_unsigned(s, "day"))


__all__ = ["Day"]
