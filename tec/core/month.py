"""Month class representing a TEC decan."""

from __future__ import annotations

import datetime as _datetime

from tec._internal.calendar import ordinal_to_decan
from tec._internal.constants import REMAINDER_DECAN, REMAINDER_DECAN_SYMBOL
from tec._internal.validation import parse_unsigned
from tec.core._scalar import Scalar
from tec.errors import MalformedNumberError


class Month(Scalar):
    """A TEC month, also called a decan.

    Months 0-9 are regular 36-day decans and month 10 is the short
    remainder at the end of the year. Month 10 is written "A" so that every
    month is a single character.

    Examples:
        >>> str(Month(3))
        '3'
        >>> str(Month(10))
        'A'
        >>> Month.from_text("A")
        Month(10)
    """

    __slots__ = ()

    @classmethod
    def from_instant(cls, dt: _datetime.datetime) -> Month:
        """Return the decan containing a Gregorian instant's day of year."""
        month, _ = ordinal_to_decan(dt.timetuple().tm_yday)
        return cls(month)

    @classmethod
    def from_text(cls, s: str) -> Month:
        """Parse an unsigned month number or the literal "A".

        Raises:
            MalformedNumberError: If s is neither.
        """
        try:
            return cls(parse_unsigned(s, "month"))
        except MalformedNumberError:
            if s == REMAINDER_DECAN_SYMBOL:
                return cls(REMAINDER_DECAN)
            raise MalformedNumberError(f"{s!r} month is not valid") from None

    def __str__(self) -> str:
        if self._value == REMAINDER_DECAN:
            return REMAINDER_DECAN_SYMBOL
        return str(self._value)


__all__ = ["Month"]
