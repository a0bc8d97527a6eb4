"""Time class representing a TEC time of day.

This module provides the Time class. A TEC day is divided into 100000
"fracs"; one frac is a little under a second (86400 seconds map onto
about 100000 fracs).
"""

from __future__ import annotations

import datetime as _datetime
import math

from tec._internal import clock
from tec._internal.constants import (
    SECONDS_PER_HOUR,
    SECONDS_PER_MINUTE,
    TIME_SCALE,
)
from tec._internal.validation import parse_unsigned
from tec.core._scalar import Scalar


class Time(Scalar):
    """A time of day in fracs since midnight.

    The value is not clamped to a single day: Time(150000) is a valid,
    if unusual, value.

    Examples:
        >>> Time.from_hms(12, 0, 0)
        Time(50000)

        >>> Time.from_hms(9, 11, 33)
        Time(38302)

        >>> str(Time(50000))
        '5000'
        >>> str(Time(50001))
        '50001'
    """

    __slots__ = ()

    @classmethod
    def from_hms(cls, hour: int, minute: int, second: int) -> Time:
        """Create a Time from a Gregorian hour, minute and second.

        Seconds since midnight are scaled by 1.15741 and truncated.

        The product is computed in double precision. Single-precision
        (32-bit float) arithmetic truncates to one frac more on 280
        seconds of the day, for example second 7058 is 8168 fracs here
        and 8169 in single precision.

        Args:
            hour: The hour.
            minute: The minute.
            second: The second.

        Returns:
            The equivalent Time.

        Examples:
            >>> Time.from_hms(20, 1, 0)
            Time(83402)
        """
        seconds = hour * SECONDS_PER_HOUR + minute * SECONDS_PER_MINUTE + second
        return cls(int(seconds * TIME_SCALE))

    @classmethod
    def from_hour(cls, hour: int) -> Time:
        """Create a Time from a whole Gregorian hour.

        Examples:
            >>> Time.from_hour(12)
            Time(50000)
        """
        return cls(int(hour * SECONDS_PER_HOUR * TIME_SCALE))

    @classmethod
    def from_instant(cls, dt: _datetime.datetime) -> Time:
        """Create a Time from the wall-clock time of a Gregorian instant.

        The instant's own offset is used; sub-second parts are ignored.
        """
        return cls.from_hms(dt.hour, dt.minute, dt.second)

    @classmethod
    def now(cls) -> Time:
        """Return the current local time."""
        return cls.from_instant(clock.now())

    @classmethod
    def from_text(cls, s: str) -> Time:
        """Parse a fracs value, with an optional leading ':'.

        Only one leading ':' is removed. The remainder must be an unsigned
        integer; "H:M:S" shapes are not understood.

        Raises:
            MalformedNumberError: If the remainder is not an unsigned integer.

        Examples:
            >>> Time.from_text(":83402")
            Time(83402)
            >>> Time.from_text("5000")
            Time(5000)
        """
        return cls(parse_unsigned(s.removeprefix(":"), "time"))

    def to_seconds(self) -> int:
        """Return the Gregorian seconds since midnight for this Time.

        This inverts from_hms: Time.from_hms(0, 0, n).to_seconds() == n.

        Examples:
            >>> Time(38302).to_seconds()
            33093
        """
        return math.ceil(round(self._value / TIME_SCALE, 6))

    def __str__(self) -> str:
        """Return the 5-digit fracs value with one trailing zero dropped.

        Only a single zero is removed, so 50000 prints as "5000" and 0
        prints as "0000".
        """
        text = f"{self._value:05d}"
        return text.removesuffix("0")


__all__ = ["Time"]
