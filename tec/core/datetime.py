"""DateTime class combining a TEC date, time and UTC offset.

This module provides the DateTime class for representing instants in the
TEC calendar together with the fixed UTC offset they were observed in.
"""

from __future__ import annotations

import datetime as _datetime

from tec._internal import clock
from tec.core.date import Date
from tec.core.time import Time
from tec.units.offset import Offset


class DateTime:
    """A TEC date and time with a fixed UTC offset.

    When no offset is given the current local offset is used, read once at
    construction. Displaying a DateTime compares its offset with the local
    offset *at display time*: the offset is printed only when they differ,
    so the same value can print differently before and after a daylight
    saving change.

    Attributes:
        date: The Date component.
        time: The Time component.
        offset: The fixed UTC offset.

    Examples:
        >>> dt = DateTime(Date(83, 10, 5), Time(83402), Offset.utc())
        >>> dt.date
        Date(83, 10, 5)

        >>> DateTime.from_text("83.A.5:83402@0") == dt
        True
    """

    __slots__ = ("_date", "_time", "_offset")

    def __init__(
        self,
        date: Date,
        time: Time,
        offset: Offset | None = None,
    ) -> None:
        """Create a DateTime from its parts.

        Args:
            date: The date component.
            time: The time component.
            offset: The UTC offset. Defaults to the current local offset.
        """
        self._date: Date = date
        self._time: Time = time
        self._offset: Offset = offset if offset is not None else clock.local_offset()

    @classmethod
    def epoch(cls) -> DateTime:
        """Return the TEC epoch, 0.0.0:0000 at UTC."""
        return cls(Date.epoch(), Time(0), Offset.utc())

    @classmethod
    def from_instant(cls, dt: _datetime.datetime) -> DateTime:
        """Create a DateTime from a Gregorian instant.

        The date and time are taken from the instant's own wall clock and
        the instant's offset is kept. A naive instant is taken to be in the
        current local offset.

        Args:
            dt: The Gregorian instant.

        Returns:
            The TEC DateTime of the instant.

        Examples:
            >>> utc = _datetime.timezone.utc
            >>> dt = DateTime.from_instant(_datetime.datetime(2084, 12, 30, 20, 1, tzinfo=utc))
            >>> dt.date, dt.time
            (Date(83, 10, 5), Time(83402))
        """
        delta = dt.utcoffset()
        offset = Offset.from_utcoffset(delta) if delta is not None else None
        return cls(Date.from_instant(dt), Time.from_instant(dt), offset)

    @classmethod
    def now(cls) -> DateTime:
        """Return the current TEC date and time in the local offset."""
        return cls.from_instant(clock.now())

    @classmethod
    def from_text(cls, s: str) -> DateTime:
        """Parse the TEC notation, falling back to Gregorian free text.

        See tec.format.notation.parse_tec for the grammar.

        Raises:
            ParseError: If the text cannot be parsed.
        """
        from tec.format.notation import parse_tec

        return parse_tec(s)

    @property
    def date(self) -> Date:
        """Return the date component."""
        return self._date

    @property
    def time(self) -> Time:
        """Return the time component."""
        return self._time

    @property
    def offset(self) -> Offset:
        """Return the fixed UTC offset."""
        return self._offset

    def replace(
        self,
        date: Date | None = None,
        time: Time | None = None,
        offset: Offset | None = None,
    ) -> DateTime:
        """Return a new DateTime with the specified components replaced."""
        return DateTime(
            date if date is not None else self._date,
            time if time is not None else self._time,
            offset if offset is not None else self._offset,
        )

    def to_instant(self) -> _datetime.datetime:
        """Return the Gregorian instant for this DateTime.

        The result is an aware datetime in this DateTime's offset. Times
        of 100000 fracs or more roll over into the following days.

        Raises:
            ValidationError: If the date does not fall inside its year.

        Examples:
            >>> dt = DateTime(Date(-11, 1, 8), Time(38302), Offset.west(25200))
            >>> dt.to_instant().isoformat()
            '1990-02-13T09:11:33-07:00'
        """
        midnight = _datetime.datetime.combine(
            self._date.to_gregorian(),
            _datetime.time(0),
            tzinfo=self._offset.to_tzinfo(),
        )
        return midnight + _datetime.timedelta(seconds=self._time.to_seconds())

    def __eq__(self, other: object) -> bool:
        """Check field-by-field equality.

        Two DateTimes for the same instant in different offsets are not
        equal.
        """
        if not isinstance(other, DateTime):
            return NotImplemented
        return (
            self._date == other._date
            and self._time == other._time
            and self._offset == other._offset
        )

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return NotImplemented
        return not result

    def __hash__(self) -> int:
        return hash((self._date, self._time, self._offset))

    def __repr__(self) -> str:
        return f"DateTime({self._date!r}, {self._time!r}, {self._offset!r})"

    def __str__(self) -> str:
        """Return "Y.M.D:F", with "@offset" appended when not local."""
        if self._offset == clock.local_offset():
            return f"{self._date}:{self._time}"
        return f"{self._date}:{self._time}@{self._offset}"

    def __bool__(self) -> bool:
        """DateTimes are always truthy."""
        return True


__all__ = ["DateTime"]
