"""Date class representing a TEC calendar date.

This module provides the Date class, a (Year, Month, Day) triple in the
TEC calendar, and its conversions to and from Gregorian dates.
"""

from __future__ import annotations

import datetime as _datetime

from tec._internal import clock
from tec._internal.calendar import (
    days_in_year,
    decan_to_ordinal,
    gregorian_year,
)
from tec._internal.validation import split_fields, validate_ordinal
from tec.core.day import Day
from tec.core.month import Month
from tec.core.year import Year


def _as_unit(value: object, unit: type) -> object:
    if isinstance(value, unit):
        return value
    return unit(value)


class Date:
    """A date in the TEC calendar.

    Date holds a Year, a Month (decan) and a Day within the decan. The
    fields are not checked against each other: Date(0, 10, 30) can be
    constructed and printed even though decan 10 has at most 7 days.

    Attributes:
        year: The Year component.
        month: The Month (decan) component, 0-10.
        day: The Day within the decan.

    Examples:
        >>> d = Date(83, 10, 5)
        >>> str(d)
        '83.A.5'

        >>> Date.from_instant(_datetime.datetime(1990, 2, 13))
        Date(-11, 1, 8)

        >>> Date.from_text("-11.1.8")
        Date(-11, 1, 8)
    """

    __slots__ = ("_year", "_month", "_day")

    def __init__(
        self,
        year: Year | int,
        month: Month | int,
        day: Day | int,
    ) -> None:
        """Create a Date from its parts.

        Plain integers are wrapped in the matching unit type. No
        validation is performed.
        """
        self._year: Year = _as_unit(year, Year)  # type: ignore[assignment]
        self._month: Month = _as_unit(month, Month)  # type: ignore[assignment]
        self._day: Day = _as_unit(day, Day)  # type: ignore[assignment]

    @classmethod
    def epoch(cls) -> Date:
        """Return the TEC epoch, 0.0.0 (Gregorian 2001-01-01)."""
        return cls(Year(0), Month(0), Day(0))

    @classmethod
    def from_instant(cls, dt: _datetime.datetime) -> Date:
        """Create a Date from a Gregorian instant.

        Only the calendar year and the day of year are used; the time of
        day is ignored.

        Args:
            dt: The Gregorian instant.

        Returns:
            The TEC date of the instant.

        Examples:
            >>> Date.from_instant(_datetime.datetime(2001, 1, 1))
            Date(0, 0, 0)
            >>> Date.from_instant(_datetime.datetime(2084, 12, 30))
            Date(83, 10, 5)
        """
        return cls(
            Year.from_instant(dt),
            Month.from_instant(dt),
            Day.from_instant(dt),
        )

    @classmethod
    def now(cls) -> Date:
        """Return today's TEC date in the current local offset."""
        return cls.from_instant(clock.now())

    @classmethod
    def from_text(cls, s: str) -> Date:
        """Parse a date in "Y.M.D" form.

        The year is a signed integer, the month an unsigned integer or "A"
        (month 10) and the day an unsigned integer.

        Args:
            s: The text to parse.

        Returns:
            The parsed Date.

        Raises:
            UnderspecifiedFieldError: If there are fewer than three fields.
            MalformedNumberError: If a field is not a valid number.

        Examples:
            >>> Date.from_text("83.A.5")
            Date(83, 10, 5)

            >>> Date.from_text("83.5")
            Traceback (most recent call last):
            ...
            UnderspecifiedFieldError: date needs 3 '.'-separated fields, got 2 in '83.5'
        """
        fields = split_fields(s, ".", 3, "date")
        return cls(
            Year.from_text(fields[0]),
            Month.from_text(fields[1]),
            Day.from_text(fields[2]),
        )

    @property
    def year(self) -> Year:
        """Return the year component."""
        return self._year

    @property
    def month(self) -> Month:
        """Return the month (decan) component."""
        return self._month

    @property
    def day(self) -> Day:
        """Return the day component."""
        return self._day

    @property
    def is_leap_year(self) -> bool:
        """Return True if this date is in a leap year."""
        return self._year.is_leap_year

    @property
    def day_of_year(self) -> int:
        """Return the 1-based Gregorian day of year for this date.

        The value is not range checked.

        Examples:
            >>> Date(-11, 1, 8).day_of_year
            44
        """
        return decan_to_ordinal(self._month.value, self._day.value)

    def replace(
        self,
        year: Year | int | None = None,
        month: Month | int | None = None,
        day: Day | int | None = None,
    ) -> Date:
        """Return a new Date with the specified components replaced.

        Examples:
            >>> Date(83, 10, 5).replace(month=9)
            Date(83, 9, 5)
        """
        return Date(
            year if year is not None else self._year,
            month if month is not None else self._month,
            day if day is not None else self._day,
        )

    def to_gregorian(self) -> _datetime.date:
        """Return the Gregorian date for this TEC date.

        Returns:
            The corresponding datetime.date.

        Raises:
            ValidationError: If the date does not fall inside its year.

        Examples:
            >>> Date(-11, 1, 8).to_gregorian()
            datetime.date(1990, 2, 13)
            >>> Date(0, 0, 0).to_gregorian()
            datetime.date(2001, 1, 1)
        """
        ordinal = self.day_of_year
        validate_ordinal(ordinal, days_in_year(self._year.value))
        start = _datetime.date(gregorian_year(self._year.value), 1, 1)
        return start + _datetime.timedelta(days=ordinal - 1)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return (
            self._year == other._year
            and self._month == other._month
            and self._day == other._day
        )

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return NotImplemented
        return not result

    def __hash__(self) -> int:
        return hash((self._year, self._month, self._day))

    def __repr__(self) -> str:
        """Return a detailed string representation.

        Returns:
            String like 'Date(83, 10, 5)'.
        """
        return f"Date({self._year.value}, {self._month.value}, {self._day.value})"

    def __str__(self) -> str:
        """Return the "Y.M.D" representation."""
        return f"{self._year}.{self._month}.{self._day}"

    def __bool__(self) -> bool:
        """Dates are always truthy."""
        return True


__all__ = ["Date"]
