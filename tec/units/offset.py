"""Fixed UTC offsets.

This module provides the Offset class, a timezone represented as a fixed
number of seconds from UTC, and the '@' offset grammar of the TEC
notation.
"""

from __future__ import annotations

import datetime as _datetime
from typing import ClassVar

from tec._internal.constants import MAX_OFFSET_SECONDS, SECONDS_PER_MINUTE
from tec._internal.validation import parse_signed
from tec.errors import MalformedNumberError, MalformedOffsetError, ValidationError


class Offset:
    """A fixed offset from UTC.

    The offset is stored in seconds, positive values being east of UTC
    (ahead in time) and negative values west of UTC (behind in time).
    Offsets must lie strictly within one day of UTC.

    Attributes:
        offset_seconds: The UTC offset in seconds, east positive.

    Examples:
        >>> Offset.utc().is_utc
        True

        >>> Offset.west(7 * 3600).offset_seconds
        -25200

        >>> str(Offset.east(19800))
        '+05:30'
    """

    __slots__ = ("_offset_seconds",)

    _utc_instance: ClassVar[Offset | None] = None

    def __init__(self, offset_seconds: int) -> None:
        """Create an Offset from seconds east of UTC.

        Args:
            offset_seconds: UTC offset in seconds, east positive.

        Raises:
            ValidationError: If the offset is a full day or more.
        """
        if not isinstance(offset_seconds, int):
            raise ValidationError(
                f"offset_seconds must be an integer, got {type(offset_seconds).__name__}"
            )
        if abs(offset_seconds) >= MAX_OFFSET_SECONDS:
            raise ValidationError(
                f"offset_seconds {offset_seconds} is outside "
                f"(-{MAX_OFFSET_SECONDS}, {MAX_OFFSET_SECONDS})"
            )
        self._offset_seconds: int = offset_seconds

    @classmethod
    def utc(cls) -> Offset:
        """Return the UTC offset (a shared instance)."""
        if cls._utc_instance is None:
            cls._utc_instance = cls(0)
        return cls._utc_instance

    @classmethod
    def east(cls, seconds: int) -> Offset:
        """Return an offset the given number of seconds ahead of UTC."""
        return cls(seconds)

    @classmethod
    def west(cls, seconds: int) -> Offset:
        """Return an offset the given number of seconds behind UTC.

        Examples:
            >>> Offset.west(3600)
            Offset(offset_seconds=-3600)
        """
        return cls(-seconds)

    @classmethod
    def from_utcoffset(cls, delta: _datetime.timedelta) -> Offset:
        """Create an Offset from a datetime utcoffset() value.

        Sub-second parts are dropped.

        Examples:
            >>> Offset.from_utcoffset(_datetime.timedelta(hours=-7))
            Offset(offset_seconds=-25200)
        """
        return cls(int(delta.total_seconds()))

    @classmethod
    def from_text(cls, s: str) -> Offset:
        """Parse the offset part of the TEC notation.

        All ':' characters are removed and the remainder is read as a
        signed number of minutes. The result is an offset that many
        minutes *west* of UTC, so a positive number means behind UTC.

        Args:
            s: The text after '@'.

        Returns:
            The parsed Offset.

        Raises:
            MalformedOffsetError: If the text is not a number of minutes or
                the offset is a full day or more.

        Examples:
            >>> Offset.from_text("420").offset_seconds
            -25200

            >>> Offset.from_text("-3:30").offset_seconds
            19800
        """
        text = s.replace(":", "")
        try:
            minutes = parse_signed(text, "offset")
        except MalformedNumberError as e:
            raise MalformedOffsetError(f"invalid offset {s!r}: {e}") from e

        seconds = minutes * SECONDS_PER_MINUTE
        if abs(seconds) >= MAX_OFFSET_SECONDS:
            raise MalformedOffsetError(
                f"offset {s!r} is {minutes} minutes, must be within one day"
            )
        return cls.west(seconds)

    @property
    def offset_seconds(self) -> int:
        """Return the UTC offset in seconds, east positive."""
        return self._offset_seconds

    @property
    def is_utc(self) -> bool:
        """Return True if this offset is zero."""
        return self._offset_seconds == 0

    def to_tzinfo(self) -> _datetime.timezone:
        """Return the equivalent datetime.timezone.

        Examples:
            >>> Offset.west(3600).to_tzinfo()
            datetime.timezone(datetime.timedelta(days=-1, seconds=82800))
        """
        return _datetime.timezone(_datetime.timedelta(seconds=self._offset_seconds))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Offset):
            return NotImplemented
        return self._offset_seconds == other._offset_seconds

    def __hash__(self) -> int:
        return hash(self._offset_seconds)

    def __repr__(self) -> str:
        return f"Offset(offset_seconds={self._offset_seconds})"

    def __str__(self) -> str:
        """Return the offset as +HH:MM, with :SS when seconds are present.

        Examples:
            >>> str(Offset.utc())
            '+00:00'
            >>> str(Offset.west(25200))
            '-07:00'
            >>> str(Offset.east(3661))
            '+01:01:01'
        """
        sign = "+" if self._offset_seconds >= 0 else "-"
        minutes, seconds = divmod(abs(self._offset_seconds), SECONDS_PER_MINUTE)
        hours, minutes = divmod(minutes, 60)
        if seconds:
            return f"{sign}{hours:02d}:{minutes:02d}:{seconds:02d}"
        return f"{sign}{hours:02d}:{minutes:02d}"


__all__ = ["Offset"]
