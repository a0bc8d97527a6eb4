"""Duration class representing a span of fracs.

This module provides the Duration class used to express timers and other
spans of time in fracs.
"""

from __future__ import annotations

import datetime as _datetime

from tec._internal.constants import DURATION_SCALE
from tec._internal.validation import parse_unsigned
from tec.core._scalar import Scalar


class Duration(Scalar):
    """A non-negative span of time in fracs.

    Conversions to and from seconds use a scale of 1.1574 and truncate,
    so they lose precision but keep order: a longer span of seconds never
    converts to fewer fracs.

    Examples:
        >>> Duration.from_secs(100)
        Duration(115)
        >>> Duration(115).to_secs()
        99
        >>> Duration.from_text("100s")
        Duration(115)
        >>> Duration.from_text("100F")
        Duration(100)
    """

    __slots__ = ()

    @classmethod
    def zero(cls) -> Duration:
        """Return a Duration of zero fracs."""
        return cls(0)

    @classmethod
    def from_secs(cls, secs: int) -> Duration:
        """Create a Duration from whole seconds."""
        return cls(int(secs * DURATION_SCALE))

    @classmethod
    def from_timedelta(cls, delta: _datetime.timedelta) -> Duration:
        """Create a Duration from the whole seconds of a timedelta."""
        return cls.from_secs(int(delta.total_seconds()))

    @classmethod
    def from_text(cls, s: str) -> Duration:
        """Parse a duration.

        Supported formats (suffix is case-insensitive):
            - "123s": whole seconds
            - "123f": fracs
            - "123": fracs

        Raises:
            MalformedNumberError: If the digits are not an unsigned integer.
        """
        lower = s.lower()
        if lower.endswith("s"):
            return cls.from_secs(parse_unsigned(lower[:-1], "duration seconds"))
        if lower.endswith("f"):
            return cls(parse_unsigned(lower[:-1], "duration fracs"))
        return cls(parse_unsigned(s, "duration fracs"))

    @property
    def fracs(self) -> int:
        """Return the span in fracs."""
        return self._value

    def to_secs(self) -> int:
        """Return the span in whole seconds (truncated)."""
        return int(self._value / DURATION_SCALE)

    def to_timedelta(self) -> _datetime.timedelta:
        """Return the span as a timedelta of whole seconds."""
        return _datetime.timedelta(seconds=self.to_secs())


__all__ = ["Duration"]
