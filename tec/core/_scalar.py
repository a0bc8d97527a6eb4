"""Shared behaviour of the single-number TEC units.

Year, Month, Day, Time and Duration each wrap one integer. They add and
subtract elementwise without carrying into larger units, compare by value,
and only ever equal or order against their own type.
"""

from __future__ import annotations

from typing import ClassVar, TypeVar

from tec.errors import OverflowError

S = TypeVar("S", bound="Scalar")


class Scalar:
    """Base class for integer-valued TEC units.

    Construction stores the value as given; there is no range check.
    Subclasses set ``unsigned`` when the unit cannot go below zero, in which
    case a subtraction with a negative result raises OverflowError.
    """

    __slots__ = ("_value",)

    unsigned: ClassVar[bool] = True

    def __init__(self, value: int) -> None:
        self._value: int = value

    @property
    def value(self) -> int:
        """Return the raw integer value."""
        return self._value

    def __int__(self) -> int:
        return self._value

    def __add__(self: S, other: object) -> S:
        if type(other) is not type(self):
            return NotImplemented
        return type(self)(self._value + other._value)  # type: ignore[attr-defined]

    def __sub__(self: S, other: object) -> S:
        if type(other) is not type(self):
            return NotImplemented
        result = self._value - other._value  # type: ignore[attr-defined]
        if self.unsigned and result < 0:
            raise OverflowError(
                f"{type(self).__name__} subtraction went below zero: "
                f"{self._value} - {other._value}"  # type: ignore[attr-defined]
            )
        return type(self)(result)

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._value == other._value  # type: ignore[attr-defined]

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return NotImplemented
        return not result

    def __lt__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._value < other._value  # type: ignore[attr-defined]

    def __le__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._value <= other._value  # type: ignore[attr-defined]

    def __gt__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._value > other._value  # type: ignore[attr-defined]

    def __ge__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._value >= other._value  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._value))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._value})"

    def __str__(self) -> str:
        return str(self._value)

    def __bool__(self) -> bool:
        """Units are always truthy, even at zero."""
        return True


__all__ = ["Scalar"]
