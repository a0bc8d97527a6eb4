"""Calendar utilities for TEC.

This module provides internal functions for mapping between Gregorian
day-of-year ordinals and TEC (decan, day) pairs, and the leap year rule.

A TEC year is split into ten regular decans of 36 days (0-9) followed by
a short remainder decan (10, written "A"). Gregorian day-of-year ordinals
are 1-based; TEC days are counted from 0 within each decan.

This module is not part of the public API.
"""

from __future__ import annotations

from tec._internal.constants import (
    DAYS_PER_DECAN,
    EPOCH_GREGORIAN_YEAR,
)


def gregorian_year(year: int) -> int:
    """Return the Gregorian year underlying a TEC year.

    Examples:
        >>> gregorian_year(0)
        2001
        >>> gregorian_year(-11)
        1990
    """
    return year + EPOCH_GREGORIAN_YEAR


def tec_year(greg_year: int) -> int:
    """Return the TEC year for a Gregorian year.

    Examples:
        >>> tec_year(2084)
        83
    """
    return greg_year - EPOCH_GREGORIAN_YEAR


def is_leap_year(year: int) -> bool:
    """Check if a TEC year is a leap year.

    The rule is the Gregorian one applied to the underlying Gregorian
    year: divisible by 4 and not by 100, or divisible by 400.

    Args:
        year: The TEC year (offset from 2001).

    Returns:
        True if the year has 366 days.

    Examples:
        >>> is_leap_year(-1)  # 2000
        True
        >>> is_leap_year(99)  # 2100
        False
        >>> is_leap_year(3)  # 2004
        True
    """
    y = gregorian_year(year)
    return y % 4 == 0 and (y % 100 != 0 or y % 400 == 0)


def days_in_year(year: int) -> int:
    """Return the number of days in a TEC year (365 or 366)."""
    return 366 if is_leap_year(year) else 365


def ordinal_to_decan(ordinal: int) -> tuple[int, int]:
    """Convert a 1-based Gregorian day-of-year to a (decan, day) pair.

    The first day of the year is day 0 of decan 0. Every other ordinal
    is re-based within its 36-day block, so ordinal 36 is day 0 of
    decan 1 and day 1 of decan 0 never occurs.

    Args:
        ordinal: Day of the Gregorian year (1-366).

    Returns:
        Tuple of (decan, day).

    Examples:
        >>> ordinal_to_decan(1)
        (0, 0)
        >>> ordinal_to_decan(44)
        (1, 8)
        >>> ordinal_to_decan(365)
        (10, 5)
    """
    decan = ordinal // DAYS_PER_DECAN
    if ordinal == 1:
        return decan, 0
    return decan, ordinal - decan * DAYS_PER_DECAN


def decan_to_ordinal(decan: int, day: int) -> int:
    """Convert a (decan, day) pair back to a 1-based day-of-year.

    This is the inverse of ordinal_to_decan for every pair it produces.
    The result is not range checked.

    Examples:
        >>> decan_to_ordinal(0, 0)
        1
        >>> decan_to_ordinal(1, 8)
        44
    """
    if decan == 0 and day == 0:
        return 1
    return decan * DAYS_PER_DECAN + day


__all__ = [
    "gregorian_year",
    "tec_year",
    "is_leap_year",
    "days_in_year",
    "ordinal_to_decan",
    "decan_to_ordinal",
]
