"""Internal constants for TEC.

These constants define the calendar geometry and the scale factors used
throughout the library. This module is not part of the public API.
"""

from __future__ import annotations

# Gregorian year that maps to TEC Year(0)
EPOCH_GREGORIAN_YEAR: int = 2001

# Calendar geometry
DAYS_PER_DECAN: int = 36
REGULAR_DECANS: int = 10  # decans 0-9; decan 10 holds the remainder of the year
REMAINDER_DECAN: int = REGULAR_DECANS
REMAINDER_DECAN_SYMBOL: str = "A"

# Time of day
SECONDS_PER_MINUTE: int = 60
SECONDS_PER_HOUR: int = 60 * SECONDS_PER_MINUTE
SECONDS_PER_DAY: int = 24 * SECONDS_PER_HOUR  # 86_400
FRACS_PER_DAY: int = 100_000
MIDDAY_FRACS: int = FRACS_PER_DAY // 2

# Seconds -> fracs. Time and Duration use different factors.
TIME_SCALE: float = 1.15741
DURATION_SCALE: float = 1.1574

# Fixed offsets must lie strictly inside +/- one day
MAX_OFFSET_SECONDS: int = SECONDS_PER_DAY


__all__ = [
    "EPOCH_GREGORIAN_YEAR",
    "DAYS_PER_DECAN",
    "REGULAR_DECANS",
    "REMAINDER_DECAN",
    "REMAINDER_DECAN_SYMBOL",
    "SECONDS_PER_MINUTE",
    "SECONDS_PER_HOUR",
    "SECONDS_PER_DAY",
    "FRACS_PER_DAY",
    "MIDDAY_FRACS",
    "TIME_SCALE",
    "DURATION_SCALE",
    "MAX_OFFSET_SECONDS",
]
