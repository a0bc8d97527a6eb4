"""Internal utilities for TEC.

This module contains private implementation details:
    - Constants for the calendar geometry and unit scales
    - Calendar arithmetic (leap years, ordinal <-> decan mapping)
    - Strict field parsing helpers
    - The current local offset accessor (tec._internal.clock)

Note: This module is not part of the public API.
"""

from __future__ import annotations

from tec._internal.calendar import (
    days_in_year,
    decan_to_ordinal,
    is_leap_year,
    ordinal_to_decan,
)
from tec._internal.validation import (
    parse_signed,
    parse_unsigned,
    split_fields,
    validate_ordinal,
)

__all__: list[str] = [
    "days_in_year",
    "decan_to_ordinal",
    "is_leap_year",
    "ordinal_to_decan",
    "parse_signed",
    "parse_unsigned",
    "split_fields",
    "validate_ordinal",
]
