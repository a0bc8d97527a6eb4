"""Core TEC types.

This module provides the fundamental TEC types:
    - Year: Signed year offset from Gregorian 2001
    - Month: Decan of the year (0-9, and 10 written "A")
    - Day: Day within a decan
    - Time: Time of day in fracs (100000 per day)
    - Duration: Span of time in fracs
    - Date: Year, Month and Day
    - DateTime: Date and Time with a fixed UTC offset
"""

from __future__ import annotations

from tec.core.date import Date
from tec.core.datetime import DateTime
from tec.core.day import Day
from tec.core.duration import Duration
from tec.core.month import Month
from tec.core.time import Time
from tec.core.year import Year

__all__: list[str] = [
    "Date",
    "DateTime",
    "Day",
    "Duration",
    "Month",
    "Time",
    "Year",
]
