"""Temporal units.

This module provides:
    - Offset: fixed UTC offset with the TEC '@' offset grammar
"""

from __future__ import annotations

from tec.units.offset import Offset

__all__: list[str] = [
    "Offset",
]
