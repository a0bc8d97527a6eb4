"""Access to the process's current local offset and wall clock.

Everything in TEC that depends on "the current local offset" reads it
through local_offset(), so a different source can be installed with
set_local_offset_provider() (tests pin it to a fixed value).

This module is not part of the public API.
"""

from __future__ import annotations

import datetime as _datetime
from typing import Callable

from tec.units.offset import Offset

OffsetProvider = Callable[[], Offset]


def system_local_offset() -> Offset:
    """Return the operating system's current UTC offset.

    The value can change while the process runs (daylight saving time),
    so it is looked up on every call.
    """
    delta = _datetime.datetime.now().astimezone().utcoffset()
    if delta is None:
        return Offset.utc()
    return Offset.from_utcoffset(delta)


_provider: OffsetProvider = system_local_offset


def local_offset() -> Offset:
    """Return the current local offset from the installed provider."""
    return _provider()


def set_local_offset_provider(provider: OffsetProvider | None) -> OffsetProvider:
    """Install a new local offset provider.

    Args:
        provider: A callable returning an Offset, or None to restore the
            system provider.

    Returns:
        The previously installed provider.
    """
    global _provider
    previous = _provider
    _provider = provider if provider is not None else system_local_offset
    return previous


def now() -> _datetime.datetime:
    """Return the current wall-clock time in the current local offset."""
    return _datetime.datetime.now(local_offset().to_tzinfo())


__all__ = [
    "OffsetProvider",
    "system_local_offset",
    "local_offset",
    "set_local_offset_provider",
    "now",
]
