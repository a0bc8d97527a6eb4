"""Pytest configuration and fixtures for TEC tests."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Iterator

import pytest

# Add the parent directory to sys.path so tec can be imported
# without needing to install the package
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from tec._internal import clock  # noqa: E402
from tec.units.offset import Offset  # noqa: E402


class PinnedOffset:
    """A local offset provider whose value tests can change."""

    def __init__(self, offset: Offset) -> None:
        self.offset = offset

    def __call__(self) -> Offset:
        return self.offset


@pytest.fixture(autouse=True)
def local_offset() -> Iterator[PinnedOffset]:
    """Pin the current local offset to UTC for every test.

    Tests that need another local offset assign to ``local_offset.offset``.
    """
    pinned = PinnedOffset(Offset.utc())
    previous = clock.set_local_offset_provider(pinned)
    yield pinned
    clock.set_local_offset_provider(previous)
