"""Tests for the DateTime class.

Covers conversion from Gregorian instants with and without an offset,
the local offset default, offset-aware display and conversion back to
Gregorian instants.
"""

from __future__ import annotations

import datetime

import pytest

from conftest import PinnedOffset
from tec.core.date import Date
from tec.core.datetime import DateTime
from tec.core.time import Time
from tec.errors import ValidationError
from tec.units.offset import Offset

UTC = datetime.timezone.utc
MST = datetime.timezone(datetime.timedelta(hours=-7))


class TestDateTimeFromInstant:
    """Tests for DateTime.from_instant."""

    def test_past_date(self) -> None:
        """1990-02-13T09:11:33-07:00."""
        dt = datetime.datetime(1990, 2, 13, 9, 11, 33, tzinfo=MST)
        expected = DateTime(Date(-11, 1, 8), Time(38302), Offset.west(25200))
        assert DateTime.from_instant(dt) == expected

    def test_future_date(self) -> None:
        """2084-12-30T20:01:00Z."""
        dt = datetime.datetime(2084, 12, 30, 20, 1, tzinfo=UTC)
        expected = DateTime(Date(83, 10, 5), Time(83402), Offset.utc())
        assert DateTime.from_instant(dt) == expected

    def test_epoch(self) -> None:
        """2001-01-01T00:00:00Z is the TEC epoch."""
        dt = datetime.datetime(2001, 1, 1, tzinfo=UTC)
        assert DateTime.from_instant(dt) == DateTime.epoch()

    def test_naive_uses_local_offset(self, local_offset: PinnedOffset) -> None:
        """A naive instant is in the current local offset."""
        local_offset.offset = Offset.east(3600)
        result = DateTime.from_instant(datetime.datetime(2001, 1, 1, 12))
        assert result.offset == Offset.east(3600)
        assert result.time == Time(50000)

    def test_now(self) -> None:
        """now() is in the local offset."""
        assert DateTime.now().offset == Offset.utc()


class TestDateTimeOffsets:
    """Tests for the local offset default and display."""

    def test_default_offset_is_local(self, local_offset: PinnedOffset) -> None:
        """No offset means the local offset."""
        local_offset.offset = Offset.west(3600)
        assert DateTime(Date(0, 0, 0), Time(0)).offset == Offset.west(3600)

    def test_default_offset_read_once(self, local_offset: PinnedOffset) -> None:
        """Changing the local offset later does not change the value."""
        dt = DateTime(Date(0, 0, 0), Time(0))
        local_offset.offset = Offset.west(3600)
        assert dt.offset == Offset.utc()

    def test_display_local(self) -> None:
        """The offset is omitted when it is local."""
        assert str(DateTime.epoch()) == "0.0.0:0000"

    def test_display_non_local(self) -> None:
        """The offset is appended when it differs from local."""
        dt = DateTime(Date(83, 10, 5), Time(83402), Offset.west(25200))
        assert str(dt) == "83.A.5:83402@-07:00"

    def test_display_rechecks_local_offset(self, local_offset: PinnedOffset) -> None:
        """The local offset is read again at display time."""
        epoch = DateTime.epoch()
        assert str(epoch) == "0.0.0:0000"
        local_offset.offset = Offset.west(3600)
        assert str(epoch) == "0.0.0:0000@+00:00"

    def test_same_instant_different_offsets(self) -> None:
        """Equality is structural, not instant-based."""
        utc = DateTime.from_instant(datetime.datetime(2001, 1, 1, 7, tzinfo=UTC))
        mst = DateTime.from_instant(datetime.datetime(2001, 1, 1, 0, tzinfo=MST))
        assert utc.to_instant() == mst.to_instant()
        assert utc != mst


class TestDateTimeToInstant:
    """Tests for DateTime.to_instant."""

    def test_past_date(self) -> None:
        """The instant is in the DateTime's own offset."""
        dt = DateTime(Date(-11, 1, 8), Time(38302), Offset.west(25200))
        assert dt.to_instant().isoformat() == "1990-02-13T09:11:33-07:00"

    def test_round_trip(self) -> None:
        """Whole-second instants survive a round trip."""
        original = datetime.datetime(2084, 12, 30, 20, 1, 7, tzinfo=UTC)
        assert DateTime.from_instant(original).to_instant() == original

    def test_time_rolls_over(self) -> None:
        """Times of a day or more move into the next day."""
        dt = DateTime(Date(0, 0, 0), Time(100000), Offset.utc())
        assert dt.to_instant() == datetime.datetime(2001, 1, 2, tzinfo=UTC)

    def test_invalid_date(self) -> None:
        """Dates outside their year cannot be converted."""
        dt = DateTime(Date(0, 10, 6), Time(0), Offset.utc())
        with pytest.raises(ValidationError):
            dt.to_instant()


class TestDateTimeMisc:
    """Tests for replace, hashing and repr."""

    def test_replace(self) -> None:
        """replace swaps single components."""
        dt = DateTime.epoch()
        assert dt.replace(time=Time(50000)) == DateTime(Date(0, 0, 0), Time(50000), Offset.utc())
        assert dt.replace(offset=Offset.east(60)).offset == Offset.east(60)
        assert dt == DateTime.epoch()

    def test_hash(self) -> None:
        """Equal values hash equal."""
        assert hash(DateTime.epoch()) == hash(DateTime.epoch())

    def test_repr(self) -> None:
        """repr nests the component reprs."""
        assert repr(DateTime.epoch()) == (
            "DateTime(Date(0, 0, 0), Time(0), Offset(offset_seconds=0))"
        )
