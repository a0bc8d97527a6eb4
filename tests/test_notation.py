"""Tests for the TEC notation parser and formatter.

This module covers:
- Date and time notation with and without an '@' offset
- Date-only notation defaulting to midday
- The quirks of the detection rules
- The Gregorian free-text fallback
- format_tec
"""

from __future__ import annotations

import pytest

from conftest import PinnedOffset
from tec.core.date import Date
from tec.core.datetime import DateTime
from tec.core.time import Time
from tec.errors import (
    GregorianParseError,
    MalformedNumberError,
    MalformedOffsetError,
    ParseError,
    UnderspecifiedFieldError,
)
from tec.format.gregorian import parse_gregorian
from tec.format.notation import format_tec, parse_tec
from tec.units.offset import Offset


class TestParseTecNotation:
    """Tests for the TEC notation rules."""

    def test_date_and_time(self) -> None:
        """Y.M.D:F in the local offset."""
        expected = DateTime(Date(83, 10, 5), Time(83402), Offset.utc())
        assert parse_tec("83.A.5:83402") == expected

    def test_date_only_is_midday(self) -> None:
        """Without a time, the time is 50000 fracs."""
        result = parse_tec("83.A.5")
        assert result.date == Date(83, 10, 5)
        assert result.time == Time(50000)

    def test_double_colon(self) -> None:
        """The time part may keep its own leading ':'."""
        assert parse_tec("83.A.5::83402").time == Time(83402)

    def test_offset_suffix(self) -> None:
        """'@420' is seven hours west of UTC."""
        result = parse_tec("83.A.5:83402@420")
        assert result.offset == Offset.west(25200)
        assert str(result) == "83.A.5:83402@-07:00"

    def test_offset_on_date_only(self) -> None:
        """An offset can follow a bare date."""
        result = parse_tec("83.A.5@-60")
        assert result.offset == Offset.east(3600)
        assert result.time == Time(50000)

    def test_offset_zero_is_utc(self, local_offset: PinnedOffset) -> None:
        """'@0' gives a UTC value even when local is elsewhere."""
        local_offset.offset = Offset.west(3600)
        result = parse_tec("0.0.0:0@0")
        assert result == DateTime.epoch()
        assert str(result) == "0.0.0:0000@+00:00"

    def test_no_offset_uses_local(self, local_offset: PinnedOffset) -> None:
        """Without '@' the current local offset applies."""
        local_offset.offset = Offset.east(7200)
        assert parse_tec("83.A.5:83402").offset == Offset.east(7200)

    def test_malformed_offset(self) -> None:
        """A bad offset is reported as such."""
        with pytest.raises(MalformedOffsetError):
            parse_tec("83.A.5:83402@east")

    def test_only_first_at_splits(self) -> None:
        """Text after a second '@' belongs to the offset."""
        with pytest.raises(MalformedOffsetError):
            parse_tec("83.A.5@0@0")

    def test_round_trip_through_display(self) -> None:
        """A local value whose time has no trailing zero survives str()."""
        value = DateTime(Date(83, 10, 5), Time(83401), Offset.utc())
        assert parse_tec(str(value)) == value


class TestParseTecQuirks:
    """Inputs where the detection rules give surprising results."""

    def test_underspecified_date_with_time(self) -> None:
        """'83.A:5' splits into a two-field date."""
        with pytest.raises(UnderspecifiedFieldError):
            parse_tec("83.A:5")

    def test_negative_year_date_only(self) -> None:
        """A negative year works without a time."""
        assert parse_tec("-11.1.8").date == Date(-11, 1, 8)

    def test_negative_year_with_time(self) -> None:
        """A '-' disables the time rule, so the time lands in the day field."""
        with pytest.raises(MalformedNumberError):
            parse_tec("-11.1.8:38302")

    def test_gregorian_with_dots_and_colons(self) -> None:
        """Month names with ':' and no '-' are read as TEC notation."""
        with pytest.raises(UnderspecifiedFieldError):
            parse_tec("Jan 15 2024 14:30")

    def test_every_error_is_parse_error(self) -> None:
        """All of the above are ParseErrors."""
        for text in ["83.A:5", "-11.1.8:38302", "83.1.5@x", "nonsense"]:
            with pytest.raises(ParseError):
                parse_tec(text)


class TestGregorianFallback:
    """Tests for the Gregorian free-text fallback."""

    def test_iso_utc(self) -> None:
        """An ISO UTC timestamp converts directly."""
        expected = DateTime(Date(83, 10, 5), Time(83402), Offset.utc())
        assert parse_tec("2084-12-30T20:01:00Z") == expected

    def test_iso_with_offset_normalised_to_utc(self) -> None:
        """Offsets in Gregorian text are converted to UTC."""
        result = parse_tec("1990-02-13T09:11:33-07:00")
        assert result.date == Date(-11, 1, 8)
        assert result.time == Time.from_hms(16, 11, 33)
        assert result.offset == Offset.utc()

    def test_date_only(self) -> None:
        """A Gregorian date alone is midnight."""
        result = parse_tec("2001-01-01")
        assert result == DateTime.epoch()

    def test_naive_text_uses_local_offset(self, local_offset: PinnedOffset) -> None:
        """Naive text is local time, then converted to UTC."""
        local_offset.offset = Offset.west(3600)
        result = parse_tec("2001-01-01 00:30:00")
        assert result.date == Date(0, 0, 0)
        assert result.time == Time.from_hms(1, 30, 0)
        assert result.offset == Offset.utc()

    def test_month_name(self) -> None:
        """Free text with month names works when it has no ':'."""
        assert parse_tec("Dec 30 2084").date == Date(83, 10, 5)

    @pytest.mark.parametrize("text", ["not a date", "", "2024-02-30"])
    def test_unparseable(self, text: str) -> None:
        """Text the fallback cannot read is a GregorianParseError."""
        with pytest.raises(GregorianParseError):
            parse_tec(text)

    @pytest.mark.parametrize(
        "text",
        ["0001-01-01T00:00:00+01:00", "9999-12-31T23:00:00-05:00"],
    )
    def test_out_of_range_after_utc_shift(self, text: str) -> None:
        """Instants that leave the datetime range in UTC are parse errors."""
        with pytest.raises(GregorianParseError, match="is not a gregorian datetime"):
            parse_tec(text)

    def test_naive_text_out_of_range_in_local_offset(self, local_offset: PinnedOffset) -> None:
        """Naive text at year 1 east of UTC cannot be shifted to UTC."""
        local_offset.offset = Offset.east(3600)
        with pytest.raises(GregorianParseError):
            parse_tec("0001-01-01")

    def test_error_message(self) -> None:
        """The message names the input."""
        with pytest.raises(GregorianParseError, match="not a date is not a gregorian datetime"):
            parse_gregorian("not a date")

    def test_parse_gregorian_returns_utc(self) -> None:
        """parse_gregorian always returns an aware UTC datetime."""
        dt = parse_gregorian("1990-02-13T09:11:33-07:00")
        assert dt.isoformat() == "1990-02-13T16:11:33+00:00"

    def test_from_text_delegates(self) -> None:
        """DateTime.from_text is parse_tec."""
        assert DateTime.from_text("83.A.5:83402") == parse_tec("83.A.5:83402")


class TestFormatTec:
    """Tests for format_tec."""

    def test_date(self) -> None:
        """Dates format as Y.M.D."""
        assert format_tec(Date(83, 10, 5)) == "83.A.5"

    def test_time(self) -> None:
        """Times format with the trailing zero rule."""
        assert format_tec(Time(50000)) == "5000"

    def test_datetime(self) -> None:
        """DateTimes format like str()."""
        assert format_tec(DateTime.epoch()) == "0.0.0:0000"

    def test_other_types(self) -> None:
        """Other values are a TypeError."""
        with pytest.raises(TypeError):
            format_tec(42)  # type: ignore[arg-type]
