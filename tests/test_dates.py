"""Tests for pocketpal.dates."""

from datetime import datetime

import pytest

from pocketpal.dates import format_timestamp, now, parse_timestamp, parse_user_date
from pocketpal.exceptions import InvalidDateError


class TestStoredTimestamps:
    """Tests for format_timestamp and parse_timestamp."""

    def test_format(self) -> None:
        """Should format as DD/MM/YYYY HH:MM."""
        assert format_timestamp(datetime(2025, 1, 5, 9, 7)) == "05/01/2025 09:07"

    def test_format_none(self) -> None:
        """Should format a missing timestamp as an empty string."""
        assert format_timestamp(None) == ""

    def test_parse(self) -> None:
        """Should parse the storage format."""
        assert parse_timestamp("05/01/2025 09:07") == datetime(2025, 1, 5, 9, 7)

    def test_parse_empty(self) -> None:
        """Should read an empty field as no timestamp."""
        assert parse_timestamp("  ") is None

    def test_format_then_parse_keeps_minutes(self) -> None:
        """Should keep the value down to the minute."""
        when = datetime(2024, 2, 29, 23, 59)
        assert parse_timestamp(format_timestamp(when)) == when

    @pytest.mark.parametrize("value", ["2025-01-05 09:07", "32/01/2025 10:00", "05/01/2025", "nonsense"])
    def test_parse_rejects_other_formats(self, value: str) -> None:
        """Should only accept the storage format."""
        with pytest.raises(InvalidDateError):
            parse_timestamp(value)

    def test_now_has_minute_precision(self) -> None:
        """Should drop seconds and microseconds."""
        current = now()
        assert current.second == 0
        assert current.microsecond == 0


class TestParseUserDate:
    """Tests for parse_user_date."""

    def test_iso_date(self) -> None:
        """Should parse ISO dates."""
        assert parse_user_date("2025-01-15") == datetime(2025, 1, 15)

    def test_day_first(self) -> None:
        """Should read slashed dates day first."""
        assert parse_user_date("03/04/2025") == datetime(2025, 4, 3)

    def test_with_time(self) -> None:
        """Should keep a given time."""
        assert parse_user_date("15/01/2025 18:30") == datetime(2025, 1, 15, 18, 30)

    def test_end_of_day(self) -> None:
        """Should move a bare date to the end of that day."""
        result = parse_user_date("2025-01-15", end_of_day=True)

        assert result.date() == datetime(2025, 1, 15).date()
        assert (result.hour, result.minute, result.second) == (23, 59, 59)

    def test_end_of_day_keeps_explicit_time(self) -> None:
        """Should not touch a date that carries a time."""
        assert parse_user_date("15/01/2025 18:30", end_of_day=True) == datetime(2025, 1, 15, 18, 30)

    @pytest.mark.parametrize("value", ["not a date", ""])
    def test_invalid(self, value: str) -> None:
        """Should raise InvalidDateError for unparsable input."""
        with pytest.raises(InvalidDateError):
            parse_user_date(value)
