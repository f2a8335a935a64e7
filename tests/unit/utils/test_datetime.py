"""Tests for datetime helpers."""

from datetime import datetime, timedelta, timezone

import pytest

from bookcast.utils.datetime import format_rfc1123, now_utc


class TestNowUtc:
    """Test now_utc."""

    def test_aware_and_whole_seconds(self) -> None:
        """Test the value is UTC with no microseconds."""
        now = now_utc()

        assert now.tzinfo == timezone.utc
        assert now.microsecond == 0


class TestFormatRfc1123:
    """Test format_rfc1123."""

    def test_utc(self) -> None:
        """Test UTC renders a +0000 zone."""
        dt = datetime(2024, 1, 1, 12, 0, 0, tzinfo=timezone.utc)

        assert format_rfc1123(dt) == "Mon, 01 Jan 2024 12:00:00 +0000"

    def test_numeric_offset(self) -> None:
        """Test other zones render their numeric offset."""
        tz = timezone(timedelta(hours=-7))
        dt = datetime(2006, 1, 2, 15, 4, 5, tzinfo=tz)

        assert format_rfc1123(dt) == "Mon, 02 Jan 2006 15:04:05 -0700"

    def test_naive_rejected(self) -> None:
        """Test naive datetimes raise ValueError."""
        with pytest.raises(ValueError, match="timezone-aware"):
            format_rfc1123(datetime(2024, 1, 1))
