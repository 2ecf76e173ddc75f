"""Tests for timestamp utilities."""

from datetime import datetime, timedelta, timezone

import pytest

from pwnotify.utils.time_utils import (
    InvalidTimestampError,
    filetime_to_datetime,
    local_now,
    to_datetime,
    whole_days_between,
)


class TestFiletime:
    """Test Windows FILETIME conversion."""

    def test_unix_epoch(self):
        assert filetime_to_datetime(116444736000000000) == datetime(1970, 1, 1, tzinfo=timezone.utc)

    def test_known_date(self):
        # 2025-01-01 00:00:00 UTC
        filetime = 116444736000000000 + 1735689600 * 10_000_000
        assert filetime_to_datetime(filetime) == datetime(2025, 1, 1, tzinfo=timezone.utc)

    def test_zero_is_rejected(self):
        with pytest.raises(InvalidTimestampError):
            filetime_to_datetime(0)


class TestToDatetime:
    """Test raw value interpretation."""

    def test_datetime_passes_through(self):
        value = datetime(2025, 1, 1, 8, 0)
        assert to_datetime(value) is value

    def test_digit_string_is_filetime(self):
        assert to_datetime("116444736000000000").year == 1970

    def test_iso_string(self):
        assert to_datetime("2025-02-03T04:05:06") == datetime(2025, 2, 3, 4, 5, 6)

    @pytest.mark.parametrize("value", [None, "", "not a date", 1.5, True])
    def test_invalid_values(self, value):
        with pytest.raises(InvalidTimestampError):
            to_datetime(value)


class TestWholeDaysBetween:
    """Test day difference computation."""

    def test_truncates_partial_days(self):
        start = datetime(2025, 1, 1, 12, 0)
        assert whole_days_between(start, datetime(2025, 1, 3, 11, 59)) == 1
        assert whole_days_between(start, datetime(2025, 1, 3, 12, 0)) == 2

    def test_negative_truncates_toward_zero(self):
        start = datetime(2025, 1, 3, 12, 0)
        assert whole_days_between(start, datetime(2025, 1, 2, 0, 0)) == -1

    def test_mixed_naive_and_aware(self):
        start = datetime(2025, 1, 1, tzinfo=timezone.utc)
        end = start.replace(tzinfo=None) + timedelta(days=5)
        assert whole_days_between(start, end) == 5

    def test_aware_utc_against_aware_local(self):
        start = datetime(2025, 3, 5, tzinfo=timezone.utc)
        end = datetime(2025, 3, 10, 8, 0, tzinfo=timezone(timedelta(hours=10)))
        assert whole_days_between(start, end) == 4


class TestLocalNow:
    """Test the default clock."""

    def test_is_aware(self):
        assert local_now().tzinfo is not None
