"""Tests for parse_instant."""
from datetime import date, datetime, timedelta, timezone

import pytest
from ouevents_countdown import parse_instant

UTC = timezone.utc


class TestValidInputs:

    def test_iso_string_with_z(self):
        assert parse_instant("2025-03-20T18:00:00Z") == datetime(2025, 3, 20, 18, tzinfo=UTC)

    def test_iso_string_with_offset_converted_to_utc(self):
        parsed = parse_instant("2025-01-01T02:00:00+02:00")
        assert parsed == datetime(2025, 1, 1, 0, 0, tzinfo=UTC)
        assert parsed.utcoffset() == timedelta(0)

    def test_iso_string_with_milliseconds(self):
        parsed = parse_instant("2025-07-15T18:00:00.250Z")
        assert parsed == datetime(2025, 7, 15, 18, 0, 0, 250000, tzinfo=UTC)

    def test_naive_string_taken_as_utc(self):
        """Offset-less strings are interpreted as UTC."""
        assert parse_instant("2025-07-15T18:00:00") == datetime(2025, 7, 15, 18, tzinfo=UTC)

    def test_date_only_string(self):
        assert parse_instant("2025-03-20") == datetime(2025, 3, 20, tzinfo=UTC)

    def test_surrounding_whitespace_ignored(self):
        assert parse_instant("  2025-03-20T00:00:00Z\n") == datetime(2025, 3, 20, tzinfo=UTC)

    def test_aware_datetime_converted(self):
        plus_five = timezone(timedelta(hours=5))
        value = datetime(2025, 1, 1, 5, 0, tzinfo=plus_five)
        assert parse_instant(value) == datetime(2025, 1, 1, 0, 0, tzinfo=UTC)

    def test_naive_datetime_taken_as_utc(self):
        parsed = parse_instant(datetime(2025, 1, 1, 9, 30))
        assert parsed == datetime(2025, 1, 1, 9, 30, tzinfo=UTC)
        assert parsed.tzinfo is not None

    def test_date_is_midnight_utc(self):
        assert parse_instant(date(2024, 2, 29)) == datetime(2024, 2, 29, tzinfo=UTC)

    def test_epoch_milliseconds(self):
        assert parse_instant(0) == datetime(1970, 1, 1, tzinfo=UTC)
        assert parse_instant(1_700_000_000_123) == datetime(
            2023, 11, 14, 22, 13, 20, 123000, tzinfo=UTC
        )

    def test_epoch_milliseconds_float(self):
        assert parse_instant(1500.0) == datetime(1970, 1, 1, 0, 0, 1, 500000, tzinfo=UTC)


class TestInvalidInputs:

    @pytest.mark.parametrize(
        "value",
        [
            None,
            "",
            "   ",
            "not-a-date",
            "2025-13-01",
            "2025-02-30T00:00:00Z",
            True,
            False,
            float("nan"),
            float("inf"),
            10**20,
            [],
            {},
        ],
    )
    def test_unusable_values_give_none(self, value):
        """Missing or unparseable values are None, never an exception."""
        assert parse_instant(value) is None
