"""Tests for feed timestamp parsing."""

from datetime import UTC, datetime, timedelta, timezone

from tafline.ingest.timestamps import parse_timestamp


class TestParseTimestamp:
    def test_z_suffix(self):
        assert parse_timestamp("2026-03-14T12:00:00Z") == datetime(2026, 3, 14, 12, tzinfo=UTC)

    def test_offset_preserved(self):
        dt = parse_timestamp("2026-03-14T12:00:00+02:00")
        assert dt.utcoffset() == timedelta(hours=2)

    def test_naive_assumed_utc(self):
        assert parse_timestamp("2026-03-14T12:00:00").tzinfo == UTC

    def test_datetime_passthrough(self):
        dt = datetime(2026, 3, 14, 12, tzinfo=timezone(timedelta(hours=-5)))
        assert parse_timestamp(dt) is dt

    def test_invalid(self):
        assert parse_timestamp("not-a-timestamp") is None
        assert parse_timestamp(None) is None
        assert parse_timestamp(1234) is None
