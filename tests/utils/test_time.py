"""Tests for time helpers."""

from datetime import UTC, datetime, timedelta, timezone

from token_insights.utils.time import elapsed_ms, start_timer, to_iso, utc_now


class TestTimeHelpers:
    """Test suite for timestamp and duration helpers."""

    def test_utc_now_is_aware(self) -> None:
        """Test that the current time carries the UTC zone."""
        assert utc_now().utcoffset() == timedelta(0)

    def test_to_iso(self) -> None:
        """Test millisecond ISO rendering with a Z suffix."""
        ts = datetime(2026, 1, 1, 12, 0, 0, 123456, tzinfo=UTC)
        assert to_iso(ts) == "2026-01-01T12:00:00.123Z"

    def test_to_iso_converts_offsets(self) -> None:
        """Test that non-UTC datetimes are converted first."""
        ts = datetime(2026, 1, 1, 14, 0, tzinfo=timezone(timedelta(hours=2)))
        assert to_iso(ts) == "2026-01-01T12:00:00.000Z"

    def test_elapsed_ms(self) -> None:
        """Test that elapsed time is non-negative and rounded."""
        value = elapsed_ms(start_timer())
        assert value >= 0
        assert round(value, 2) == value
