"""
Time helpers for request processing metadata.

Wall-clock time is used for the analysis timestamp; a monotonic clock is
used for durations so that clock adjustments never yield negative timings.
"""

import time
from datetime import UTC, datetime


def utc_now() -> datetime:
    """Current wall-clock time as a UTC datetime."""
    return datetime.now(UTC)


def to_iso(ts: datetime) -> str:
    """
    Render a datetime as ISO-8601 with a Z suffix.

    Args:
        ts: Timezone-aware datetime

    Returns:
        ISO string in UTC, e.g. 2026-01-01T12:00:00.000Z
    """
    return ts.astimezone(UTC).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def start_timer() -> float:
    """Monotonic start mark for elapsed_ms."""
    return time.perf_counter()


def elapsed_ms(start: float) -> float:
    """Milliseconds since start, rounded to two decimals."""
    return round((time.perf_counter() - start) * 1000, 2)
