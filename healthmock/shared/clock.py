"""
Wall-clock and uptime helpers.

The process start is captured once, on import, from the monotonic clock.
"""

import time
from datetime import datetime, timezone

_PROCESS_STARTED_AT = time.monotonic()


def uptime_seconds() -> float:
    """Seconds elapsed since the process started."""
    return time.monotonic() - _PROCESS_STARTED_AT


def iso_timestamp(moment: datetime | None = None) -> str:
    """Format ``moment`` (default: now) as UTC ISO-8601 with milliseconds.

    Example: ``2024-05-01T12:00:00.123Z``.
    """
    moment = moment or datetime.now(timezone.utc)
    return (
        moment.astimezone(timezone.utc)
        .isoformat(timespec="milliseconds")
        .replace("+00:00", "Z")
    )
