"""Timestamp helpers."""

from datetime import datetime, timezone


def utc_timestamp(moment: datetime | None = None) -> str:
    """Render a UTC ISO-8601 timestamp with millisecond precision and a Z suffix."""
    moment = moment or datetime.now(timezone.utc)
    return moment.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")
