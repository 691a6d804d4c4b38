from __future__ import annotations

from datetime import datetime, timezone


def iso_timestamp(value: datetime | None) -> str | None:
    """Format as UTC ISO-8601 with milliseconds and a trailing 'Z'."""
    if value is None:
        return None
    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc).replace(tzinfo=None)
    return value.strftime("%Y-%m-%dT%H:%M:%S.") + f"{value.microsecond // 1000:03d}Z"


def utcnow() -> datetime:
    return datetime.now(timezone.utc)
