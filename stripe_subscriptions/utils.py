"""Shared utility functions."""

from datetime import datetime, timezone


def to_unix_timestamp(value: datetime) -> int:
    """Whole seconds since the Unix epoch. Naive datetimes are read as UTC."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return int(value.timestamp())


def from_unix_timestamp(value: int) -> datetime:
    """Inverse of :func:`to_unix_timestamp`, always timezone-aware (UTC)."""
    return datetime.fromtimestamp(value, tz=timezone.utc)
