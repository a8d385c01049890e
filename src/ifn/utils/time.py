"""UTC timestamp helpers for export envelopes."""

from datetime import datetime, timezone


def utc_now_z() -> str:
    """Current UTC time as ISO 8601 with a Z suffix (e.g. '2026-03-02T08:15:00.120000Z')."""
    return to_utc_z(datetime.now(timezone.utc))


def to_utc_z(dt: datetime) -> str:
    """
    Format an aware datetime as ISO 8601 UTC with a Z suffix.

    Raises:
        ValueError: If dt is naive
    """
    if dt.tzinfo is None:
        raise ValueError(f"Naive datetime not allowed: {dt}")
    return dt.astimezone(timezone.utc).isoformat().replace("+00:00", "Z")
