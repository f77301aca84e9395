from __future__ import annotations

from datetime import datetime, timedelta, timezone


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def _as_utc(dt: datetime) -> datetime:
    # Naive datetimes are taken to be UTC
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def format_timestamp(dt: datetime) -> str:
    """Render `dt` as ISO-8601 UTC with millisecond precision and a `Z` suffix."""
    return _as_utc(dt).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def parse_timestamp(text: str) -> datetime:
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    return _as_utc(datetime.fromisoformat(text))


def is_expired(timestamp: datetime, ttl_days: float, now: datetime) -> bool:
    # Compare ages so timestamps near datetime.max cannot overflow
    return _as_utc(now) - _as_utc(timestamp) > timedelta(days=ttl_days)
