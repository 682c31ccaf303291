from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional


SECONDS_PER_DAY = 60 * 60 * 24


def ensure_utc(dt: datetime) -> datetime:
    """Return a timezone-aware UTC datetime."""
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def parse_timestamp(value: object) -> Optional[datetime]:
    """Parse an ISO 8601 timestamp (registry style, trailing Z allowed) to UTC."""
    if not value or not isinstance(value, str):
        return None
    try:
        parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        return None
    return ensure_utc(parsed)


def days_between(earlier: datetime, later: datetime) -> float:
    """Fractional days elapsed from ``earlier`` to ``later``."""
    return (ensure_utc(later) - ensure_utc(earlier)).total_seconds() / SECONDS_PER_DAY
