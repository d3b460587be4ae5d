"""
Server clock and timestamp serialization.
All server-owned timestamps come from utcnow() so tests can pin time at the call site.
"""
from datetime import datetime, timezone
from typing import Optional


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def isoformat_utc(dt: Optional[datetime]) -> Optional[str]:
    """ISO-8601 string in UTC. SQLite hands back naive datetimes; those are stored as UTC."""
    if dt is None:
        return None
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc).isoformat()


def to_utc(dt: datetime) -> datetime:
    """Normalize a client-supplied timestamp to UTC; naive values are taken as UTC already."""
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)
