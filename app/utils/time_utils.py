"""
Time helpers.

All timestamps are stored in UTC. pymongo hands back naive datetimes
(tz_aware=False by default), so anything naive is read as UTC.
"""

from datetime import datetime, timezone
from typing import Optional


def utc_now() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


def as_utc(value: datetime) -> datetime:
    """Attach UTC to naive datetimes, convert aware ones."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def get_time_ago(timestamp: datetime, now: Optional[datetime] = None) -> str:
    """
    Human-readable age of a past instant.

    Examples (now = T):
        T           -> "Today"
        T - 1 day   -> "1 day ago"
        T - 3 days  -> "3 days ago"
        T - 10 days -> "1 weeks ago"
        T - 40 days -> "1 months ago"
    """
    now = as_utc(now) if now is not None else utc_now()
    diff_in_days = (now - as_utc(timestamp)).days

    if diff_in_days <= 0:
        return "Today"
    if diff_in_days == 1:
        return "1 day ago"
    if diff_in_days < 7:
        return f"{diff_in_days} days ago"
    if diff_in_days < 30:
        return f"{diff_in_days // 7} weeks ago"
    return f"{diff_in_days // 30} months ago"
