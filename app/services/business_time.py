"""
Business-local time helpers
"""

from datetime import date, datetime, timedelta, timezone

from ..config import BUSINESS_UTC_OFFSET_HOURS, JOB_DEFAULT_LOCAL_HOUR, JOB_DEFAULT_LOCAL_MINUTE


def utcnow() -> datetime:
    """Current instant as naive UTC, matching how DateTime columns are stored"""
    return datetime.now(timezone.utc).replace(tzinfo=None)


def to_business_local_time(
    day: date,
    hour: int = JOB_DEFAULT_LOCAL_HOUR,
    minute: int = JOB_DEFAULT_LOCAL_MINUTE,
    utc_offset_hours: int = BUSINESS_UTC_OFFSET_HOURS,
) -> datetime:
    """
    Convert a calendar date + local wall-clock time into a naive UTC instant.

    Uses a fixed standard-time offset, so during daylight saving time the
    result is one hour off from true local time (09:00 EST -> 14:00 UTC all year).
    Known limitation: replace with a zoneinfo conversion when DST-correct
    scheduling is wanted.
    """
    local = datetime(day.year, day.month, day.day, hour, minute)
    return local - timedelta(hours=utc_offset_hours)
