from datetime import datetime, timezone as dt_timezone
from typing import Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError
import logging

from vitalcheck.core.config import settings

logger = logging.getLogger(__name__)


def get_zoneinfo() -> Optional[ZoneInfo]:
    tz_name = settings.DEFAULT_TIMEZONE
    if not tz_name:
        return None
    try:
        return ZoneInfo(tz_name)
    except ZoneInfoNotFoundError:
        logger.warning(f"Unknown DEFAULT_TIMEZONE {tz_name!r}; rendering times in UTC")
        return None


def utcnow() -> datetime:
    """Naive UTC timestamp used for stored creation times."""
    return datetime.now(dt_timezone.utc).replace(tzinfo=None)


def to_local(dt: datetime) -> datetime:
    """
    Convert a stored timestamp to the configured display timezone.
    Naive datetimes are assumed UTC.
    """
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=dt_timezone.utc)
    tz = get_zoneinfo()
    return dt.astimezone(tz) if tz else dt


def format_local_date(dt: datetime) -> str:
    """M/D/YYYY, no zero padding."""
    local = to_local(dt)
    return f"{local.month}/{local.day}/{local.year}"


def format_local_time(dt: datetime) -> str:
    """h:MM:SS AM/PM, hour not zero padded."""
    local = to_local(dt)
    hour = local.hour % 12 or 12
    suffix = "AM" if local.hour < 12 else "PM"
    return f"{hour}:{local.minute:02d}:{local.second:02d} {suffix}"


def as_utc(dt: datetime) -> datetime:
    """Stored timestamps are naive UTC; attach the zone for the wire."""
    if dt.tzinfo is None:
        return dt.replace(tzinfo=dt_timezone.utc)
    return dt.astimezone(dt_timezone.utc)
