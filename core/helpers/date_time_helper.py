"""
date_time_helper.py

Conversion and formatting helpers for date and time values.

History events are stored in UTC and displayed in Europe/Berlin local time,
date filters in the GUI are local calendar days.
"""
from __future__ import annotations

from datetime import date, datetime, time, timezone

from zoneinfo import ZoneInfo

# Local timezone for display
LOCAL_TZ = ZoneInfo("Europe/Berlin")


def utc_now() -> datetime:
    """Current UTC time without microseconds."""
    return datetime.now(timezone.utc).replace(microsecond=0)


def to_utc(dt: datetime) -> datetime:
    """Naive datetimes are interpreted as local time."""
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=LOCAL_TZ)
    return dt.astimezone(timezone.utc)


def local_date_to_utc_range(start: date | None, end: date | None) -> tuple[datetime | None, datetime | None]:
    """
    Converts a local [start, end] day range to UTC datetimes covering the
    full days. Either bound may be None (open range).
    """
    start_utc = end_utc = None
    if start is not None:
        start_utc = datetime.combine(start, time.min).replace(tzinfo=LOCAL_TZ).astimezone(timezone.utc)
    if end is not None:
        end_utc = datetime.combine(end, time.max).replace(tzinfo=LOCAL_TZ).astimezone(timezone.utc)
    return start_utc, end_utc


def utc_to_local_str(dt_utc: datetime) -> str:
    """Format as 'DD.MM.YYYY HH:MM:SS' in local time."""
    return to_utc(dt_utc).astimezone(LOCAL_TZ).strftime("%d.%m.%Y %H:%M:%S")


def date_stamp(day: date | None = None) -> str:
    """ISO date used in export file names, e.g. '2024-01-15'."""
    return (day or date.today()).isoformat()
