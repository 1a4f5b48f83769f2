"""Utilities for data extraction: date ranges and timezone resolution."""

import os
from datetime import date, timedelta, tzinfo
from zoneinfo import ZoneInfo

from tzlocal import get_localzone


def date_range(start: date, end: date) -> list[date]:
    """Generate a list of dates from start to end (inclusive)."""
    dates = []
    current = start
    while current <= end:
        dates.append(current)
        current += timedelta(days=1)
    return dates


def resolve_timezone(name: str | None = None) -> tzinfo:
    """Resolve the timezone start times are displayed in.

    Order: explicit name, then SCOREBOARD_TZ, then the host's local zone.

    Raises:
        zoneinfo.ZoneInfoNotFoundError: If a given name is not a known zone.
    """
    name = name or os.environ.get("SCOREBOARD_TZ")
    if name:
        return ZoneInfo(name)
    return get_localzone()
