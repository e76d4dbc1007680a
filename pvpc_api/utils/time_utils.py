"""
Timezone helpers for the Spanish peninsular electricity system.

Every "now", "today" and "current hour" used by the API is derived here so
that date and hour computations always agree on the same zone, regardless
of where the process runs.
"""

from datetime import date, datetime
from typing import Optional, Tuple

import pytz

from ..config import app_config

REGION_TIMEZONE = app_config.pricing.timezone


def get_region_timezone():
    """Return the pytz timezone of the market region."""
    return pytz.timezone(REGION_TIMEZONE)


def to_region_time(moment: datetime) -> datetime:
    """
    Convert a datetime to the region timezone.

    Args:
        moment: Aware datetime, or naive datetime interpreted as UTC

    Returns:
        Datetime in the region timezone
    """
    if moment.tzinfo is None:
        moment = pytz.utc.localize(moment)
    return moment.astimezone(get_region_timezone())


def region_now(now: Optional[datetime] = None) -> datetime:
    """Current moment in the region, or the injected `now` converted to it."""
    if now is None:
        return datetime.now(get_region_timezone())
    return to_region_time(now)


def region_today(now: Optional[datetime] = None) -> date:
    """Calendar date in the region."""
    return region_now(now).date()


def region_current_hour(now: Optional[datetime] = None) -> int:
    """Hour of day (0-23) in the region."""
    return region_now(now).hour


def format_hour_range(hour: int) -> str:
    """
    Build the half-open hour label used by price records.

    Examples:
        >>> format_hour_range(0)
        '00-01'
        >>> format_hour_range(23)
        '23-24'
    """
    return f"{hour:02d}-{hour + 1:02d}"


def format_display_date(day: date) -> str:
    """Format a date the way es-ES renders it, e.g. 19/10/2026 or 5/1/2026."""
    return f"{day.day}/{day.month}/{day.year}"


def build_query_window(day: date) -> Tuple[str, str]:
    """Return the minute-precision start/end bounds covering a whole day."""
    iso_day = day.strftime('%Y-%m-%d')
    return f"{iso_day}T00:00", f"{iso_day}T23:59"
