"""
Utilities package shared by the services and charts.
"""

from .time_utils import (
    REGION_TIMEZONE,
    build_query_window,
    format_display_date,
    format_hour_range,
    region_current_hour,
    region_now,
    region_today,
    to_region_time,
)

__all__ = [
    'REGION_TIMEZONE',
    'build_query_window',
    'format_display_date',
    'format_hour_range',
    'region_current_hour',
    'region_now',
    'region_today',
    'to_region_time',
]
