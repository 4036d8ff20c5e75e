"""
Core utilities package.
"""

from .datetime_utils import (
    get_age_from_birthdate,
    get_current_timestamp,
    parse_iso_datetime,
    to_calendar_date,
    to_utc_datetime,
)

__all__ = [
    "get_age_from_birthdate",
    "get_current_timestamp",
    "parse_iso_datetime",
    "to_calendar_date",
    "to_utc_datetime",
]
