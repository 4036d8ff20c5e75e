"""
Date and time utility functions for the patient registry.
"""

from datetime import date, datetime, time, timezone
from typing import Any, Optional


def get_current_timestamp() -> datetime:
    """Get current UTC timestamp."""
    return datetime.now(timezone.utc)


def parse_iso_datetime(value: str) -> Optional[datetime]:
    """Parse an ISO-8601 string (date or date-time, 'Z' allowed)."""
    try:
        return datetime.fromisoformat(value.strip())
    except ValueError:
        return None


def to_utc_datetime(value: Any) -> Optional[datetime]:
    """Normalize a date, datetime or ISO string to an aware UTC datetime.

    Naive datetimes are taken to be UTC. Plain dates become midnight UTC.
    Returns None when the value is not a usable point in time.
    """
    if isinstance(value, str):
        value = parse_iso_datetime(value)

    if isinstance(value, datetime):
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc)

    if isinstance(value, date):
        return datetime.combine(value, time.min, tzinfo=timezone.utc)

    return None


def to_calendar_date(value: Any) -> Optional[date]:
    """Normalize a date, datetime or ISO string to a calendar date.

    The date is taken as written; an offset is never converted to UTC first.
    """
    if isinstance(value, str):
        value = parse_iso_datetime(value)

    if isinstance(value, datetime):
        return value.date()

    if isinstance(value, date):
        return value

    return None


def get_age_from_birthdate(birthdate: date, today: Optional[date] = None) -> int:
    """Calculate age in whole years from birthdate."""
    today = today or date.today()
    age = today.year - birthdate.year

    # Adjust if birthday hasn't occurred this year
    if today.month < birthdate.month or (
        today.month == birthdate.month and today.day < birthdate.day
    ):
        age -= 1

    return age
