"""Date parsing utilities."""

import re
from datetime import date, timedelta
from typing import Optional

from dateutil import parser as date_parser


_DAYS_AGO = re.compile(r"^(\d+) days? ago$")


def parse_date(date_str: str, today: Optional[date] = None) -> date:
    """Parse a user-supplied date string into a date object.

    Supports absolute dates ("2024-01-15", "January 15, 2024", ...) and the
    relative forms "today", "yesterday" and "<n> days ago".

    Args:
        date_str: Date string
        today: Reference date for relative forms (defaults to date.today())

    Returns:
        Date object

    Raises:
        ValueError: If date string cannot be parsed
    """
    date_str = date_str.strip().lower()
    today = today or date.today()

    if date_str == "today":
        return today
    if date_str == "yesterday":
        return today - timedelta(days=1)

    match = _DAYS_AGO.match(date_str)
    if match:
        return today - timedelta(days=int(match.group(1)))

    try:
        return date_parser.parse(date_str).date()
    except (ValueError, OverflowError) as e:
        raise ValueError(f"Could not parse date '{date_str}': {e}")


def parse_stored_date(value: Optional[str]) -> Optional[date]:
    """Parse a persisted date value.

    Stored dates are ISO ``YYYY-MM-DD`` strings; a timestamp suffix is
    tolerated and dropped. Empty values map to None.
    """
    if not value:
        return None
    return date.fromisoformat(value[:10])


def parse_required_date(value: Optional[str]) -> date:
    """Parse a persisted date that must be present.

    Raises:
        ValueError: If the value is empty or not an ISO date
    """
    parsed = parse_stored_date(value)
    if parsed is None:
        raise ValueError("Stored date is missing")
    return parsed
