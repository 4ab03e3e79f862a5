"""
Innochannel Core Time — Temporal Helpers
==========================================
Pure functions turning API date strings into date objects.
Innochannel sends dates as 'YYYY-MM-DD' and timestamps as
ISO-8601 or 'YYYY-MM-DD HH:MM:SS'.
"""

from __future__ import annotations

from datetime import date, datetime, timezone
from typing import Optional, Union

DateLike = Union[date, datetime, str]


def parse_date(value: DateLike) -> date:
    """Parse a calendar date; datetimes are truncated to their date."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        return date.fromisoformat(value.strip()[:10])
    raise ValueError(f"Cannot parse date from {value!r}.")


def parse_datetime(value: DateLike) -> datetime:
    """
    Parse a timestamp. Naive values are taken as UTC.
    """
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, date):
        parsed = datetime(value.year, value.month, value.day)
    elif isinstance(value, str):
        text = value.strip()
        if text.endswith("Z"):
            text = text[:-1] + "+00:00"
        parsed = datetime.fromisoformat(text)
    else:
        raise ValueError(f"Cannot parse datetime from {value!r}.")

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def nights_between(check_in: Optional[date], check_out: Optional[date]) -> int:
    """Number of nights in a stay; 0 when either bound is unknown."""
    if check_in is None or check_out is None:
        return 0
    return max((check_out - check_in).days, 0)
