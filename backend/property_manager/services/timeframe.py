"""
Date helpers for stored YYYY-MM-DD strings and month arithmetic.
"""
from datetime import datetime, date, timezone
from typing import Iterator, Optional


def today() -> date:
    """Current UTC calendar date."""
    return datetime.now(timezone.utc).date()


def utc_now_iso() -> str:
    """Timestamp in the same shape a browser's toISOString() produces."""
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def parse_date(value) -> Optional[date]:
    """
    Parse a stored date leniently.

    Accepts date objects, "YYYY-MM-DD", full ISO timestamps (only the date
    part is used) and the US "MM/DD/YYYY" form. Returns None for anything else.
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    text = str(value).strip()
    if not text:
        return None
    try:
        return datetime.strptime(text[:10], "%Y-%m-%d").date()
    except ValueError:
        try:
            return datetime.strptime(text, "%m/%d/%Y").date()
        except ValueError:
            return None


def format_date_iso(d: date) -> str:
    """Format date as ISO (YYYY-MM-DD)."""
    return d.isoformat()


def format_month_year(d: date) -> str:
    """e.g. 'October 2025'."""
    return d.strftime("%B %Y")


def is_same_month(target_date: Optional[date], reference_date: date) -> bool:
    """Check if target_date falls in the calendar month of reference_date."""
    if target_date is None:
        return False
    return target_date.year == reference_date.year and target_date.month == reference_date.month


def next_month_start(d: date) -> date:
    if d.month == 12:
        return date(d.year + 1, 1, 1)
    return date(d.year, d.month + 1, 1)


def month_starts(start: date, end: date) -> Iterator[date]:
    """
    Yield every first-of-month date d with start <= d <= end.

    A term starting mid-month begins with the following month's 1st.
    """
    current = start.replace(day=1)
    if current < start:
        current = next_month_start(current)
    while current <= end:
        yield current
        current = next_month_start(current)
