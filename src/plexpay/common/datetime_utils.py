from __future__ import annotations

from datetime import date, datetime
from typing import Optional


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD (or an ISO timestamp) into a date."""
    value = value.strip()
    if "T" in value:
        value = value.split("T", 1)[0]
    return datetime.strptime(value, "%Y-%m-%d").date()


def parse_optional_date(value: Optional[str]) -> Optional[date]:
    if value is None or not value.strip():
        return None
    return parse_iso_date(value)


def in_range(value: date, start: Optional[date], end: Optional[date]) -> bool:
    """Inclusive range check; the range applies only when both bounds are set."""
    if start is None or end is None:
        return True
    return start <= value <= end


def today_local() -> date:
    """Current local date.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return date.today()


def now_local() -> datetime:
    return datetime.now()
