from __future__ import annotations

from datetime import date, datetime
from typing import Union

from ..core.constants import ISO_DATE_FORMAT


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, ISO_DATE_FORMAT).date()


def format_iso_date(value: date) -> str:
    return value.strftime(ISO_DATE_FORMAT)


def to_date(value: Union[date, datetime, str]) -> date:
    """Normalize a stored date value to date-only granularity.

    Timestamps lose their time-of-day; strings may carry a ``T...`` suffix.
    """

    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return parse_iso_date(str(value).split("T")[0].strip())


def sunday_based_weekday(day: date) -> int:
    """Weekday index as stored in schedules (0=Sunday ... 6=Saturday)."""
    return (day.weekday() + 1) % 7


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()
