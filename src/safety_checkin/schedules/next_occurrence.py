from __future__ import annotations

from datetime import date, timedelta
from typing import Collection, Iterable, Optional

from .expander import expand
from .model import ScheduleDefinition


def find_next(
    definitions: Iterable[ScheduleDefinition],
    start: date,
    horizon_days: int,
    *,
    checked_in_dates: Collection[date] = (),
) -> Optional[date]:
    """Next date the worker is required to check in.

    ``start`` itself wins while it is scheduled and still lacks a check-in.
    Otherwise days ``start+1 .. start+horizon_days`` are scanned in order.
    """

    definitions = list(definitions)

    if start in expand(definitions, start, start) and start not in checked_in_dates:
        return start

    if horizon_days <= 0:
        return None

    upcoming = expand(definitions, start + timedelta(days=1), start + timedelta(days=horizon_days))
    return min(upcoming) if upcoming else None


def format_next_label(next_date: Optional[date], today: date) -> Optional[str]:
    """Human label for the next check-in date."""
    if next_date is None:
        return None
    if next_date == today:
        return "Today"
    if next_date == today + timedelta(days=1):
        return "Tomorrow"
    return f"{next_date.strftime('%A, %b')} {next_date.day}"
