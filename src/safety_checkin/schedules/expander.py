"""Expand schedule definitions into the calendar dates a worker must check in.

Every function here is pure: same definitions and range, same result.
Malformed rows contribute no dates instead of raising, since they are data
entry issues this layer cannot correct.
"""

from __future__ import annotations

from datetime import date, timedelta
from typing import Iterable, List, Optional, Set

from ..common.datetime_utils import sunday_based_weekday
from ..core.enums import ScheduleMode
from .model import ScheduleDefinition


def _recurring_bounds(definition: ScheduleDefinition, start: date, end: date) -> Optional[tuple[date, date]]:
    lo = start
    hi = end
    if definition.effective_date is not None and definition.effective_date > lo:
        lo = definition.effective_date
    if definition.expiry_date is not None and definition.expiry_date < hi:
        hi = definition.expiry_date
    if lo > hi:
        return None
    return lo, hi


def _is_valid(definition: ScheduleDefinition) -> bool:
    mode = definition.mode
    if mode is None:
        return False
    if mode == ScheduleMode.RECURRING:
        if not 0 <= int(definition.day_of_week) <= 6:
            return False
        if (
            definition.effective_date is not None
            and definition.expiry_date is not None
            and definition.expiry_date < definition.effective_date
        ):
            return False
    return True


def definition_claims(definition: ScheduleDefinition, day: date) -> bool:
    """True when an active, well-formed definition requires a check-in on ``day``."""

    if not definition.is_active or not _is_valid(definition):
        return False

    if definition.mode == ScheduleMode.FIXED:
        return definition.scheduled_date == day

    if sunday_based_weekday(day) != definition.day_of_week:
        return False
    return _recurring_bounds(definition, day, day) is not None


def _expand_one(definition: ScheduleDefinition, start: date, end: date) -> Iterable[date]:
    if not definition.is_active or not _is_valid(definition):
        return ()

    if definition.mode == ScheduleMode.FIXED:
        d = definition.scheduled_date
        return (d,) if start <= d <= end else ()

    bounds = _recurring_bounds(definition, start, end)
    if bounds is None:
        return ()
    lo, hi = bounds

    offset = (definition.day_of_week - sunday_based_weekday(lo)) % 7
    out: List[date] = []
    current = lo + timedelta(days=offset)
    while current <= hi:
        out.append(current)
        current += timedelta(days=7)
    return out


def expand(definitions: Iterable[ScheduleDefinition], start: date, end: date) -> Set[date]:
    """Union of dates in ``[start, end]`` claimed by any active definition."""

    if start > end:
        return set()

    dates: Set[date] = set()
    for definition in definitions:
        dates.update(_expand_one(definition, start, end))
    return dates


def definitions_for_date(definitions: Iterable[ScheduleDefinition], day: date) -> List[ScheduleDefinition]:
    """Active definitions claiming ``day``, in the order given."""

    return [d for d in definitions if definition_claims(d, day)]
