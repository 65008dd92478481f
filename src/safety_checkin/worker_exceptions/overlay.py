from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import FrozenSet, Iterable, List

from .model import ExceptionRecord


@dataclass(frozen=True)
class OverlayResult:
    excused: FrozenSet[date]
    exception_dates: List[date]


def overlay(scheduled_dates: Iterable[date], exceptions: Iterable[ExceptionRecord]) -> OverlayResult:
    """Split scheduled dates into excused and the rest.

    A scheduled date is excused when any exception record covers it, whether
    or not that record is still active: the excusal belongs to the historical
    day, not to the exception's current lifecycle state. Only scheduled dates
    are ever returned.
    """

    # Records that cover nothing (end before start) drop out here.
    usable = [e for e in exceptions if e.effective_end is None or e.effective_end >= e.start_date]

    excused = frozenset(d for d in scheduled_dates if any(e.covers(d) for e in usable))
    return OverlayResult(excused=excused, exception_dates=sorted(excused))
