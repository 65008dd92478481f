from __future__ import annotations

from datetime import datetime, timedelta
from typing import Iterable, Sequence

from ..checkins.model import CheckInRecord
from ..schedules.expander import definitions_for_date, expand
from ..schedules.model import ScheduleDefinition
from ..schedules.next_occurrence import find_next, format_next_label
from ..worker_exceptions.model import ExceptionRecord
from ..worker_exceptions.overlay import overlay
from .model import StreakSummary
from .reconciler import reconcile


def compute_streak(
    worker_id: str,
    definitions: Sequence[ScheduleDefinition],
    exceptions: Iterable[ExceptionRecord],
    check_ins: Iterable[CheckInRecord],
    *,
    now: datetime,
    lookback_days: int,
    horizon_days: int,
) -> StreakSummary:
    """Run expander, overlay, reconciler and next-occurrence finder on one snapshot."""

    today = now.date()
    definitions = list(definitions)

    past_dates = expand(definitions, today - timedelta(days=lookback_days), today)
    excused = overlay(past_dates, exceptions).excused
    checked_in = {c.check_in_date for c in check_ins}

    result = reconcile(
        past_dates,
        checked_in,
        excused,
        today=today,
        now_time=now.time(),
        lookback_days=lookback_days,
        today_definitions=definitions_for_date(definitions, today),
    )

    future_dates = expand(definitions, today, today + timedelta(days=horizon_days))
    next_date = find_next(definitions, today, horizon_days, checked_in_dates=checked_in)

    return StreakSummary(
        worker_id=worker_id,
        today=today,
        result=result,
        total_scheduled_days=len(past_dates) + len(future_dates),
        next_check_in_date=next_date,
        next_check_in_label=format_next_label(next_date, today),
    )
