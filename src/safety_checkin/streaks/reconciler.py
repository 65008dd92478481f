"""Reconcile required dates against check-ins into streak statistics.

The walk goes backwards from ``today`` over ``lookback_days``:

- unscheduled and excused days are transparent, they neither extend nor
  break a run;
- a scheduled day with a check-in extends the run being built;
- a scheduled day without one breaks it and seals the current streak, so
  older runs only feed ``longest_streak``.

Today without a check-in only counts as missed once its window has closed.
"""

from __future__ import annotations

from datetime import date, time, timedelta
from typing import AbstractSet, Optional, Sequence

from ..core.constants import BADGE_STREAK_DAYS, DEFAULT_LOOKBACK_DAYS, STREAK_MILESTONES
from ..schedules.model import ScheduleDefinition
from .closure.factory import WindowClosureFactory
from .model import Badge, MilestoneProgress, ReconciliationResult


def milestone_progress(current_streak: int, today: date) -> MilestoneProgress:
    next_milestone = next((m for m in STREAK_MILESTONES if m > current_streak), None)
    has_badge = current_streak >= BADGE_STREAK_DAYS
    return MilestoneProgress(
        next_milestone=next_milestone,
        days_until_next_milestone=next_milestone - current_streak if next_milestone is not None else None,
        has_seven_day_badge=has_badge,
        badge=Badge.seven_day(today) if has_badge else None,
    )


def reconcile(
    scheduled_dates: AbstractSet[date],
    checked_in_dates: AbstractSet[date],
    excused_dates: AbstractSet[date],
    *,
    today: date,
    now_time: time,
    lookback_days: int = DEFAULT_LOOKBACK_DAYS,
    today_definitions: Sequence[ScheduleDefinition] = (),
    closure_factory: Optional[WindowClosureFactory] = None,
) -> ReconciliationResult:
    factory = closure_factory or WindowClosureFactory()
    today_closed = factory.for_today(today_definitions).is_closed(now_time=now_time)

    current_streak = 0
    longest_streak = 0
    run = 0
    sealed = False

    completed_days = 0
    past_scheduled_days = 0
    missed: list[date] = []
    excused_in_window: list[date] = []

    for offset in range(max(lookback_days, 0) + 1):
        day = today - timedelta(days=offset)
        if day not in scheduled_dates:
            continue

        past_scheduled_days += 1
        if day in excused_dates:
            excused_in_window.append(day)
            continue

        if day in checked_in_dates:
            completed_days += 1
            run += 1
            if not sealed:
                current_streak = run
            longest_streak = max(longest_streak, run)
            continue

        if day == today and not today_closed:
            # Still open: not missed, not a break.
            continue

        missed.append(day)
        run = 0
        sealed = True

    return ReconciliationResult(
        current_streak=current_streak,
        longest_streak=longest_streak,
        completed_days=completed_days,
        past_scheduled_days=past_scheduled_days,
        today_check_in_completed=today in scheduled_dates and today in checked_in_dates,
        missed_dates=missed,
        exception_dates=sorted(excused_in_window),
        milestones=milestone_progress(current_streak, today),
    )
