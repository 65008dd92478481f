from __future__ import annotations

from dataclasses import dataclass
from datetime import date, time
from typing import Optional

from ..core.enums import ScheduleMode


@dataclass(frozen=True)
class CheckInWindow:
    """Daily check-in window; only ``end`` decides when today is missed."""

    start: Optional[time]
    end: time


@dataclass(frozen=True)
class ScheduleDefinition:
    """Domain entity: one schedule assignment for a worker.

    A definition is either a single dated assignment (``scheduled_date``) or a
    weekly recurrence (``day_of_week``, 0=Sunday) optionally bounded by
    ``effective_date`` / ``expiry_date``.
    """

    schedule_id: str
    worker_id: str
    team_id: str
    scheduled_date: Optional[date] = None
    day_of_week: Optional[int] = None
    effective_date: Optional[date] = None
    expiry_date: Optional[date] = None
    is_active: bool = True
    requires_daily_checkin: bool = False
    checkin_window: Optional[CheckInWindow] = None

    @property
    def mode(self) -> Optional[ScheduleMode]:
        """Fixed or recurring; None when the row sets both or neither."""
        if self.scheduled_date is not None and self.day_of_week is None:
            return ScheduleMode.FIXED
        if self.day_of_week is not None and self.scheduled_date is None:
            return ScheduleMode.RECURRING
        return None
