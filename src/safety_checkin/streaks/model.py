from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import List, Optional

from ..common.datetime_utils import format_iso_date
from ..core.constants import BADGE_DESCRIPTION, BADGE_ICON, BADGE_NAME


@dataclass(frozen=True)
class Badge:
    name: str
    description: str
    icon: str
    achieved: bool
    achieved_date: date

    @classmethod
    def seven_day(cls, achieved_date: date) -> "Badge":
        return cls(
            name=BADGE_NAME,
            description=BADGE_DESCRIPTION,
            icon=BADGE_ICON,
            achieved=True,
            achieved_date=achieved_date,
        )


@dataclass(frozen=True)
class MilestoneProgress:
    next_milestone: Optional[int]
    days_until_next_milestone: Optional[int]
    has_seven_day_badge: bool
    badge: Optional[Badge] = None


@dataclass(frozen=True)
class ReconciliationResult:
    """Read-model computed per request from one snapshot; never persisted."""

    current_streak: int
    longest_streak: int
    completed_days: int
    past_scheduled_days: int
    today_check_in_completed: bool
    missed_dates: List[date] = field(default_factory=list)
    exception_dates: List[date] = field(default_factory=list)
    milestones: Optional[MilestoneProgress] = None


@dataclass(frozen=True)
class StreakSummary:
    worker_id: str
    today: date
    result: ReconciliationResult
    total_scheduled_days: int
    next_check_in_date: Optional[date]
    next_check_in_label: Optional[str]

    def to_payload(self) -> dict:
        r = self.result
        m = r.milestones
        badge = m.badge if m else None
        return {
            "currentStreak": r.current_streak,
            "longestStreak": r.longest_streak,
            "todayCheckInCompleted": r.today_check_in_completed,
            "nextMilestone": m.next_milestone if m else None,
            "daysUntilNextMilestone": m.days_until_next_milestone if m else None,
            "hasSevenDayBadge": m.has_seven_day_badge if m else False,
            "totalScheduledDays": self.total_scheduled_days,
            "pastScheduledDays": r.past_scheduled_days,
            "completedDays": r.completed_days,
            "missedScheduleDates": [format_iso_date(d) for d in r.missed_dates],
            "missedScheduleCount": len(r.missed_dates),
            "exceptionDates": [format_iso_date(d) for d in r.exception_dates],
            "nextCheckInDate": format_iso_date(self.next_check_in_date) if self.next_check_in_date else None,
            "nextCheckInDateFormatted": self.next_check_in_label,
            "badge": {
                "name": badge.name,
                "description": badge.description,
                "icon": badge.icon,
                "achieved": badge.achieved,
                "achievedDate": format_iso_date(badge.achieved_date),
            }
            if badge
            else None,
        }

    def to_team_row(self) -> dict:
        return {
            "workerId": self.worker_id,
            "currentStreak": self.result.current_streak,
            "longestStreak": self.result.longest_streak,
            "missedScheduleCount": len(self.result.missed_dates),
            "todayCheckInCompleted": self.result.today_check_in_completed,
        }
