from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from ..core.enums import CaseStatus, ExceptionType


@dataclass(frozen=True)
class ExceptionRecord:
    """Domain entity: leave, injury or incident absence excusing scheduled days."""

    exception_id: str
    worker_id: str
    team_id: str
    exception_type: ExceptionType
    start_date: date
    end_date: Optional[date] = None
    is_active: bool = True
    deactivated_at: Optional[datetime] = None
    reason: Optional[str] = None
    case_status: Optional[CaseStatus] = None

    @property
    def effective_end(self) -> Optional[date]:
        """Last excused day; a deactivation date caps an open or later end date."""
        closed_on = self.deactivated_at.date() if self.deactivated_at is not None else None
        if self.end_date is None:
            return closed_on
        if closed_on is None:
            return self.end_date
        return min(self.end_date, closed_on)

    def covers(self, day: date) -> bool:
        end = self.effective_end
        return self.start_date <= day and (end is None or day <= end)

    @property
    def is_case_closed(self) -> bool:
        if self.deactivated_at is not None:
            return True
        return self.case_status is not None and self.case_status.is_closed
