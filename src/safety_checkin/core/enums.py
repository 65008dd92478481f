from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """User roles used for route authorization."""

    WORKER = "worker"
    TEAM_LEADER = "team_leader"
    SUPERVISOR = "supervisor"
    WHS_CONTROL_CENTER = "whs_control_center"
    CLINICIAN = "clinician"
    EXECUTIVE = "executive"
    ADMIN = "admin"


class ScheduleMode(str, Enum):
    """How a schedule definition claims calendar dates."""

    FIXED = "fixed"
    RECURRING = "recurring"


class ExceptionType(str, Enum):
    """Reasons a worker is exempt from daily check-ins."""

    TRANSFER = "transfer"
    ACCIDENT = "accident"
    INJURY = "injury"
    MEDICAL_LEAVE = "medical_leave"
    OTHER = "other"


class CaseStatus(str, Enum):
    """Lifecycle of the case attached to an exception record."""

    NEW = "new"
    TRIAGED = "triaged"
    ASSESSED = "assessed"
    IN_REHAB = "in_rehab"
    RETURN_TO_WORK = "return_to_work"
    CLOSED = "closed"

    @property
    def is_closed(self) -> bool:
        return self in (CaseStatus.CLOSED, CaseStatus.RETURN_TO_WORK)
