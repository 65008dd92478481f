from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..common.datetime_utils import format_iso_date
from ..common.validators import require_non_empty
from ..core.enums import ExceptionType
from .repository import WorkerExceptionRepository

logger = logging.getLogger(__name__)

ACTIVE_CASE_REASON = (
    "You already have an active incident/exception. "
    "Please wait until your current case is closed before submitting a new report."
)


@dataclass(frozen=True)
class IncidentEligibility:
    can_report: bool
    reason: Optional[str] = None
    exception_type: Optional[ExceptionType] = None
    start_date: Optional[date] = None

    @property
    def has_active_case(self) -> bool:
        return not self.can_report

    def to_payload(self) -> dict:
        payload = {
            "canReport": self.can_report,
            "reason": self.reason,
            "hasActiveCase": self.has_active_case,
        }
        if self.has_active_case:
            payload["exceptionType"] = self.exception_type.value if self.exception_type else None
            payload["startDate"] = format_iso_date(self.start_date) if self.start_date else None
        return payload


class WorkerExceptionService:
    def __init__(self, exceptions: WorkerExceptionRepository):
        self._exceptions = exceptions

    def can_report_incident(self, worker_id: str) -> IncidentEligibility:
        """A worker may file a new incident only when no open case is running."""

        worker_id = require_non_empty(worker_id, "worker_id")
        active = self._exceptions.get_active_for_worker(worker_id=worker_id)
        if active is None or active.is_case_closed:
            return IncidentEligibility(can_report=True)

        logger.info("Worker %s blocked from reporting: open %s case", worker_id, active.exception_type.value)
        return IncidentEligibility(
            can_report=False,
            reason=ACTIVE_CASE_REASON,
            exception_type=active.exception_type,
            start_date=active.start_date,
        )
