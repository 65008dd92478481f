from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

import pytest

from safety_checkin.core.enums import CaseStatus, ExceptionType
from safety_checkin.core.exceptions import ValidationError
from safety_checkin.worker_exceptions.model import ExceptionRecord
from safety_checkin.worker_exceptions.service import ACTIVE_CASE_REASON, WorkerExceptionService


@dataclass
class SingleActiveException:
    record: Optional[ExceptionRecord]

    def get_active_for_worker(self, *, worker_id: str):
        return self.record


def _active(**kw) -> ExceptionRecord:
    return ExceptionRecord(
        exception_id="e1",
        worker_id="w1",
        team_id="t1",
        exception_type=ExceptionType.ACCIDENT,
        start_date=date(2026, 10, 12),
        **kw,
    )


def test_no_active_exception_can_report():
    result = WorkerExceptionService(SingleActiveException(None)).can_report_incident("w1")
    assert result.can_report is True
    assert result.to_payload() == {"canReport": True, "reason": None, "hasActiveCase": False}


def test_open_case_blocks_report():
    result = WorkerExceptionService(SingleActiveException(_active(case_status=CaseStatus.IN_REHAB))).can_report_incident("w1")

    assert result.can_report is False
    assert result.to_payload() == {
        "canReport": False,
        "reason": ACTIVE_CASE_REASON,
        "hasActiveCase": True,
        "exceptionType": "accident",
        "startDate": "2026-10-12",
    }


@pytest.mark.parametrize(
    "record",
    [
        _active(case_status=CaseStatus.CLOSED),
        _active(case_status=CaseStatus.RETURN_TO_WORK),
        _active(deactivated_at=datetime(2026, 10, 15, 10, 0)),
    ],
)
def test_closed_case_allows_report(record):
    assert WorkerExceptionService(SingleActiveException(record)).can_report_incident("w1").can_report is True


def test_missing_worker_rejected():
    with pytest.raises(ValidationError):
        WorkerExceptionService(SingleActiveException(None)).can_report_incident("")
