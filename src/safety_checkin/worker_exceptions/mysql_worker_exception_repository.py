from __future__ import annotations

from typing import Any, Dict, Optional, Sequence

from ..common.datetime_utils import to_date
from ..core.enums import CaseStatus, ExceptionType
from ..database.connection import DatabaseConnection
from ..database.mysql_base import as_bool, db_cursor, fetchall, fetchone
from .model import ExceptionRecord
from .repository import WorkerExceptionRepository

_COLUMNS = """
    id, user_id, team_id, exception_type, start_date, end_date,
    is_active, deactivated_at, reason, case_status
"""


def _to_record(r: Dict[str, Any]) -> ExceptionRecord:
    end_date = r.get("end_date")
    case_status = r.get("case_status")
    return ExceptionRecord(
        exception_id=str(r["id"]),
        worker_id=str(r["user_id"]),
        team_id=str(r["team_id"]),
        exception_type=ExceptionType(r["exception_type"]),
        start_date=to_date(r["start_date"]),
        end_date=to_date(end_date) if end_date is not None else None,
        is_active=as_bool(r.get("is_active")),
        deactivated_at=r.get("deactivated_at"),
        reason=r.get("reason"),
        case_status=CaseStatus(case_status) if case_status else None,
    )


class MySQLWorkerExceptionRepository(WorkerExceptionRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_for_worker(self, *, worker_id: str) -> Sequence[ExceptionRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {_COLUMNS} FROM worker_exceptions WHERE user_id=%s ORDER BY start_date ASC",
                (worker_id,),
            )
            return [_to_record(r) for r in fetchall(cur)]

    def list_for_workers(self, *, worker_ids: Sequence[str]) -> Sequence[ExceptionRecord]:
        if not worker_ids:
            return []

        placeholders = ",".join(["%s"] * len(worker_ids))
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM worker_exceptions
                WHERE user_id IN ({placeholders})
                ORDER BY user_id ASC, start_date ASC
                """,
                tuple(worker_ids),
            )
            return [_to_record(r) for r in fetchall(cur)]

    def get_active_for_worker(self, *, worker_id: str) -> Optional[ExceptionRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM worker_exceptions
                WHERE user_id=%s AND is_active=1 AND deactivated_at IS NULL
                  AND (case_status IS NULL OR case_status NOT IN (%s, %s))
                ORDER BY start_date DESC
                LIMIT 1
                """,
                (worker_id, CaseStatus.CLOSED.value, CaseStatus.RETURN_TO_WORK.value),
            )
            r = fetchone(cur)
            return _to_record(r) if r else None
