from __future__ import annotations

from datetime import date
from typing import Any, Dict, Sequence

from ..common.datetime_utils import to_date
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, normalize_mysql_time
from .model import CheckInRecord
from .repository import CheckInRepository


def _to_record(r: Dict[str, Any]) -> CheckInRecord:
    return CheckInRecord(
        worker_id=str(r["user_id"]),
        check_in_date=to_date(r["check_in_date"]),
        check_in_time=normalize_mysql_time(r.get("check_in_time")),
    )


class MySQLCheckInRepository(CheckInRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_since(self, *, worker_id: str, since: date) -> Sequence[CheckInRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT user_id, check_in_date, check_in_time
                FROM daily_checkins
                WHERE user_id=%s AND check_in_date >= %s
                ORDER BY check_in_date DESC
                """,
                (worker_id, since),
            )
            return [_to_record(r) for r in fetchall(cur)]

    def list_since_for_workers(self, *, worker_ids: Sequence[str], since: date) -> Sequence[CheckInRecord]:
        if not worker_ids:
            return []

        placeholders = ",".join(["%s"] * len(worker_ids))
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT user_id, check_in_date, check_in_time
                FROM daily_checkins
                WHERE user_id IN ({placeholders}) AND check_in_date >= %s
                ORDER BY user_id ASC, check_in_date DESC
                """,
                (*worker_ids, since),
            )
            return [_to_record(r) for r in fetchall(cur)]
