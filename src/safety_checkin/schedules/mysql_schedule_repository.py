from __future__ import annotations

from typing import Any, Dict, Optional, Sequence

from ..common.datetime_utils import to_date
from ..database.connection import DatabaseConnection
from ..database.mysql_base import as_bool, db_cursor, fetchall, normalize_mysql_time
from .model import CheckInWindow, ScheduleDefinition
from .repository import ScheduleRepository

_COLUMNS = """
    id, worker_id, team_id, scheduled_date, day_of_week, effective_date, expiry_date,
    is_active, requires_daily_checkin, daily_checkin_start_time, daily_checkin_end_time
"""


def _opt_date(value):
    return to_date(value) if value is not None else None


def _to_definition(r: Dict[str, Any]) -> ScheduleDefinition:
    start = normalize_mysql_time(r.get("daily_checkin_start_time"))
    end = normalize_mysql_time(r.get("daily_checkin_end_time"))
    window: Optional[CheckInWindow] = CheckInWindow(start=start, end=end) if end is not None else None

    day_of_week = r.get("day_of_week")
    return ScheduleDefinition(
        schedule_id=str(r["id"]),
        worker_id=str(r["worker_id"]),
        team_id=str(r["team_id"]),
        scheduled_date=_opt_date(r.get("scheduled_date")),
        day_of_week=int(day_of_week) if day_of_week is not None else None,
        effective_date=_opt_date(r.get("effective_date")),
        expiry_date=_opt_date(r.get("expiry_date")),
        is_active=as_bool(r.get("is_active")),
        requires_daily_checkin=as_bool(r.get("requires_daily_checkin")),
        checkin_window=window,
    )


class MySQLScheduleRepository(ScheduleRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_active_for_worker(self, *, worker_id: str) -> Sequence[ScheduleDefinition]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM worker_schedules
                WHERE worker_id=%s AND is_active=1
                ORDER BY scheduled_date DESC, day_of_week ASC
                """,
                (worker_id,),
            )
            return [_to_definition(r) for r in fetchall(cur)]

    def list_active_for_team(self, *, team_id: str) -> Sequence[ScheduleDefinition]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM worker_schedules
                WHERE team_id=%s AND is_active=1
                ORDER BY worker_id ASC, scheduled_date DESC, day_of_week ASC
                """,
                (team_id,),
            )
            return [_to_definition(r) for r in fetchall(cur)]
