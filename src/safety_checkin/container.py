from __future__ import annotations

from dataclasses import dataclass

from .checkins.mysql_checkin_repository import MySQLCheckInRepository
from .core.constants import DEFAULT_HORIZON_DAYS, DEFAULT_LOOKBACK_DAYS
from .database.connection import DBConfig, DatabaseConnection
from .schedules.mysql_schedule_repository import MySQLScheduleRepository
from .streaks.service import StreakService
from .worker_exceptions.mysql_worker_exception_repository import MySQLWorkerExceptionRepository
from .worker_exceptions.service import WorkerExceptionService


@dataclass(frozen=True)
class Container:
    conn: DatabaseConnection

    schedules_repo: MySQLScheduleRepository
    exceptions_repo: MySQLWorkerExceptionRepository
    checkins_repo: MySQLCheckInRepository

    streak_service: StreakService
    worker_exception_service: WorkerExceptionService


def build_container(
    *,
    db_config: dict,
    lookback_days: int = DEFAULT_LOOKBACK_DAYS,
    horizon_days: int = DEFAULT_HORIZON_DAYS,
) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))

    schedules_repo = MySQLScheduleRepository(conn)
    exceptions_repo = MySQLWorkerExceptionRepository(conn)
    checkins_repo = MySQLCheckInRepository(conn)

    streak_service = StreakService(
        schedules_repo,
        exceptions_repo,
        checkins_repo,
        lookback_days=lookback_days,
        horizon_days=horizon_days,
    )
    worker_exception_service = WorkerExceptionService(exceptions_repo)

    return Container(
        conn=conn,
        schedules_repo=schedules_repo,
        exceptions_repo=exceptions_repo,
        checkins_repo=checkins_repo,
        streak_service=streak_service,
        worker_exception_service=worker_exception_service,
    )
