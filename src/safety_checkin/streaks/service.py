from __future__ import annotations

import logging
from collections import defaultdict
from datetime import datetime, timedelta
from typing import Callable, List, Optional

from ..checkins.repository import CheckInRepository
from ..common.datetime_utils import now_local
from ..common.validators import require_non_empty, require_positive_int
from ..core.constants import DEFAULT_HORIZON_DAYS, DEFAULT_LOOKBACK_DAYS
from ..schedules.repository import ScheduleRepository
from ..worker_exceptions.repository import WorkerExceptionRepository
from .engine import compute_streak
from .model import StreakSummary

logger = logging.getLogger(__name__)


class StreakService:
    """Fetches a worker's snapshot and runs the streak engine on it.

    Repository errors propagate so a request fails as a whole instead of
    reconciling a partial snapshot.
    """

    def __init__(
        self,
        schedules: ScheduleRepository,
        exceptions: WorkerExceptionRepository,
        checkins: CheckInRepository,
        *,
        lookback_days: int = DEFAULT_LOOKBACK_DAYS,
        horizon_days: int = DEFAULT_HORIZON_DAYS,
        clock: Callable[[], datetime] = now_local,
    ):
        self._schedules = schedules
        self._exceptions = exceptions
        self._checkins = checkins
        self._lookback_days = require_positive_int(lookback_days, "lookback_days")
        self._horizon_days = require_positive_int(horizon_days, "horizon_days")
        self._clock = clock

    def get_streak(self, worker_id: str, *, now: Optional[datetime] = None) -> StreakSummary:
        worker_id = require_non_empty(worker_id, "worker_id")
        now = now or self._clock()
        since = now.date() - timedelta(days=self._lookback_days)

        definitions = self._schedules.list_active_for_worker(worker_id=worker_id)
        exceptions = self._exceptions.list_for_worker(worker_id=worker_id)
        check_ins = self._checkins.list_since(worker_id=worker_id, since=since)

        summary = compute_streak(
            worker_id,
            definitions,
            exceptions,
            check_ins,
            now=now,
            lookback_days=self._lookback_days,
            horizon_days=self._horizon_days,
        )
        logger.debug(
            "Streak for %s: current=%d completed=%d past_scheduled=%d",
            worker_id,
            summary.result.current_streak,
            summary.result.completed_days,
            summary.result.past_scheduled_days,
        )
        return summary

    def get_team_overview(self, team_id: str, *, now: Optional[datetime] = None) -> List[StreakSummary]:
        """One summary per worker holding an active schedule in the team.

        The team only selects the roster: each worker is reconciled on all of
        their active schedules, so a row matches that worker's own streak.
        """

        team_id = require_non_empty(team_id, "team_id")
        now = now or self._clock()
        since = now.date() - timedelta(days=self._lookback_days)

        worker_ids = sorted({d.worker_id for d in self._schedules.list_active_for_team(team_id=team_id)})
        if not worker_ids:
            return []

        definitions_by_worker = {
            worker_id: self._schedules.list_active_for_worker(worker_id=worker_id) for worker_id in worker_ids
        }

        exceptions_by_worker = defaultdict(list)
        for record in self._exceptions.list_for_workers(worker_ids=worker_ids):
            exceptions_by_worker[record.worker_id].append(record)

        checkins_by_worker = defaultdict(list)
        for record in self._checkins.list_since_for_workers(worker_ids=worker_ids, since=since):
            checkins_by_worker[record.worker_id].append(record)

        summaries = [
            compute_streak(
                worker_id,
                definitions_by_worker[worker_id],
                exceptions_by_worker[worker_id],
                checkins_by_worker[worker_id],
                now=now,
                lookback_days=self._lookback_days,
                horizon_days=self._horizon_days,
            )
            for worker_id in worker_ids
        ]
        logger.info("Computed streaks for %d workers in team %s", len(summaries), team_id)
        return summaries
