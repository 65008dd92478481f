from __future__ import annotations

from typing import Protocol, Sequence

from .model import ScheduleDefinition


class ScheduleRepository(Protocol):
    def list_active_for_worker(self, *, worker_id: str) -> Sequence[ScheduleDefinition]:
        raise NotImplementedError

    def list_active_for_team(self, *, team_id: str) -> Sequence[ScheduleDefinition]:
        """All active definitions of every worker in a team."""

        raise NotImplementedError
