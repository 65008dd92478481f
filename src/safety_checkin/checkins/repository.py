from __future__ import annotations

from datetime import date
from typing import Protocol, Sequence

from .model import CheckInRecord


class CheckInRepository(Protocol):
    def list_since(self, *, worker_id: str, since: date) -> Sequence[CheckInRecord]:
        """Check-ins dated on or after ``since``, newest first."""

        raise NotImplementedError

    def list_since_for_workers(self, *, worker_ids: Sequence[str], since: date) -> Sequence[CheckInRecord]:
        raise NotImplementedError
