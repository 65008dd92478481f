from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import ExceptionRecord


class WorkerExceptionRepository(Protocol):
    def list_for_worker(self, *, worker_id: str) -> Sequence[ExceptionRecord]:
        """Every exception of a worker, active or not."""

        raise NotImplementedError

    def list_for_workers(self, *, worker_ids: Sequence[str]) -> Sequence[ExceptionRecord]:
        raise NotImplementedError

    def get_active_for_worker(self, *, worker_id: str) -> Optional[ExceptionRecord]:
        """Newest active exception whose case is still open."""

        raise NotImplementedError
