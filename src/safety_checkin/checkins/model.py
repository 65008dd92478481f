from __future__ import annotations

from dataclasses import dataclass
from datetime import date, time
from typing import Optional


@dataclass(frozen=True)
class CheckInRecord:
    """A completed daily check-in; at most one per worker per date."""

    worker_id: str
    check_in_date: date
    check_in_time: Optional[time] = None
