from __future__ import annotations

from datetime import time

from ...core.constants import END_OF_DAY
from .base import WindowClosureStrategy


class EndOfDayStrategy(WindowClosureStrategy):
    """No daily check-in requirement: the day only closes after 23:59."""

    def is_closed(self, *, now_time: time) -> bool:
        return now_time.replace(second=0, microsecond=0) > END_OF_DAY
