from __future__ import annotations

from datetime import time

from .base import WindowClosureStrategy


class CheckInWindowStrategy(WindowClosureStrategy):
    """Daily check-in required inside an explicit window."""

    def __init__(self, window_end: time):
        self._window_end = window_end

    def is_closed(self, *, now_time: time) -> bool:
        return now_time > self._window_end
