from __future__ import annotations

from datetime import time

from .base import WindowClosureStrategy


class NeverClosedStrategy(WindowClosureStrategy):
    """Today stays unresolved (no claiming schedule, or a daily check-in without a window)."""

    def is_closed(self, *, now_time: time) -> bool:
        return False
