from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import time


class WindowClosureStrategy(ABC):
    """Strategy Pattern: decide whether today's check-in window has closed.

    Until it closes, a scheduled day without a check-in is "not yet missed".
    """

    @abstractmethod
    def is_closed(self, *, now_time: time) -> bool:
        raise NotImplementedError
