from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from ...schedules.model import ScheduleDefinition
from .base import WindowClosureStrategy
from .end_of_day_strategy import EndOfDayStrategy
from .open_strategy import NeverClosedStrategy
from .window_strategy import CheckInWindowStrategy


@dataclass
class WindowClosureFactory:
    """Factory Pattern: choose the closure rule from today's schedule.

    The first definition claiming today decides, mirroring how the stored
    schedules are ordered when fetched.
    """

    def for_today(self, today_definitions: Sequence[ScheduleDefinition]) -> WindowClosureStrategy:
        if not today_definitions:
            return NeverClosedStrategy()

        definition = today_definitions[0]
        if definition.requires_daily_checkin:
            if definition.checkin_window is not None:
                return CheckInWindowStrategy(definition.checkin_window.end)
            return NeverClosedStrategy()
        return EndOfDayStrategy()
