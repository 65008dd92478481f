"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

from datetime import time

DEFAULT_LOOKBACK_DAYS = 30
DEFAULT_HORIZON_DAYS = 90

# Window closes at end of day when a schedule does not require a daily check-in.
END_OF_DAY = time(23, 59)

STREAK_MILESTONES = (7, 14, 30, 60, 90)
BADGE_STREAK_DAYS = 7
BADGE_NAME = "7-Day Streak"
BADGE_DESCRIPTION = "Completed 7 consecutive days of check-ins"
BADGE_ICON = "\U0001F525"

ISO_DATE_FORMAT = "%Y-%m-%d"
