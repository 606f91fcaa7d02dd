"""
Resolves a requested hour/weekday against the current time in a fixed timezone.
"""
from datetime import datetime, tzinfo
from typing import Optional, Tuple
from zoneinfo import ZoneInfo

from ..domain import Clock, TimeResolution

DAYS_PER_WEEK = 7
HOURS_PER_DAY = 24


class SystemClock:
    """Clock backed by the system wall clock."""

    def now(self, tz: tzinfo) -> datetime:
        return datetime.now(tz)


def normalize_hour(hour: int) -> int:
    return hour % HOURS_PER_DAY


def normalize_day(day: int) -> int:
    """Folds any integer onto Monday=1..Sunday=7."""
    return (day - 1) % DAYS_PER_WEEK + 1


class TimeResolver:
    """
    Determines whether a target weekday is today or a number of days ahead.
    """

    def __init__(self, timezone: str = "America/Chicago", clock: Optional[Clock] = None):
        self.timezone = timezone
        self.tz = ZoneInfo(timezone)
        self.clock = clock or SystemClock()

    def now(self) -> Tuple[int, int]:
        """Current (hour, day) in the configured timezone, Monday=1..Sunday=7."""
        moment = self.clock.now(self.tz)
        return moment.hour, moment.isoweekday()

    def resolve(self, target_hour: int, target_day: int) -> TimeResolution:
        # The hour never shifts the offset: forecast rows are indexed from local midnight
        _, current_day = self.now()
        day_offset = (normalize_day(target_day) - current_day + DAYS_PER_WEEK) % DAYS_PER_WEEK
        return TimeResolution(is_now=day_offset == 0, day_offset=day_offset)
