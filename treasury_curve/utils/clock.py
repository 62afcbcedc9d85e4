"""
Time sources used to decide which years and dates can be requested.
"""

from datetime import date, datetime, timezone


class SystemClock:
    """Current date from the process clock, in UTC"""

    def today(self) -> date:
        return datetime.now(timezone.utc).date()

    def current_year(self) -> int:
        return self.today().year


class FixedClock(SystemClock):
    """Clock pinned to a given date"""

    def __init__(self, fixed: date):
        self.fixed = fixed

    def today(self) -> date:
        return self.fixed
