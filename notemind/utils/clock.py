"""Injectable time sources."""

from datetime import datetime, timedelta
from typing import Protocol


class Clock(Protocol):
    """Anything that can tell the current time."""

    def now(self) -> datetime: ...


class SystemClock:
    """Wall clock in local time."""

    def now(self) -> datetime:
        return datetime.now()


class FixedClock:
    """
    Clock frozen at a given moment.

    Usage:
        clock = FixedClock(datetime(2024, 3, 4, 9, 30))
        clock.advance(hours=2)
    """

    def __init__(self, moment: datetime):
        self._moment = moment

    def now(self) -> datetime:
        return self._moment

    def advance(self, **delta: float) -> datetime:
        """Move the clock forward by a timedelta built from keyword arguments."""
        self._moment = self._moment + timedelta(**delta)
        return self._moment
