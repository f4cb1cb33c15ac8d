"""Time sources for the stores."""

from collections.abc import Callable
from datetime import datetime, timedelta

Clock = Callable[[], datetime]


def system_clock() -> datetime:
    """Return the current local time."""
    return datetime.now()


class TickingClock:
    """
    Deterministic clock that advances by a fixed step on every read.

    Every call returns a strictly later timestamp, which keeps
    "most recently updated" ordering reproducible in tests and replays.
    """

    def __init__(self, start: datetime | None = None, step: timedelta = timedelta(seconds=1)):
        self.current = start or datetime(2024, 1, 1, 9, 0, 0)
        self.step = step

    def __call__(self) -> datetime:
        now = self.current
        self.current = self.current + self.step
        return now

    def advance(self, delta: timedelta) -> None:
        """Move the clock forward without producing a reading."""
        self.current = self.current + delta
