"""Monotonic timer giving elapsed time and time steps in seconds."""

import time
from collections.abc import Callable


class Timer:
    """Track time since creation and time between successive steps."""

    def __init__(self, clock: Callable[[], float] | None = None) -> None:
        self._clock = clock if clock is not None else time.perf_counter
        self._start = self._clock()
        self._now = self._start

    def duration_since_start(self) -> float:
        """Seconds elapsed since the timer was created."""
        return self._clock() - self._start

    def get_dt(self) -> float:
        """Seconds since the previous call (or creation), then restart the step."""
        new_now = self._clock()
        dt = new_now - self._now
        self._now = new_now
        return dt