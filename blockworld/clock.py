"""A restartable stopwatch."""

from __future__ import annotations

import time
from typing import Callable


class Clock:
    """Measures time since construction or the last restart."""

    def __init__(self, timer: Callable[[], int] = time.perf_counter_ns) -> None:
        self._timer = timer
        self._last = timer()

    def restart(self) -> float:
        """Return the seconds since the last restart, in whole milliseconds, and restart."""
        delta = self._timer() - self._last
        self._last += delta
        return (delta // 1_000_000) / 1000.0

    def elapsed(self) -> float:
        """Seconds since the last restart, in whole microseconds."""
        return ((self._timer() - self._last) // 1000) * 0.000001