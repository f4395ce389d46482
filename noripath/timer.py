"""A simple timer with millisecond precision."""

from __future__ import annotations

import time
from typing import Callable


class Timer:
    """Measures whole milliseconds since the last reset."""

    def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
        self._clock = clock
        self._start = clock()

    def reset(self) -> None:
        """Restart the timer at the current time."""
        self._start = self._clock()

    @staticmethod
    def _milliseconds(seconds: float) -> float:
        return float(int(seconds * 1000.0))

    def elapsed(self) -> float:
        """Return the whole milliseconds elapsed since the last reset."""
        return self._milliseconds(self._clock() - self._start)

    def lap(self) -> float:
        """Return the elapsed milliseconds and restart the timer."""
        now = self._clock()
        duration = self._milliseconds(now - self._start)
        self._start = now
        return duration