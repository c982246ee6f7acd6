"""Frame timing based on a nanosecond performance counter."""

from __future__ import annotations

import time
from collections.abc import Callable

_NANOSECONDS = 0.000000001


class Clock:
    """Tracks elapsed time, frame delta and frames per second."""

    def __init__(self, counter: Callable[[], int] = time.perf_counter_ns) -> None:
        self._counter = counter
        self._start = float(counter())
        self._last = 0.0
        self.time = 0.0
        self.delta_time = 1.0
        self.fps = 1.0

    def update(self) -> None:
        """Sample the counter and recompute time, delta and fps."""
        self.time = (float(self._counter()) - self._start) * _NANOSECONDS
        self.delta_time = self.time - self._last
        self._last = self.time
        if self.delta_time > 0.0:
            self.fps = 1.0 / self.delta_time