"""Frame timing: delta time and frames per second."""

from __future__ import annotations

import time
from typing import Callable


class FrameClock:
    """Measures time between ticks and the frame rate over each second."""

    def __init__(self, clock: Callable[[], float] | None = None) -> None:
        self._clock = clock if clock is not None else time.perf_counter
        self._prev = self._clock()
        self.dt = 0.0
        self.fps = 0
        self._frame_count = 0
        self._frame_time = 0.0

    def tick(self) -> float:
        """Start a new frame and return the seconds since the previous one."""
        now = self._clock()
        self.dt = now - self._prev
        self._prev = now
        self._frame_count += 1
        self._frame_time += self.dt
        if self._frame_time >= 1.0:
            self.fps = int(self._frame_count / self._frame_time)
            self._frame_time = 0.0
            self._frame_count = 0
        return self.dt