"""Frame timing."""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Callable


@dataclass(frozen=True)
class GameTime:
    """Timing of one frame, in seconds."""

    delta: float
    total: float


class Timer:
    """Measures time between ticks using a clock that returns seconds."""

    def __init__(self, clock: Callable[[], float] = time.perf_counter):
        self._clock = clock
        self._start = clock()
        self._last = self._start
        self._delta = 0.0
        self._total = 0.0

    @property
    def delta(self) -> float:
        """Seconds between the last two ticks."""
        return self._delta

    @property
    def total(self) -> float:
        """Seconds from creation to the last tick."""
        return self._total

    def tick(self) -> GameTime:
        """Record a new frame and return its timing."""
        now = self._clock()
        self._delta = now - self._last
        self._total = now - self._start
        self._last = now
        return GameTime(self._delta, self._total)