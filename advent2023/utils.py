from __future__ import annotations

import time
from typing import *


class NoValueT:
    __slots__ = ()

    instance: NoValueT

    def __new__(cls) -> NoValueT:
        if not hasattr(cls, "instance"):
            cls.instance = super().__new__(cls)
        return cls.instance

    def __repr__(self) -> str:
        return "NoValue"


NoValue = NoValueT()


class Stopwatch:
    """Measures elapsed wall-clock time with `time.perf_counter`.

    Examples:
        >>> watch = Stopwatch()
        >>> watch.elapsed() >= 0
        True
        >>> watch.lap() >= 0
        True
    """

    def __init__(self, clock: Callable[[], float] = time.perf_counter) -> None:
        self._clock = clock
        self._start = clock()
        self._last_lap = self._start

    def elapsed(self) -> float:
        """Seconds since the stopwatch was created."""
        return self._clock() - self._start

    def lap(self) -> float:
        """Seconds since the previous lap (or since creation, for the first one)."""
        now = self._clock()
        duration = now - self._last_lap
        self._last_lap = now
        return duration


def format_duration(seconds: float) -> str:
    """Render a duration as whole milliseconds, e.g. `12ms`."""
    return f"{int(seconds * 1000)}ms"


__all__ = (
    "NoValue",
    "NoValueT",
    "Stopwatch",
    "format_duration",
)
