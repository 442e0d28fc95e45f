import time
from contextlib import contextmanager
from typing import Callable


class StageTimer:
    """Milliseconds spent in each named stage of one solve.

    Re-entering a stage adds to its time, so a stage can wrap the work of
    every starting cell separately.
    """

    def __init__(self, clock: Callable[[], float] = time.perf_counter):
        self._clock = clock
        self._start = clock()
        self.timings: dict[str, float] = {}

    @contextmanager
    def stage(self, name: str):
        t0 = self._clock()
        try:
            yield
        finally:
            elapsed_ms = (self._clock() - t0) * 1000
            self.timings[name] = self.timings.get(name, 0.0) + elapsed_ms

    @property
    def total_ms(self) -> float:
        return round((self._clock() - self._start) * 1000, 1)

    def summary(self) -> dict[str, float]:
        result = {name: round(ms, 1) for name, ms in self.timings.items()}
        result["total"] = self.total_ms
        return result

    def describe(self) -> str:
        """Render the summary as "name=1.2ms" pairs for a log line."""
        return " ".join(f"{name}={ms:.1f}ms" for name, ms in self.summary().items())
