"""Timing helpers for scan passes."""

import time


class Timer:
    """Wall-clock stopwatch reporting milliseconds.

    Usable directly (start/stop) or as a context manager.
    """

    def __init__(self):
        self._start: float | None = None
        self._end: float | None = None

    def start(self) -> "Timer":
        self._start = time.perf_counter()
        self._end = None
        return self

    def stop(self) -> "Timer":
        if self._start is None:
            raise RuntimeError("Timer was never started")
        self._end = time.perf_counter()
        return self

    @property
    def elapsed_ms(self) -> float:
        """Elapsed milliseconds; still counting until stopped."""
        if self._start is None:
            return 0.0
        end = self._end if self._end is not None else time.perf_counter()
        return (end - self._start) * 1000

    def __enter__(self) -> "Timer":
        return self.start()

    def __exit__(self, *exc) -> None:
        self.stop()
