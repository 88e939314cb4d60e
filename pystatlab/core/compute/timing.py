"""
Wall-clock timing for backend solves.

Backends wrap their kernel call in a named section so Result.timing
reports both the total and the kernel time, e.g.

    {'total_seconds': 4.1e-05, 'chi-square': 3.6e-05}
"""

import time
from contextlib import contextmanager
from typing import Iterator


class Timer:
    """
    Stopwatch with named, accumulating sections.

    Usage:
        timer = Timer()
        timer.start()
        with timer.section('kolmogorov-smirnov'):
            params, warnings_list = ks_one_sample(design)
        timer.stop()
        timer.result()   # {'total_seconds': ..., 'kolmogorov-smirnov': ...}
    """

    def __init__(self) -> None:
        self._began: float | None = None
        self._elapsed: float | None = None
        self._sections: dict[str, float] = {}

    def start(self) -> None:
        self._began = time.perf_counter()
        self._elapsed = None

    def stop(self) -> None:
        if self._began is None:
            raise RuntimeError("Timer.stop() called before start()")
        self._elapsed = time.perf_counter() - self._began

    @contextmanager
    def section(self, name: str) -> Iterator[None]:
        """Add the time spent in the block to section `name`."""
        t0 = time.perf_counter()
        try:
            yield
        finally:
            self._sections[name] = self._sections.get(name, 0.0) + (time.perf_counter() - t0)

    def result(self) -> dict[str, float]:
        """
        Timing breakdown.

        Raises:
            RuntimeError: If the timer has not been stopped
        """
        if self._elapsed is None:
            raise RuntimeError("Timer.result() called before stop()")
        return {'total_seconds': self._elapsed, **self._sections}


@contextmanager
def timed() -> Iterator[Timer]:
    """
    Time an arbitrary block:

        with timed() as timer:
            sol = gof_test(x, 'ks')
        timer.result()['total_seconds']
    """
    timer = Timer()
    timer.start()
    try:
        yield timer
    finally:
        timer.stop()
