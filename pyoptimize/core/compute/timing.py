"""
Execution timing utilities.

Provides accumulating wall-clock timing with named sections. The clock is
injected rather than read from ambient state, so callers (and tests) can
supply a deterministic clock.
"""

import time
from contextlib import contextmanager
from typing import Callable, Iterator


class Timer:
    """
    Accumulating timer with an injectable clock.

    Usage:
        timer = Timer()
        timer.start()

        with timer.section('optimization'):
            out = minimizer(fn, gr, start, lower, upper, control)

        with timer.section('newton'):
            par = newton_step(fn, gr, par)

        timer.stop()
        result = timer.result()
        # {'total_seconds': 0.05, 'optimization': 0.04, 'newton': 0.01}
    """

    def __init__(self, clock: Callable[[], float] | None = None):
        """
        Initialize timer.

        Args:
            clock: Zero-argument callable returning seconds as a float.
                   Defaults to time.perf_counter.
        """
        self._clock = clock if clock is not None else time.perf_counter
        self._sections: dict[str, float] = {}
        self._start_time: float | None = None
        self._total: float | None = None

    def start(self) -> None:
        """Start the overall timer."""
        self._start_time = self._clock()

    def stop(self) -> float:
        """Stop the overall timer and return the elapsed total."""
        if self._start_time is None:
            raise RuntimeError("Timer.stop() called before start()")
        self._total = self._clock() - self._start_time
        return self._total

    @contextmanager
    def section(self, name: str) -> Iterator[None]:
        """
        Time a named section.

        Args:
            name: Section identifier (used as key in result dict)

        Note:
            Sections can overlap with each other and with the total time.
            The timer does not enforce mutual exclusion.
        """
        start = self._clock()
        try:
            yield
        finally:
            elapsed = self._clock() - start
            # Accumulate if section called multiple times
            self._sections[name] = self._sections.get(name, 0.0) + elapsed

    def result(self) -> dict[str, float]:
        """
        Get timing results.

        Returns:
            Dictionary with 'total_seconds' and all section timings

        Raises:
            RuntimeError: If called before stop()
        """
        if self._total is None:
            raise RuntimeError("Timer.result() called before stop()")

        result = {'total_seconds': self._total}
        result.update(self._sections)
        return result

