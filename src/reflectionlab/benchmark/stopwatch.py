"""
Monotonic Stopwatch

Accumulating stopwatch over ``time.perf_counter_ns()``.
"""
from __future__ import annotations

import time


class Stopwatch:
    """Stopwatch that accumulates elapsed time across start/stop pairs.

    ``start()`` resumes without clearing the accumulated time;
    ``restart()`` clears it and starts again.

    Example:
        ```python
        sw = Stopwatch.start_new()
        work()
        sw.stop()
        print(sw.elapsed_ms)
        ```
    """

    def __init__(self) -> None:
        self._elapsed_ns = 0
        self._started_at: int | None = None

    @classmethod
    def start_new(cls) -> "Stopwatch":
        """Create and start a stopwatch."""
        sw = cls()
        sw.start()
        return sw

    @property
    def is_running(self) -> bool:
        return self._started_at is not None

    def start(self) -> None:
        """Start or resume timing. No-op if already running."""
        if self._started_at is None:
            self._started_at = time.perf_counter_ns()

    def stop(self) -> None:
        """Stop timing and add the running interval. No-op if stopped."""
        if self._started_at is not None:
            self._elapsed_ns += time.perf_counter_ns() - self._started_at
            self._started_at = None

    def reset(self) -> None:
        """Stop and clear accumulated time."""
        self._elapsed_ns = 0
        self._started_at = None

    def restart(self) -> None:
        """Clear accumulated time and start timing."""
        self.reset()
        self.start()

    @property
    def elapsed_ns(self) -> int:
        """Accumulated nanoseconds, including the running interval."""
        if self._started_at is None:
            return self._elapsed_ns
        return self._elapsed_ns + time.perf_counter_ns() - self._started_at

    @property
    def elapsed_ms(self) -> int:
        """Accumulated whole milliseconds."""
        return self.elapsed_ns // 1_000_000
