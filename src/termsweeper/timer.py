"""
Elapsed-time clock for a round of Minesweeper.
"""
import time
from typing import Callable, Optional


class Timer:
    """
    Stopwatch over a monotonic clock.

    Reading the elapsed time never changes the timer. Before ``start``
    it reads zero; after ``stop`` it stays frozen.
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
        self._clock = clock
        self._started_at: Optional[float] = None
        self._stopped_at: Optional[float] = None

    def start(self) -> None:
        """Start the timer. Has no effect once started."""
        if self._started_at is None:
            self._started_at = self._clock()

    def stop(self) -> None:
        """Freeze the elapsed time. Has no effect if not running."""
        if self.is_running:
            self._stopped_at = self._clock()

    @property
    def is_running(self) -> bool:
        """Check if the timer has started and not stopped."""
        return self._started_at is not None and self._stopped_at is None

    def elapsed(self) -> float:
        """Seconds between start and stop, or now if still running."""
        if self._started_at is None:
            return 0.0
        end = self._stopped_at if self._stopped_at is not None else self._clock()
        return end - self._started_at
