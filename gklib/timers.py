"""Wall-clock and CPU time readings, and an accumulating timer."""

import time
from collections.abc import Callable


def wclock_seconds() -> float:
    """Return the wall-clock time in seconds."""
    return time.time()


def cpu_seconds() -> float:
    """Return the user plus system CPU time of this process in seconds."""
    return time.process_time()


class Timer:
    """Accumulates elapsed time over any number of start/stop intervals."""

    def __init__(self, clock: Callable[[], float] = wclock_seconds) -> None:
        self.clock = clock
        self.elapsed = 0.0

    def start(self) -> "Timer":
        """Begin an interval."""
        self.elapsed -= self.clock()
        return self

    def stop(self) -> float:
        """End an interval and return the accumulated time."""
        self.elapsed += self.clock()
        return self.elapsed

    def clear(self) -> None:
        """Reset the accumulated time to zero."""
        self.elapsed = 0.0

    def __enter__(self) -> "Timer":
        return self.start()

    def __exit__(self, exc_type, exc, tb) -> None:
        self.stop()