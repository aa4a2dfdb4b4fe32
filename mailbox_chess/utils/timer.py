"""Wall-clock timer for reporting search time."""

import time


class Timer:
    """
    Context manager measuring elapsed wall time.

    Usage:
        with Timer() as timer:
            ...
        print(timer.elapsed)
    """

    def __init__(self):
        self.start = None
        self.end = None

    def __enter__(self) -> "Timer":
        self.start = time.perf_counter()
        self.end = None
        return self

    def __exit__(self, exc_type, exc, tb):
        self.end = time.perf_counter()
        return False

    @property
    def elapsed(self) -> float:
        """Seconds since start (frozen once the block exits)."""
        if self.start is None:
            return 0.0
        end = self.end if self.end is not None else time.perf_counter()
        return end - self.start


def format_time(seconds: float) -> str:
    """Format time"""
    if seconds < 1:
        return f"{seconds * 1000:.0f}ms"
    elif seconds < 60:
        return f"{seconds:.1f}s"
    else:
        minutes = int(seconds // 60)
        secs = seconds % 60
        return f"{minutes}m {secs:.0f}s"
