"""Wall-clock timer measuring time between calls."""

import time


class Timer:
    """Reports seconds passed since creation or the previous call."""

    def __init__(self) -> None:
        self._previous = time.perf_counter()

    def elapsed(self) -> float:
        current = time.perf_counter()
        difference = current - self._previous
        self._previous = current
        return difference