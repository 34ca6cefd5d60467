"""A simple wall-clock stopwatch."""

import time


class Timer:
    """Measures elapsed time in milliseconds from a start point."""

    def __init__(self):
        self._start_time = time.perf_counter()

    @classmethod
    def start(cls):
        """Create a timer that starts now."""
        return cls()

    def restart(self):
        """Move the start point to now."""
        self._start_time = time.perf_counter()

    def elapsed_milliseconds(self, reset=False):
        """Return milliseconds since the start point, optionally restarting."""
        end_time = time.perf_counter()
        elapsed = (end_time - self._start_time) * 1000.0
        if reset:
            self._start_time = end_time
        return elapsed