"""Wall-clock timing of move selection."""

import time
from contextlib import contextmanager


class MoveTimer:
    """Accumulates the time spent choosing moves."""

    def __init__(self):
        self.count = 0
        self.total = 0.0
        self.longest = 0.0

    @contextmanager
    def timing(self):
        start = time.perf_counter()
        try:
            yield
        finally:
            elapsed = time.perf_counter() - start
            self.count += 1
            self.total += elapsed
            self.longest = max(self.longest, elapsed)

    def summary(self):
        if self.count == 0:
            return "No moves timed."
        mean = self.total / self.count
        return (
            f"Timed {self.count} moves: total {self.total:.3f}s, "
            f"mean {mean:.3f}s, longest {self.longest:.3f}s"
        )
