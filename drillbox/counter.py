"""A thread-safe counter and a helper that hammers it from several threads."""

import threading


class AtomicCounter:
    """An integer counter whose updates are safe across threads."""

    def __init__(self, start=0):
        self._value = start
        self._lock = threading.Lock()

    def increment(self, amount=1):
        """Add amount and return the new value."""
        with self._lock:
            self._value += amount
            return self._value

    def value(self):
        """Return the current value."""
        with self._lock:
            return self._value


def run_increments(workers=2, iterations=100_000):
    """Increment a fresh counter from several threads and return the final count."""
    if workers < 0 or iterations < 0:
        raise ValueError("workers and iterations must not be negative")
    counter = AtomicCounter()

    def task():
        for _ in range(iterations):
            counter.increment()

    threads = [threading.Thread(target=task) for _ in range(workers)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    return counter.value()