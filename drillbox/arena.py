"""A bump allocator handing out views into one fixed buffer."""


class ArenaExhausted(MemoryError):
    """Raised when an allocation does not fit in what is left of the arena."""


class Arena:
    """A fixed-size byte buffer carved into consecutive regions."""

    def __init__(self, capacity):
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self._buffer = bytearray(capacity)
        self._offset = 0

    @property
    def capacity(self):
        """Total size of the arena in bytes."""
        return len(self._buffer)

    @property
    def used(self):
        """Bytes handed out since the last reset."""
        return self._offset

    @property
    def remaining(self):
        """Bytes still available."""
        return len(self._buffer) - self._offset

    def alloc(self, size):
        """Return a writable view of the next size bytes."""
        if size < 0:
            raise ValueError("size must not be negative")
        if self._offset + size > len(self._buffer):
            raise ArenaExhausted(
                f"cannot allocate {size} bytes, {self.remaining} remaining"
            )
        start = self._offset
        self._offset += size
        return memoryview(self._buffer)[start:self._offset]

    def reset(self):
        """Make the whole arena available again; earlier views may be overwritten."""
        self._offset = 0