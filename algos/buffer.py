"""A bounded producer/consumer buffer guarded by a lock."""

from __future__ import annotations

import threading

DEFAULT_CAPACITY = 3


class BufferFull(Exception):
    """Raised when producing into a full buffer."""


class BufferEmpty(Exception):
    """Raised when consuming from an empty buffer."""


class BoundedBuffer:
    """Counts produced items against a fixed number of slots.

    Items are numbered; consuming takes back the most recently produced one.
    """

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 1:
            raise ValueError("capacity must be positive")
        self.capacity = capacity
        self._full = 0
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return self._full

    def produce(self) -> int:
        """Fill one slot and return the number of the item produced."""
        with self._lock:
            if self._full == self.capacity:
                raise BufferFull("buffer is full")
            self._full += 1
            return self._full

    def consume(self) -> int:
        """Empty one slot and return the number of the item consumed."""
        with self._lock:
            if self._full == 0:
                raise BufferEmpty("buffer is empty")
            item = self._full
            self._full -= 1
            return item