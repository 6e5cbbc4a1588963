"""A first-in first-out queue with a fixed capacity."""

from __future__ import annotations

from collections import deque
from typing import Any

__all__ = ["QueueEmptyError", "BoundedQueue"]


class QueueEmptyError(IndexError):
    """Raised when reading from an empty queue."""

    def __init__(self, message: str = "Queue is empty.") -> None:
        super().__init__(message)


class BoundedQueue:
    """FIFO queue that refuses new items once ``capacity`` are held."""

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("capacity must be non-negative")
        self._capacity = capacity
        self._items: deque[Any] = deque()

    def enqueue(self, item: Any) -> bool:
        """Append ``item``; return False, leaving the queue unchanged, when full."""
        if len(self._items) >= self._capacity:
            return False
        self._items.append(item)
        return True

    def dequeue(self) -> Any:
        """Remove and return the front item."""
        if not self._items:
            raise QueueEmptyError()
        return self._items.popleft()

    def front(self) -> Any:
        """Return the front item without removing it."""
        if not self._items:
            raise QueueEmptyError()
        return self._items[0]

    def is_empty(self) -> bool:
        return not self._items

    def __len__(self) -> int:
        return len(self._items)

    @property
    def capacity(self) -> int:
        return self._capacity