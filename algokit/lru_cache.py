"""A least-recently-used cache of bounded size."""

from __future__ import annotations

from collections import OrderedDict
from collections.abc import Hashable
from typing import Any

__all__ = ["LRUCache"]


class LRUCache:
    """Mapping that keeps at most ``capacity`` entries and drops the least recently used.

    Both reading and writing a key make it the most recently used one.
    """

    def __init__(self, capacity: int = 10) -> None:
        if capacity < 0:
            raise ValueError("capacity must be non-negative")
        self._capacity = capacity
        # Most recently used entry first.
        self._data: OrderedDict[Hashable, Any] = OrderedDict()

    @property
    def capacity(self) -> int:
        return self._capacity

    def get(self, key: Hashable) -> Any:
        """Return the value for ``key`` and mark it as most recently used."""
        try:
            value = self._data[key]
        except KeyError:
            raise KeyError(key) from None
        self._data.move_to_end(key, last=False)
        return value

    def put(self, key: Hashable, value: Any) -> None:
        """Add or update ``key``, mark it most recently used and evict if over capacity."""
        self._data[key] = value
        self._data.move_to_end(key, last=False)
        if len(self._data) > self._capacity:
            self._data.popitem(last=True)

    def items(self) -> list[tuple[Hashable, Any]]:
        """Return the entries from most to least recently used."""
        return list(self._data.items())

    def __len__(self) -> int:
        return len(self._data)

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def __repr__(self) -> str:
        return f"LRUCache(capacity={self._capacity}, items={self.items()!r})"