"""String algorithms: longest palindromic substring and suffix arrays."""

from __future__ import annotations

from collections.abc import Callable, Hashable, Sequence

__all__ = ["longest_palindrome", "SuffixArray"]


def longest_palindrome(s: str) -> str:
    """Return the longest palindromic substring of ``s``; the earliest one on ties."""
    best_start, best_len = 0, 0
    n = len(s)
    for center in range(n):
        for lo, hi in ((center, center), (center, center + 1)):
            while lo >= 0 and hi < n and s[lo] == s[hi]:
                lo -= 1
                hi += 1
            length = hi - lo - 1
            if length > best_len:
                best_start, best_len = lo + 1, length
    return s[best_start:best_start + best_len]


def _rank(order: Sequence[int], key: Callable[[int], Hashable], n: int) -> list[int]:
    ranks = [0] * n
    seq = 0
    last: Hashable = None
    for position, index in enumerate(order):
        current = key(index)
        if position and current != last:
            seq += 1
        ranks[index] = seq
        last = current
    return ranks


class SuffixArray:
    """Sorted suffixes of a string built by prefix doubling, with fast LCP queries."""

    def __init__(self, s: str) -> None:
        self._text = s
        n = len(s)
        self._levels: list[list[int]] = []
        order = list(range(n))
        if n:
            order.sort(key=s.__getitem__)
            ranks = _rank(order, s.__getitem__, n)
            self._levels.append(ranks)
            half = 1
            while half < n:
                def pair(i: int, prev: list[int] = ranks, half: int = half) -> tuple[int, int]:
                    return prev[i], prev[i + half] if i + half < n else -1

                order.sort(key=pair)
                ranks = _rank(order, pair, n)
                self._levels.append(ranks)
                half *= 2
        self._suffixes = order

    def __getitem__(self, i: int) -> int:
        """Start position of the ``i``-th smallest suffix."""
        return self._suffixes[i]

    def __len__(self) -> int:
        return len(self._suffixes)

    def lcp_length(self, x: int, y: int) -> int:
        """Length of the longest common prefix of the suffixes starting at ``x`` and ``y``."""
        n = len(self._text)
        if not (0 <= x < n and 0 <= y < n):
            raise IndexError("suffix position out of range")
        if x == y:
            return n - x
        length = 0
        for k in reversed(range(len(self._levels))):
            if x >= n or y >= n:
                break
            if self._levels[k][x] == self._levels[k][y]:
                step = 1 << k
                x += step
                y += step
                length += step
        return length