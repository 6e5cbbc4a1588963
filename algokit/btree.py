"""A disk-resident B-tree of 32-bit integer keys stored in 4 KiB blocks."""

from __future__ import annotations

import bisect
import os
import struct
from dataclasses import dataclass, field
from typing import BinaryIO

__all__ = ["BLOCK_SIZE", "MIN_DEGREE", "SearchResult", "BTree"]

BLOCK_SIZE = 4096
MIN_DEGREE = 255
MAX_KEYS = 2 * MIN_DEGREE - 1

LEAF = 0x0001
ONDISK = 0x0002
MARKFREE = 0x0004

_INT32_MIN = -(1 << 31)
_INT32_MAX = (1 << 31) - 1
_PADDING = b"\xcc" * 12
# key count, flags, block offset, padding, keys, child block offsets
_LAYOUT = struct.Struct(f"<HHI12s{MAX_KEYS}i{MAX_KEYS + 1}i")


@dataclass(frozen=True)
class SearchResult:
    """Where a key was found: the block offset of its node and its index there."""

    offset: int
    index: int


@dataclass(eq=False)
class _Node:
    flag: int = 0
    offset: int = 0
    keys: list[int] = field(default_factory=list)
    children: list[int] = field(default_factory=list)

    @property
    def leaf(self) -> bool:
        return bool(self.flag & LEAF)

    def pack(self) -> bytes:
        keys = self.keys + [0] * (MAX_KEYS - len(self.keys))
        children = self.children + [0] * (MAX_KEYS + 1 - len(self.children))
        return _LAYOUT.pack(len(self.keys), self.flag, self.offset, _PADDING, *keys, *children)

    @classmethod
    def unpack(cls, block: bytes) -> _Node:
        n, flag, offset, _pad, *rest = _LAYOUT.unpack(block)
        keys = list(rest[:n])
        children = [] if flag & LEAF else list(rest[MAX_KEYS:MAX_KEYS + n + 1])
        return cls(flag=flag, offset=offset, keys=keys, children=children)


def _check_key(key: int) -> None:
    if not isinstance(key, int) or isinstance(key, bool):
        raise TypeError("keys must be integers")
    if not _INT32_MIN <= key <= _INT32_MAX:
        raise ValueError("key must fit in a signed 32-bit integer")


class BTree:
    """B-tree of minimum degree 255 kept in a file; the root always lives at offset 0.

    Freed blocks are marked but never reused, so the file only grows.
    """

    def __init__(self, path: str | os.PathLike[str]) -> None:
        fd = os.open(path, os.O_RDWR | os.O_CREAT, 0o640)
        self._fh: BinaryIO | None = os.fdopen(fd, "r+b")
        self._fh.seek(0)
        if len(self._fh.read(BLOCK_SIZE)) != BLOCK_SIZE:
            self._fh.truncate(0)
            self._write(_Node(flag=LEAF))

    @property
    def _file(self) -> BinaryIO:
        if self._fh is None:
            raise ValueError("B-tree file is closed")
        return self._fh

    def search(self, key: int) -> SearchResult | None:
        """Locate ``key``; return None when it is not in the tree."""
        _check_key(key)
        node = self._read(0)
        while True:
            i = bisect.bisect_left(node.keys, key)
            if i < len(node.keys) and node.keys[i] == key:
                return SearchResult(node.offset, i)
            if node.leaf:
                return None
            node = self._read_child(node, i)

    def insert(self, key: int) -> None:
        """Insert ``key``; duplicates are kept."""
        _check_key(key)
        root = self._read(0)
        if len(root.keys) == MAX_KEYS:
            # Move the old root to the end of the file and grow a new root at 0.
            root.flag &= ~ONDISK
            self._write(root)
            new_root = _Node(flag=ONDISK, offset=0, children=[root.offset])
            self._split_child(new_root, 0)
            self._insert_nonfull(new_root, key)
        else:
            self._insert_nonfull(root, key)

    def delete(self, key: int) -> None:
        """Remove one occurrence of ``key``; absent keys are ignored."""
        _check_key(key)
        self._delete(self._read(0), key)

    def close(self) -> None:
        if self._fh is not None:
            self._fh.flush()
            self._fh.close()
            self._fh = None

    def __enter__(self) -> BTree:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()

    # -- insertion ---------------------------------------------------------

    def _insert_nonfull(self, node: _Node, key: int) -> None:
        while True:
            if node.leaf:
                bisect.insort_right(node.keys, key)
                self._write(node)
                return
            i = bisect.bisect_right(node.keys, key)
            child = self._read_child(node, i)
            if len(child.keys) == MAX_KEYS:
                self._split_child(node, i)
                if key > node.keys[i]:
                    i += 1
                child = self._read_child(node, i)
            node = child

    def _split_child(self, parent: _Node, i: int) -> None:
        full = self._read_child(parent, i)
        sibling = _Node(flag=full.flag & LEAF)
        sibling.keys = full.keys[MIN_DEGREE:]
        if not full.leaf:
            sibling.children = full.children[MIN_DEGREE:]
            full.children = full.children[:MIN_DEGREE]
        median = full.keys[MIN_DEGREE - 1]
        full.keys = full.keys[:MIN_DEGREE - 1]
        self._write(full)
        self._write(sibling)
        parent.children.insert(i + 1, sibling.offset)
        parent.keys.insert(i, median)
        self._write(parent)

    # -- deletion ----------------------------------------------------------

    def _delete(self, node: _Node, key: int) -> None:
        if not node.keys:
            return
        i = bisect.bisect_right(node.keys, key) - 1
        if i >= 0 and node.keys[i] == key:
            if node.leaf:
                del node.keys[i]
                self._write(node)
            else:
                self._delete_internal(node, i, key)
        elif not node.leaf:
            self._delete_from_child(node, i + 1, key)

    def _delete_internal(self, node: _Node, i: int, key: int) -> None:
        before = self._read_child(node, i)
        if len(before.keys) >= MIN_DEGREE:
            replacement = self._max_key(before)
            node.keys[i] = replacement
            self._write(node)
            self._delete(before, replacement)
            return

        after = self._read_child(node, i + 1)
        if len(after.keys) >= MIN_DEGREE:
            replacement = self._min_key(after)
            node.keys[i] = replacement
            self._write(node)
            self._delete(after, replacement)
            return

        # Both neighbours are minimal: merge key and right child into the left one.
        before.keys += [key] + after.keys
        before.children += after.children
        self._free(after)
        del node.keys[i]
        del node.children[i + 1]
        self._write(node)
        self._adopt_root(node, before)
        self._write(before)
        self._delete(before, key)

    def _delete_from_child(self, node: _Node, i: int, key: int) -> None:
        child = self._read_child(node, i)
        if len(child.keys) >= MIN_DEGREE:
            self._delete(child, key)
            return

        left = self._read_child(node, i - 1) if i > 0 else None
        if left is not None and len(left.keys) >= MIN_DEGREE:
            child.keys.insert(0, node.keys[i - 1])
            if not child.leaf:
                child.children.insert(0, left.children.pop())
            node.keys[i - 1] = left.keys.pop()
            self._write(child)
            self._write(node)
            self._write(left)
            self._delete(child, key)
            return

        right = self._read_child(node, i + 1) if i < len(node.keys) else None
        if right is not None and len(right.keys) >= MIN_DEGREE:
            child.keys.append(node.keys[i])
            if not child.leaf:
                child.children.append(right.children.pop(0))
            node.keys[i] = right.keys.pop(0)
            self._write(child)
            self._write(node)
            self._write(right)
            self._delete(child, key)
            return

        if left is not None:
            left.keys += [node.keys[i - 1]] + child.keys
            left.children += child.children
            del node.keys[i - 1]
            del node.children[i]
            self._free(child)
            self._write(node)
            self._adopt_root(node, left)
            self._write(left)
            self._delete(left, key)
        elif right is not None:
            child.keys += [node.keys[i]] + right.keys
            child.children += right.children
            del node.keys[i]
            del node.children[i + 1]
            self._free(right)
            self._write(node)
            self._adopt_root(node, child)
            self._write(child)
            self._delete(child, key)

    def _adopt_root(self, parent: _Node, merged: _Node) -> None:
        """Move ``merged`` to offset 0 when it replaces an emptied root."""
        if parent.keys or parent.offset != 0:
            return
        merged.flag |= MARKFREE
        self._write(merged)
        merged.flag &= ~MARKFREE
        merged.offset = 0

    def _free(self, node: _Node) -> None:
        node.flag |= MARKFREE
        node.keys = []
        node.children = []
        self._write(node)

    def _max_key(self, node: _Node) -> int:
        while not node.leaf:
            node = self._read_child(node, len(node.keys))
        return node.keys[-1]

    def _min_key(self, node: _Node) -> int:
        while not node.leaf:
            node = self._read_child(node, 0)
        return node.keys[0]

    # -- block I/O ---------------------------------------------------------

    def _read(self, offset: int) -> _Node:
        fh = self._file
        fh.seek(offset)
        block = fh.read(BLOCK_SIZE)
        if len(block) != BLOCK_SIZE:
            raise ValueError(f"truncated block at offset {offset}")
        return _Node.unpack(block)

    def _read_child(self, node: _Node, i: int) -> _Node:
        return self._read(node.children[i])

    def _write(self, node: _Node) -> None:
        fh = self._file
        if node.flag & ONDISK:
            fh.seek(node.offset)
        else:
            fh.seek(0, os.SEEK_END)
            node.offset = fh.tell()
        node.flag |= ONDISK
        fh.write(node.pack())