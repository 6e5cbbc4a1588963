"""Byte-order helpers and GB18030 character reading."""

from __future__ import annotations

import sys

__all__ = [
    "is_big_endian",
    "byte_swap2",
    "byte_swap4",
    "byte_swap8",
    "gb18030_read",
    "gb18030_bytes",
]


def is_big_endian() -> bool:
    """True when the host stores the most significant byte first."""
    return sys.byteorder == "big"


def _swap(value: int, width: int) -> int:
    if not 0 <= value < 1 << (8 * width):
        raise ValueError(f"value does not fit in {width} bytes")
    return int.from_bytes(value.to_bytes(width, "little"), "big")


def byte_swap2(value: int) -> int:
    """Reverse the bytes of a 16-bit value."""
    return _swap(value, 2)


def byte_swap4(value: int) -> int:
    """Reverse the bytes of a 32-bit value."""
    return _swap(value, 4)


def byte_swap8(value: int) -> int:
    """Reverse the bytes of a 64-bit value."""
    return _swap(value, 8)


def gb18030_read(data: bytes, start: int = 0) -> tuple[int, int]:
    """Read one GB18030 character at ``start``; return its code word and byte length."""
    if start >= len(data):
        raise ValueError("no character at the given position")
    lead = data[start]
    if lead <= 0x7F:
        return lead, 1
    if not 0x81 <= lead <= 0xFE:
        raise ValueError(f"invalid GB18030 lead byte 0x{lead:02X}")
    if start + 1 >= len(data):
        raise ValueError("truncated GB18030 character")
    length = 2 if 0x40 <= data[start + 1] <= 0xFE else 4
    chunk = data[start:start + length]
    if len(chunk) < length:
        raise ValueError("truncated GB18030 character")
    return int.from_bytes(chunk, "big"), length


def gb18030_bytes(word: int) -> bytes:
    """Return the bytes of a GB18030 code word as read by :func:`gb18030_read`."""
    if not 0 <= word <= 0xFFFFFFFF:
        raise ValueError("code word must fit in 32 bits")
    raw = word.to_bytes(4, "big")
    if raw[0]:
        return raw
    if raw[2]:
        return raw[2:]
    return raw[3:]