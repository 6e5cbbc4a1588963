"""Base64 encoding and a lenient decoder."""

from __future__ import annotations

import base64

__all__ = ["ALPHABET", "encode_base64", "decode_base64", "index_of_code"]

ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789+/"


def encode_base64(data: bytes) -> str:
    """Encode bytes as padded base64 text."""
    return base64.b64encode(bytes(data)).decode("ascii")


def index_of_code(c: str) -> int:
    """Return the alphabet position of ``c``; characters outside it count as 0."""
    if len(c) != 1:
        raise ValueError("expected a single character")
    position = ALPHABET.find(c)
    return max(position, 0)


def decode_base64(text: str) -> bytes:
    """Decode base64 text leniently.

    Unknown characters (including ``=``) count as zero, a trailing incomplete
    group is ignored, and each decoded group stops at its first zero byte.
    """
    out = bytearray()
    codes = iter(index_of_code(c) for c in text)
    for a, b, c, d in zip(codes, codes, codes, codes):
        group = ((a << 18) | (b << 12) | (c << 6) | d).to_bytes(3, "big")
        out += group.split(b"\x00", 1)[0]
    return bytes(out)