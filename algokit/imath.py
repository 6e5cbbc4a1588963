"""Integer helpers: dot products, base-m digits, modular powers and primality."""

from __future__ import annotations

import math
import random
from collections.abc import Sequence

__all__ = [
    "KLEN",
    "dot_product",
    "m_based",
    "exp_mod",
    "zeros_r",
    "test_prime",
    "miller_rabin_test",
    "is_prime",
]

KLEN = 64
_UINT32 = 0xFFFFFFFF
_UINT64_LIMIT = 1 << 64


def dot_product(k: Sequence[int], a: Sequence[int]) -> int:
    """Return the dot product of two equal-length sequences, wrapped to 32 bits."""
    if len(k) != len(a):
        raise ValueError("sequences must have the same length")
    return sum(x * y for x, y in zip(k, a)) & _UINT32


def m_based(key: int, m: int) -> list[int]:
    """Split ``key`` into base-``m`` digits, least significant first, padded to KLEN."""
    if m < 2:
        raise ValueError("base must be at least 2")
    if not 0 <= key < _UINT64_LIMIT:
        raise ValueError("key must be an unsigned 64-bit integer")
    digits: list[int] = []
    while True:
        key, remainder = divmod(key, m)
        digits.append(remainder)
        if key == 0:
            break
    return digits + [0] * (KLEN - len(digits))


def exp_mod(base: int, exponent: int, modulus: int) -> int:
    """Return ``base ** exponent % modulus`` by square-and-multiply."""
    if base < 0 or exponent < 0:
        raise ValueError("base and exponent must be non-negative")
    if modulus <= 0:
        raise ValueError("modulus must be positive")
    if exponent == 0:
        return 1
    return pow(base, exponent, modulus)


def zeros_r(v: int) -> int:
    """Count the trailing zero bits of a 32-bit value; zero has 32."""
    v &= _UINT32
    if v == 0:
        return 32
    return (v & -v).bit_length() - 1


def test_prime(n: int) -> bool:
    """Primality by trial division."""
    if n < 2:
        return False
    if n == 2:
        return True
    if n % 2 == 0:
        return False
    return all(n % i for i in range(3, math.isqrt(n) + 1, 2))


def miller_rabin_test(n: int, rng: random.Random | None = None) -> bool:
    """Probabilistic Miller-Rabin test with three random witnesses."""
    if n < 2:
        return False
    if n in (2, 3):
        return True
    if n % 2 == 0:
        return False
    rng = rng or random.Random()
    s = zeros_r(n - 1)
    d = (n - 1) >> s
    for _ in range(3):
        a = rng.randrange(n - 4) + 2 if n > 4 else 2
        x = exp_mod(a, d, n)
        if x in (1, n - 1):
            continue
        for _ in range(s - 1):
            x = exp_mod(x, 2, n)
            if x == 1:
                return False
            if x == n - 1:
                break
        else:
            return False
    return True


def is_prime(n: int) -> bool:
    """Miller-Rabin screening confirmed by trial division."""
    return miller_rabin_test(n) and test_prime(n)