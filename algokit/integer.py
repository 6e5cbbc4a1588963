"""Fixed-width unsigned integers made of 16-bit components."""

from __future__ import annotations

import math

__all__ = ["Integer"]

COMPONENT_BITS = 16
MAX_COMPONENT = (1 << COMPONENT_BITS) - 1
LOG_2_10 = 3.3219280948873623478703194294894


class Integer:
    """An unsigned integer of a fixed number of 16-bit components, least significant first."""

    def __init__(self, components: int) -> None:
        if components < 0:
            raise ValueError("component count must be non-negative")
        self._size = components
        self._value = 0

    @classmethod
    def _of(cls, components: int, value: int) -> Integer:
        result = cls(components)
        result._value = value & ((1 << (COMPONENT_BITS * components)) - 1)
        return result

    @classmethod
    def from_string(cls, s: str) -> Integer:
        """Parse a decimal string into an Integer just wide enough to hold it."""
        if s and not (s.isascii() and s.isdigit()):
            raise ValueError(f"not a decimal number: {s!r}")
        width = math.ceil(LOG_2_10 * len(s) / COMPONENT_BITS)
        return cls._of(width, int(s) if s else 0)

    def to_string(self) -> str:
        """Return the decimal representation."""
        return str(self._value)

    def is_zero(self) -> bool:
        return self._value == 0

    def compare(self, other: Integer) -> int:
        """Return -1, 0 or 1 as this value is below, equal to or above ``other``."""
        return (self._value > other._value) - (self._value < other._value)

    def __add__(self, other: Integer) -> Integer:
        if not isinstance(other, Integer):
            return NotImplemented
        return Integer._of(max(self._size, other._size) + 1, self._value + other._value)

    def __sub__(self, other: Integer) -> Integer:
        if not isinstance(other, Integer):
            return NotImplemented
        # The borrow out of the left operand's width is dropped.
        width = 1 << (COMPONENT_BITS * self._size)
        difference = (self._value - other._value % width) % width
        return Integer._of(max(self._size, other._size), difference)

    def __mul__(self, other: Integer | int) -> Integer:
        if isinstance(other, Integer):
            return Integer._of(max(self._size, other._size) * 2, self._value * other._value)
        if isinstance(other, int):
            _check_component(other)
            return Integer._of(self._size + 1, self._value * other)
        return NotImplemented

    def __floordiv__(self, divisor: int) -> Integer:
        if not isinstance(divisor, int):
            return NotImplemented
        _check_component(divisor)
        if divisor == 0:
            raise ZeroDivisionError("division by zero")
        return Integer._of(self._size, self._value // divisor)

    def __mod__(self, divisor: Integer | int) -> Integer | int:
        if isinstance(divisor, Integer):
            if divisor.is_zero():
                raise ZeroDivisionError("modulo by zero")
            return Integer._of(divisor._size, self._value % divisor._value)
        if isinstance(divisor, int):
            _check_component(divisor)
            if divisor == 0:
                raise ZeroDivisionError("modulo by zero")
            return self._value % divisor
        return NotImplemented

    def __getitem__(self, index: int) -> int:
        if not 0 <= index < self._size:
            raise IndexError("component index out of range")
        return (self._value >> (COMPONENT_BITS * index)) & MAX_COMPONENT

    def __setitem__(self, index: int, component: int) -> None:
        if not 0 <= index < self._size:
            raise IndexError("component index out of range")
        _check_component(component)
        shift = COMPONENT_BITS * index
        self._value = (self._value & ~(MAX_COMPONENT << shift)) | (component << shift)

    def __len__(self) -> int:
        return self._size

    def __int__(self) -> int:
        return self._value

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Integer):
            return self._value == other._value
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Integer({self.to_string()}, components={self._size})"


def _check_component(value: int) -> None:
    if not 0 <= value <= MAX_COMPONENT:
        raise ValueError("component must fit in 16 bits")