"""Fixed-width bit flag values with bitwise operators."""

from __future__ import annotations

from functools import total_ordering
from typing import Union

DEFAULT_WIDTH = 32

FlagsLike = Union["Flags", int]


def _raw(other: FlagsLike) -> int:
    if isinstance(other, Flags):
        return other.value
    if isinstance(other, int):
        return other
    raise TypeError(f"expected Flags or int, got {type(other).__name__}")


@total_ordering
class Flags:
    """An unsigned integer of a fixed bit width, used as a set of flags.

    Every result is truncated to the width, so ``~`` and ``<<`` behave
    as on an unsigned machine integer of that size.
    """

    __slots__ = ("_value", "_width")

    def __init__(self, value: FlagsLike = 0, width: int = DEFAULT_WIDTH) -> None:
        if width <= 0:
            raise ValueError("width must be positive")
        self._width = width
        self._value = _raw(value) & self.mask

    @property
    def value(self) -> int:
        return self._value

    @property
    def width(self) -> int:
        return self._width

    @property
    def mask(self) -> int:
        return (1 << self._width) - 1

    def _make(self, value: int) -> Flags:
        return Flags(value, self._width)

    def has_flag(self, flags: FlagsLike) -> bool:
        """Return True if every bit of ``flags`` is set here."""
        wanted = _raw(flags) & self.mask
        return (self._value & wanted) == wanted

    def __bool__(self) -> bool:
        return self._value != 0

    def __int__(self) -> int:
        return self._value

    def __index__(self) -> int:
        return self._value

    def __hash__(self) -> int:
        return hash(self._value)

    def __repr__(self) -> str:
        return f"Flags(0x{self._value:X}, width={self._width})"

    def __invert__(self) -> Flags:
        return self._make(~self._value)

    def __or__(self, other: FlagsLike) -> Flags:
        return self._make(self._value | _raw(other))

    __ror__ = __or__

    def __and__(self, other: FlagsLike) -> Flags:
        return self._make(self._value & _raw(other))

    __rand__ = __and__

    def __xor__(self, other: FlagsLike) -> Flags:
        return self._make(self._value ^ _raw(other))

    __rxor__ = __xor__

    def __lshift__(self, count: int) -> Flags:
        if count < 0:
            raise ValueError("negative shift count")
        return self._make(self._value << count)

    def __rshift__(self, count: int) -> Flags:
        if count < 0:
            raise ValueError("negative shift count")
        return self._make(self._value >> count)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, (Flags, int)):
            return self._value == _raw(other)
        return NotImplemented

    def __lt__(self, other: FlagsLike) -> bool:
        if isinstance(other, (Flags, int)):
            return self._value < _raw(other)
        return NotImplemented