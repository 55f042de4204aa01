"""Signed 64-bit integers that raise on overflow."""

from __future__ import annotations

from zonekit.debug import error
from zonekit.numbers import ZNumber

_MAX = 2**63 - 1
_MIN = -(2**63)


def _as_int(value: object) -> int | None:
    if isinstance(value, SafeInt64):
        return value._n
    if isinstance(value, int):
        return SafeInt64(value)._n
    return None


def _checked(value: int, operation: str) -> SafeInt64:
    if not _MIN <= value <= _MAX:
        error("Integer overflow during ", operation)
    return SafeInt64(value)


class SafeInt64:
    """A signed 64-bit integer whose arithmetic raises CrabError on overflow."""

    __slots__ = ("_n",)

    def __init__(self, value: SafeInt64 | ZNumber | int = 0) -> None:
        if isinstance(value, SafeInt64):
            n = value._n
        elif isinstance(value, ZNumber):
            if not value.fits_sint64():
                error("z_number ", value, " does not fit into a signed 64-bit integer")
            n = int(value)
        elif isinstance(value, int):
            n = int(value)
            if not _MIN <= n <= _MAX:
                error("value ", n, " does not fit into a signed 64-bit integer")
        else:
            raise TypeError(f"cannot build a 64-bit integer from {type(value).__name__}")
        self._n = n

    def __add__(self, other: SafeInt64 | int) -> SafeInt64:
        o = _as_int(other)
        if o is None:
            return NotImplemented
        return _checked(self._n + o, "addition")

    def __radd__(self, other: int) -> SafeInt64:
        return self.__add__(other)

    def __sub__(self, other: SafeInt64 | int) -> SafeInt64:
        o = _as_int(other)
        if o is None:
            return NotImplemented
        return _checked(self._n - o, "subtraction")

    def __rsub__(self, other: int) -> SafeInt64:
        o = _as_int(other)
        if o is None:
            return NotImplemented
        return _checked(o - self._n, "subtraction")

    def __mul__(self, other: SafeInt64 | int) -> SafeInt64:
        o = _as_int(other)
        if o is None:
            return NotImplemented
        return _checked(self._n * o, "multiplication")

    def __rmul__(self, other: int) -> SafeInt64:
        return self.__mul__(other)

    def __truediv__(self, other: SafeInt64 | int) -> SafeInt64:
        o = _as_int(other)
        if o is None:
            return NotImplemented
        if o == 0:
            error("Integer division by zero")
        q = abs(self._n) // abs(o)
        if (self._n < 0) != (o < 0):
            q = -q
        return _checked(q, "division")

    def __rtruediv__(self, other: int) -> SafeInt64:
        o = _as_int(other)
        if o is None:
            return NotImplemented
        return SafeInt64(o) / self

    def __neg__(self) -> SafeInt64:
        return SafeInt64(0) - self

    def __eq__(self, other: object) -> bool:
        if isinstance(other, SafeInt64):
            return self._n == other._n
        if isinstance(other, int):
            return self._n == other
        return NotImplemented

    def __lt__(self, other: SafeInt64 | int) -> bool:
        o = other._n if isinstance(other, SafeInt64) else other
        if not isinstance(o, int):
            return NotImplemented
        return self._n < o

    def __le__(self, other: SafeInt64 | int) -> bool:
        o = other._n if isinstance(other, SafeInt64) else other
        if not isinstance(o, int):
            return NotImplemented
        return self._n <= o

    def __gt__(self, other: SafeInt64 | int) -> bool:
        o = other._n if isinstance(other, SafeInt64) else other
        if not isinstance(o, int):
            return NotImplemented
        return self._n > o

    def __ge__(self, other: SafeInt64 | int) -> bool:
        o = other._n if isinstance(other, SafeInt64) else other
        if not isinstance(o, int):
            return NotImplemented
        return self._n >= o

    def __hash__(self) -> int:
        return hash(self._n)

    def __int__(self) -> int:
        return self._n

    def __str__(self) -> str:
        return str(self._n)

    def __repr__(self) -> str:
        return f"SafeInt64({self._n})"