"""Arbitrary-precision integers with fixed-width casts."""

from __future__ import annotations

from typing import Union

from zonekit.debug import error

_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1
_UINT_MAX = 2**32 - 1
_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1
_UINT64_MAX = 2**64 - 1

Operand = Union["ZNumber", int]


def _as_int(value: object) -> int | None:
    if isinstance(value, ZNumber):
        return value._n
    if isinstance(value, int):
        return int(value)
    return None


def _tdiv(a: int, b: int) -> int:
    """Integer division truncating toward zero."""
    q = abs(a) // abs(b)
    return q if (a < 0) == (b < 0) else -q


def _trem(a: int, b: int) -> int:
    """Remainder whose sign follows the dividend."""
    return a - b * _tdiv(a, b)


def _to_signed(value: int, bits: int) -> int:
    value &= (1 << bits) - 1
    if value >= 1 << (bits - 1):
        value -= 1 << bits
    return value


class ZNumber:
    """An unbounded integer; division truncates toward zero."""

    __slots__ = ("_n",)

    def __init__(self, value: ZNumber | int | str = 0) -> None:
        if isinstance(value, ZNumber):
            self._n = value._n
        elif isinstance(value, int):
            self._n = int(value)
        elif isinstance(value, str):
            self._n = int(value.strip())
        else:
            raise TypeError(f"cannot build a number from {type(value).__name__}")

    # -- range checks -----------------------------------------------------

    def fits_sint(self) -> bool:
        return _INT_MIN <= self._n <= _INT_MAX

    def fits_uint(self) -> bool:
        return 0 <= self._n <= _UINT_MAX

    def fits_sint64(self) -> bool:
        return _INT64_MIN <= self._n <= _INT64_MAX

    def fits_uint64(self) -> bool:
        return 0 <= self._n <= _UINT64_MAX

    def fits_cast_to_int64(self) -> bool:
        return self.fits_uint64() or self.fits_sint64()

    # -- casts --------------------------------------------------------------

    def cast_to_uint64(self) -> int:
        """Return the value as an unsigned 64-bit integer."""
        if self.fits_uint64():
            return self._n
        if self.fits_sint64():
            return self._n & _UINT64_MAX
        error("z_number ", self._n, " does not fit into an unsigned 64-bit integer")

    def cast_to_sint64(self) -> int:
        """Return the value as a signed 64-bit integer."""
        if self.fits_sint64():
            return self._n
        if self.fits_uint64():
            return _to_signed(self._n, 64)
        error("z_number ", self._n, " does not fit into a signed 64-bit integer")

    def cast_to_sint32(self) -> int:
        """Return the low 32 bits as a signed integer."""
        return _to_signed(self.cast_to_sint64(), 32)

    def cast_to_finite_width(self, finite_width: int) -> ZNumber:
        """Cast to 32 or 64 bits; a width of 0 leaves the value unchanged."""
        if finite_width == 0:
            return self
        if finite_width == 32:
            return ZNumber(self.cast_to_sint32())
        if finite_width == 64:
            return ZNumber(self.cast_to_sint64())
        error("invalid finite width")

    def fill_ones(self) -> ZNumber:
        """Smallest number of the form 2**k - 1 not below this one."""
        if self._n == 0:
            return ZNumber(0)
        result = 1
        while result < self._n:
            result = result * 2 + 1
        return ZNumber(result)

    # -- arithmetic ---------------------------------------------------------

    def __add__(self, other: Operand) -> ZNumber:
        o = _as_int(other)
        if o is None:
            return NotImplemented
        return ZNumber(self._n + o)

    def __radd__(self, other: int) -> ZNumber:
        return self.__add__(other)

    def __sub__(self, other: Operand) -> ZNumber:
        o = _as_int(other)
        if o is None:
            return NotImplemented
        return ZNumber(self._n - o)

    def __rsub__(self, other: int) -> ZNumber:
        o = _as_int(other)
        if o is None:
            return NotImplemented
        return ZNumber(o - self._n)

    def __mul__(self, other: Operand) -> ZNumber:
        o = _as_int(other)
        if o is None:
            return NotImplemented
        return ZNumber(self._n * o)

    def __rmul__(self, other: int) -> ZNumber:
        return self.__mul__(other)

    def __truediv__(self, other: Operand) -> ZNumber:
        o = _as_int(other)
        if o is None:
            return NotImplemented
        if o == 0:
            error("z_number: division by zero [1]")
        return ZNumber(_tdiv(self._n, o))

    def __rtruediv__(self, other: int) -> ZNumber:
        o = _as_int(other)
        if o is None:
            return NotImplemented
        return ZNumber(o) / self

    def __mod__(self, other: Operand) -> ZNumber:
        o = _as_int(other)
        if o is None:
            return NotImplemented
        if o == 0:
            error("z_number: division by zero [2]")
        return ZNumber(_trem(self._n, o))

    def __rmod__(self, other: int) -> ZNumber:
        o = _as_int(other)
        if o is None:
            return NotImplemented
        return ZNumber(o) % self

    def __neg__(self) -> ZNumber:
        return ZNumber(-self._n)

    def __pos__(self) -> ZNumber:
        return self

    # -- bit operations -----------------------------------------------------

    @staticmethod
    def _shift_amount(other: object) -> int | None:
        if isinstance(other, ZNumber):
            if not other.fits_sint():
                error("z_number ", other._n, " does not fit into an int")
            return other._n
        return _as_int(other)

    def __lshift__(self, other: Operand) -> ZNumber:
        amount = self._shift_amount(other)
        if amount is None:
            return NotImplemented
        return ZNumber(self._n << amount)

    def __rshift__(self, other: Operand) -> ZNumber:
        amount = self._shift_amount(other)
        if amount is None:
            return NotImplemented
        return ZNumber(self._n >> amount)

    def __and__(self, other: Operand) -> ZNumber:
        o = _as_int(other)
        if o is None:
            return NotImplemented
        return ZNumber(self._n & o)

    __rand__ = __and__

    def __or__(self, other: Operand) -> ZNumber:
        o = _as_int(other)
        if o is None:
            return NotImplemented
        return ZNumber(self._n | o)

    __ror__ = __or__

    def __xor__(self, other: Operand) -> ZNumber:
        o = _as_int(other)
        if o is None:
            return NotImplemented
        return ZNumber(self._n ^ o)

    __rxor__ = __xor__

    # -- comparisons --------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        o = _as_int(other)
        if o is None:
            return NotImplemented
        return self._n == o

    def __lt__(self, other: Operand) -> bool:
        o = _as_int(other)
        if o is None:
            return NotImplemented
        return self._n < o

    def __le__(self, other: Operand) -> bool:
        o = _as_int(other)
        if o is None:
            return NotImplemented
        return self._n <= o

    def __gt__(self, other: Operand) -> bool:
        o = _as_int(other)
        if o is None:
            return NotImplemented
        return self._n > o

    def __ge__(self, other: Operand) -> bool:
        o = _as_int(other)
        if o is None:
            return NotImplemented
        return self._n >= o

    def __hash__(self) -> int:
        return hash(self._n)

    def __bool__(self) -> bool:
        return self._n != 0

    # -- conversions --------------------------------------------------------

    def __int__(self) -> int:
        return self._n

    def __str__(self) -> str:
        return str(self._n)

    def __repr__(self) -> str:
        return f"ZNumber({self._n})"