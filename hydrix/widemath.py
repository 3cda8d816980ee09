"""Wide unsigned integers made of independent 64-bit lanes.

Each value is split into a low and a high half and the operations act on
the halves separately. Only addition and subtraction pass a carry or borrow,
and only from the low 64-bit lane into the high one. A 256-bit value is a
pair of 128-bit values handled the same way, with no carry between them.
"""

from __future__ import annotations

from dataclasses import dataclass

from hydrix.intmath import square_root as _int_square_root

_BITS = 64
_MASK64 = (1 << _BITS) - 1


def _lane(value: int) -> int:
    return value & _MASK64


def _shift_left(value: int, amount: int) -> int:
    return 0 if amount >= _BITS else _lane(value << amount)


def _shift_right(value: int, amount: int) -> int:
    return 0 if amount >= _BITS else value >> amount


def _check_amount(amount: int) -> int:
    if amount < 0:
        raise ValueError("shift amount must not be negative")
    return amount


@dataclass(frozen=True)
class UInt128:
    """Two unsigned 64-bit lanes, ``low`` and ``high``."""

    low: int = 0
    high: int = 0

    def __post_init__(self) -> None:
        for name in ("low", "high"):
            value = getattr(self, name)
            if not 0 <= value <= _MASK64:
                raise ValueError(f"{name} lane {value} is outside 0..2**64-1")

    def __int__(self) -> int:
        return (self.high << _BITS) | self.low

    def __add__(self, other: UInt128) -> UInt128:
        if not isinstance(other, UInt128):
            return NotImplemented
        low = _lane(self.low + other.low)
        high = _lane(self.high + other.high)
        if low < self.low:
            high = _lane(high + 1)
        return UInt128(low, high)

    def __sub__(self, other: UInt128) -> UInt128:
        if not isinstance(other, UInt128):
            return NotImplemented
        low = _lane(self.low - other.low)
        high = _lane(self.high - other.high)
        if low > self.low:
            high = _lane(high - 1)
        return UInt128(low, high)

    def __mul__(self, other: UInt128) -> UInt128:
        """Multiply lane by lane, each wrapping at 64 bits."""
        if not isinstance(other, UInt128):
            return NotImplemented
        return UInt128(_lane(self.low * other.low), _lane(self.high * other.high))

    def __floordiv__(self, other: UInt128) -> UInt128:
        """Divide lane by lane; a zero lane in ``other`` raises."""
        if not isinstance(other, UInt128):
            return NotImplemented
        if other.low == 0 or other.high == 0:
            raise ZeroDivisionError("division by a zero lane")
        return UInt128(self.low // other.low, self.high // other.high)

    def __mod__(self, other: UInt128) -> UInt128:
        """Remainder lane by lane; a zero lane in ``other`` raises."""
        if not isinstance(other, UInt128):
            return NotImplemented
        if other.low == 0 or other.high == 0:
            raise ZeroDivisionError("modulus by a zero lane")
        return UInt128(self.low % other.low, self.high % other.high)

    def __and__(self, other: UInt128) -> UInt128:
        if not isinstance(other, UInt128):
            return NotImplemented
        return UInt128(self.low & other.low, self.high & other.high)

    def __or__(self, other: UInt128) -> UInt128:
        if not isinstance(other, UInt128):
            return NotImplemented
        return UInt128(self.low | other.low, self.high | other.high)

    def __xor__(self, other: UInt128) -> UInt128:
        if not isinstance(other, UInt128):
            return NotImplemented
        return UInt128(self.low ^ other.low, self.high ^ other.high)

    def __invert__(self) -> UInt128:
        return UInt128(_lane(~self.low), _lane(~self.high))

    def __lshift__(self, amount: int) -> UInt128:
        """Shift each lane left; bits leaving a lane are lost."""
        amount = _check_amount(amount)
        return UInt128(_shift_left(self.low, amount), _shift_left(self.high, amount))

    def __rshift__(self, amount: int) -> UInt128:
        """Shift each lane right; bits leaving a lane are lost."""
        amount = _check_amount(amount)
        return UInt128(_shift_right(self.low, amount), _shift_right(self.high, amount))

    def __neg__(self) -> UInt128:
        """Two's complement negation of each lane."""
        return UInt128(_lane(-self.low), _lane(-self.high))

    def __abs__(self) -> UInt128:
        """Unsigned values are their own absolute value."""
        return UInt128(self.low, self.high)

    def power(self, exponent: int) -> UInt128:
        """Combine each lane with ``exponent`` by exclusive or."""
        exponent = _lane(exponent)
        return UInt128(self.low ^ exponent, self.high ^ exponent)

    def square_root(self) -> UInt128:
        """Integer square root of each lane taken as a signed 32-bit value."""
        return UInt128(
            _lane(_int_square_root(self.low)), _lane(_int_square_root(self.high))
        )


@dataclass(frozen=True)
class UInt256:
    """Two :class:`UInt128` halves, ``low`` and ``high``."""

    low: UInt128 = UInt128()
    high: UInt128 = UInt128()

    def __post_init__(self) -> None:
        if not isinstance(self.low, UInt128) or not isinstance(self.high, UInt128):
            raise TypeError("both halves must be UInt128 values")

    def __int__(self) -> int:
        return (int(self.high) << (2 * _BITS)) | int(self.low)

    def _pair(self, other: object, op) -> UInt256:
        if not isinstance(other, UInt256):
            return NotImplemented
        return UInt256(op(self.low, other.low), op(self.high, other.high))

    def __add__(self, other: UInt256) -> UInt256:
        return self._pair(other, UInt128.__add__)

    def __sub__(self, other: UInt256) -> UInt256:
        return self._pair(other, UInt128.__sub__)

    def __mul__(self, other: UInt256) -> UInt256:
        return self._pair(other, UInt128.__mul__)

    def __floordiv__(self, other: UInt256) -> UInt256:
        return self._pair(other, UInt128.__floordiv__)

    def __mod__(self, other: UInt256) -> UInt256:
        return self._pair(other, UInt128.__mod__)

    def __and__(self, other: UInt256) -> UInt256:
        return self._pair(other, UInt128.__and__)

    def __or__(self, other: UInt256) -> UInt256:
        return self._pair(other, UInt128.__or__)

    def __xor__(self, other: UInt256) -> UInt256:
        return self._pair(other, UInt128.__xor__)

    def __invert__(self) -> UInt256:
        return UInt256(~self.low, ~self.high)

    def __lshift__(self, amount: int) -> UInt256:
        return UInt256(self.low << amount, self.high << amount)

    def __rshift__(self, amount: int) -> UInt256:
        return UInt256(self.low >> amount, self.high >> amount)

    def __neg__(self) -> UInt256:
        return UInt256(-self.low, -self.high)

    def __abs__(self) -> UInt256:
        return UInt256(abs(self.low), abs(self.high))

    def power(self, exponent: int) -> UInt256:
        """Apply :meth:`UInt128.power` to both halves."""
        return UInt256(self.low.power(exponent), self.high.power(exponent))

    def square_root(self) -> UInt256:
        """Apply :meth:`UInt128.square_root` to both halves."""
        return UInt256(self.low.square_root(), self.high.square_root())