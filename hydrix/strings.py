"""Text helpers: joining, comparing and formatting numbers."""

from __future__ import annotations

import math

_DECIMALS = 6
_UNSIGNED_WIDTHS = (8, 16, 32, 64)
_INT32_SPAN = 1 << 32
_INT32_HALF = 1 << 31
_BOOL_WORDS = ("false", "true")


def _int32(value: int) -> int:
    return (value + _INT32_HALF) % _INT32_SPAN - _INT32_HALF


def _check_width(bits: int) -> int:
    if bits not in _UNSIGNED_WIDTHS:
        raise ValueError(f"unsupported width {bits}; use one of {_UNSIGNED_WIDTHS}")
    return bits


def concatenate(first: str, second: str) -> str:
    """A new string holding ``first`` followed by ``second``."""
    return first + second


def compare(first: str, second: str) -> bool:
    """True when both strings hold the same characters."""
    return first == second


def format_int(value: int) -> str:
    """Decimal text of ``value`` taken as a signed 32-bit integer."""
    return str(_int32(value))


def format_unsigned(value: int, bits: int = 64) -> str:
    """Decimal text of ``value`` wrapped to an unsigned ``bits``-wide integer."""
    _check_width(bits)
    return str(value & ((1 << bits) - 1))


def format_float(value: float) -> str:
    """Integer part, a point and exactly six truncated fractional digits."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        raise OverflowError("cannot format an infinite value")
    whole = int(value)
    fraction = abs(value - whole)
    digits = []
    for _ in range(_DECIMALS):
        fraction *= 10
        digit = int(fraction)
        digits.append(str(digit))
        fraction -= digit
    prefix = "-" if value < 0 and whole == 0 else ""
    return f"{prefix}{whole}.{''.join(digits)}"


def format_bool(value: bool) -> str:
    """``'true'`` or ``'false'`` according to the truth of ``value``."""
    return _BOOL_WORDS[int(bool(value))]


def format_char(value: str) -> str:
    """The single character as a string."""
    if len(value) != 1:
        raise ValueError("expected exactly one character")
    return value


def format_hex(value: int, bits: int = 64) -> str:
    """Upper-case hexadecimal digits of ``value`` wrapped to ``bits``, no prefix."""
    _check_width(bits)
    return format(value & ((1 << bits) - 1), "X")


def digit_char(value: int) -> str:
    """The digit for 0-9; any other value gives ``'0'``."""
    return str(value) if 0 <= value <= 9 else "0"


def to_string(value: bool | int | float | str) -> str:
    """Text for a boolean, integer, float or single character."""
    if isinstance(value, bool):
        return format_bool(value)
    if isinstance(value, int):
        if -_INT32_HALF <= value < _INT32_HALF:
            return format_int(value)
        if 0 <= value < 1 << 64:
            return format_unsigned(value, 64)
        raise OverflowError(f"{value} does not fit in 64 bits")
    if isinstance(value, float):
        if math.isnan(value):
            return "NaN"
        if value == 0.0:
            return "0.0"
        return format_float(value)
    if isinstance(value, str):
        return format_char(value)
    raise TypeError(f"cannot format {type(value).__name__}")