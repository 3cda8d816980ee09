"""Basic integer arithmetic on 32-bit signed integers."""

_INT32_SPAN = 1 << 32
_INT32_HALF = 1 << 31


def _int32(value: int) -> int:
    """Wrap an integer to the signed 32-bit range."""
    return (value + _INT32_HALF) % _INT32_SPAN - _INT32_HALF


def absolute(x: int) -> int:
    """Absolute value (the most negative value maps to itself)."""
    return _int32(-x) if x < 0 else x


def minimum(a: int, b: int) -> int:
    """The smaller of two numbers."""
    return a if a < b else b


def maximum(a: int, b: int) -> int:
    """The larger of two numbers."""
    return a if a > b else b


def clamp(x: int, low: int, high: int) -> int:
    """Clamp ``x`` between ``low`` and ``high``."""
    if x < low:
        return low
    if x > high:
        return high
    return x


def sign(x: int) -> int:
    """-1 if negative, 1 if positive, 0 if zero."""
    if x < 0:
        return -1
    if x > 0:
        return 1
    return 0


def power(x: int, y: int) -> int:
    """``x`` raised to ``y`` by repeated multiplication; 1 when ``y`` <= 0."""
    result = 1
    for _ in range(max(0, y)):
        result = _int32(result * x)
    return result


def square_root(x: int) -> int:
    """Integer square root, built bit by bit from bit 15 down."""
    x = _int32(x)
    result = 0
    for bit in reversed(range(16)):
        candidate = result | (1 << bit)
        if _int32(candidate * candidate) <= x:
            result = candidate
    return result


def linear_interpolation(a: int, b: int, t: int) -> int:
    """``a + (b - a) * t``."""
    return _int32(a + _int32(_int32(b - a) * t))