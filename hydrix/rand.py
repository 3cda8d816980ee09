"""Linear congruential pseudo-random numbers."""

_MASK64 = (1 << 64) - 1
_HALF64 = 1 << 63


def _int64(value: int) -> int:
    """Wrap an integer to the signed 64-bit range."""
    value &= _MASK64
    return value - (1 << 64) if value >= _HALF64 else value


class RandomGenerator:
    """Generator producing values in ``0..32767`` from a 64-bit state."""

    def __init__(self, seed: int = 0) -> None:
        self._state = 0
        self.set_seed(seed)

    def set_seed(self, seed: int) -> None:
        """Reset the state; the seed is taken as an unsigned 64-bit value."""
        self._state = _int64(seed)

    def next(self) -> int:
        """Advance the state and return the next value."""
        self._state = _int64(self._state * 1103515245 + 12345)
        quotient = abs(self._state) // 65536
        if self._state < 0:
            quotient = -quotient
        return (quotient & _MASK64) % 32768

    def in_range(self, low: int, high: int) -> int:
        """A value offset from ``low`` by less than ``|high - low|``."""
        span = high - low
        if span == 0:
            raise ValueError("range is empty")
        return self.next() % abs(span) + low


_default = RandomGenerator(0)


def random() -> int:
    """Next value of the shared generator."""
    return _default.next()


def set_random_seed(seed: int) -> None:
    """Seed the shared generator."""
    _default.set_seed(seed)


def random_with_range(low: int, high: int) -> int:
    """Ranged value from the shared generator."""
    return _default.in_range(low, high)