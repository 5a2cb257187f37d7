"""Integer helpers with 32-bit signed wrap-around semantics."""

_INT_BITS = 32
_INT_RANGE = 1 << _INT_BITS
_INT_HALF = 1 << (_INT_BITS - 1)


def _wrap(value: int) -> int:
    """Reduce an integer to the signed 32-bit range, wrapping on overflow."""
    return ((value + _INT_HALF) % _INT_RANGE) - _INT_HALF


def absolute(x: int) -> int:
    """Absolute value; the most negative value maps to itself."""
    x = _wrap(x)
    return _wrap(-x) if x < 0 else x


def minimum(a: int, b: int) -> int:
    """Smaller of two values."""
    return a if a < b else b


def maximum(a: int, b: int) -> int:
    """Larger of two values."""
    return a if a > b else b


def clamp(x: int, lower: int, upper: int) -> int:
    """Limit ``x`` to the range ``lower``..``upper``."""
    if x < lower:
        return lower
    if x > upper:
        return upper
    return x


def sign(x: int) -> int:
    """-1, 0 or 1 according to the sign of ``x``."""
    if x < 0:
        return -1
    if x > 0:
        return 1
    return 0


def power(x: int, y: int) -> int:
    """``x`` raised to ``y`` by repeated multiplication; 1 when ``y <= 0``."""
    if y <= 0:
        return 1
    return _wrap(pow(x, y, _INT_RANGE))


def square_root(x: int) -> int:
    """Integer square root found bit by bit over the low 16 bits."""
    result = 0
    for bit in range(15, -1, -1):
        candidate = result | (1 << bit)
        if _wrap(candidate * candidate) <= x:
            result = candidate
    return result


def lerp(a: int, b: int, t: int) -> int:
    """Linear interpolation ``a + (b - a) * t``."""
    return _wrap(a + (b - a) * t)