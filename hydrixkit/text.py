"""String formatting and comparison helpers for the kernel library.

The number formatters keep the exact output of the library: fixed six
fractional digits for floating-point values, upper-case hexadecimal without
a prefix, and C's truncating digit arithmetic for negative integer parts.
"""

from __future__ import annotations

import math
import struct
from collections.abc import Callable

_INT_MIN = -(1 << 31)
_INT_MAX = (1 << 31) - 1
_UINT64_MAX = (1 << 64) - 1
_FRACTION_DIGITS = 6


def _wrap32(value: int) -> int:
    """Reduce an integer to the signed 32-bit range, wrapping on overflow."""
    return ((value - _INT_MIN) % (1 << 32)) + _INT_MIN


def _to_float32(value: float) -> float:
    """Round a value to single precision."""
    return struct.unpack("<f", struct.pack("<f", value))[0]


def _c_digits(value: int) -> str:
    """Decimal digits built the way a C loop does with ``%`` and ``/``.

    Both operators truncate toward zero, so a negative value yields
    characters below ``'0'`` rather than a minus sign.
    """
    if value == 0:
        return "0"
    chars = []
    while value != 0:
        quotient = -(-value // 10) if value < 0 else value // 10
        chars.append(chr(ord("0") + value - quotient * 10))
        value = quotient
    return "".join(reversed(chars))


def _fixed_point(value: float, rounding: Callable[[float], float]) -> str:
    """Integer part, a dot and six truncated fractional digits."""
    if math.isnan(value):
        raise ValueError("cannot format NaN")
    if math.isinf(value):
        raise OverflowError("cannot format an infinite value")
    int_part = int(value)
    if not _INT_MIN <= int_part <= _INT_MAX:
        raise OverflowError(f"integer part out of 32-bit range: {value}")
    fraction = rounding(value - rounding(float(int_part)))
    if fraction < 0:
        fraction = -fraction
    parts = [_c_digits(int_part), "."]
    for _ in range(_FRACTION_DIGITS):
        fraction = rounding(fraction * 10)
        digit = int(fraction)
        parts.append(chr(ord("0") + digit))
        fraction = rounding(fraction - digit)
    return "".join(parts)


def _c_string(text: str) -> str:
    """The part of ``text`` before its first NUL character."""
    return text.split("\0", 1)[0]


def strings_equal(first: str, second: str) -> bool:
    """True when both strings match up to their terminating NUL."""
    return _c_string(first) == _c_string(second)


def reverse_prefix(text: str, length: int) -> str:
    """Return ``text`` with its first ``length`` characters reversed.

    A length below two leaves the text unchanged; a length beyond the end
    of the text raises ValueError.
    """
    if length > len(text):
        raise ValueError(f"length {length} exceeds text of length {len(text)}")
    if length < 2:
        return text
    return text[:length][::-1] + text[length:]


def format_int(value: int) -> str:
    """Decimal form of a signed 32-bit integer (wrapping larger values)."""
    value = _wrap32(value)
    if value == 0:
        return "0"
    negative = value < 0
    if negative:
        value = _wrap32(-value)
    digits = _c_digits(value)
    return "-" + digits if negative else digits


def format_unsigned(value: int) -> str:
    """Decimal form of an unsigned integer of up to 64 bits."""
    if not 0 <= value <= _UINT64_MAX:
        raise ValueError(f"value out of unsigned 64-bit range: {value}")
    return str(value)


def format_float(value: float) -> str:
    """Single-precision value with six fractional digits.

    NaN gives ``"NaN"`` and zero gives ``"0.0"``.
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        raise OverflowError("cannot format an infinite value")
    value = _to_float32(value)
    if value == 0.0:
        return "0.0"
    return _fixed_point(value, _to_float32)


def format_double(value: float) -> str:
    """Double-precision value with six fractional digits; zero gives ``"0.0"``."""
    if value == 0.0:
        return "0.0"
    return _fixed_point(value, float)


def format_char(value: str) -> str:
    """A single character as a string; NUL gives the empty string."""
    if len(value) != 1:
        raise ValueError("expected exactly one character")
    return _c_string(value)


def format_bool(value: bool) -> str:
    """``"true"`` or ``"false"``."""
    return str(bool(value)).lower()


def to_hex(value: int) -> str:
    """Upper-case hexadecimal digits of an unsigned value, without prefix."""
    if not 0 <= value <= _UINT64_MAX:
        raise ValueError(f"value out of unsigned 64-bit range: {value}")
    return format(value, "X")


def to_digit_char(value: int) -> str:
    """The digit character for 0..9; any other value gives ``"0"``."""
    return str(value) if 0 <= value <= 9 else "0"