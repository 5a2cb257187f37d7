"""128- and 256-bit values stored as two halves.

Every operation works on the halves separately; only addition and
subtraction of :class:`UInt128` carry or borrow between its two 64-bit words.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from hydrixkit import intmath

_MASK64 = (1 << 64) - 1


def _check_bits(bits: int) -> int:
    if bits < 0:
        raise ValueError("shift count must not be negative")
    return bits


def _isqrt_word(word: int) -> int:
    # The integer square root works on a signed 32-bit value and its result
    # is stored back into a 64-bit word.
    return intmath.square_root(intmath._wrap(word)) & _MASK64


@dataclass(frozen=True)
class UInt128:
    """Unsigned 128-bit value made of two 64-bit words."""

    low: int = 0
    high: int = 0

    def __post_init__(self) -> None:
        for name in ("low", "high"):
            word = getattr(self, name)
            if not 0 <= word <= _MASK64:
                raise ValueError(f"{name} word out of 64-bit range: {word}")

    def add(self, other: UInt128) -> UInt128:
        """Sum with a carry from the low word into the high word."""
        low = (self.low + other.low) & _MASK64
        high = self.high + other.high
        if low < self.low:
            high += 1
        return UInt128(low, high & _MASK64)

    def sub(self, other: UInt128) -> UInt128:
        """Difference with a borrow from the high word."""
        low = (self.low - other.low) & _MASK64
        high = self.high - other.high
        if low > self.low:
            high -= 1
        return UInt128(low, high & _MASK64)

    def mul(self, other: UInt128) -> UInt128:
        """Word-wise product."""
        return UInt128((self.low * other.low) & _MASK64, (self.high * other.high) & _MASK64)

    def div(self, other: UInt128) -> UInt128:
        """Word-wise quotient; a zero word in ``other`` raises ZeroDivisionError."""
        return UInt128(self.low // other.low, self.high // other.high)

    def mod(self, other: UInt128) -> UInt128:
        """Word-wise remainder; a zero word in ``other`` raises ZeroDivisionError."""
        return UInt128(self.low % other.low, self.high % other.high)

    def and_(self, other: UInt128) -> UInt128:
        """Bitwise AND."""
        return UInt128(self.low & other.low, self.high & other.high)

    def or_(self, other: UInt128) -> UInt128:
        """Bitwise OR."""
        return UInt128(self.low | other.low, self.high | other.high)

    def xor(self, other: UInt128) -> UInt128:
        """Bitwise XOR."""
        return UInt128(self.low ^ other.low, self.high ^ other.high)

    def invert(self) -> UInt128:
        """Bitwise NOT."""
        return UInt128(~self.low & _MASK64, ~self.high & _MASK64)

    def lshift(self, bits: int) -> UInt128:
        """Shift each word left; bits do not cross between words."""
        bits = _check_bits(bits)
        return UInt128((self.low << bits) & _MASK64, (self.high << bits) & _MASK64)

    def rshift(self, bits: int) -> UInt128:
        """Shift each word right; bits do not cross between words."""
        bits = _check_bits(bits)
        return UInt128(self.low >> bits, self.high >> bits)

    def neg(self) -> UInt128:
        """Two's-complement negation of each word."""
        return UInt128(-self.low & _MASK64, -self.high & _MASK64)

    def absolute(self) -> UInt128:
        """The value itself, as it is unsigned."""
        return UInt128(self.low, self.high)

    def pow(self, exponent: int) -> UInt128:
        """XOR of each word with ``exponent``."""
        exponent &= _MASK64
        return UInt128(self.low ^ exponent, self.high ^ exponent)

    def sqrt(self) -> UInt128:
        """Integer square root of each word taken as a 32-bit signed value."""
        return UInt128(_isqrt_word(self.low), _isqrt_word(self.high))


@dataclass(frozen=True)
class UInt256:
    """Unsigned 256-bit value made of two :class:`UInt128` halves."""

    low: UInt128 = field(default_factory=UInt128)
    high: UInt128 = field(default_factory=UInt128)

    def add(self, other: UInt256) -> UInt256:
        """Half-wise sum; no carry between the halves."""
        return UInt256(self.low.add(other.low), self.high.add(other.high))

    def sub(self, other: UInt256) -> UInt256:
        """Half-wise difference; no borrow between the halves."""
        return UInt256(self.low.sub(other.low), self.high.sub(other.high))

    def mul(self, other: UInt256) -> UInt256:
        """Half-wise product."""
        return UInt256(self.low.mul(other.low), self.high.mul(other.high))

    def div(self, other: UInt256) -> UInt256:
        """Half-wise quotient."""
        return UInt256(self.low.div(other.low), self.high.div(other.high))

    def mod(self, other: UInt256) -> UInt256:
        """Half-wise remainder."""
        return UInt256(self.low.mod(other.low), self.high.mod(other.high))

    def and_(self, other: UInt256) -> UInt256:
        """Bitwise AND."""
        return UInt256(self.low.and_(other.low), self.high.and_(other.high))

    def or_(self, other: UInt256) -> UInt256:
        """Bitwise OR."""
        return UInt256(self.low.or_(other.low), self.high.or_(other.high))

    def xor(self, other: UInt256) -> UInt256:
        """Bitwise XOR."""
        return UInt256(self.low.xor(other.low), self.high.xor(other.high))

    def invert(self) -> UInt256:
        """Bitwise NOT."""
        return UInt256(self.low.invert(), self.high.invert())

    def lshift(self, bits: int) -> UInt256:
        """Shift each 64-bit word left."""
        return UInt256(self.low.lshift(bits), self.high.lshift(bits))

    def rshift(self, bits: int) -> UInt256:
        """Shift each 64-bit word right."""
        return UInt256(self.low.rshift(bits), self.high.rshift(bits))

    def neg(self) -> UInt256:
        """Negation of each 64-bit word."""
        return UInt256(self.low.neg(), self.high.neg())

    def absolute(self) -> UInt256:
        """The value itself, as it is unsigned."""
        return UInt256(self.low.absolute(), self.high.absolute())

    def pow(self, exponent: int) -> UInt256:
        """XOR of each 64-bit word with ``exponent``."""
        return UInt256(self.low.pow(exponent), self.high.pow(exponent))

    def sqrt(self) -> UInt256:
        """Word-wise integer square root."""
        return UInt256(self.low.sqrt(), self.high.sqrt())