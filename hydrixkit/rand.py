"""Linear congruential pseudo-random number generator."""

from __future__ import annotations

from collections.abc import Iterator

_MASK64 = (1 << 64) - 1
_MULTIPLIER = 1103515245
_INCREMENT = 12345


class LinearCongruential:
    """Generator producing values in ``0..32767`` from a 64-bit state."""

    def __init__(self, seed: int) -> None:
        self._state = seed & _MASK64

    def set_seed(self, seed: int) -> None:
        """Restart the sequence from ``seed``."""
        self._state = seed & _MASK64

    def next(self) -> int:
        """Advance the state and return the next value in ``0..32767``."""
        self._state = (self._state * _MULTIPLIER + _INCREMENT) & _MASK64
        return (self._state // 65536) % 32768

    def in_range(self, minimum: int, maximum: int) -> int:
        """Next value reduced into ``minimum`` plus the span's size.

        Raises ZeroDivisionError when ``minimum == maximum``.
        """
        span = maximum - minimum
        if span == 0:
            raise ZeroDivisionError("range is empty")
        # The remainder takes the sign of the non-negative draw.
        return self.next() % abs(span) + minimum

    def __iter__(self) -> Iterator[int]:
        while True:
            yield self.next()