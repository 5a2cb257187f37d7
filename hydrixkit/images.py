"""Bitmaps held as row-major pixel sequences, with nearest-neighbour stretching."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class Bitmap:
    """A ``width`` by ``height`` image whose pixels are stored row by row."""

    width: int
    height: int
    data: Sequence[int]

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise ValueError("bitmap dimensions must not be negative")
        pixels = tuple(self.data)
        if len(pixels) != self.width * self.height:
            raise ValueError(
                f"expected {self.width * self.height} pixels, got {len(pixels)}"
            )
        object.__setattr__(self, "data", pixels)

    def stretched(self, width: int, height: int) -> Bitmap:
        """A copy resized to ``width`` by ``height`` by picking the nearest pixel."""
        if width < 0 or height < 0:
            raise ValueError("target dimensions must not be negative")
        if width * height and not self.data:
            raise ValueError("cannot stretch an empty bitmap to a non-empty size")
        pixels = [
            self.data[(y * self.height // height) * self.width + (x * self.width // width)]
            for y in range(height)
            for x in range(width)
        ]
        return Bitmap(width, height, pixels)