"""Decoding of PS/2 mouse packets into button, scroll and position state."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum


class MouseButton(IntEnum):
    """Button held in the latest packet; left wins over right over middle."""

    NONE = 0
    LEFT = 1
    RIGHT = 2
    MIDDLE = 3


class ScrollDirection(IntEnum):
    """Direction of the last wheel movement."""

    UP = 4
    DOWN = 5


@dataclass(frozen=True)
class MouseScroll:
    """Last wheel direction (None before any movement) and its raw delta byte."""

    direction: ScrollDirection | None
    delta: int


def _signed(byte: int) -> int:
    return byte - 0x100 if byte & 0x80 else byte


class PacketDecoder:
    """Consumes packet bytes one at a time and tracks the pointer on screen."""

    def __init__(
        self,
        screen_width: int,
        screen_height: int,
        has_wheel: bool = False,
        sensitivity: int = 1,
    ) -> None:
        if screen_width <= 0 or screen_height <= 0:
            raise ValueError("screen dimensions must be positive")
        self.screen_width = screen_width
        self.screen_height = screen_height
        self.has_wheel = has_wheel
        self.sensitivity = sensitivity
        self.button = MouseButton.NONE
        self.scroll = MouseScroll(None, 0)
        self._cycle = 0
        self._packet = [0, 0, 0]
        self._x = 0
        self._y = 0

    def feed(self, byte: int) -> bool:
        """Process one byte; True when it completes a packet."""
        if not 0 <= byte <= 0xFF:
            raise ValueError(f"byte out of range: {byte}")
        if self._cycle == 0:
            if byte & 0x01:
                self.button = MouseButton.LEFT
            elif byte & 0x02:
                self.button = MouseButton.RIGHT
            elif byte & 0x04:
                self.button = MouseButton.MIDDLE
            else:
                self.button = MouseButton.NONE
            self._packet[0] = byte
            self._cycle = 1
            return False
        if self._cycle == 1:
            self._packet[1] = byte
            self._cycle = 2
            return False
        if self._cycle == 2:
            self._packet[2] = byte
            self._move(_signed(self._packet[1]), _signed(byte))
            if self.has_wheel:
                self._cycle = 3
                return False
            self._cycle = 0
            return True
        delta = _signed(byte)
        direction = self.scroll.direction
        if delta > 0:
            direction = ScrollDirection.UP
        elif delta < 0:
            direction = ScrollDirection.DOWN
        self.scroll = MouseScroll(direction, byte)
        self._cycle = 0
        return True

    def _move(self, dx: int, dy: int) -> None:
        x = self._x + int(dx * self.sensitivity)
        y = self._y - int(dy * self.sensitivity)
        self._x = min(max(x, 0), self.screen_width - 1)
        self._y = min(max(y, 0), self.screen_height - 1)

    def position(self) -> tuple[int, int]:
        """Pointer position as ``(x, y)`` within the screen."""
        return (self._x, self._y)