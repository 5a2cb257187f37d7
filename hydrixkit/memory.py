"""Byte-buffer copy, fill, move and compare, and memory map totals."""

from __future__ import annotations

from collections.abc import Iterable

from hydrixkit.bootproto import MemmapEntry, MemmapType


def _check_span(name: str, buffer_length: int, offset: int, count: int) -> None:
    if count < 0:
        raise ValueError("count must not be negative")
    if offset < 0 or offset + count > buffer_length:
        raise IndexError(
            f"{name} span {offset}..{offset + count} outside buffer of {buffer_length} bytes"
        )


def copy(
    dest: bytearray, dest_offset: int, src: bytes, src_offset: int, count: int
) -> bytearray:
    """Copy ``count`` bytes from ``src`` into ``dest`` and return ``dest``."""
    _check_span("destination", len(dest), dest_offset, count)
    _check_span("source", len(src), src_offset, count)
    dest[dest_offset:dest_offset + count] = bytes(src[src_offset:src_offset + count])
    return dest


def fill(buffer: bytearray, offset: int, value: int, count: int) -> bytearray:
    """Set ``count`` bytes to the low byte of ``value`` and return ``buffer``."""
    _check_span("buffer", len(buffer), offset, count)
    buffer[offset:offset + count] = bytes([value & 0xFF]) * count
    return buffer


def move(buffer: bytearray, dest_offset: int, src_offset: int, count: int) -> bytearray:
    """Copy ``count`` bytes within ``buffer``, correct for overlapping spans."""
    _check_span("destination", len(buffer), dest_offset, count)
    _check_span("source", len(buffer), src_offset, count)
    buffer[dest_offset:dest_offset + count] = bytes(buffer[src_offset:src_offset + count])
    return buffer


def compare(first: bytes, second: bytes, count: int) -> int:
    """-1, 0 or 1 from the first differing byte among the leading ``count``."""
    _check_span("first", len(first), 0, count)
    _check_span("second", len(second), 0, count)
    for a, b in zip(first[:count], second[:count]):
        if a != b:
            return -1 if a < b else 1
    return 0


def usable_memory(entries: Iterable[MemmapEntry]) -> int:
    """Total length of the usable regions of a memory map."""
    return sum(entry.length for entry in entries if entry.type == MemmapType.USABLE)