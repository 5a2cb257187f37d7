"""Constants and binary records of the boot protocol used to start the kernel.

Requests are identified by four 64-bit words: a common magic pair followed
by a pair specific to each request. Records pack to their little-endian
in-memory layout.
"""

from __future__ import annotations

import struct
from dataclasses import dataclass
from enum import Enum, IntEnum

COMMON_MAGIC: tuple[int, int] = (0xC7B1DD30DF4C8B88, 0x0A82E883A194F07B)

REQUESTS_START_MARKER: tuple[int, int, int, int] = (
    0xF6B8F4B39DE7D1AE,
    0xFAB91A6940FCB9CF,
    0x785C6ED015D3E316,
    0x181E920A7852B9D9,
)
REQUESTS_END_MARKER: tuple[int, int] = (0xADC0E0531BB10D03, 0x9572709F31764C62)
REQUESTS_DELIMITER = REQUESTS_END_MARKER

_BASE_REVISION_MAGIC: tuple[int, int] = (0xF9562B2D5C95A6C8, 0x6A7B384944536BDC)

FRAMEBUFFER_RGB = 1
SMP_X2APIC = 1 << 0
INTERNAL_MODULE_REQUIRED = 1 << 0
INTERNAL_MODULE_COMPRESSED = 1 << 1

_MASK64 = (1 << 64) - 1


class RequestKind(Enum):
    """Each request and the two words that follow the common magic in its id."""

    BOOTLOADER_INFO = (0xF55038D8E2A1202F, 0x279426FCF5F59740)
    STACK_SIZE = (0x224EF0460A8E8926, 0xE1CB0FC25F46EA3D)
    HHDM = (0x48DCF1CB8AD2B852, 0x63984E959A98244B)
    FRAMEBUFFER = (0x9D5827DCD881DD75, 0xA3148604F6FAB11B)
    TERMINAL = (0xC8AC59310C2B0844, 0xA68D0C7265D38878)
    PAGING_MODE = (0x95C1A0EDAB0944CB, 0xA4E5CB3842F7488A)
    FIVE_LEVEL_PAGING = (0x94469551DA9B3192, 0xEBE5E86DB7382888)
    SMP = (0x95A67B819A1B857E, 0xA0B61B723B6A73E0)
    MEMMAP = (0x67CF3D9D378A806F, 0xE304ACDFC50C3C62)
    ENTRY_POINT = (0x13D86C035A1CD3E1, 0x2B0CAA89D8F3026A)
    KERNEL_FILE = (0xAD97E90E83F1ED67, 0x31EB5D1C5FF23B69)
    MODULE = (0x3E7E279702BE32AF, 0xCA1C4F3BD1280CEE)
    RSDP = (0xC5E77B6B397E7B43, 0x27637845ACCDCF3C)
    SMBIOS = (0x9E9046F11E095391, 0xAA4A520FEFBDE5EE)
    EFI_SYSTEM_TABLE = (0x5CEBA5163EAAF6D6, 0x0A6981610CF65FCC)
    EFI_MEMMAP = (0x7DF62A431D6872D5, 0xA4FCDFB3E57306C8)
    BOOT_TIME = (0x502746E184C088AA, 0xFBC5EC83E6327893)
    KERNEL_ADDRESS = (0x71BA76863CC55F63, 0xB2644A48C516A487)
    DTB = (0xB40DDB48FB54BAC7, 0x545081493F81FFB7)


class MemmapType(IntEnum):
    """Kinds of memory map entries."""

    USABLE = 0
    RESERVED = 1
    ACPI_RECLAIMABLE = 2
    ACPI_NVS = 3
    BAD_MEMORY = 4
    BOOTLOADER_RECLAIMABLE = 5
    KERNEL_AND_MODULES = 6
    FRAMEBUFFER = 7


class MediaType(IntEnum):
    """Media a file was loaded from."""

    GENERIC = 0
    OPTICAL = 1
    TFTP = 2


class TerminalCallback(IntEnum):
    """Callback kinds reported by the terminal."""

    DEC = 10
    BELL = 20
    PRIVATE_ID = 30
    STATUS_REPORT = 40
    POS_REPORT = 50
    KBD_LEDS = 60
    MODE = 70
    LINUX = 80


def _check_range(name: str, value: int, bits: int) -> None:
    if not 0 <= value < (1 << bits):
        raise ValueError(f"{name} out of {bits}-bit range: {value}")


_UUID_FORMAT = struct.Struct("<IHH8s")


@dataclass(frozen=True)
class Uuid:
    """A GUID split into a 32-bit, two 16-bit and an eight-byte part."""

    a: int
    b: int
    c: int
    d: bytes

    def __post_init__(self) -> None:
        _check_range("a", self.a, 32)
        _check_range("b", self.b, 16)
        _check_range("c", self.c, 16)
        data = bytes(self.d)
        if len(data) != 8:
            raise ValueError(f"d must hold 8 bytes, got {len(data)}")
        object.__setattr__(self, "d", data)

    def pack(self) -> bytes:
        """The 16-byte in-memory form."""
        return _UUID_FORMAT.pack(self.a, self.b, self.c, self.d)

    @classmethod
    def unpack(cls, data: bytes) -> Uuid:
        """Read a UUID from exactly 16 bytes."""
        if len(data) != _UUID_FORMAT.size:
            raise ValueError(f"expected {_UUID_FORMAT.size} bytes, got {len(data)}")
        a, b, c, d = _UUID_FORMAT.unpack(data)
        return cls(a, b, c, d)


_MEMMAP_FORMAT = struct.Struct("<QQQ")


@dataclass(frozen=True)
class MemmapEntry:
    """One region of the physical memory map."""

    base: int
    length: int
    type: int

    def __post_init__(self) -> None:
        _check_range("base", self.base, 64)
        _check_range("length", self.length, 64)
        _check_range("type", self.type, 64)

    def pack(self) -> bytes:
        """The 24-byte in-memory form."""
        return _MEMMAP_FORMAT.pack(self.base, self.length, int(self.type))

    @classmethod
    def unpack(cls, data: bytes) -> MemmapEntry:
        """Read an entry from exactly 24 bytes."""
        if len(data) != _MEMMAP_FORMAT.size:
            raise ValueError(f"expected {_MEMMAP_FORMAT.size} bytes, got {len(data)}")
        base, length, kind = _MEMMAP_FORMAT.unpack(data)
        return cls(base, length, kind)


def request_id(kind: RequestKind) -> tuple[int, int, int, int]:
    """The four-word identifier of a request."""
    return (*COMMON_MAGIC, *kind.value)


def base_revision(revision: int) -> tuple[int, int, int]:
    """The three-word base revision marker asking for ``revision``."""
    _check_range("revision", revision, 64)
    return (*_BASE_REVISION_MAGIC, revision)


def base_revision_supported(marker: tuple[int, int, int]) -> bool:
    """True when the loader has cleared the revision word of the marker."""
    if len(marker) != 3:
        raise ValueError("a base revision marker holds three words")
    return marker[2] == 0