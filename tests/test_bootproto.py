import pytest

from hydrixkit.bootproto import (
    COMMON_MAGIC,
    MemmapEntry,
    MemmapType,
    MediaType,
    RequestKind,
    TerminalCallback,
    Uuid,
    base_revision,
    base_revision_supported,
    request_id,
)


def test_memmap_request_id():
    assert request_id(RequestKind.MEMMAP) == (
        0xC7B1DD30DF4C8B88,
        0x0A82E883A194F07B,
        0x67CF3D9D378A806F,
        0xE304ACDFC50C3C62,
    )


def test_hhdm_request_id():
    assert request_id(RequestKind.HHDM)[2:] == (0x48DCF1CB8AD2B852, 0x63984E959A98244B)


def test_all_request_ids_start_with_magic_and_differ():
    ids = [request_id(kind) for kind in RequestKind]
    assert all(ident[:2] == COMMON_MAGIC for ident in ids)
    assert len(set(ids)) == len(ids)


def test_base_revision_marker():
    assert base_revision(2) == (0xF9562B2D5C95A6C8, 0x6A7B384944536BDC, 2)


def test_base_revision_supported():
    marker = base_revision(2)
    assert base_revision_supported(marker) is False
    assert base_revision_supported((*marker[:2], 0)) is True


def test_base_revision_supported_rejects_wrong_length():
    with pytest.raises(ValueError):
        base_revision_supported((1, 2))


def test_uuid_round_trip():
    uuid = Uuid(0x12345678, 0xABCD, 0x0102, bytes(range(8)))
    packed = uuid.pack()
    assert len(packed) == 16
    assert Uuid.unpack(packed) == uuid


def test_uuid_packs_little_endian():
    uuid = Uuid(1, 2, 3, bytes(range(8)))
    assert uuid.pack()[:8] == b"\x01\x00\x00\x00\x02\x00\x03\x00"
    assert uuid.pack()[8:] == bytes(range(8))


def test_uuid_rejects_bad_tail():
    with pytest.raises(ValueError):
        Uuid(1, 2, 3, b"\x00" * 7)


def test_uuid_rejects_out_of_range_field():
    with pytest.raises(ValueError):
        Uuid(1, 1 << 16, 3, bytes(8))


def test_uuid_unpack_rejects_wrong_size():
    with pytest.raises(ValueError):
        Uuid.unpack(b"\x00" * 15)


def test_memmap_entry_round_trip():
    entry = MemmapEntry(0x100000, 0x7FF00000, MemmapType.USABLE)
    packed = entry.pack()
    assert len(packed) == 24
    restored = MemmapEntry.unpack(packed)
    assert restored == entry
    assert restored.type == MemmapType.USABLE


def test_memmap_entry_layout():
    packed = MemmapEntry(1, 2, MemmapType.FRAMEBUFFER).pack()
    assert packed[0:8] == (1).to_bytes(8, "little")
    assert packed[8:16] == (2).to_bytes(8, "little")
    assert packed[16:24] == (7).to_bytes(8, "little")


def test_memmap_entry_rejects_negative():
    with pytest.raises(ValueError):
        MemmapEntry(-1, 0, 0)


def test_memmap_entry_unpack_rejects_wrong_size():
    with pytest.raises(ValueError):
        MemmapEntry.unpack(b"\x00" * 23)


def test_enum_lookups():
    assert MediaType(2) is MediaType.TFTP
    assert TerminalCallback(80) is TerminalCallback.LINUX
    assert MemmapType(5) is MemmapType.BOOTLOADER_RECLAIMABLE