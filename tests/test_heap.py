import pytest

from hydrixkit.heap import HEADER_SIZE, Heap


def test_first_allocation_follows_header():
    heap = Heap(0x1000)
    assert heap.allocate(8) == 0x1000 + HEADER_SIZE


def test_allocations_do_not_overlap():
    heap = Heap(0)
    addresses = [heap.allocate(n) for n in (1, 16, 17, 40, 0)]
    for first, second in zip(addresses, addresses[1:]):
        assert second >= first + heap.size_of(first) + HEADER_SIZE
    assert heap.used_list_count() == len(addresses)


def test_sizes_are_rounded_to_header_multiple():
    heap = Heap(0)
    for n in (1, 15, 16, 17, 33):
        address = heap.allocate(n)
        size = heap.size_of(address)
        assert size >= n
        assert size % HEADER_SIZE == 0
        assert size - n < HEADER_SIZE


def test_freed_block_is_reused():
    heap = Heap(0)
    a = heap.allocate(64)
    heap.allocate(8)
    heap.free(a)
    assert heap.free_list_count() == 1
    assert heap.allocate(32) == a
    assert heap.free_list_count() == 0


def test_too_small_free_block_is_skipped():
    heap = Heap(0)
    a = heap.allocate(16)
    heap.free(a)
    b = heap.allocate(64)
    assert b > a
    assert heap.free_list_count() == 1


def test_most_recently_freed_is_used_first():
    heap = Heap(0)
    a = heap.allocate(32)
    b = heap.allocate(32)
    heap.free(a)
    heap.free(b)
    assert heap.allocate(32) == b
    assert heap.allocate(32) == a


def test_free_none_is_ignored():
    heap = Heap(0)
    heap.free(None)
    assert heap.free_list_count() == 0


def test_double_free_raises():
    heap = Heap(0)
    a = heap.allocate(8)
    heap.free(a)
    with pytest.raises(ValueError):
        heap.free(a)


def test_unknown_address_raises():
    heap = Heap(0)
    heap.allocate(8)
    with pytest.raises(ValueError):
        heap.free(12345)


def test_negative_size_raises():
    with pytest.raises(ValueError):
        Heap(0).allocate(-1)


def test_reallocate_none_allocates():
    heap = Heap(0)
    address = heap.reallocate(None, 10)
    assert heap.size_of(address) >= 10
    assert heap.used_list_count() == 1


def test_reallocate_within_capacity_keeps_address():
    heap = Heap(0)
    a = heap.allocate(30)
    assert heap.reallocate(a, heap.size_of(a)) == a
    assert heap.free_list_count() == 0


def test_reallocate_larger_moves_and_frees_old():
    heap = Heap(0)
    a = heap.allocate(16)
    b = heap.reallocate(a, 100)
    assert b > a
    assert heap.size_of(b) >= 100
    assert heap.free_list_count() == 1
    with pytest.raises(ValueError):
        heap.size_of(a)


def test_used_list_counts_free_blocks():
    heap = Heap(0)
    a = heap.allocate(8)
    heap.allocate(8)
    heap.free(a)
    assert heap.used_list_count() == 2


def test_clean_releases_top_blocks():
    heap = Heap(0x2000)
    a = heap.allocate(16)
    b = heap.allocate(16)
    heap.free(a)
    heap.free(b)
    heap.clean()
    assert heap.end == heap.base
    assert heap.used_list_count() == 0
    assert heap.free_list_count() == 0
    assert heap.allocate(16) == a


def test_clean_keeps_block_below_live_one():
    heap = Heap(0)
    a = heap.allocate(16)
    heap.allocate(16)
    end = heap.end
    heap.free(a)
    heap.clean()
    assert heap.end == end
    assert heap.free_list_count() == 1


def test_clean_single_pass_order():
    heap = Heap(0)
    a = heap.allocate(16)
    b = heap.allocate(16)
    heap.free(b)
    heap.free(a)
    heap.clean()
    assert heap.end == b - HEADER_SIZE
    assert heap.free_list_count() == 1
    assert heap.used_list_count() == 1


def test_negative_base_raises():
    with pytest.raises(ValueError):
        Heap(-1)