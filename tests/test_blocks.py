import pytest

from tdmm.blocks import (
    ALIGNMENT,
    PAGE_SIZE,
    Block,
    align,
    align_for_extension,
    insert_sorted,
)


def test_block_end_is_address_plus_size():
    block = Block(address=4096, size=100)
    assert block.end() == 4196


def test_block_defaults_to_free_and_unmarked():
    block = Block(address=0, size=PAGE_SIZE)
    assert block.free is True
    assert block.mark is False


@pytest.mark.parametrize("size", [0, 1, 2, 3, 4, 5, 27, 28, 29, 1000, 4097])
def test_align_rounds_up_to_alignment(size):
    result = align(size)
    assert result % ALIGNMENT == 0
    assert size <= result < size + ALIGNMENT


def test_align_keeps_aligned_sizes():
    assert align(28) == 28


def test_align_rejects_negative():
    with pytest.raises(ValueError):
        align(-1)


def test_align_for_extension_minimum_is_a_page():
    assert align_for_extension(1) == PAGE_SIZE
    assert align_for_extension(PAGE_SIZE) == PAGE_SIZE


@pytest.mark.parametrize("size", [4097, 5000, 16384, 16416, 100000])
def test_align_for_extension_is_smallest_power_of_two_pages(size):
    result = align_for_extension(size)
    pages = result // PAGE_SIZE
    assert result % PAGE_SIZE == 0
    assert pages & (pages - 1) == 0
    assert result >= size
    assert result // 2 < size


def test_align_for_extension_rejects_negative():
    with pytest.raises(ValueError):
        align_for_extension(-5)


def test_insert_sorted_keeps_address_order():
    blocks = []
    for address in (300, 100, 500, 200, 400):
        insert_sorted(blocks, Block(address=address, size=10))
    assert [b.address for b in blocks] == [100, 200, 300, 400, 500]


def test_insert_sorted_at_head_and_tail():
    blocks = [Block(address=200, size=10)]
    head = Block(address=100, size=10)
    tail = Block(address=900, size=10)
    insert_sorted(blocks, tail)
    insert_sorted(blocks, head)
    assert blocks[0] is head
    assert blocks[-1] is tail


def test_insert_sorted_into_empty_list():
    blocks = []
    block = Block(address=42, size=8)
    insert_sorted(blocks, block)
    assert blocks == [block]