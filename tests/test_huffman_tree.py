import pytest

from fwnt.bit_stream import BitStream
from fwnt.errors import ArgumentError, BoundsError
from fwnt.huffman_tree import HuffmanTree

# Code sizes giving the canonical codes:
#   symbol 1 -> 0, symbol 0 -> 10, symbol 2 -> 110, symbol 3 -> 111
CODE_SIZES = [2, 1, 3, 3]


def _make_tree():
    tree = HuffmanTree(4, 3)
    assert tree.build(CODE_SIZES) is True
    return tree


def test_init_bounds():
    with pytest.raises(BoundsError):
        HuffmanTree(-1, 8)
    with pytest.raises(BoundsError):
        HuffmanTree(1025, 8)
    with pytest.raises(BoundsError):
        HuffmanTree(16, 33)


def test_init_state():
    tree = HuffmanTree(1024, 32)
    assert tree.maximum_code_size == 32
    assert len(tree.symbols) == 1024
    assert len(tree.code_size_counts) == 33


def test_build_sorts_symbols_by_code_size():
    tree = _make_tree()
    assert tree.symbols == [1, 0, 2, 3]
    assert tree.code_size_counts == [0, 1, 1, 2]


def test_build_empty_tree():
    tree = HuffmanTree(4, 3)
    assert tree.build([0, 0, 0, 0]) is False


def test_build_code_size_exceeds_maximum():
    tree = HuffmanTree(4, 3)
    with pytest.raises(BoundsError):
        tree.build([1, 4, 2, 2])


def test_build_over_subscribed():
    tree = HuffmanTree(3, 3)
    with pytest.raises(BoundsError):
        tree.build([1, 1, 1])


def test_build_none():
    tree = HuffmanTree(3, 3)
    with pytest.raises(ArgumentError):
        tree.build(None)


def test_decode_sequence():
    tree = _make_tree()
    # Bits 0 10 110 111 padded to 16 bits: 0101 1011 1000 0000 -> 0x5b80,
    # stored as a little-endian 16-bit word.
    stream = BitStream(b"\x80\x5b")
    decoded = [tree.get_symbol(stream) for _ in range(4)]
    assert decoded == [1, 0, 2, 3]


def test_decode_past_end_yields_all_zero_code():
    tree = _make_tree()
    stream = BitStream(b"")
    assert tree.get_symbol(stream) == 1
    assert tree.get_symbol(stream) == 1


def test_invalid_code_in_incomplete_tree():
    tree = HuffmanTree(1, 1)
    assert tree.build([1]) is True
    stream = BitStream(b"\x00\x80")
    with pytest.raises(BoundsError):
        tree.get_symbol(stream)


def test_get_symbol_none_stream():
    tree = _make_tree()
    with pytest.raises(ArgumentError):
        tree.get_symbol(None)


def test_rebuild_resets_counts():
    tree = HuffmanTree(4, 3)
    assert tree.build(CODE_SIZES) is True
    assert tree.build([1, 1, 0, 0]) is True
    assert tree.code_size_counts == [2, 2, 0, 0]
    stream = BitStream(b"\x00\x40")
    # Bits 0 then 1 decode to the two symbols of size 1.
    assert [tree.get_symbol(stream), tree.get_symbol(stream)] == [0, 1]