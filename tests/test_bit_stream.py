import pytest

from fwnt.bit_stream import BitStream
from fwnt.errors import ArgumentError, BoundsError, FwntError


def test_single_word_value():
    stream = BitStream(b"\x34\x12")
    assert stream.get_value(16) == 0x1234


def test_two_words_as_32_bit_value():
    stream = BitStream(b"\x34\x12\x78\x56")
    assert stream.get_value(32) == 0x12345678


def test_nibbles_recombine_to_word():
    data = b"\xcd\xab\x21\x43"
    whole = BitStream(data).get_value(16)
    stream = BitStream(data)
    combined = 0
    for _ in range(4):
        combined = (combined << 4) | stream.get_value(4)
    assert combined == whole


@pytest.mark.parametrize("width", [1, 3, 5, 7, 11, 13])
def test_arbitrary_widths_recombine(width):
    data = bytes(range(1, 33))
    total_bits = len(data) * 8
    reference = BitStream(data)
    expected = 0
    for _ in range(total_bits // 16):
        expected = (expected << 16) | reference.get_value(16)

    stream = BitStream(data)
    combined = 0
    consumed = 0
    while consumed + width <= total_bits:
        combined = (combined << width) | stream.get_value(width)
        consumed += width
    assert combined == expected >> (total_bits - consumed)


def test_values_fit_in_requested_width():
    stream = BitStream(b"\xff" * 16)
    for width in (1, 2, 5, 9, 15, 17, 31):
        assert stream.get_value(width) == (1 << width) - 1


def test_empty_data_yields_zero_bits():
    stream = BitStream(b"")
    assert stream.get_value(32) == 0
    assert stream.get_value(7) == 0


def test_reading_past_end_yields_zero_bits():
    stream = BitStream(b"\xff\xff")
    assert stream.get_value(16) == 0xFFFF
    assert stream.get_value(16) == 0


def test_trailing_odd_byte_is_ignored():
    assert BitStream(b"\x34\x12\xff").get_value(32) == BitStream(b"\x34\x12").get_value(32)


def test_zero_bits_returns_zero_and_keeps_state():
    stream = BitStream(b"\x34\x12")
    assert stream.get_value(0) == 0
    assert stream.bit_buffer_size == 0
    assert stream.offset == 0


def test_read_fills_buffer_and_advances_offset():
    stream = BitStream(b"\x34\x12\x78\x56")
    stream.read(17)
    assert stream.bit_buffer_size == 32
    assert stream.offset == 4


def test_buffer_size_decreases_by_consumed_bits():
    stream = BitStream(b"\x34\x12\x78\x56")
    stream.get_value(5)
    assert stream.bit_buffer_size == 11
    assert stream.bit_buffer < (1 << 11)


@pytest.mark.parametrize("bits", [0, 33])
def test_read_rejects_out_of_bounds_bit_count(bits):
    with pytest.raises(BoundsError):
        BitStream(b"\x00\x00").read(bits)


def test_get_value_rejects_too_many_bits():
    with pytest.raises(ArgumentError):
        BitStream(b"\x00\x00").get_value(33)


def test_none_data_is_rejected():
    with pytest.raises(FwntError):
        BitStream(None)