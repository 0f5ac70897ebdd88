"""Reading of bit values from a little-endian 16-bit word stream."""

from __future__ import annotations

from .errors import ArgumentError, BoundsError

_MASK_32 = 0xFFFFFFFF


class BitStream:
    """A stream of bits fed from a byte string, 16 bits at a time.

    Each 16-bit little-endian word is appended to the bit buffer, most
    significant bits are handed out first. Reading beyond the end of the
    data yields zero bits.
    """

    def __init__(self, data: bytes | bytearray | memoryview) -> None:
        if data is None:
            raise ArgumentError("invalid byte stream value.")
        self.data = bytes(data)
        self.offset = 0
        self.bit_buffer = 0
        self.bit_buffer_size = 0

    def read(self, number_of_bits: int) -> None:
        """Fill the bit buffer until it holds at least number_of_bits bits."""
        if not 0 < number_of_bits <= 32:
            raise BoundsError("number of bits value out of bounds.")

        size = len(self.data)
        while self.bit_buffer_size < number_of_bits:
            if size < 2 or self.offset > size - 2:
                # Past the end of the data the buffer is filled with zero bits.
                self.bit_buffer = (self.bit_buffer << 16) & _MASK_32
            else:
                word = self.data[self.offset] | (self.data[self.offset + 1] << 8)
                self.bit_buffer = ((self.bit_buffer << 16) | word) & _MASK_32
                self.offset += 2
            self.bit_buffer_size += 16

    def get_value(self, number_of_bits: int) -> int:
        """Take the next number_of_bits bits from the stream as an integer."""
        if number_of_bits < 0:
            raise BoundsError("number of bits value out of bounds.")
        if number_of_bits > 32:
            raise ArgumentError("invalid number of bits value exceeds maximum.")
        if number_of_bits == 0:
            return 0

        if self.bit_buffer_size < number_of_bits:
            self.read(number_of_bits)

        value = self.bit_buffer
        if number_of_bits < 32:
            value >>= self.bit_buffer_size - number_of_bits

        self.bit_buffer_size -= number_of_bits
        if self.bit_buffer_size == 0:
            self.bit_buffer = 0
        else:
            self.bit_buffer &= _MASK_32 >> (32 - self.bit_buffer_size)

        return value & _MASK_32