"""Canonical Huffman tree decoding of symbols from a bit stream."""

from __future__ import annotations

from collections.abc import Sequence

from .bit_stream import BitStream
from .errors import ArgumentError, BoundsError

_MAXIMUM_NUMBER_OF_SYMBOLS = 1024
_MAXIMUM_CODE_SIZE = 32


class HuffmanTree:
    """A canonical Huffman tree built from per-symbol code sizes."""

    def __init__(self, number_of_symbols: int, maximum_code_size: int) -> None:
        if not 0 <= number_of_symbols <= _MAXIMUM_NUMBER_OF_SYMBOLS:
            raise BoundsError("invalid number of symbols value out of bounds.")
        if not 0 <= maximum_code_size <= _MAXIMUM_CODE_SIZE:
            raise BoundsError("invalid maximum code size value out of bounds.")
        self.maximum_code_size = maximum_code_size
        self.symbols = [0] * number_of_symbols
        self.code_size_counts = [0] * (maximum_code_size + 1)

    def build(self, code_sizes: Sequence[int] | bytes) -> bool:
        """Build the tree from the code size of every symbol.

        Returns False if no symbol has a code, True otherwise.
        """
        if code_sizes is None:
            raise ArgumentError("invalid code sizes array.")

        code_sizes = list(code_sizes)
        counts = [0] * (self.maximum_code_size + 1)

        for symbol, code_size in enumerate(code_sizes):
            if not 0 <= code_size <= self.maximum_code_size:
                raise BoundsError(
                    f"invalid symbol: {symbol} code size: {code_size} "
                    "value out of bounds."
                )
            counts[code_size] += 1

        self.code_size_counts = counts

        if counts[0] == len(code_sizes):
            return False

        left_value = 1
        for count in counts[1:]:
            left_value = (left_value << 1) - count
            if left_value < 0:
                raise BoundsError("code sizes are over-subscribed.")

        # Offsets at which the symbols of each code size start.
        symbol_offsets = [0] * max(len(counts), 2)
        for bit_index in range(1, self.maximum_code_size):
            symbol_offsets[bit_index + 1] = symbol_offsets[bit_index] + counts[bit_index]

        for symbol, code_size in enumerate(code_sizes):
            if code_size == 0:
                continue
            code_offset = symbol_offsets[code_size]
            if not 0 <= code_offset < len(self.symbols):
                raise BoundsError(
                    f"invalid symbol: {symbol} code offset: {code_offset} "
                    "value out of bounds."
                )
            symbol_offsets[code_size] += 1
            self.symbols[code_offset] = symbol

        return True

    def get_symbol(self, bit_stream: BitStream) -> int:
        """Read one Huffman code from the bit stream and return its symbol."""
        if bit_stream is None:
            raise ArgumentError("invalid bit stream.")

        if bit_stream.bit_buffer_size < self.maximum_code_size:
            bit_stream.read(self.maximum_code_size)

        number_of_bits = min(self.maximum_code_size, bit_stream.bit_buffer_size)

        huffman_code = 0
        first_huffman_code = 0
        first_index = 0

        for bit_index in range(1, number_of_bits + 1):
            huffman_code = (huffman_code << 1) | bit_stream.get_value(1)
            code_size_count = self.code_size_counts[bit_index]

            if huffman_code - code_size_count < first_huffman_code:
                return self.symbols[first_index + (huffman_code - first_huffman_code)]

            first_huffman_code = (first_huffman_code + code_size_count) << 1
            first_index += code_size_count

        raise BoundsError(f"invalid Huffman code: 0x{huffman_code:08x}.")