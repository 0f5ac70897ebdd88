"""LCID language tag lookup, bit streams and Huffman decoding for Windows NT formats."""

__version__ = "0.1.0"