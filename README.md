# fwnt

Pure Python building blocks for data found in Windows NT formats.

## What it covers

- `fwnt.locale_identifier`: looks up Windows locale identifier (LCID)
  language tags. `get_language_tag_identifier` returns the tag's identifier
  (such as `"en-US"`) and `get_language_tag_description` its description
  (such as `"English, United States"`). Unknown values give `"_UNKNOWN_"`
  and `"Unknown"`. The full table is available as `LANGUAGE_TAGS`, a tuple
  of `LanguageTag` records.
- `fwnt.bit_stream.BitStream`: reads bit values from data made of 16-bit
  little-endian words, most significant bits first. Reading past the end of
  the data yields zero bits.
- `fwnt.huffman_tree.HuffmanTree`: a canonical Huffman tree built from the
  code size of every symbol, which decodes symbols from a `BitStream`.
- `fwnt.errors`: the exceptions raised by the package.

## Installation

```
pip install .
```

## Examples

```python
from fwnt.locale_identifier import (
    get_language_tag_description,
    get_language_tag_identifier,
)

print(get_language_tag_identifier(0x0409))   # en-US
print(get_language_tag_description(0x0409))  # English, United States
print(get_language_tag_identifier(0xBEEF))   # _UNKNOWN_
```

```python
from fwnt.bit_stream import BitStream

stream = BitStream(b"\x34\x12")  # one word: 0x1234
print(stream.get_value(4))  # 1
print(stream.get_value(4))  # 2
```

```python
from fwnt.bit_stream import BitStream
from fwnt.huffman_tree import HuffmanTree

# Symbol 0 has code "0", symbol 1 "10", symbol 2 "11"; symbol 3 is unused.
tree = HuffmanTree(number_of_symbols=4, maximum_code_size=2)
tree.build([1, 2, 2, 0])

stream = BitStream(b"\x00\xb0")  # bits 1011 0000 ...
print([tree.get_symbol(stream) for _ in range(3)])  # [1, 2, 0]
```

`HuffmanTree.build` returns `False` when no symbol has a code and `True`
otherwise. It raises `BoundsError` when a code size is larger than the
maximum code size or when the code sizes are over-subscribed.
`HuffmanTree.get_symbol` raises `BoundsError` when the bits read form no
valid code.

## Errors

Every exception raised by the package is a subclass of
`fwnt.errors.FwntError`: `ArgumentError` for invalid arguments, `BoundsError`
for values out of bounds and `UnsupportedValueError` for values that are
valid in form but not supported. All three are also `ValueError`s.

## What it does not do

The package does not parse security descriptors, access control lists,
access control entries or security identifiers, and it has no functions that
turn access masks or control flags into names. It offers no command-line
tool; it is a library only.

## Running the tests

```
pip install .[test]
pytest
```