# spec

Low-level encoding and decoding of the spec binary value format.

Every value is written *back to front*. Its payload comes first and a single
type byte comes last. A reader starts at the end of a byte string, reads the
type, and walks backwards to find the value and its size. Sizes and integers
use a compact variable-length encoding that is also read in reverse. Signed
integers are zigzag-encoded.

## Modules

- `spec.format` holds the `Type` enumeration (`Type.check()` raises
  `ValueError` for an unsupported type, and `str(Type.INT32)` gives
  `"int32"`). It also holds the `ListElement` and `MessageField` records, the
  `ListTable` and `MessageTable` readers, and `is_big_list` /
  `is_big_message`, which decide whether a table needs the wide layout.
- `spec.encode` provides `encode_bool`, `encode_byte`,
  `encode_int16/32/64`, `encode_uint16/32/64`, `encode_float32/64`,
  `encode_bin64/128/256`, `encode_bytes`, `encode_string`, `encode_struct`,
  `encode_list_table` and `encode_message_table`. Each one appends to a
  `bytearray` and returns the number of bytes written. It raises
  `EncodeError` for:
  - a value outside the range of its type;
  - a binary value of the wrong length;
  - a size that is negative or larger than 2**31 - 1.
- `spec.decode` provides `decode_type`, `decode_type_size`, `decode_size`
  and the scalar decoders: `decode_bool`, `decode_byte`,
  `decode_int16/32/64`, `decode_uint16/32/64`, `decode_float32/64` and
  `decode_bin64/128/256`.
- `spec.decode_compound` provides `decode_bytes`, `decode_string`,
  `decode_struct`, `decode_list_table` and `decode_message_table`.

## Decoding

Each decoder returns a tuple of the value and the number of bytes the value
takes up at the end of the input. Empty input decodes to the zero value with
a size of 0. `decode_type` gives `Type.UNDEFINED` for empty input.

`DecodeError`, a subclass of `ValueError`, is raised for:

- malformed data;
- a wrong type byte;
- a value that does not fit the requested width.

Integers and floats widen freely. For example, `decode_int64` reads an
`INT32` value, and `decode_float64` reads a `FLOAT32` value. Narrowing is
checked. `decode_bool` reads any type other than `TRUE` as `False`.
`decode_type_size` gives the type and the total encoded size of any value
without decoding it.

## Example

```python
from spec.encode import encode_int32, encode_string
from spec.decode import decode_int64, decode_type_size
from spec.decode_compound import decode_string
from spec.format import Type

buf = bytearray()
encode_int32(buf, 2_147_483_647)

value, size = decode_int64(bytes(buf))
assert value == 2_147_483_647 and size == len(buf)

typ, total = decode_type_size(bytes(buf))
assert typ == Type.INT32 and total == len(buf)

buf = bytearray()
encode_string(buf, "hello, world")
text, size = decode_string(bytes(buf))
assert text == "hello, world" and size == len(buf)
```

## Lists and messages

A list or a message is stored as its element data followed by an offset
table. Write the data first. Then call `encode_list_table` or
`encode_message_table` with the data size and a sequence of `ListElement` or
`MessageField` entries. Message fields must be ordered by tag. A small table
is used when possible, and a big one only when needed:

- a list is big when it has more than 255 elements or when the last offset is
  above 65535;
- a message is big when any tag is above 255 or any offset is above 65535.

Decoding returns a `ListTable` or a `MessageTable`. Both have `len()`,
`data_size` and `big`.

A `ListTable` has these methods:

- `elements()` parses the table into a list of `ListElement` entries.
- `offset(index)` gives the start and end of an element, or `(-1, -1)` when
  the index is out of range.

A `MessageTable` has these methods:

- `fields()` parses the table into a list of `MessageField` entries.
- `offset(tag)` finds the end offset of a field by binary search, or gives
  `-1` when the tag is absent.
- `offset_by_index(index)` gives the end offset of the field at that index,
  or `-1` when the index is out of range.
- `field(index)` gives the `MessageField` at that index, or `None` when the
  index is out of range.

## What this package does not do

It only handles single values and offset tables. It has no schema language,
no code generation, and no builder that tracks offsets while nested values
are written. The caller records each element's end offset and passes the
table to the encoder. It also has no command-line tool.

## Installation

```
pip install .
```

## Running the tests

```
pip install ".[test]"
pytest
```