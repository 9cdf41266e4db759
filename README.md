# ndndissect

A tool for inspecting Named Data Networking (NDN) packets. It reads a stream
of TLV-encoded blocks, such as Interests, Data packets and certificates, and
prints each block as a tree. Every node in the tree shows:

- the block's type number,
- the name of that type,
- the length of the block's value.

A leaf node also shows its value. Bytes outside the unreserved URI characters
are percent-encoded.

## Installation

```
pip install .
```

The package has no runtime dependencies. To run the tests, install the `test`
extra (`pip install .[test]`) and run `pytest`.

## Command line

```
ndn-dissect [options] [input-file]
```

The tool reads from `input-file`. With no file, or with `-`, it reads from
standard input. `python -m ndndissect.cli` does the same thing.

| Option | Meaning |
| --- | --- |
| `-c`, `--content` | also dissect the value of Content elements |
| `-h`, `--help` | print the help message and exit |
| `-V`, `--version` | print `ndn-dissect 0.1.0` and exit |

Example output:

```
5 (Interest) (size: 10)
├─7 (Name) (size: 6)
│ └─8 (GenericNameComponent) (size: 4) [[test]]
└─33 (CanBePrefix) (size: 0) [[]]
```

Some values are always shown as raw bytes and never split into sub-elements:

- SignatureValue blocks,
- InterestSignatureValue blocks,
- Content blocks, unless you pass `--content`.

A block whose value is not a valid sequence of TLV elements is also shown as a
leaf.

Type names come from the NDN packet format. Any other type number is labelled
in one of two ways:

- `UNKNOWN_APP` for the application-private ranges, 128–252 and 32767 and above;
- `RESERVED` for everything else.

If the input stream contains a malformed or truncated block, the tool stops at
that point. It writes `ERROR: <reason> at offset <n>` to standard error. Blocks
that were decoded before the error are still printed. A single top-level block
may not have a value longer than 8800 bytes.

Exit codes:

| Code | Meaning |
| --- | --- |
| `0` | success, including input that stopped on a malformed block |
| `2` | bad command-line arguments |
| `3` | the input file is missing or cannot be read |

## Library use

```python
import io
from ndndissect.dissector import Dissector, Options
from ndndissect.tlv import encode_block

packet = encode_block(5, encode_block(7, encode_block(8, b"test")))
out = io.StringIO()
Dissector(io.BytesIO(packet), out, Options(dissect_content=False)).dissect()
print(out.getvalue())
```

`Dissector` reads from a binary stream and writes text to the output stream.
It reports errors on standard error.

`ndndissect.tlv` holds the low-level helpers:

- `read_block(stream)` reads one `Block` from a binary stream. At end of stream it returns `None`.
- `read_var_number(stream)` reads one variable-length number from a binary stream. At end of stream it returns `None`.
- `encode_block(tlv_type, value)` returns the wire encoding of a block.
- `encode_var_number(value)` encodes a TLV variable-length number.
- `decode_var_number(data, offset)` decodes a TLV variable-length number. It returns `(value, next_offset)`.
- `type_name(tlv_type)` returns the display name of a type number.
- `escape(data)` returns the percent-encoded form of a byte string.
- `Block` has the fields `tlv_type`, `value`, `wire` and `elements`:
  - `Block.parse()` splits the value into nested `elements`.
  - `Block.wire_size()` gives the size of the encoded block.

Malformed input raises `TlvError`, which is a subclass of `ValueError`.

## Limitations

The tool only decodes TLV structure. It does not:

- capture packets from the network or from a forwarder,
- verify signatures,
- interpret field values such as numbers, timestamps or name components.