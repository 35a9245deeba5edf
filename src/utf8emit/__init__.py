"""
utf8emit: Unicode code point to UTF-8 encoder with width-checked output.

This package turns integer code points into UTF-8 byte sequences and writes
them to a binary character stream.

LAYERS:
-------
    codec       - length classification and bit packing (pure)
    writer      - per-width entry points (8/16/32/64-bit) over a stream
    analyzer    - read-only inventory of a batch of code points
    cli         - command-line front end

Decoding UTF-8 is NOT part of this package.
"""

from utf8emit.codec import classify_length, encode, encode_all, encode_to_bytes
from utf8emit.model import CellWidth, EncodedSequence, ErrorPolicy, WriteResult, WriteStatus
from utf8emit.writer import Utf8Writer, write_u8, write_u16, write_u32, write_u64

__version__ = "0.1.0"

__all__ = [
    "classify_length",
    "encode",
    "encode_all",
    "encode_to_bytes",
    "CellWidth",
    "EncodedSequence",
    "ErrorPolicy",
    "WriteResult",
    "WriteStatus",
    "Utf8Writer",
    "write_u8",
    "write_u16",
    "write_u32",
    "write_u64",
]
