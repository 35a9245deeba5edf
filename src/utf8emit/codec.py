"""
UTF-8 codec core: length classification and encoding.

Bit layout per length class:

    1 byte:  0xxxxxxx
    2 bytes: 110xxxxx 10xxxxxx
    3 bytes: 1110xxxx 10xxxxxx 10xxxxxx
    4 bytes: 11110xxx 10xxxxxx 10xxxxxx 10xxxxxx

Both functions are pure apart from writing into the caller's buffer.
Neither raises for an out-of-range code point: the sentinel 0 is returned.
"""

from typing import Iterable

from utf8emit.model import EncodedSequence

MAX_CODE_POINT = 0x10FFFF

# Inclusive upper bound of each length class, shortest first
LENGTH_BOUNDS = (0x7F, 0x7FF, 0xFFFF, MAX_CODE_POINT)

# Header bits and payload mask of the leading byte, indexed by length
LEADING_MARKS = (None, 0x00, 0xC0, 0xE0, 0xF0)
LEADING_MASKS = (None, 0x7F, 0x1F, 0x0F, 0x07)

CONTINUATION_MARK = 0x80
CONTINUATION_MASK = 0x3F

MAX_SEQUENCE_LENGTH = 4


def classify_length(code_point: int) -> int:
    """
    Return the number of bytes the UTF-8 encoding of code_point occupies.

    Args:
        code_point: Any integer

    Returns:
        1, 2, 3 or 4; 0 if code_point is negative or above 0x10FFFF
    """
    if code_point < 0:
        return 0
    for length, bound in enumerate(LENGTH_BOUNDS, start=1):
        if code_point <= bound:
            return length
    return 0


def encode(buffer, code_point: int) -> int:
    """
    Write the UTF-8 encoding of code_point into the front of buffer.

    Args:
        buffer: Mutable byte buffer (bytearray, writable memoryview)
            with room for at least 4 bytes
        code_point: Value to encode

    Returns:
        Number of bytes written (0 when code_point is unclassifiable)

    Bytes past the returned count are left untouched.
    """
    length = classify_length(code_point)
    if length == 0:
        return 0

    # Continuation bytes, last first
    value = code_point
    for i in range(length - 1, 0, -1):
        buffer[i] = CONTINUATION_MARK | (value & CONTINUATION_MASK)
        value >>= 6
    buffer[0] = LEADING_MARKS[length] | (value & LEADING_MASKS[length])
    return length


def encode_to_bytes(code_point: int) -> EncodedSequence:
    """Encode a single code point into a fresh EncodedSequence."""
    buf = bytearray(MAX_SEQUENCE_LENGTH)
    n = encode(buf, code_point)
    return EncodedSequence(code_point=code_point, data=bytes(buf[:n]))


def encode_all(code_points: Iterable[int]) -> bytes:
    """
    Encode a run of code points back to back.

    Unclassifiable values contribute nothing to the output.
    """
    out = bytearray()
    buf = bytearray(MAX_SEQUENCE_LENGTH)
    for cp in code_points:
        n = encode(buf, cp)
        out += buf[:n]
    return bytes(out)
