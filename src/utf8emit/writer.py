"""
Output adapter: write encoded code points to a binary stream.

Utf8Writer exposes one entry point per declared width:

    write_u8   raw byte, written as-is
    write_u32  code point, encoded to UTF-8
    write_u16  code point below 0x10000, delegates to write_u32
    write_u64  code point that fits in 32 bits, delegates to write_u32

Every call flushes the stream and returns a WriteResult. Failures
(width violations, stream errors) are routed through the writer's
ErrorPolicy; the default policy aborts the process.

Writers hold no lock. Callers sharing a stream across threads must
serialize access themselves.
"""

import logging
import os
import sys
from typing import BinaryIO, Optional

from utf8emit.codec import MAX_SEQUENCE_LENGTH, encode
from utf8emit.errors import OutputStreamError, WidthRangeError
from utf8emit.model import CellWidth, ErrorPolicy, WriteResult, WriteStatus

logger = logging.getLogger(__name__)

U16_LIMIT = 0x10000
U32_MAX = CellWidth.U32.max_value


class Utf8Writer:
    """
    Writes raw bytes and UTF-8 encoded code points to a binary stream.

    Args:
        stream: Binary file-like object with write() and flush().
            If None, sys.stdout.buffer is looked up on each call.
        policy: What to do with a failed write (default ABORT)
    """

    def __init__(self, stream: Optional[BinaryIO] = None, policy: ErrorPolicy = ErrorPolicy.ABORT):
        self._stream = stream
        self.policy = policy

    @property
    def stream(self) -> BinaryIO:
        if self._stream is not None:
            return self._stream
        return sys.stdout.buffer

    def write_u8(self, value: int) -> WriteResult:
        """Write value as a single raw byte."""
        if not 0 <= value <= CellWidth.U8.max_value:
            return self._fail_range(WidthRangeError(value, CellWidth.U8))
        return self._emit(bytes((value,)))

    def write_u16(self, value: int) -> WriteResult:
        """Write value as a code point; it must be below 0x10000."""
        if not 0 <= value < U16_LIMIT:
            return self._fail_range(WidthRangeError(value, CellWidth.U16, limit=U16_LIMIT))
        return self.write_u32(value)

    def write_u32(self, code_point: int) -> WriteResult:
        """
        Encode code_point and write its bytes in order.

        A code point above 0x10FFFF writes nothing and still succeeds.
        """
        if not 0 <= code_point <= U32_MAX:
            return self._fail_range(WidthRangeError(code_point, CellWidth.U32))
        buf = bytearray(MAX_SEQUENCE_LENGTH)
        n = encode(buf, code_point)
        if n == 0:
            logger.debug("code point %#x is not encodable, nothing written", code_point)
        return self._emit(buf[:n])

    def write_u64(self, value: int) -> WriteResult:
        """Write value as a code point; it must fit in 32 bits."""
        if not 0 <= value <= U32_MAX:
            return self._fail_range(WidthRangeError(value, CellWidth.U64, limit=U32_MAX + 1))
        return self.write_u32(value)

    def write(self, value: int, width: CellWidth = CellWidth.U32) -> WriteResult:
        """Dispatch to the entry point for width."""
        handlers = {
            CellWidth.U8: self.write_u8,
            CellWidth.U16: self.write_u16,
            CellWidth.U32: self.write_u32,
            CellWidth.U64: self.write_u64,
        }
        return handlers[width](value)

    def _emit(self, data) -> WriteResult:
        stream = self.stream
        written = 0
        try:
            for b in data:
                stream.write(bytes((b,)))
                written += 1
            stream.flush()
        except (OSError, ValueError) as e:
            # ValueError: write or flush on a closed stream
            err = OutputStreamError(f"output stream failed after {written} byte(s): {e}")
            err.__cause__ = e
            return self._handle(WriteResult(WriteStatus.IO_FAILED, written, err))
        return WriteResult(WriteStatus.OK, written)

    def _fail_range(self, err: WidthRangeError) -> WriteResult:
        return self._handle(WriteResult(WriteStatus.OUT_OF_RANGE, 0, err))

    def _handle(self, result: WriteResult) -> WriteResult:
        if self.policy is ErrorPolicy.RAISE:
            raise result.error
        if self.policy is ErrorPolicy.ABORT:
            logger.critical("fatal output error (%s): %s", result.status.value, result.error)
            os.abort()
        return result


_default_writer: Optional[Utf8Writer] = None


def get_default_writer() -> Utf8Writer:
    """Return the shared stdout writer, building it from Settings on first use."""
    global _default_writer
    if _default_writer is None:
        from utf8emit.config import get_settings
        _default_writer = Utf8Writer(policy=get_settings().error_policy())
    return _default_writer


def set_default_writer(writer: Optional[Utf8Writer]) -> None:
    """Replace the shared writer (None resets it to be rebuilt lazily)."""
    global _default_writer
    _default_writer = writer


def write_u8(value: int) -> WriteResult:
    """Write value as a raw byte to standard output."""
    return get_default_writer().write_u8(value)


def write_u16(value: int) -> WriteResult:
    """Write a code point below 0x10000 to standard output."""
    return get_default_writer().write_u16(value)


def write_u32(code_point: int) -> WriteResult:
    """Write the UTF-8 encoding of code_point to standard output."""
    return get_default_writer().write_u32(code_point)


def write_u64(value: int) -> WriteResult:
    """Write a code point given as a 64-bit value to standard output."""
    return get_default_writer().write_u64(value)
