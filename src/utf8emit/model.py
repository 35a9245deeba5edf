"""
Core value types for utf8emit.

These are small data classes and enums shared by the codec and the writer:
    - CellWidth (declared integer width of an output value)
    - EncodedSequence (one code point and its UTF-8 bytes)
    - WriteStatus / WriteResult (outcome of a writer call)
    - ErrorPolicy (what the writer does with a failed result)

None of these objects perform I/O.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class CellWidth(Enum):
    """
    Declared width of an integer value handed to the writer.

    Each width has its own entry point on Utf8Writer:
        U8  -> raw byte, bypasses the encoder
        U16 -> code point, must be below 0x10000
        U32 -> code point, encoded directly
        U64 -> code point, must fit in 32 bits
    """

    U8 = 8
    U16 = 16
    U32 = 32
    U64 = 64

    @property
    def bits(self) -> int:
        return self.value

    @property
    def max_value(self) -> int:
        return (1 << self.value) - 1

    @classmethod
    def from_bits(cls, bits: int) -> "CellWidth":
        """
        Look up a width by its bit count.

        Raises:
            ValueError: If bits is not 8, 16, 32 or 64
        """
        return cls(int(bits))


@dataclass(frozen=True)
class EncodedSequence:
    """
    A code point together with the bytes it encodes to.

    Properties:
        code_point: The input value
        data: UTF-8 bytes (empty when the code point is unclassifiable)
    """

    code_point: int
    data: bytes = b""

    @property
    def length(self) -> int:
        return len(self.data)

    @property
    def is_valid(self) -> bool:
        return len(self.data) > 0

    def hex(self, sep: str = " ") -> str:
        return sep.join(f"{b:02X}" for b in self.data)


class WriteStatus(Enum):
    """Outcome of a single writer call."""

    OK = "ok"
    OUT_OF_RANGE = "out_of_range"
    IO_FAILED = "io_failed"


@dataclass(frozen=True)
class WriteResult:
    """
    Result of a writer call.

    An unclassifiable code point is still OK with bytes_written == 0.
    Only width violations and stream failures carry an error.
    """

    status: WriteStatus
    bytes_written: int = 0
    error: Optional[Exception] = None

    @property
    def ok(self) -> bool:
        return self.status is WriteStatus.OK


class ErrorPolicy(Enum):
    """
    What a writer does when a call fails.

    ABORT  - terminate the process immediately (os.abort)
    RAISE  - raise the exception carried by the result
    RETURN - hand the failed WriteResult back to the caller
    """

    ABORT = "abort"
    RAISE = "raise"
    RETURN = "return"
