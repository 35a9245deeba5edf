"""Exception types raised by utf8emit."""

from typing import Optional

from utf8emit.model import CellWidth


class Utf8EmitError(Exception):
    """Base class for all utf8emit errors."""
    pass


class WidthRangeError(Utf8EmitError, ValueError):
    """Raised when a value does not fit the rule for its declared width."""

    def __init__(self, value: int, width: CellWidth, limit: Optional[int] = None):
        self.value = value
        self.width = width
        self.limit = limit
        if limit is None:
            msg = f"value {value:#x} does not fit in u{width.bits}"
        else:
            msg = f"u{width.bits} value {value:#x} must be below {limit:#x}"
        super().__init__(msg)


class OutputStreamError(Utf8EmitError, OSError):
    """Raised when writing to or flushing the output stream fails."""
    pass


class CodePointParseError(Utf8EmitError, ValueError):
    """Raised when a code point literal cannot be parsed."""
    pass


class ConfigError(Utf8EmitError):
    """Raised when a configuration value is invalid."""
    pass
