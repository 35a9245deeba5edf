"""
Code point literal parser.

Accepted forms:
    U+1F600   Unicode notation (hex)
    0x41      Python-style hex
    65        decimal
    'A'       a single quoted character

Parsing does not range-check. Values above 0x10FFFF are returned
unchanged and left to the codec, which treats them as unclassifiable.
"""

import re
import warnings
from typing import Iterable, List

from utf8emit.errors import CodePointParseError

_UNICODE_RE = re.compile(r'^[Uu]\+([0-9A-Fa-f]+)$')
_HEX_RE = re.compile(r'^0[xX]([0-9A-Fa-f]+)$')
_DEC_RE = re.compile(r'^\d+$')
_CHAR_RE = re.compile(r"^(['\"])(.)\1$", re.DOTALL)


def parse_code_point(text: str) -> int:
    """
    Parse one code point literal.

    Args:
        text: Literal in one of the accepted forms

    Returns:
        The integer value

    Raises:
        CodePointParseError: If text matches no accepted form
    """
    token = text.strip()

    m = _UNICODE_RE.match(token) or _HEX_RE.match(token)
    if m:
        return int(m.group(1), 16)

    if _DEC_RE.match(token):
        return int(token)

    m = _CHAR_RE.match(token)
    if m:
        return ord(m.group(2))

    raise CodePointParseError(f"Not a code point literal: {text!r}")


def parse_code_points(tokens: Iterable[str], strict: bool = True) -> List[int]:
    """
    Parse a batch of literals.

    In strict mode the first bad token raises CodePointParseError.
    Otherwise bad tokens are skipped with a UserWarning.
    """
    values = []
    for token in tokens:
        try:
            values.append(parse_code_point(token))
        except CodePointParseError as e:
            if strict:
                raise
            warnings.warn(f"Skipping token: {e}", UserWarning)
    return values


__all__ = [
    "parse_code_point",
    "parse_code_points",
]
