"""
Reference code points with their known UTF-8 encodings.

One sample per length class, plus the range boundaries. Used by the
demo script and the test suite.
"""
from typing import List, Tuple

# (name, code point, expected bytes)
SAMPLE_ENCODINGS: List[Tuple[str, int, bytes]] = [
    ("LATIN CAPITAL LETTER A", 0x41, b"\x41"),
    ("LATIN SMALL LETTER E WITH ACUTE", 0xE9, b"\xC3\xA9"),
    ("CJK UNIFIED IDEOGRAPH-4E2D", 0x4E2D, b"\xE4\xB8\xAD"),
    ("GRINNING FACE", 0x1F600, b"\xF0\x9F\x98\x80"),
]

# Last code point of each length class and first of the next
BOUNDARY_CODE_POINTS: List[int] = [
    0x00, 0x7F,
    0x80, 0x7FF,
    0x800, 0xFFFF,
    0x10000, 0x10FFFF,
]


def build_sample_text() -> List[int]:
    """Code points for a short mixed-width line of text."""
    return [ord(c) for c in "Café 中 \U0001F600\n"]
