"""
Encoding analyzer: inventory of a batch of code points.

Reports, for a sequence of code points:
    - how many fall in each UTF-8 length class
    - which values are unclassifiable (encode to nothing)
    - which values are surrogates (encodable here, but not scalar values)
    - total encoded size

IMPORTANT: This is read-only. It does not write anywhere.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, List

from utf8emit.codec import encode_to_bytes
from utf8emit.model import EncodedSequence

SURROGATE_FIRST = 0xD800
SURROGATE_LAST = 0xDFFF


def is_surrogate(code_point: int) -> bool:
    return SURROGATE_FIRST <= code_point <= SURROGATE_LAST


@dataclass
class EncodingReport:
    """Result of analyze_code_points()."""
    sequences: List[EncodedSequence] = field(default_factory=list)
    length_counts: Dict[int, int] = field(default_factory=lambda: {1: 0, 2: 0, 3: 0, 4: 0})
    invalid: List[int] = field(default_factory=list)
    surrogates: List[int] = field(default_factory=list)

    @property
    def total_code_points(self) -> int:
        return len(self.sequences)

    @property
    def total_bytes(self) -> int:
        return sum(s.length for s in self.sequences)

    def encoded(self) -> bytes:
        return b"".join(s.data for s in self.sequences)

    def summary(self) -> str:
        lines = [
            f"code points: {self.total_code_points}",
            f"encoded bytes: {self.total_bytes}",
        ]
        for length in sorted(self.length_counts):
            lines.append(f"  {length}-byte: {self.length_counts[length]}")
        if self.invalid:
            lines.append("unencodable: " + ", ".join(f"{cp:#x}" for cp in self.invalid))
        if self.surrogates:
            lines.append("surrogates: " + ", ".join(f"U+{cp:04X}" for cp in self.surrogates))
        return "\n".join(lines)


def analyze_code_points(code_points: Iterable[int]) -> EncodingReport:
    report = EncodingReport()
    for cp in code_points:
        seq = encode_to_bytes(cp)
        report.sequences.append(seq)
        if seq.is_valid:
            report.length_counts[seq.length] += 1
            if is_surrogate(cp):
                report.surrogates.append(cp)
        else:
            report.invalid.append(cp)
    return report
