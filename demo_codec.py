#!/usr/bin/env python3
"""
Demo: encode sample code points and write them through each width.

Shows the byte layout of each length class, then writes a line of text
to stdout the way a u32 cell stream would.
"""

import io

from utf8emit import CellWidth, ErrorPolicy, Utf8Writer, encode_to_bytes
from utf8emit.analyzer import analyze_code_points
from utf8emit.examples import SAMPLE_ENCODINGS, build_sample_text


def main():
    print("=" * 80)
    print("UTF-8 ENCODING DEMO")
    print("=" * 80)

    for name, cp, _ in SAMPLE_ENCODINGS:
        seq = encode_to_bytes(cp)
        bits = " ".join(f"{b:08b}" for b in seq.data)
        print(f"U+{cp:04X} {name}")
        print(f"  bytes: {seq.hex()}")
        print(f"  bits:  {bits}")

    print("\nWIDTH CHECKS:")
    print("-" * 80)
    for width, value in [(CellWidth.U16, 0x10000), (CellWidth.U64, 0x100000000)]:
        w = Utf8Writer(stream=io.BytesIO(), policy=ErrorPolicy.RETURN)
        result = w.write(value, width)
        print(f"  u{width.bits} {value:#x}: {result.status.value} ({result.error})")

    print("\nSAMPLE TEXT:")
    print("-" * 80)
    text = build_sample_text()
    print(analyze_code_points(text).summary())

    print("-" * 80, flush=True)
    w = Utf8Writer(policy=ErrorPolicy.RAISE)
    for cp in text:
        w.write_u32(cp)


if __name__ == "__main__":
    main()
