"""
Command-line front end.

    utf8emit encode U+1F600 0x41 --width 32
    utf8emit inspect 'A' 0xE9 0x110000 --format yaml
"""
from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from utf8emit.analyzer import analyze_code_points
from utf8emit.config import OUTPUT_FORMATS, Settings, load_settings
from utf8emit.errors import CodePointParseError, ConfigError, Utf8EmitError
from utf8emit.model import CellWidth
from utf8emit.parsing import parse_code_points
from utf8emit.serialization import report_to_json, report_to_yaml
from utf8emit.writer import Utf8Writer

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="utf8emit",
        description="Encode code points to UTF-8 and write them to stdout.",
    )
    p.add_argument("-v", "--verbose", action="store_true", help="Verbose output")
    p.add_argument("--config", default=None, help="YAML settings file")

    # SUPPRESS keeps a top-level --config when the subcommand omits it
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--config", default=argparse.SUPPRESS, help="YAML settings file")

    sub = p.add_subparsers(dest="command")

    enc = sub.add_parser("encode", parents=[common], help="Write values to stdout")
    enc.add_argument("values", nargs="+", help="Code point literals (U+XXXX, 0xXX, decimal, 'c')")
    enc.add_argument(
        "-s", "--width",
        type=int,
        choices=[w.bits for w in CellWidth],
        default=None,
        help="Declared value width in bits (default from settings)",
    )

    ins = sub.add_parser("inspect", parents=[common], help="Print an encoding report")
    ins.add_argument("values", nargs="+", help="Code point literals")
    ins.add_argument("--format", choices=OUTPUT_FORMATS, default=None, help="Report format")

    return p


def _handle_encode(args: argparse.Namespace, settings: Settings) -> int:
    width = CellWidth.from_bits(args.width) if args.width else settings.cell_width()
    writer = Utf8Writer(policy=settings.error_policy())
    values = parse_code_points(args.values)
    for value in values:
        result = writer.write(value, width)
        if not result.ok:
            logger.error("write failed for %s: %s", value, result.error)
            return 1
    return 0


def _handle_inspect(args: argparse.Namespace, settings: Settings) -> int:
    fmt = (args.format or settings.OUTPUT_FORMAT).lower()
    report = analyze_code_points(parse_code_points(args.values, strict=False))
    logger.info("%s", report.summary())
    if fmt == "yaml":
        print(report_to_yaml(report), end="")
    else:
        print(report_to_json(report))
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point; returns the process exit code."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    try:
        settings = load_settings(args.config) if args.config else Settings()
    except (OSError, ConfigError) as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 2

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else settings.LOG_LEVEL.upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    if args.command is None:
        parser.print_help()
        return 2

    try:
        if args.command == "encode":
            return _handle_encode(args, settings)
        return _handle_inspect(args, settings)
    except CodePointParseError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 2
    except Utf8EmitError as e:
        print(f"FAIL: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
