"""
Serialization helpers for encodings and analyzer reports.

Provides JSON/YAML output via an intermediate dict representation.
Bytes are stored as upper-case hex strings so the output stays readable.
"""
from __future__ import annotations

import json
from typing import Any, Dict

import yaml

from utf8emit.analyzer import EncodingReport
from utf8emit.model import EncodedSequence


def sequence_to_dict(s: EncodedSequence) -> Dict[str, Any]:
    return {
        "code_point": s.code_point,
        "notation": f"U+{s.code_point:04X}" if s.code_point >= 0 else str(s.code_point),
        "length": s.length,
        "bytes": s.hex(),
    }


def sequence_from_dict(d: Dict[str, Any]) -> EncodedSequence:
    return EncodedSequence(code_point=d["code_point"], data=bytes.fromhex(d.get("bytes", "")))


def report_to_dict(r: EncodingReport) -> Dict[str, Any]:
    return {
        "sequences": [sequence_to_dict(s) for s in r.sequences],
        "length_counts": {str(k): v for k, v in sorted(r.length_counts.items())},
        "invalid": list(r.invalid),
        "surrogates": list(r.surrogates),
        "total_bytes": r.total_bytes,
    }


def report_from_dict(d: Dict[str, Any]) -> EncodingReport:
    r = EncodingReport()
    r.sequences = [sequence_from_dict(s) for s in d.get("sequences", [])]
    counts = d.get("length_counts", {})
    r.length_counts = {int(k): v for k, v in counts.items()} if counts else r.length_counts
    r.invalid = list(d.get("invalid", []))
    r.surrogates = list(d.get("surrogates", []))
    return r


def report_to_json(r: EncodingReport) -> str:
    return json.dumps(report_to_dict(r), sort_keys=True)


def report_from_json(s: str) -> EncodingReport:
    return report_from_dict(json.loads(s))


def report_to_yaml(r: EncodingReport) -> str:
    return yaml.safe_dump(report_to_dict(r))


def report_from_yaml(s: str) -> EncodingReport:
    return report_from_dict(yaml.safe_load(s))
