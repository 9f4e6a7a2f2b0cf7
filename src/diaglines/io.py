"""
diaglines.io
============

msgspec codecs at the edges: editor-shaped diagnostic records in, rendered
batches out (JSON, for snapshots and out-of-process hosts).
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from types import MappingProxyType
from typing import Any

import msgspec
import msgspec.json

from diaglines.diagnostic import Diagnostic, Severity
from diaglines.errors import DiagnosticDecodeError
from diaglines.lines import RenderBatch, StyledSegment, VirtualLine

__all__ = ["DiagnosticRecord", "decode_diagnostics", "encode_batch", "decode_batch"]

_SEVERITY_NAMES: dict[str, Severity] = {
    "error": Severity.ERROR,
    "warn": Severity.WARN,
    "warning": Severity.WARN,
    "info": Severity.INFO,
    "information": Severity.INFO,
    "hint": Severity.HINT,
}


class DiagnosticRecord(msgspec.Struct, frozen=True):
    """One diagnostic as editors hand them out; unknown fields are ignored."""

    lnum: int
    col: int = 0
    severity: int | str = 1
    message: str = ""
    code: str | int | None = None

    def to_diagnostic(self) -> Diagnostic:
        if isinstance(self.severity, int):
            sev = Severity.from_level(self.severity)
        else:
            try:
                sev = _SEVERITY_NAMES[self.severity.strip().lower()]
            except KeyError:
                raise ValueError(f"Unknown severity name: {self.severity!r}") from None
        code = None if self.code is None else str(self.code)
        return Diagnostic(line=self.lnum, column=self.col, severity=sev, message=self.message, code=code)


_RECORDS = list[DiagnosticRecord]


def decode_diagnostics(data: bytes | str | Sequence[Mapping[str, Any]]) -> list[Diagnostic]:
    """Decode JSON (bytes/str) or already-parsed dicts into Diagnostics."""
    try:
        if isinstance(data, (bytes, str)):
            records = msgspec.json.decode(data, type=_RECORDS)
        else:
            records = msgspec.convert(list(data), type=_RECORDS)
    except (msgspec.ValidationError, msgspec.DecodeError) as e:
        raise DiagnosticDecodeError(f"Malformed diagnostic records: {e}") from e

    out: list[Diagnostic] = []
    for i, rec in enumerate(records):
        try:
            out.append(rec.to_diagnostic())
        except ValueError as e:
            raise DiagnosticDecodeError(f"record {i}: {e}") from e
    return out


def encode_batch(batch: RenderBatch) -> bytes:
    """``{"<line>": [[[text, style], ...], ...]}`` with lines in ascending order."""
    doc = {
        str(line): [[[seg.text, seg.style] for seg in vline] for vline in batch[line]]
        for line in sorted(batch)
    }
    return msgspec.json.encode(doc) + b"\n"


def decode_batch(data: bytes | str) -> RenderBatch:
    try:
        doc = msgspec.json.decode(data, type=dict[int, list[list[tuple[str, str]]]])
    except (msgspec.ValidationError, msgspec.DecodeError) as e:
        raise DiagnosticDecodeError(f"Malformed render batch: {e}") from e
    out: dict[int, tuple[VirtualLine, ...]] = {}
    for line, vlines in doc.items():
        out[line] = tuple(tuple(StyledSegment(t, s) for t, s in vl) for vl in vlines)
    return MappingProxyType(out)
