from __future__ import annotations

import msgspec.json
import pytest

from diaglines.diagnostic import Diagnostic, Severity
from diaglines.errors import DiagnosticDecodeError
from diaglines.host import MemoryHost
from diaglines.io import decode_batch, decode_diagnostics, encode_batch
from diaglines.lines import StyledSegment
from diaglines.render import render


def test_decode_editor_dicts():
    records = [
        {"lnum": 3, "col": 7, "severity": 2, "message": "unused", "code": 6133, "bufnr": 4},
        {"lnum": 0, "severity": "Error", "message": "boom"},
    ]
    assert decode_diagnostics(records) == [
        Diagnostic(line=3, column=7, severity=Severity.WARN, message="unused", code="6133"),
        Diagnostic(line=0, column=0, severity=Severity.ERROR, message="boom"),
    ]


def test_decode_json_bytes():
    data = b'[{"lnum": 1, "col": 2, "severity": 4, "message": "consider const"}]'
    (d,) = decode_diagnostics(data)
    assert d.severity is Severity.HINT
    assert d.code is None


@pytest.mark.parametrize(
    "data",
    [
        b"not json",
        b'[{"col": 1}]',
        b'[{"lnum": 1, "severity": 9}]',
        b'[{"lnum": 1, "severity": "fatal"}]',
        [{"lnum": "one"}],
    ],
)
def test_decode_errors(data) -> None:  # type: ignore[no-untyped-def]
    with pytest.raises(DiagnosticDecodeError):
        decode_diagnostics(data)


def test_encode_batch_shape():
    batch = {
        2: ((StyledSegment("  ", "A"), StyledSegment("└───", "B")),),
        0: ((StyledSegment("x", ""),),),
    }
    doc = msgspec.json.decode(encode_batch(batch))
    assert list(doc) == ["0", "2"]
    assert doc["2"] == [[["  ", "A"], ["└───", "B"]]]


def test_rendered_batch_survives_json():
    host = MemoryHost()
    host.add_buffer(1, "value = call(arg)")
    diags = decode_diagnostics([{"lnum": 0, "col": 8, "severity": 1, "message": "bad call"}])
    render(3, 1, diags, host=host)
    batch = host.batch(3, 1)
    assert dict(decode_batch(encode_batch(batch))) == dict(batch)
