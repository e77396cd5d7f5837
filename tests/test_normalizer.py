"""Unit tests for diagnostics parsing and error normalization."""
from __future__ import annotations

import json
import logging

from prqlbind.compile.normalizer import FALLBACK_MESSAGE, normalize
from prqlbind.schema.diagnostics import Diagnostic, Diagnostics
from tests.fixtures import INVALID_DIAGNOSTICS


def _diags(*entries: tuple[str, list[str]]) -> Diagnostics:
    return Diagnostics(inner=[Diagnostic(reason=r, hints=h) for r, h in entries])


def test_reason_with_hint():
    assert normalize(_diags(("R", ["H"]))) == "R (H)"


def test_reason_without_hint():
    assert normalize(_diags(("R", []))) == "R"


def test_only_first_hint_is_used():
    assert normalize(_diags(("R", ["H1", "H2"]))) == "R (H1)"


def test_only_first_diagnostic_is_used():
    assert normalize(_diags(("first", []), ("second", ["hint"]))) == "first"
    assert normalize(INVALID_DIAGNOSTICS) == "unexpected @ (remove the stray character)"


def test_empty_diagnostics_fall_back(caplog):
    with caplog.at_level(logging.ERROR, logger="prqlbind.compile.normalizer"):
        assert normalize(Diagnostics()) == FALLBACK_MESSAGE
    assert caplog.records


def test_parse_compiler_json():
    payload = json.dumps(
        {
            "inner": [
                {
                    "kind": "Error",
                    "code": "E0001",
                    "reason": "Unknown name `foo`",
                    "hints": ["did you mean `from`?"],
                    "span": "1:0-3",
                    "display": "Error: ...",
                    "location": {"start": [0, 0], "end": [0, 3]},
                }
            ]
        }
    )
    diags = Diagnostics.from_message(payload)
    assert diags.inner[0].code == "E0001"
    assert normalize(diags) == "Unknown name `foo` (did you mean `from`?)"


def test_parse_bare_list():
    diags = Diagnostics.from_message('[{"reason": "bad", "hints": []}]')
    assert normalize(diags) == "bad"


def test_parse_empty_inner():
    assert Diagnostics.from_message('{"inner": []}').inner == []


def test_non_json_message_becomes_reason():
    diags = Diagnostics.from_message("Invalid options")
    assert normalize(diags) == "Invalid options"


def test_json_of_wrong_shape_becomes_reason():
    diags = Diagnostics.from_message('"just a string"')
    assert normalize(diags) == '"just a string"'


def test_missing_hints_default_to_empty():
    diags = Diagnostics.from_message('{"inner": [{"reason": "no hints"}]}')
    assert diags.inner[0].hints == []


def test_rendered_report_label_becomes_reason():
    report = (
        "Error:\n"
        "   ╭─[ :1:6 ]\n"
        "   │\n"
        " 1 │ from x | foo\n"
        "   │          ─┬─\n"
        "   │           ╰─── Unknown name `foo`\n"
        "   │\n"
        "   │ Help: did you mean `from`?\n"
        "───╯\n"
    )
    diags = Diagnostics.from_message(report)
    assert normalize(diags) == "Unknown name `foo` (did you mean `from`?)"


def test_rendered_report_header_becomes_reason():
    diags = Diagnostics.from_message("Error: missing main pipeline\n───╯\n")
    assert normalize(diags) == "missing main pipeline"
