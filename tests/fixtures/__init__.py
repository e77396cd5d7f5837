"""Test fixtures: a deterministic compiler backend and sample diagnostics."""

from __future__ import annotations

import json

from prqlbind.compile.base import CompilerBackend
from prqlbind.errors import DiagnosticsError
from prqlbind.schema.diagnostics import Diagnostic, Diagnostics
from prqlbind.schema.dialect import Dialect
from prqlbind.schema.options import CompileConfiguration

#: Source the fake backend rejects with two diagnostics.
INVALID_SOURCE = "not valid @@@"

#: Source the fake backend rejects with no diagnostics at all.
SILENT_FAILURE_SOURCE = "silent failure"

#: Source that parses but cannot be rendered back to PRQL.
UNRENDERABLE_SOURCE = "from unrenderable"

INVALID_DIAGNOSTICS = Diagnostics(
    inner=[
        Diagnostic(
            reason="unexpected @",
            hints=["remove the stray character", "see the PRQL book"],
            code="E0001",
        ),
        Diagnostic(reason="unknown name valid"),
    ]
)

RENDER_DIAGNOSTICS = Diagnostics(inner=[Diagnostic(reason="cannot render module")])


class FakeBackend(CompilerBackend):
    """Deterministic stand-in for the ``prqlc`` binding.

    ``compile`` echoes the last word of the source as a table name and the
    target name as a comment; ``prql_to_pl`` / ``pl_to_prql`` collapse
    whitespace so that formatting is idempotent.
    """

    def __init__(self) -> None:
        self.calls: list[tuple[str, object]] = []

    @property
    def name(self) -> str:
        return "fake"

    def compile(self, source: str, config: CompileConfiguration) -> str:
        self.calls.append(("compile", (source, config)))
        if source == INVALID_SOURCE:
            raise DiagnosticsError(INVALID_DIAGNOSTICS)
        if source == SILENT_FAILURE_SOURCE:
            raise DiagnosticsError(Diagnostics())
        table = source.split()[-1]
        return f"SELECT * FROM {table} -- {config.target.name}"

    def prql_to_pl(self, source: str) -> str:
        self.calls.append(("prql_to_pl", source))
        if source == INVALID_SOURCE:
            raise DiagnosticsError(INVALID_DIAGNOSTICS)
        return json.dumps({"source": " ".join(source.split())})

    def pl_to_prql(self, pl: str) -> str:
        self.calls.append(("pl_to_prql", pl))
        text = json.loads(pl)["source"]
        if text == UNRENDERABLE_SOURCE:
            raise DiagnosticsError(RENDER_DIAGNOSTICS)
        return text + "\n"

    def targets(self) -> list[str]:
        return ["sql.any", Dialect.GENERIC.target_name, Dialect.POSTGRES.target_name]


#: Registry name of :class:`FakeBackend`.
FAKE_BACKEND = "fake"
