"""Backend bound to the ``prqlc`` Python package.

``prqlc.compile`` reports failures as a rendered, multi-line error box.  The
staged entry points (``prql_to_pl`` → ``pl_to_rq`` → ``rq_to_sql``) report
them as JSON diagnostics instead, so :meth:`PrqlcBackend.compile` runs the
stages one by one.
"""
from __future__ import annotations

from collections.abc import Callable

import prqlc

from prqlbind.compile.base import CompilerBackend
from prqlbind.errors import DiagnosticsError
from prqlbind.schema.diagnostics import Diagnostics
from prqlbind.schema.options import CompileConfiguration


def _call(fn: Callable[..., str], *args: object) -> str:
    # prqlc raises SyntaxError or ValueError; the message is JSON diagnostics
    # or, for some entry points, a rendered error box.
    try:
        return fn(*args)
    except (SyntaxError, ValueError) as exc:
        message = exc.msg if isinstance(exc, SyntaxError) and exc.msg else str(exc)
        raise DiagnosticsError(Diagnostics.from_message(message)) from exc


class PrqlcBackend(CompilerBackend):
    """Calls the PRQL compiler through its official Python bindings."""

    @property
    def name(self) -> str:
        return "prqlc"

    @staticmethod
    def compile_options(config: CompileConfiguration) -> prqlc.CompileOptions:
        return prqlc.CompileOptions(
            format=config.format,
            target=config.target.name,
            signature_comment=config.signature_comment,
            color=config.color,
            display=config.display.value,
        )

    def compile(self, source: str, config: CompileConfiguration) -> str:
        options = self.compile_options(config)
        pl = _call(prqlc.prql_to_pl, source)
        rq = _call(prqlc.pl_to_rq, pl)
        return _call(prqlc.rq_to_sql, rq, options)

    def prql_to_pl(self, source: str) -> str:
        return _call(prqlc.prql_to_pl, source)

    def pl_to_prql(self, pl: str) -> str:
        return _call(prqlc.pl_to_prql, pl)

    def targets(self) -> list[str]:
        return list(prqlc.get_targets())
