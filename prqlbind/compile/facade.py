"""Invocation facade: configuration in, SQL or formatted PRQL out.

``Invoker`` is the only place that calls the compiler backend.  Any
:class:`~prqlbind.errors.DiagnosticsError` from the backend is normalized
into a :class:`~prqlbind.errors.CompilationError` whose message is the one
line produced by :func:`~prqlbind.compile.normalizer.normalize`.  Nothing
is cached and nothing is retried.
"""
from __future__ import annotations

from prqlbind.compile.base import CompilerBackend
from prqlbind.compile.normalizer import normalize
from prqlbind.errors import CompilationError, DiagnosticsError
from prqlbind.schema.options import CompileConfiguration


class Invoker:
    """Runs compile and round-trip format calls against a backend.

    Args:
        backend: The compiler binding to call.
    """

    def __init__(self, backend: CompilerBackend) -> None:
        self._backend = backend

    def compile(self, source: str, config: CompileConfiguration) -> str:
        """Compile PRQL ``source`` to SQL with ``config``.

        Returns:
            The SQL text exactly as the compiler emitted it.

        Raises:
            CompilationError: If the compiler rejects the source.
        """
        try:
            return self._backend.compile(source, config)
        except DiagnosticsError as exc:
            raise CompilationError(normalize(exc.diagnostics), exc.diagnostics) from exc

    def format(self, source: str) -> str:
        """Round-trip PRQL ``source`` through PL to its canonical form.

        Raises:
            CompilationError: If either the parse or the render stage fails.
        """
        try:
            pl = self._backend.prql_to_pl(source)
            return self._backend.pl_to_prql(pl)
        except DiagnosticsError as exc:
            raise CompilationError(normalize(exc.diagnostics), exc.diagnostics) from exc
