"""Compiler backend abstraction: the seam to the external PRQL compiler.

``CompilerBackend`` exposes the three compiler entry points the facade
needs.  Implementations report every failure as a
:class:`~prqlbind.errors.DiagnosticsError`; the facade owns normalization.
"""
from __future__ import annotations

from abc import ABC, abstractmethod

from prqlbind.schema.options import CompileConfiguration


class CompilerBackend(ABC):
    """Abstract base for PRQL compiler bindings."""

    @abstractmethod
    def compile(self, source: str, config: CompileConfiguration) -> str:
        """Compile PRQL ``source`` to SQL in a single pass.

        Raises:
            DiagnosticsError: If the compiler rejects the source.
        """

    @abstractmethod
    def prql_to_pl(self, source: str) -> str:
        """Parse PRQL ``source`` into its serialized PL representation.

        Raises:
            DiagnosticsError: If the source does not parse.
        """

    @abstractmethod
    def pl_to_prql(self, pl: str) -> str:
        """Render a serialized PL representation back to PRQL source.

        Raises:
            DiagnosticsError: If the representation cannot be rendered.
        """

    @abstractmethod
    def targets(self) -> list[str]:
        """Return the target names the compiler supports (``'sql.postgres'``, ...)."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Return the registry name of this backend."""
