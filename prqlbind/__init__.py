"""prqlbind – host boundary for the PRQL compiler.

Compile PRQL to SQL, and round-trip format PRQL, from untyped host options.

Public API
----------
``compile``
    Resolve ``(name, value)`` option entries into a configuration and
    compile PRQL source to SQL.

``format``
    Round-trip PRQL source through the compiler to its canonical form.

``supported_dialects``
    Dialects the installed compiler can target.

Both ``compile`` and ``format`` raise ``ConfigurationError`` or
``CompilationError``.  :mod:`prqlbind.host` wraps the same operations for
callers that need results as values instead.

Recognised options
------------------
- ``format`` (bool, default ``False``)
- ``target`` (dialect tag or ``None``, default unspecified: ``sql.any``)
- ``signature_comment`` (bool, default ``False``)
- ``color`` (bool, default ``False``)
- ``display`` (``"ansi_color"`` or anything else, default ``"plain"``)

Any other option name is ignored.
"""

from __future__ import annotations

from collections.abc import Iterable

from prqlbind.compile.base import CompilerBackend
from prqlbind.compile.facade import Invoker
from prqlbind.compile.normalizer import FALLBACK_MESSAGE, normalize
from prqlbind.compile.prqlc_backend import PrqlcBackend
from prqlbind.compile.registry import DEFAULT_BACKEND, BackendFactory
from prqlbind.errors import (
    CompilationError,
    ConfigurationError,
    DiagnosticsError,
    PrqlBindError,
)
from prqlbind.resolve.configuration import ConfigurationResolver, resolve_configuration
from prqlbind.schema.diagnostics import Diagnostic, Diagnostics
from prqlbind.schema.dialect import Dialect, SqlTarget, resolve_dialect
from prqlbind.schema.options import (
    CompileConfiguration,
    DisplayMode,
    OptionEntry,
    OptionName,
)

# ---------------------------------------------------------------------------
# Register built-in backends with BackendFactory
# ---------------------------------------------------------------------------

BackendFactory.register_class("prqlc", PrqlcBackend)

__all__ = [
    # Core operations
    "compile",
    "format",
    "supported_dialects",
    # Configuration
    "CompileConfiguration",
    "ConfigurationResolver",
    "resolve_configuration",
    "OptionEntry",
    "OptionName",
    "DisplayMode",
    # Dialects
    "Dialect",
    "SqlTarget",
    "resolve_dialect",
    # Compilation
    "BackendFactory",
    "CompilerBackend",
    "Invoker",
    "PrqlcBackend",
    # Diagnostics
    "Diagnostic",
    "Diagnostics",
    "normalize",
    "FALLBACK_MESSAGE",
    # Errors
    "PrqlBindError",
    "ConfigurationError",
    "CompilationError",
    "DiagnosticsError",
]


def compile(
    prql_source: str,
    options: Iterable[OptionEntry] = (),
    backend: str = DEFAULT_BACKEND,
) -> str:
    """Compile PRQL source to SQL.

    This is the main entry point::

        sql = prqlbind.compile(
            "from employees | take 10",
            [("target", "postgres"), ("signature_comment", False)],
        )

    Args:
        prql_source: The PRQL query text.
        options: ``(name, value)`` option entries, applied in order.
        backend: Registered compiler backend to use.

    Returns:
        The SQL emitted by the compiler.

    Raises:
        ConfigurationError: If a boolean option is not a boolean, or the
            target names an unknown dialect.
        CompilationError: If the compiler rejects the source.
    """
    config = resolve_configuration(options)
    return Invoker(BackendFactory.create(backend)).compile(prql_source, config)


def format(prql_source: str, backend: str = DEFAULT_BACKEND) -> str:
    """Return the canonical formatting of PRQL source.

    Formatting is idempotent: ``format(format(s)) == format(s)``.

    Raises:
        CompilationError: If the source cannot be parsed or rendered.
    """
    return Invoker(BackendFactory.create(backend)).format(prql_source)


def supported_dialects(backend: str = DEFAULT_BACKEND) -> list[Dialect]:
    """Return the dialects both this package and the compiler support."""
    available = set(BackendFactory.create(backend).targets())
    return [dialect for dialect in Dialect if dialect.target_name in available]
