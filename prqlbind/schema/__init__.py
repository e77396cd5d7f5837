"""prqlbind schema layer: dialects, options, host values, and diagnostics."""
from prqlbind.schema.diagnostics import Diagnostic, Diagnostics
from prqlbind.schema.dialect import Dialect, SqlTarget, resolve_dialect
from prqlbind.schema.options import (
    CompileConfiguration,
    DisplayMode,
    OptionEntry,
    OptionName,
)
from prqlbind.schema.values import DecodeError

__all__ = [
    "CompileConfiguration",
    "DecodeError",
    "Diagnostic",
    "Diagnostics",
    "Dialect",
    "DisplayMode",
    "OptionEntry",
    "OptionName",
    "SqlTarget",
    "resolve_dialect",
]
