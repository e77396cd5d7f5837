"""Pydantic model for the compile configuration.

One :class:`CompileConfiguration` is built per ``compile`` call from the
host's option entries and discarded afterwards.  Every field has a default,
so ``CompileConfiguration()`` is a complete, valid configuration.
"""
from __future__ import annotations

import enum
from typing import Any, Tuple

from pydantic import BaseModel, ConfigDict, Field

from prqlbind.schema.dialect import SqlTarget


class DisplayMode(str, enum.Enum):
    """How the compiler renders its messages."""

    PLAIN = "plain"
    ANSI_COLOR = "ansi_color"


class OptionName(str, enum.Enum):
    """Option names recognised by the configuration resolver."""

    FORMAT = "format"
    TARGET = "target"
    SIGNATURE_COMMENT = "signature_comment"
    COLOR = "color"
    DISPLAY = "display"


#: A single host-supplied ``(name, value)`` option entry.
OptionEntry = Tuple[str, Any]


class CompileConfiguration(BaseModel):
    """Immutable compiler configuration.

    Attributes:
        format: Pretty-print the emitted SQL.
        signature_comment: Append the compiler's provenance comment.
        color: Enable ANSI coloring of compiler output.
        display: Plain or ANSI-colored rendering.
        target: SQL target; defaults to an unspecified dialect.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    format: bool = False
    signature_comment: bool = False
    color: bool = False
    display: DisplayMode = DisplayMode.PLAIN
    target: SqlTarget = Field(default_factory=SqlTarget)
