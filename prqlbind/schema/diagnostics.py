"""Typed models for the compiler's diagnostics output.

The PRQL compiler reports failures as a JSON document::

    {"inner": [{"kind": "Error", "code": "E0001", "reason": "...",
                "hints": ["..."], "span": "1:0-5", "display": "...",
                "location": {...}}]}

Only ``reason`` and ``hints`` feed the normalized message; the remaining
fields are kept so callers can inspect them.
"""
from __future__ import annotations

import json
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic import ValidationError as PydanticValidationError


class Diagnostic(BaseModel):
    """A single compiler diagnostic."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    reason: str
    hints: list[str] = Field(default_factory=list)
    kind: str | None = None
    code: str | None = None
    span: Any = None
    display: str | None = None
    location: Any = None


class Diagnostics(BaseModel):
    """An ordered sequence of diagnostics from one failed compiler call."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    inner: list[Diagnostic] = Field(default_factory=list)

    @model_validator(mode="before")
    @classmethod
    def _accept_bare_list(cls, data: Any) -> Any:
        """Accept ``[...]`` as shorthand for ``{"inner": [...]}``."""
        if isinstance(data, list):
            return {"inner": data}
        return data

    @classmethod
    def from_message(cls, message: str) -> "Diagnostics":
        """Parse a compiler error message into diagnostics.

        JSON payloads are parsed as-is.  Anything else is read as a rendered
        error report (see :func:`parse_report`) and becomes a single
        diagnostic.

        Args:
            message: The message carried by the compiler's exception.

        Returns:
            The parsed :class:`Diagnostics`.
        """
        try:
            return cls.model_validate(json.loads(message))
        except (json.JSONDecodeError, PydanticValidationError):
            return cls(inner=[parse_report(message)])


#: Marker preceding a label in a rendered report (``╰── unexpected @``).
_LABEL_MARKER = "╰──"
_HEADER_PREFIX = "Error:"
_HELP_PREFIX = "Help:"


def parse_report(message: str) -> Diagnostic:
    """Reduce a rendered error report to a one-line diagnostic.

    A rendered report looks like::

        Error:
           ╭─[ :1:1 ]
           │
         1 │ from employees | select {
           │                         ┬
           │                         ╰── unexpected end of input
        ───╯

    The first label becomes the reason, falling back to the text of the
    ``Error:`` header and then to the first non-blank line.  ``Help:`` lines
    become hints.  The full report is kept in ``display``.
    """
    lines = [line.strip() for line in message.splitlines() if line.strip()]
    labels: list[str] = []
    hints: list[str] = []
    header = ""
    for line in lines:
        if line.startswith(_HEADER_PREFIX) and not header:
            header = line[len(_HEADER_PREFIX):].strip()
        _, marker, label = line.partition(_LABEL_MARKER)
        label = label.lstrip("─").strip()
        if marker and label:
            labels.append(label)
        _, marker, hint = line.partition(_HELP_PREFIX)
        if marker and hint.strip():
            hints.append(hint.strip())

    if labels:
        reason = labels[0]
    elif header:
        reason = header
    elif lines:
        reason = lines[0]
    else:
        reason = message
    return Diagnostic(reason=reason, hints=hints, display=message)
