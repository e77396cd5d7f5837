"""Reduction of compiler diagnostics to a single line of text."""
from __future__ import annotations

import logging

from prqlbind.schema.diagnostics import Diagnostics

logger = logging.getLogger(__name__)

#: Message used when the compiler fails without reporting any diagnostic.
FALLBACK_MESSAGE = "Unknown PRQL compilation error"


def normalize(diagnostics: Diagnostics) -> str:
    """Return the first diagnostic as ``"reason (hint)"`` or ``"reason"``.

    Later diagnostics and hints beyond the first are dropped.  An empty
    diagnostics set yields :data:`FALLBACK_MESSAGE` and is logged at ERROR.
    """
    if not diagnostics.inner:
        logger.error("Compiler reported a failure with no diagnostics")
        return FALLBACK_MESSAGE
    first = diagnostics.inner[0]
    if first.hints:
        return f"{first.reason} ({first.hints[0]})"
    return first.reason
