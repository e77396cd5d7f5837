"""Decoding of untyped host option values.

The host hands over option values with no static type.  Each field decodes
its value explicitly through one of the adapters below; nothing assumes a
value's shape without checking it.

Three shapes are recognised:

``bool``
    A strict boolean.  ``1``, ``0`` and ``"true"`` are *not* booleans.
``symbol``
    A symbolic tag: a ``str``, or an ``Enum`` member whose value is a
    ``str`` (its value is used).
``optional symbol``
    A symbol or ``None``.
"""
from __future__ import annotations

import enum
from typing import Any, Optional

from pydantic import StrictBool, StrictStr, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

_BOOL_ADAPTER: TypeAdapter[bool] = TypeAdapter(StrictBool)
_SYMBOL_ADAPTER: TypeAdapter[str] = TypeAdapter(StrictStr)
_OPTIONAL_SYMBOL_ADAPTER: TypeAdapter[Optional[str]] = TypeAdapter(Optional[StrictStr])


class DecodeError(ValueError):
    """Raised when a host value does not have the expected shape.

    Args:
        expected: Name of the expected shape (``"boolean"``, ``"symbol"``).
        value: The offending raw value.
    """

    def __init__(self, expected: str, value: Any) -> None:
        super().__init__(f"expected {expected}, got {type(value).__name__}")
        self.expected = expected
        self.value = value


def _unwrap_enum(value: Any) -> Any:
    if isinstance(value, enum.Enum) and isinstance(value.value, str):
        return value.value
    return value


def decode_bool(value: Any) -> bool:
    """Decode a strict boolean.

    Raises:
        DecodeError: If ``value`` is not ``True`` or ``False``.
    """
    try:
        return _BOOL_ADAPTER.validate_python(value)
    except PydanticValidationError as exc:
        raise DecodeError("boolean", value) from exc


def decode_symbol(value: Any) -> str:
    """Decode a symbolic tag.

    Raises:
        DecodeError: If ``value`` is not a string or string-valued enum.
    """
    try:
        return _SYMBOL_ADAPTER.validate_python(_unwrap_enum(value))
    except PydanticValidationError as exc:
        raise DecodeError("symbol", value) from exc


def decode_optional_symbol(value: Any) -> str | None:
    """Decode a symbolic tag or ``None``.

    Raises:
        DecodeError: If ``value`` is neither ``None`` nor a symbol.
    """
    try:
        return _OPTIONAL_SYMBOL_ADAPTER.validate_python(_unwrap_enum(value))
    except PydanticValidationError as exc:
        raise DecodeError("optional symbol", value) from exc
