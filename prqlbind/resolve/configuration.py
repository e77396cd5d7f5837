"""Resolution of host option entries into a :class:`CompileConfiguration`.

``ConfigurationResolver`` walks the entries in input order and hands each
recognised one to its field handler.  Boolean fields are strict: a value
that does not decode aborts resolution with a :class:`ConfigurationError`.
``target`` and ``display`` are lenient: a value that does not decode falls
back to the default instead.  An unknown dialect *tag* is still an error.

Duplicate names are applied in order, so the last entry wins.
"""
from __future__ import annotations

import enum
import logging
from collections.abc import Callable, Iterable
from typing import Any, ClassVar

from prqlbind.errors import ConfigurationError
from prqlbind.schema.dialect import SqlTarget, resolve_dialect
from prqlbind.schema.options import (
    CompileConfiguration,
    DisplayMode,
    OptionEntry,
    OptionName,
)
from prqlbind.schema.values import (
    DecodeError,
    decode_bool,
    decode_optional_symbol,
    decode_symbol,
)

logger = logging.getLogger(__name__)

#: ``(raw_value) -> field_value``; raises ConfigurationError on hard failures.
FieldHandler = Callable[[Any], Any]


def _strict_bool(field: OptionName) -> FieldHandler:
    def handler(value: Any) -> bool:
        try:
            return decode_bool(value)
        except DecodeError as exc:
            raise ConfigurationError(field.value, "expected boolean", value=value) from exc

    return handler


def _resolve_target(value: Any) -> SqlTarget:
    try:
        tag = decode_optional_symbol(value)
    except DecodeError:
        logger.debug("Undecodable target %r; using unspecified dialect", value)
        return SqlTarget()
    if tag is None:
        return SqlTarget()
    return SqlTarget(dialect=resolve_dialect(tag))


def _resolve_display(value: Any) -> DisplayMode:
    try:
        tag = decode_symbol(value)
    except DecodeError:
        logger.debug("Undecodable display %r; using plain", value)
        return DisplayMode.PLAIN
    if tag == DisplayMode.ANSI_COLOR.value:
        return DisplayMode.ANSI_COLOR
    return DisplayMode.PLAIN


def _option_name(name: Any) -> OptionName | None:
    if isinstance(name, enum.Enum):
        name = name.value
    if not isinstance(name, str):
        return None
    try:
        return OptionName(name)
    except ValueError:
        return None


class ConfigurationResolver:
    """Builds a :class:`CompileConfiguration` from host option entries.

    Stateless: one instance may resolve any number of entry sequences,
    concurrently or not.

    Example::

        config = ConfigurationResolver().resolve(
            [("target", "postgres"), ("format", True)]
        )
        assert config.target.name == "sql.postgres"
    """

    _handlers: ClassVar[dict[OptionName, FieldHandler]] = {
        OptionName.FORMAT: _strict_bool(OptionName.FORMAT),
        OptionName.SIGNATURE_COMMENT: _strict_bool(OptionName.SIGNATURE_COMMENT),
        OptionName.COLOR: _strict_bool(OptionName.COLOR),
        OptionName.TARGET: _resolve_target,
        OptionName.DISPLAY: _resolve_display,
    }

    def resolve(self, entries: Iterable[OptionEntry]) -> CompileConfiguration:
        """Resolve ``entries`` into a configuration.

        Args:
            entries: ``(name, value)`` pairs, processed in order.

        Returns:
            The resolved configuration; defaults for anything not supplied.

        Raises:
            ConfigurationError: On the first boolean field that fails to
                decode, or an unrecognised dialect tag.
        """
        fields: dict[str, Any] = {}
        for name, value in entries:
            option = _option_name(name)
            if option is None:
                logger.debug("Ignoring unrecognised option %r", name)
                continue
            fields[option.value] = self._handlers[option](value)
        return CompileConfiguration(**fields)


def resolve_configuration(entries: Iterable[OptionEntry]) -> CompileConfiguration:
    """Resolve host option entries; see :meth:`ConfigurationResolver.resolve`."""
    return ConfigurationResolver().resolve(entries)
