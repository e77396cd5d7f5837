"""Host-facing entry points that return results as values.

The host runtime cannot receive Python exceptions, so both entry points
return :class:`Ok` or :class:`Err` instead of raising for configuration or
compilation failures::

    from prqlbind import host

    result = host.compile("from employees", [("target", "postgres")])
    if isinstance(result, host.Ok):
        print(result.value)
    else:
        print(result.error)
"""
from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Generic, TypeVar, Union

from prqlbind.compile.facade import Invoker
from prqlbind.compile.registry import DEFAULT_BACKEND, BackendFactory
from prqlbind.errors import CompilationError, ConfigurationError
from prqlbind.resolve.configuration import resolve_configuration
from prqlbind.schema.options import OptionEntry

T = TypeVar("T")


@dataclass(frozen=True)
class Ok(Generic[T]):
    """Successful result carrying ``value``."""

    value: T

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class Err:
    """Failed result carrying a one-line ``error`` and its ``kind``."""

    error: str
    kind: str

    @property
    def ok(self) -> bool:
        return False


Result = Union[Ok[T], Err]


def compile(
    prql_source: str,
    options: Iterable[OptionEntry] = (),
    backend: str = DEFAULT_BACKEND,
) -> Result[str]:
    """Compile ``prql_source`` with host ``options``.

    Returns:
        ``Ok(sql)`` on success; ``Err`` with ``kind`` set to
        ``CONFIGURATION_ERROR`` or ``COMPILATION_ERROR`` otherwise.
    """
    try:
        config = resolve_configuration(options)
        return Ok(Invoker(BackendFactory.create(backend)).compile(prql_source, config))
    except (ConfigurationError, CompilationError) as exc:
        return Err(error=str(exc), kind=exc.code)


def format(prql_source: str, backend: str = DEFAULT_BACKEND) -> Result[str]:
    """Round-trip format ``prql_source``.

    Returns:
        ``Ok(prql)`` on success; ``Err`` with ``kind`` ``COMPILATION_ERROR``
        otherwise.
    """
    try:
        return Ok(Invoker(BackendFactory.create(backend)).format(prql_source))
    except CompilationError as exc:
        return Err(error=str(exc), kind=exc.code)
