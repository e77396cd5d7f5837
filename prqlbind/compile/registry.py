"""Backend registry.

``BackendFactory`` maps a backend name to a :class:`CompilerBackend`
class.  The ``prqlc`` binding is registered by the package; alternative
bindings (or test doubles) register the same way::

    BackendFactory.register_class("recording", RecordingBackend)
    backend = BackendFactory.create("recording")
"""
from __future__ import annotations

from typing import ClassVar

from prqlbind.compile.base import CompilerBackend
from prqlbind.errors import PrqlBindError

#: Name of the backend used when none is requested.
DEFAULT_BACKEND = "prqlc"


class UnknownBackendError(PrqlBindError):
    """Raised when no backend is registered under the requested name."""

    code = "UNKNOWN_BACKEND"


class BackendFactory:
    """Registry mapping backend names to :class:`CompilerBackend` classes."""

    _backends: ClassVar[dict[str, type[CompilerBackend]]] = {}

    @classmethod
    def register_class(cls, name: str, backend_cls: type[CompilerBackend]) -> None:
        """Register ``backend_cls`` under ``name``."""
        cls._backends[name] = backend_cls

    @classmethod
    def create(cls, name: str = DEFAULT_BACKEND) -> CompilerBackend:
        """Instantiate the backend registered for ``name``.

        Raises:
            UnknownBackendError: If no backend is registered for ``name``.
        """
        backend_cls = cls._backends.get(name)
        if backend_cls is None:
            raise UnknownBackendError(
                f"Unknown compiler backend: '{name}'. "
                f"Registered backends: {sorted(cls._backends)}."
            )
        return backend_cls()
