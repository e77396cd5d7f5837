"""prqlbind compilation layer: backend seam, facade, and error normalization."""
from prqlbind.compile.base import CompilerBackend
from prqlbind.compile.facade import Invoker
from prqlbind.compile.normalizer import FALLBACK_MESSAGE, normalize
from prqlbind.compile.registry import BackendFactory

__all__ = [
    "BackendFactory",
    "CompilerBackend",
    "FALLBACK_MESSAGE",
    "Invoker",
    "normalize",
]
