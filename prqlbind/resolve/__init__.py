"""prqlbind resolution layer: host options → CompileConfiguration."""
from prqlbind.resolve.configuration import ConfigurationResolver, resolve_configuration

__all__ = ["ConfigurationResolver", "resolve_configuration"]
