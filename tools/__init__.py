"""Runtime support for generated tools: base class, registry and autoload."""

from tools.base import EmptyProperty, Tool

__all__ = [
    "EmptyProperty",
    "Tool",
]
