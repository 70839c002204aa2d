"""Explicit registry of discovered tool classes."""
from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Iterator, List, Optional, Type

from pydantic import BaseModel, ConfigDict

from tools.base import Tool
from tools.exceptions import DuplicateToolError, ToolNotFoundError
from utils.logger import get_logger

logger = get_logger(__name__)

__all__ = [
    "ToolDescriptor",
    "ToolRegistry",
    "get_registry",
    "reset_registry",
]


class ToolDescriptor(BaseModel):
    """Registry entry for one tool class."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    name: str
    class_name: str
    description: str = ""
    source: Optional[Path] = None
    tool_class: Type[Tool]

    @classmethod
    def from_class(cls, tool_class: Type[Tool], *, source: Optional[Path] = None) -> "ToolDescriptor":
        return cls(
            name=tool_class.tool_name(),
            class_name=tool_class.__name__,
            description=tool_class.description,
            source=source,
            tool_class=tool_class,
        )

    def input_schema(self) -> Dict[str, Any]:
        return self.tool_class.input_schema()


class ToolRegistry:
    """
    Name -> ``ToolDescriptor`` mapping populated by the autoload step.

    Re-registering a name from the same source replaces the entry, so a
    discovery pass can be repeated. A name coming from a different source is
    rejected.
    """

    def __init__(self) -> None:
        self._tools: Dict[str, ToolDescriptor] = {}

    def register(self, descriptor: ToolDescriptor) -> ToolDescriptor:
        existing = self._tools.get(descriptor.name)
        if existing is not None and existing.source != descriptor.source:
            raise DuplicateToolError(descriptor.name, existing=existing.source, incoming=descriptor.source)

        self._tools[descriptor.name] = descriptor
        logger.debug(
            "tool_registered",
            tool=descriptor.name,
            class_name=descriptor.class_name,
            source=str(descriptor.source) if descriptor.source else None,
            replaced=existing is not None,
        )
        return descriptor

    def register_class(self, tool_class: Type[Tool], *, source: Optional[Path] = None) -> ToolDescriptor:
        return self.register(ToolDescriptor.from_class(tool_class, source=source))

    def unregister(self, name: str) -> ToolDescriptor:
        try:
            return self._tools.pop(name)
        except KeyError:
            raise ToolNotFoundError(name) from None

    def get(self, name: str) -> ToolDescriptor:
        try:
            return self._tools[name]
        except KeyError:
            raise ToolNotFoundError(name) from None

    def names(self) -> List[str]:
        return sorted(self._tools)

    def descriptors(self) -> List[ToolDescriptor]:
        return [self._tools[name] for name in self.names()]

    def clear(self) -> None:
        self._tools.clear()

    def __contains__(self, name: object) -> bool:
        return name in self._tools

    def __len__(self) -> int:
        return len(self._tools)

    def __iter__(self) -> Iterator[ToolDescriptor]:
        return iter(self.descriptors())


_default_registry: Optional[ToolRegistry] = None


def get_registry() -> ToolRegistry:
    """Process-wide registry, created on first use."""
    global _default_registry
    if _default_registry is None:
        _default_registry = ToolRegistry()
    return _default_registry


def reset_registry() -> None:
    global _default_registry
    if _default_registry is not None:
        _default_registry.clear()
    _default_registry = None
