"""
Tool discovery and registry exceptions.
"""
from __future__ import annotations

from pathlib import Path


class ToolError(Exception):
    """Base exception for tool loading and registry failures."""


class ToolLoadError(ToolError):
    """Raised when a discovered tool file cannot be imported."""

    def __init__(self, path: Path | str, message: str):
        self.path = Path(path)
        self.message = message
        super().__init__(f"Failed to load tool file '{path}': {message}")


class DuplicateToolError(ToolError):
    """Raised when two different sources register the same tool name."""

    def __init__(self, name: str, *, existing: Path | str | None, incoming: Path | str | None):
        self.name = name
        self.existing = existing
        self.incoming = incoming
        super().__init__(
            f"Tool '{name}' from '{incoming}' is already registered from '{existing}'"
        )


class ToolNotFoundError(ToolError):
    """Raised when a tool name is not present in the registry."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Tool '{name}' is not registered")
