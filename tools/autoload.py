"""
Startup discovery of generated tool files.

Every ``*.py`` file below the tools root is imported and each ``Tool``
subclass it defines is registered into a ``ToolRegistry``. Loading is safe to
repeat: modules are re-executed and their entries replaced.
"""
from __future__ import annotations

import importlib.util
import inspect
import re
import sys
from pathlib import Path
from types import ModuleType
from typing import List, Optional

from tools.base import Tool
from tools.exceptions import ToolLoadError
from tools.registry import ToolDescriptor, ToolRegistry, get_registry
from utils.logger import get_logger

logger = get_logger(__name__)

DEFAULT_TOOLS_DIR = Path("app") / "tools"
DEFAULT_PATTERN = "**/*.py"
MODULE_PREFIX = "app_tools"


class ToolAutoloader:
    """Discovers, imports and registers tool files under ``root``."""

    def __init__(
        self,
        registry: ToolRegistry,
        root: Path | str = DEFAULT_TOOLS_DIR,
        pattern: str = DEFAULT_PATTERN,
    ):
        self.registry = registry
        self.root = Path(root)
        self.pattern = pattern

    def discover(self) -> List[Path]:
        if not self.root.is_dir():
            logger.info("tools_dir_missing", root=str(self.root))
            return []
        return sorted(
            path for path in self.root.glob(self.pattern)
            if path.is_file() and path.name != "__init__.py"
        )

    def module_name(self, path: Path) -> str:
        relative = path.relative_to(self.root).with_suffix("")
        parts = [re.sub(r"\W", "_", part) for part in relative.parts]
        return ".".join([MODULE_PREFIX, *parts])

    def load_file(self, path: Path) -> List[ToolDescriptor]:
        """Import ``path`` and register the tools it defines."""
        module = self._import(path)
        descriptors = []
        for _, obj in inspect.getmembers(module, inspect.isclass):
            if issubclass(obj, Tool) and obj is not Tool and obj.__module__ == module.__name__:
                descriptors.append(self.registry.register_class(obj, source=path.resolve()))
        if not descriptors:
            logger.warning("tool_file_without_tools", path=str(path))
        return descriptors

    def load_all(self) -> List[ToolDescriptor]:
        loaded: List[ToolDescriptor] = []
        files = self.discover()
        for path in files:
            loaded.extend(self.load_file(path))
        logger.info("tools_autoloaded", root=str(self.root), files=len(files), tools=len(loaded))
        return loaded

    def _import(self, path: Path) -> ModuleType:
        name = self.module_name(path)
        spec = importlib.util.spec_from_file_location(name, path)
        if spec is None or spec.loader is None:
            raise ToolLoadError(path, "not an importable Python file")

        module = importlib.util.module_from_spec(spec)
        sys.modules[name] = module
        try:
            spec.loader.exec_module(module)
        except Exception as exc:
            sys.modules.pop(name, None)
            logger.error("tool_load_failed", path=str(path), error=str(exc))
            raise ToolLoadError(path, f"{exc.__class__.__name__}: {exc}") from exc
        return module


def autoload_tools(
    registry: Optional[ToolRegistry] = None,
    root: Path | str = DEFAULT_TOOLS_DIR,
    pattern: str = DEFAULT_PATTERN,
) -> ToolRegistry:
    """Prepare hook: load every tool under ``root`` into ``registry`` (the process registry by default)."""
    registry = registry if registry is not None else get_registry()
    ToolAutoloader(registry, root=root, pattern=pattern).load_all()
    return registry
