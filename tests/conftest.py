from pathlib import Path
from typing import Any, Dict

import pytest

from models.attribute import Attribute
from tools.registry import ToolRegistry, reset_registry


POST_ATTRIBUTES = [
    Attribute("title", "string"),
    Attribute("views", "integer"),
    Attribute("published", "boolean"),
]


def load_source(path: Path) -> Dict[str, Any]:
    """Execute a generated module and return its namespace."""
    namespace: Dict[str, Any] = {"__name__": f"generated_{path.stem}"}
    exec(compile(path.read_text(encoding="utf-8"), str(path), "exec"), namespace)
    return namespace


@pytest.fixture
def registry() -> ToolRegistry:
    return ToolRegistry()


@pytest.fixture(autouse=True)
def _clean_default_registry():
    reset_registry()
    yield
    reset_registry()
