"""
Jinja2 rendering of tool definitions into Python source text.

Rendering is kept free of filesystem writes so it can be exercised on its own;
the generators decide where (and whether) the text ends up on disk.
"""
from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

from jinja2 import Environment, FileSystemLoader, StrictUndefined, TemplateError

from generators.exceptions import TemplateRenderError
from models.tool_definition import ToolDefinition
from utils.logger import get_logger

logger = get_logger(__name__)

DEFAULT_TEMPLATE_DIR = Path(__file__).parent / "templates"


class ToolRenderer:
    """Renders ``ToolDefinition`` objects with the ``*.py.j2`` templates."""

    def __init__(self, template_dir: Optional[str | Path] = None):
        self.template_dir = Path(template_dir) if template_dir else DEFAULT_TEMPLATE_DIR
        self.env = Environment(
            loader=FileSystemLoader(str(self.template_dir)),
            undefined=StrictUndefined,
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
            autoescape=False,
        )
        self.env.filters["literal"] = json.dumps

    def render(self, definition: ToolDefinition) -> str:
        """Return the module source for ``definition``."""
        try:
            template = self.env.get_template(definition.template)
            text = template.render(tool=definition)
        except TemplateError as exc:
            raise TemplateRenderError(definition.target, str(exc)) from exc

        logger.debug("tool_rendered", template=definition.template, target=definition.target)
        return text
