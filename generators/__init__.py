"""Scaffolding generators for MCP tool files."""

from generators.base import BaseGenerator, ConflictPolicy, FileAction
from generators.resource_generator import ResourceGenerator
from generators.tool_generator import ToolGenerator
from generators.type_mapper import map_attribute_type

__all__ = [
    "BaseGenerator",
    "ConflictPolicy",
    "FileAction",
    "ResourceGenerator",
    "ToolGenerator",
    "map_attribute_type",
]
