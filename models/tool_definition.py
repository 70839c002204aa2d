"""Descriptor of a single generated tool file, handed to the template renderer."""
from __future__ import annotations

from typing import List

from pydantic import BaseModel

from models.attribute import FieldKind

__all__ = [
    "ToolField",
    "ToolDefinition",
]


class ToolField(BaseModel):
    """One ``(name, kind)`` entry of a tool's input schema."""

    name: str
    kind: FieldKind
    required: bool = False


class ToolDefinition(BaseModel):
    """Everything a template needs to render one tool module."""

    class_name: str
    tool_name: str
    description: str
    template: str
    target: str
    action: str = "tool"
    resource_singular: str = ""
    resource_plural: str = ""
    fields: List[ToolField] = []

    @property
    def has_properties(self) -> bool:
        return bool(self.fields)

    @property
    def required(self) -> List[str]:
        return [f.name for f in self.fields if f.required]
