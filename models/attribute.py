"""Attribute definitions supplied to the generators as ``name:type`` tokens."""
from __future__ import annotations

import dataclasses
from enum import Enum
from typing import Iterable, List

__all__ = [
    "Attribute",
    "FieldKind",
    "DEFAULT_DECLARED_TYPE",
    "parse_attribute",
    "parse_attributes",
]

DEFAULT_DECLARED_TYPE = "string"


class FieldKind(str, Enum):
    """The only scalar kinds a generated tool schema distinguishes."""

    INTEGER = "integer"
    BOOLEAN = "boolean"
    STRING = "string"

    def __str__(self) -> str:
        return self.value


@dataclasses.dataclass(frozen=True)
class Attribute:
    name: str
    declared_type: str = DEFAULT_DECLARED_TYPE

    def __str__(self) -> str:
        return f"{self.name}:{self.declared_type}"


def parse_attribute(token: str) -> Attribute:
    """
    Parse a single ``name[:type[:modifier...]]`` token.

    A missing type falls back to ``string``. Trailing modifiers such as
    ``index`` or ``uniq`` are accepted and ignored.
    """
    parts = token.strip().split(":")
    name = parts[0].strip()
    declared_type = parts[1].strip() if len(parts) > 1 and parts[1].strip() else DEFAULT_DECLARED_TYPE
    return Attribute(name=name, declared_type=declared_type)


def parse_attributes(tokens: Iterable[str]) -> List[Attribute]:
    return [parse_attribute(token) for token in tokens if token.strip()]
