"""Maps declared attribute types onto the field kinds tool schemas support."""
from __future__ import annotations

from models.attribute import FieldKind

_INTEGER_TYPES = frozenset({"references", "belongs_to", "timestamp", "integer"})
_BOOLEAN_TYPES = frozenset({"boolean"})


def map_attribute_type(declared_type: str) -> FieldKind:
    """
    Map a declared column/relation type to a canonical field kind.

    Unknown types (including the empty string) fall back to ``string`` so
    scaffolding never rejects an attribute.
    """
    normalised = (declared_type or "").strip().lower()
    if normalised in _INTEGER_TYPES:
        return FieldKind.INTEGER
    if normalised in _BOOLEAN_TYPES:
        return FieldKind.BOOLEAN
    return FieldKind.STRING
