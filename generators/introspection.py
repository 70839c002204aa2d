"""Collaborators that report a resource's declared fields."""
from __future__ import annotations

import tomllib
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, List, Mapping

from models.attribute import Attribute
from utils.logger import get_logger

logger = get_logger(__name__)


class SchemaIntrospector(ABC):
    """Returns the ``(name, declared_type)`` pairs of a resource, in declaration order."""

    @abstractmethod
    def attributes_for(self, resource_name: str) -> List[Attribute]: ...


class MappingSchemaIntrospector(SchemaIntrospector):
    """Introspector over an in-memory ``{resource: {field: type}}`` mapping."""

    def __init__(self, models: Mapping[str, Mapping[str, str]]):
        self._models: Dict[str, Dict[str, str]] = {name: dict(fields) for name, fields in models.items()}

    def attributes_for(self, resource_name: str) -> List[Attribute]:
        fields = self._models.get(resource_name)
        if fields is None:
            logger.warning("resource_schema_not_found", resource=resource_name, known=sorted(self._models))
            return []
        return [Attribute(name=name, declared_type=str(declared)) for name, declared in fields.items()]


class TomlSchemaIntrospector(MappingSchemaIntrospector):
    """
    Reads model schemas from a TOML file::

        [models.post]
        title = "string"
        views = "integer"
    """

    def __init__(self, path: Path | str):
        self.path = Path(path)
        if not self.path.is_file():
            raise FileNotFoundError(f"Schema file not found: {self.path}")
        try:
            with open(self.path, "rb") as f:
                data = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise ValueError(f"Invalid TOML in schema file {self.path}: {e}") from e
        super().__init__(data.get("models", {}))
