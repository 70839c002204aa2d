"""
Runtime base class for generated tools and the ``EmptyProperty`` marker.

Every file written under ``app/tools`` defines one ``Tool`` subclass. The
class attributes describe the tool's input schema; ``call`` is filled in by
hand after scaffolding.
"""
from __future__ import annotations

from typing import Any, ClassVar, Dict, List, Union


class _EmptyPropertyType:
    """Marker for a tool that declares no input properties."""

    _instance: ClassVar["_EmptyPropertyType | None"] = None

    def __new__(cls) -> "_EmptyPropertyType":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "EmptyProperty"

    def __bool__(self) -> bool:
        return False

    def __copy__(self) -> "_EmptyPropertyType":
        return self

    def __deepcopy__(self, memo: Dict[int, Any]) -> "_EmptyPropertyType":
        return self

    def __reduce__(self) -> str:
        return "EmptyProperty"


EmptyProperty = _EmptyPropertyType()

Properties = Union[Dict[str, Dict[str, Any]], _EmptyPropertyType]


class Tool:
    """Base class for scaffolded tools."""

    name: ClassVar[str] = ""
    description: ClassVar[str] = ""
    properties: ClassVar[Properties] = EmptyProperty
    required: ClassVar[List[str]] = []

    @classmethod
    def tool_name(cls) -> str:
        return cls.name or cls.__name__

    @classmethod
    def has_properties(cls) -> bool:
        return cls.properties is not EmptyProperty and bool(cls.properties)

    @classmethod
    def input_schema(cls) -> Dict[str, Any]:
        """JSON-schema style description of the tool input."""
        schema: Dict[str, Any] = {"type": "object"}
        if cls.properties is EmptyProperty:
            return schema
        schema["properties"] = {key: dict(value) for key, value in cls.properties.items()}
        if cls.required:
            schema["required"] = list(cls.required)
        return schema

    def call(self, **arguments: Any) -> Any:
        raise NotImplementedError(f"{self.__class__.__name__}.call")

    def __call__(self, **arguments: Any) -> Any:
        return self.call(**arguments)

    def __str__(self) -> str:
        return f"{self.__class__.__name__}({self.tool_name()})"
