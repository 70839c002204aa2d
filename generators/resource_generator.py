"""
Generator for the five CRUD tools of a resource.

``generate resource post title:string views:integer`` writes::

    app/tools/posts/index_tool.py    ListPostsTool
    app/tools/posts/show_tool.py     ShowPostTool
    app/tools/posts/create_tool.py   CreatePostTool
    app/tools/posts/update_tool.py   UpdatePostTool
    app/tools/posts/delete_tool.py   DeletePostTool

``admin/post`` writes the same files under ``app/tools/admin/posts/`` as
``AdminListPostsTool`` (``admin_list_posts``) and so on.
"""
from __future__ import annotations

from pathlib import PurePosixPath
from typing import Iterable, List, Optional

from generators.base import BaseGenerator
from generators.exceptions import InvalidIdentifierError
from generators.introspection import SchemaIntrospector
from generators.naming import pluralize, singularize, split_name, tool_class_name
from models.attribute import Attribute, FieldKind
from models.tool_definition import ToolDefinition, ToolField
from utils.logger import get_logger

logger = get_logger(__name__)

ID_FIELD = "id"

# (action, file stem, verb used in class and tool names)
ACTIONS = (
    ("index", "index_tool", "list"),
    ("show", "show_tool", "show"),
    ("create", "create_tool", "create"),
    ("update", "update_tool", "update"),
    ("delete", "delete_tool", "delete"),
)


class ResourceGenerator(BaseGenerator):
    """Scaffolds index/show/create/update/delete tools into one directory per resource."""

    def __init__(
        self,
        name: str,
        attributes: Iterable[Attribute] = (),
        *,
        introspector: Optional[SchemaIntrospector] = None,
        **kwargs,
    ):
        super().__init__(name, attributes, **kwargs)
        self.introspector = introspector

    def resource_attributes(self) -> List[Attribute]:
        if self.attributes or self.introspector is None:
            return self.attributes
        attributes = self.introspector.attributes_for(self.name)
        logger.info("resource_attributes_introspected", resource=self.name, attributes=[str(a) for a in attributes])
        return attributes

    def definitions(self) -> List[ToolDefinition]:
        *namespace, raw = split_name(self.name, kind="resource name")
        singular = singularize(raw)
        plural = pluralize(singular)

        attributes = self.resource_attributes()
        if any(attribute.name == ID_FIELD for attribute in attributes):
            raise InvalidIdentifierError(ID_FIELD, kind="attribute", reason="is reserved for the record identifier")

        # Mapped once; every tool reuses the same kinds.
        fields = self.map_fields(attributes)
        id_field = ToolField(name=ID_FIELD, kind=FieldKind.INTEGER, required=True)

        schemas = {
            "index": [],
            "show": [id_field],
            "create": [field.model_copy(update={"required": True}) for field in fields],
            "update": [id_field, *fields],
            "delete": [id_field],
        }

        directory = PurePosixPath(self.tools_dir.as_posix(), *namespace, plural)
        definitions = []
        for action, stem, verb in ACTIONS:
            subject = plural if action == "index" else singular
            segments = [*namespace, verb, subject]
            definitions.append(
                ToolDefinition(
                    class_name=tool_class_name(self.name, segments, kind="resource name"),
                    tool_name="_".join(segments),
                    description=_describe(action, singular, plural),
                    template=f"{stem}.py.j2",
                    target=str(directory / f"{stem}.py"),
                    action=action,
                    resource_singular=singular,
                    resource_plural=plural,
                    fields=schemas[action],
                )
            )
        return definitions


def _describe(action: str, singular: str, plural: str) -> str:
    singular_words = singular.replace("_", " ")
    return {
        "index": f"List {plural.replace('_', ' ')}",
        "show": f"Show a {singular_words}",
        "create": f"Create a {singular_words}",
        "update": f"Update a {singular_words}",
        "delete": f"Delete a {singular_words}",
    }[action]
