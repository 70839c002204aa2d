"""Generator for a single standalone tool file."""
from __future__ import annotations

from pathlib import PurePosixPath
from typing import List

from generators.base import BaseGenerator
from generators.naming import split_name, tool_class_name
from models.tool_definition import ToolDefinition


class ToolGenerator(BaseGenerator):
    """
    ``generate tool search_posts query:string limit:integer``
    -> ``app/tools/search_posts.py`` defining ``SearchPostsTool``.

    Namespace segments prefix the tool and class names, so ``admin/ping``
    registers ``admin_ping`` as ``AdminPingTool``.
    """

    template = "tool.py.j2"

    def definitions(self) -> List[ToolDefinition]:
        segments = split_name(self.name, kind="tool name")
        *namespace, file_name = segments
        class_name = tool_class_name(self.name, segments, kind="tool name")
        fields = self.map_fields(self.attributes)
        target = PurePosixPath(self.tools_dir.as_posix(), *namespace, f"{file_name}.py")
        return [
            ToolDefinition(
                class_name=class_name,
                tool_name="_".join(segments),
                description=file_name.replace("_", " ").capitalize(),
                template=self.template,
                target=str(target),
                fields=fields,
            )
        ]
