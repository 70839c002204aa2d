"""
Shared plan -> render -> write pipeline for the tool generators.

A generator first builds its ``ToolDefinition`` list (validating every name),
then renders all of them, and only then touches the filesystem. Writes are
sequential and not rolled back: when one fails, files written before it stay.
"""
from __future__ import annotations

import dataclasses
from abc import ABC, abstractmethod
from enum import Enum
from pathlib import Path
from typing import Iterable, List, Optional, Sequence, Tuple

from generators.exceptions import FileWriteError, InvalidIdentifierError
from generators.naming import validate_identifier
from generators.renderer import ToolRenderer
from generators.type_mapper import map_attribute_type
from models.attribute import Attribute
from models.tool_definition import ToolDefinition, ToolField
from utils.logger import get_logger, trace_method

logger = get_logger(__name__)

DEFAULT_TOOLS_DIR = Path("app") / "tools"

# Parameter names every generated `call` signature already binds.
RESERVED_FIELD_NAMES = frozenset({"self"})


class ConflictPolicy(str, Enum):
    FORCE = "force"
    SKIP = "skip"


@dataclasses.dataclass
class FileAction:
    """Outcome for one target file: create, force, identical, skip, remove or missing."""

    status: str
    target: Path
    pretend: bool = False

    def __str__(self) -> str:
        return f"{self.status:>10}  {self.target}"


class BaseGenerator(ABC):
    """Common behaviour of the single-tool and resource generators."""

    def __init__(
        self,
        name: str,
        attributes: Iterable[Attribute] = (),
        *,
        root: Path | str = ".",
        tools_dir: Path | str = DEFAULT_TOOLS_DIR,
        renderer: Optional[ToolRenderer] = None,
        on_conflict: ConflictPolicy | str = ConflictPolicy.FORCE,
        pretend: bool = False,
    ):
        self.name = name
        self.attributes: List[Attribute] = list(attributes)
        self.root = Path(root)
        self.tools_dir = Path(tools_dir)
        self.renderer = renderer or ToolRenderer()
        self.on_conflict = ConflictPolicy(on_conflict)
        self.pretend = pretend

    @abstractmethod
    def definitions(self) -> List[ToolDefinition]:
        """Build the definitions for every file this generator emits."""

    def map_fields(self, attributes: Sequence[Attribute], *, required: bool = False) -> List[ToolField]:
        """Validate attribute names and map their types, preserving order."""
        seen = set()
        fields = []
        for attribute in attributes:
            validate_identifier(attribute.name, kind="attribute")
            if attribute.name in RESERVED_FIELD_NAMES:
                raise InvalidIdentifierError(
                    attribute.name, kind="attribute", reason="clashes with the generated call signature"
                )
            if attribute.name in seen:
                raise InvalidIdentifierError(attribute.name, kind="attribute", reason="is declared more than once")
            seen.add(attribute.name)
            fields.append(
                ToolField(name=attribute.name, kind=map_attribute_type(attribute.declared_type), required=required)
            )
        return fields

    def render_all(self) -> List[Tuple[ToolDefinition, str]]:
        return [(definition, self.renderer.render(definition)) for definition in self.definitions()]

    def target_path(self, definition: ToolDefinition) -> Path:
        return self.root / definition.target

    @trace_method
    def generate(self) -> List[FileAction]:
        rendered = self.render_all()
        actions = [self._write(self.target_path(definition), text) for definition, text in rendered]
        logger.info(
            "tools_generated",
            generator=self.__class__.__name__,
            name=self.name,
            files=[str(action.target) for action in actions],
            pretend=self.pretend,
        )
        return actions

    @trace_method
    def destroy(self) -> List[FileAction]:
        targets = [self.target_path(definition) for definition in self.definitions()]
        actions = [self._remove(target) for target in targets]
        if not self.pretend:
            self._prune_empty_dirs({target.parent for target in targets})
        logger.info("tools_destroyed", generator=self.__class__.__name__, name=self.name, pretend=self.pretend)
        return actions

    def _write(self, target: Path, text: str) -> FileAction:
        if target.exists():
            try:
                current = target.read_text(encoding="utf-8")
            except OSError as exc:
                raise FileWriteError(target, str(exc)) from exc
            if current == text:
                status = "identical"
            elif self.on_conflict is ConflictPolicy.SKIP:
                status = "skip"
            else:
                status = "force"
        else:
            status = "create"

        if status in ("create", "force") and not self.pretend:
            try:
                target.parent.mkdir(parents=True, exist_ok=True)
                target.write_text(text, encoding="utf-8")
            except OSError as exc:
                raise FileWriteError(target, str(exc)) from exc

        logger.info("tool_file_written", status=status, path=str(target), pretend=self.pretend)
        return FileAction(status=status, target=target, pretend=self.pretend)

    def _remove(self, target: Path) -> FileAction:
        if not target.exists():
            return FileAction(status="missing", target=target, pretend=self.pretend)
        if not self.pretend:
            try:
                target.unlink()
            except OSError as exc:
                raise FileWriteError(target, str(exc)) from exc
        logger.info("tool_file_removed", path=str(target), pretend=self.pretend)
        return FileAction(status="remove", target=target, pretend=self.pretend)

    def _prune_empty_dirs(self, directories: Iterable[Path]) -> None:
        stop = (self.root / self.tools_dir).resolve()
        for directory in directories:
            current = directory.resolve()
            while current != stop and stop in current.parents:
                if not current.is_dir() or any(current.iterdir()):
                    break
                current.rmdir()
                current = current.parent
