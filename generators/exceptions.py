"""
Exceptions raised while planning, rendering and writing generated tool files.
"""
from __future__ import annotations

from pathlib import PurePath

from utils.logger import get_logger

logger = get_logger(__name__)


class GeneratorError(Exception):
    """Base exception for all generator failures."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)
        logger.warning(
            "generator_error",
            error_type=self.__class__.__name__,
            message=message,
        )


class InvalidIdentifierError(GeneratorError):
    """A tool, resource or attribute name cannot form a valid Python identifier."""

    def __init__(self, value: str, *, kind: str = "name", reason: str | None = None):
        self.value = value
        self.kind = kind
        detail = f": {reason}" if reason else ""
        super().__init__(f"Invalid {kind} '{value}'{detail}")


class TemplateRenderError(GeneratorError):
    """A template could not be rendered for the given target file."""

    def __init__(self, target: PurePath | str, message: str):
        self.target = target
        super().__init__(f"Failed to render '{target}': {message}")


class FileWriteError(GeneratorError):
    """Writing (or removing) a generated file failed."""

    def __init__(self, target: PurePath | str, message: str):
        self.target = target
        super().__init__(f"Failed to write '{target}': {message}")
