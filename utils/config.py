from __future__ import annotations
import dataclasses


@dataclasses.dataclass
class Generator:
    tools_dir: str = "app/tools"
    template_dir: str = ""
    on_conflict: str = "force"


@dataclasses.dataclass
class Autoload:
    pattern: str = "**/*.py"


@dataclasses.dataclass
class LoggingFileRotation:
    enabled: bool = True
    max_bytes: int = 10_000_000
    backup_count: int = 5


@dataclasses.dataclass
class LoggingFile:
    enabled: bool = False
    level: str = "DEBUG"
    path: str = "logs/mcp_scaffold.log"
    rotation: LoggingFileRotation = dataclasses.field(default_factory=LoggingFileRotation)


@dataclasses.dataclass
class Logging:
    level: str = "INFO"
    file: LoggingFile = dataclasses.field(default_factory=LoggingFile)


@dataclasses.dataclass
class Config:
    generator: Generator = dataclasses.field(default_factory=Generator)
    autoload: Autoload = dataclasses.field(default_factory=Autoload)
    logging: Logging = dataclasses.field(default_factory=Logging)
