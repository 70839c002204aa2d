import os
import tomllib
from pathlib import Path

from dacite import Config as DaciteConfig, DaciteError, from_dict

from utils.config import Config

CONFIG_ENV_VAR = "MCP_SCAFFOLD_CONFIG"
CONFIG_FILE = Path("config.toml")
VALID_CONFLICT_POLICIES = ("force", "skip")


class ConfigError(Exception):
    """Raised when the configuration file exists but cannot be used."""


def resolve_config_path(path: str | Path | None = None) -> Path:
    return Path(path or os.getenv(CONFIG_ENV_VAR) or CONFIG_FILE)


def load_config(path: str | Path | None = None) -> Config:
    """
    Load ``config.toml`` into a ``Config``.

    An absent file yields the defaults; an unreadable or ill-typed one raises ``ConfigError``.
    """
    config_path = resolve_config_path(path)
    if not config_path.is_file():
        return Config()

    try:
        with open(config_path, "rb") as f:
            config_dict = tomllib.load(f)
        config = from_dict(Config, config_dict, config=DaciteConfig(strict=True))
    except (tomllib.TOMLDecodeError, DaciteError) as e:
        raise ConfigError(f"Failed to load config from {config_path}: {e}") from e

    if config.generator.on_conflict not in VALID_CONFLICT_POLICIES:
        raise ConfigError(
            f"Invalid generator.on_conflict '{config.generator.on_conflict}'. "
            f"Allowed: {', '.join(VALID_CONFLICT_POLICIES)}"
        )
    return config
