"""
Structured logging module using structlog

Features
--------
• Structured logging with automatic context
• Console colour support
• Optional file logging with rotation
• Automatic method entry/exit tracing
"""
from __future__ import annotations
import logging
import os
import sys
import tomllib
from pathlib import Path
from logging.handlers import RotatingFileHandler
from typing import Any, Dict
from functools import wraps

import structlog


def _supports_colour() -> bool:
    """True if stderr seems to handle ANSI colour codes."""
    if os.getenv("NO_COLOR"):
        return False
    if sys.platform == "win32" and os.getenv("TERM") != "xterm":
        return False
    return sys.stderr.isatty()


def _read_cfg(path: str | Path | None) -> Dict[str, Any]:
    if not path:
        return {}
    p = Path(path)
    if not p.is_file():
        raise FileNotFoundError(f"Logging config file not found: {p}")
    try:
        with open(p, "rb") as f:
            return tomllib.load(f).get("logging", {})
    except tomllib.TOMLDecodeError as e:
        raise ValueError(f"Invalid TOML in logging config: {e}") from e


def init_logger(config_path: str | Path | None = None, *, level: str | None = None) -> None:
    """Configure structlog with console and optional file output.

    ``level`` overrides the level from the config file (used by ``--verbose``).
    """
    cfg = _read_cfg(config_path)
    log_level = getattr(logging, (level or cfg.get("level", "INFO")).upper(), logging.INFO)

    # Configure standard library logging first; stdout is reserved for command output
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=log_level,
        force=True,
    )

    processors = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="ISO"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.dev.ConsoleRenderer(colors=_supports_colour()),
    ]

    structlog.configure(
        processors=processors,  # type: ignore[arg-type]
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    # Setup file logging if enabled
    file_cfg = cfg.get("file", {})
    if file_cfg.get("enabled", False):
        path = Path(file_cfg.get("path", "logs/mcp_scaffold.log"))
        path.parent.mkdir(parents=True, exist_ok=True)

        if file_cfg.get("rotation", {}).get("enabled", True):
            handler = RotatingFileHandler(
                path,
                maxBytes=file_cfg.get("rotation", {}).get("max_bytes", 10_000_000),
                backupCount=file_cfg.get("rotation", {}).get("backup_count", 5),
            )
        else:
            handler = logging.FileHandler(path)  # type: ignore[assignment]

        handler.setLevel(getattr(logging, file_cfg.get("level", "DEBUG").upper(), logging.DEBUG))
        formatter = logging.Formatter("%(asctime)s | %(levelname)s | %(name)s | %(message)s")
        handler.setFormatter(formatter)

        # Add to root logger
        logging.getLogger().addHandler(handler)


def get_logger(name: str):
    """Get a structlog logger instance."""
    return structlog.get_logger(name)


def trace_method(func):
    """Decorator to automatically trace method entry/exit at debug level."""
    @wraps(func)
    def wrapper(self, *args, **kwargs):
        logger = get_logger(func.__module__)
        method_name = f"{self.__class__.__name__}.{func.__name__}"

        logger.debug("method_entry", method=method_name)
        try:
            result = func(self, *args, **kwargs)
            logger.debug("method_exit", method=method_name, success=True)
            return result
        except Exception as e:
            logger.debug("method_exit", method=method_name, success=False, error=str(e))
            raise
    return wrapper
