"""Logging setup for the grade pipeline.

Log records go to stderr (and optionally a file); stdout carries only the
grade report so it can be piped or captured on its own.
"""

import logging
import sys
from pathlib import Path
from typing import Any

DEFAULT_LEVEL = "WARNING"
DEFAULT_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

_configured = False


def _resolve_level(name: str | None) -> int:
    level = logging.getLevelName((name or DEFAULT_LEVEL).upper())
    if isinstance(level, int):
        return level
    return getattr(logging, DEFAULT_LEVEL)


def setup_logging(config: dict[str, Any] | None = None) -> None:
    """Configure root logging once from the `logging` config section.

    Config keys: level (DEBUG, INFO, WARNING, ERROR), format, file (optional path).
    """
    global _configured
    if _configured:
        return
    config = config or {}

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    log_file = config.get("file")
    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))

    logging.basicConfig(
        level=_resolve_level(config.get("level")),
        format=config.get("format") or DEFAULT_FORMAT,
        datefmt="%Y-%m-%d %H:%M:%S",
        handlers=handlers,
        force=True,
    )
    # Reduce noise from third-party libs
    logging.getLogger("openpyxl").setLevel(logging.WARNING)
    _configured = True


def get_logger(name: str) -> logging.Logger:
    """Return a logger for the given module name (e.g. __name__)."""
    return logging.getLogger(name)
