"""Pipeline utilities: logging, cell normalization."""

from .logging import setup_logging, get_logger
from .normalize import normalize_name, normalize_score

__all__ = [
    "setup_logging",
    "get_logger",
    "normalize_name",
    "normalize_score",
]
