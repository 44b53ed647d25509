"""Pipeline report: console output."""

from .console import ConsoleWriter, format_result, format_invalid

__all__ = ["ConsoleWriter", "format_result", "format_invalid"]
