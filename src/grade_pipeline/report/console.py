"""Console writer: the report lines printed for a grading run."""

from __future__ import annotations

import sys
from typing import TextIO

RULE = "=" * 50

BANNER = [
    RULE,
    "     STUDENT GRADE CALCULATOR PROGRAM",
    RULE,
    "",
    "This program reads student grades from an Excel file",
    "and calculates the letter grade for each student.",
    "",
    RULE,
]


def format_result(name: str, letter: str) -> str:
    return f"{name}: {letter}"


def format_invalid(name: str) -> str:
    return f"{name} has an invalid grade."


class ConsoleWriter:
    """Writes report lines to a text stream.

    With no stream given, lines go to whatever sys.stdout is at write time.
    """

    def __init__(self, stream: TextIO | None = None):
        self._stream = stream

    @property
    def stream(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stdout

    def line(self, text: str = "") -> None:
        self.stream.write(f"{text}\n")

    def banner(self) -> None:
        for text in BANNER:
            self.line(text)
