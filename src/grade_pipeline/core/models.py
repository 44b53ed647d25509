"""Records passed between the reader, the grading loop and the report."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Student:
    """One data row of the score sheet."""
    name: str
    grade: Optional[int] = None  # None when the cell was empty or not a number


@dataclass(frozen=True)
class GradeResult:
    """A student that passed validation, with the score used and its letter."""
    student: Student
    score: int
    letter: str
