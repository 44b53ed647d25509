"""Letter grade mapping for integer scores."""

from __future__ import annotations

from .models import Student

MIN_SCORE = 0
MAX_SCORE = 100

# Stands in for an absent score; always fails is_valid_score.
MISSING_SCORE = -1

INVALID_GRADE = "Invalid grade"

# (letter, lowest score, highest score), inclusive, checked in order
GRADE_BANDS: list[tuple[str, int, int]] = [
    ("A", 90, 100),
    ("B", 80, 89),
    ("C", 70, 79),
    ("D", 60, 69),
    ("F", 0, 59),
]


def calculate_grade(score: int) -> str:
    """Map a score to its letter grade, or INVALID_GRADE outside 0-100."""
    for letter, low, high in GRADE_BANDS:
        if low <= score <= high:
            return letter
    return INVALID_GRADE


def is_valid_score(score: int) -> bool:
    return MIN_SCORE <= score <= MAX_SCORE


def effective_score(student: Student) -> int:
    """Return the student's score, or MISSING_SCORE when none was read."""
    if student.grade is None:
        return MISSING_SCORE
    return student.grade
