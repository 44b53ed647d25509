"""Pipeline core: grade mapping and records. The run loop lives in core.engine."""

from .models import GradeResult, Student
from .grading import calculate_grade, effective_score, is_valid_score

__all__ = [
    "GradeResult",
    "Student",
    "calculate_grade",
    "effective_score",
    "is_valid_score",
]
