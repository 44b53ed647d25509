"""Pipeline engine: orchestrates resolve path → read → validate → grade → print."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Callable, Sequence

from ..io import read_students
from ..report import ConsoleWriter, format_invalid, format_result
from ..utils import get_logger
from .grading import calculate_grade, effective_score, is_valid_score
from .models import GradeResult, Student

_log = get_logger(__name__)

PROMPT = "Enter the path to your Excel file: "

Loader = Callable[..., list[Student]]


def resolve_path(
    args: Sequence[str],
    *,
    config: dict[str, Any] | None = None,
    prompt: Callable[[str], str] | None = None,
) -> str:
    """Pick the workbook path: first argument, then config, then an interactive prompt.

    Returns an empty string when none of them yields a path.
    """
    if args and args[0]:
        return args[0]

    paths = (config or {}).get("paths") or {}
    configured = paths.get("student_workbook")
    if configured:
        return str(configured).strip()

    prompt = prompt or input
    try:
        answer = prompt(PROMPT)
    except EOFError:
        answer = ""
    return (answer or "").strip()


def grade_students(students: Sequence[Student], out: ConsoleWriter) -> list[GradeResult]:
    """Print a grade line for each student, skipping those without a valid score."""
    results = []
    for student in students:
        score = effective_score(student)
        if not is_valid_score(score):
            _log.debug("Skipping %s: score %r out of range", student.name, student.grade)
            out.line(format_invalid(student.name))
            continue
        letter = calculate_grade(score)
        out.line(format_result(student.name, letter))
        results.append(GradeResult(student=student, score=score, letter=letter))
    return results


def run_pipeline(
    args: Sequence[str],
    *,
    config: dict[str, Any] | None = None,
    prompt: Callable[[str], str] | None = None,
    out: ConsoleWriter | None = None,
    loader: Loader = read_students,
) -> list[GradeResult]:
    """Run one grading pass over the workbook named by args, config or prompt.

    Missing path, missing file and empty sheets are reported on out and end
    the run early with no results.
    """
    out = out or ConsoleWriter()

    path = resolve_path(args, config=config, prompt=prompt)
    if not path:
        out.line("No path entered. Exiting.")
        return []

    students = loader(Path(path), out=out)
    if not students:
        out.line("No students found.")
        return []

    out.line()
    out.line("Processing grades...")
    out.line()
    results = grade_students(students, out)
    _log.info(
        "Graded %s of %s student(s) from %s",
        len(results), len(students), path,
    )
    return results
