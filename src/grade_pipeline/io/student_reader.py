"""Reader for student names and scores from an Excel workbook."""

from __future__ import annotations

import os
from pathlib import Path
from typing import TYPE_CHECKING, List, Optional

import pandas as pd

from ..core.models import Student
from ..utils import get_logger, normalize_name, normalize_score

if TYPE_CHECKING:
    from ..report.console import ConsoleWriter

_log = get_logger(__name__)

# Column positions on the first sheet
COL_NAME = 0
COL_SCORE = 1

HEADER_ROWS = 1


def read_students(
    path: str | Path,
    *,
    out: Optional[ConsoleWriter] = None,
) -> List[Student]:
    """
    Read students from the first sheet of a workbook.

    The first row is a header and is skipped. Column A holds the name and
    column B the score. A path that is not an existing file is reported and
    gives an empty list.

    Args:
        path: Path to the Excel workbook
        out: Optional writer that receives the missing-file message

    Returns:
        List of Student, in sheet row order
    """
    path = Path(path)
    if not path.is_file() or not os.access(path, os.R_OK):
        _log.warning("Student workbook not found or unreadable: %s", path)
        if out is not None:
            out.line("File does not exist.")
        return []

    with pd.ExcelFile(path, engine="openpyxl") as workbook:
        # Keep cells as read; only an empty cell counts as missing ("NA" is a name)
        sheet = workbook.parse(
            sheet_name=0,
            header=None,
            dtype=object,
            keep_default_na=False,
            na_values=[""],
        )

    # Rows absent from the sheet are dropped first, so the header is the first populated row
    data = sheet.dropna(how="all").iloc[HEADER_ROWS:]

    students = []
    for _, row in data.iterrows():
        students.append(Student(
            name=normalize_name(row.get(COL_NAME)),
            grade=normalize_score(row.get(COL_SCORE)),
        ))

    _log.debug("Read %s student(s) from %s", len(students), path)
    return students
