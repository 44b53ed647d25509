"""Shared fixtures for the grade pipeline tests."""

import io

import pytest
from openpyxl import Workbook

from grade_pipeline.report import ConsoleWriter
from grade_pipeline.utils import logging as pipeline_logging


@pytest.fixture
def make_workbook(tmp_path):
    """Return a factory that writes rows (header first) to an .xlsx file."""

    def _make(rows, name="students.xlsx", extra_sheets=None):
        wb = Workbook()
        ws = wb.active
        ws.title = "Grades"
        for row in rows:
            ws.append(list(row))
        for title, sheet_rows in (extra_sheets or {}).items():
            extra = wb.create_sheet(title)
            for row in sheet_rows:
                extra.append(list(row))
        path = tmp_path / name
        wb.save(path)
        return path

    return _make


@pytest.fixture
def output():
    return io.StringIO()


@pytest.fixture
def writer(output):
    return ConsoleWriter(output)


@pytest.fixture(autouse=True)
def reset_logging(monkeypatch):
    monkeypatch.setattr(pipeline_logging, "_configured", False)
