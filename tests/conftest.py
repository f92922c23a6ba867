from collections.abc import Callable
from pathlib import Path

import pytest
from openpyxl import Workbook

NAMES = ["ABC", "DEF", "GHI", "JKL", "MNO", "", "PQR", "STU", "VWX", "YZ"]

MakeWorkbook = Callable[..., Path]


@pytest.fixture
def make_workbook(tmp_path: Path) -> MakeWorkbook:
    """Return a factory that writes rows to a new .xlsx file."""

    def make(rows: list[list[object]], *, sheet: str = "Sheet1", name: str = "test.xlsx") -> Path:
        workbook = Workbook()
        worksheet = workbook.active
        worksheet.title = sheet
        for row in rows:
            worksheet.append(row)
        path = tmp_path / name
        workbook.save(path)
        return path

    return make


@pytest.fixture
def names_workbook(make_workbook: MakeWorkbook) -> Path:
    """A workbook with a "name" column and an "id" column."""
    rows: list[list[object]] = [["name", "id"]]
    for index, name in enumerate(NAMES, start=1):
        rows.append([name or None, index])
    return make_workbook(rows)


@pytest.fixture
def names() -> list[str]:
    """The values of the "name" column of ``names_workbook``, in row order."""
    return list(NAMES)
