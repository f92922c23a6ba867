"""Read the values of one column from a worksheet."""

import logging
from collections.abc import Sequence
from pathlib import Path

from python_calamine import CalamineError, CalamineSheet, CalamineWorkbook

from .errors import EmptyWorkbookError, RowDeserializeError, SheetNotFoundError, WorkbookError
from .utils import cell_to_string

Row = tuple[object, ...]


def column_letter(number: int) -> str:
    """Convert a 1-based column number to its letters: 1 is A, 28 is AB."""
    letters = ""
    while number:
        number, remainder = divmod(number - 1, 26)
        letters = chr(ord("A") + remainder) + letters
    return letters


class UsedRange:
    """The bounding box of the non-empty cells of a sheet.

    ``rows`` holds the cell values inside the box; ``top`` and ``left`` are
    the 1-based sheet coordinates of its first cell.
    """

    def __init__(self, rows: list[Row], top: int, left: int):
        self.rows = rows
        self.top = top
        self.left = left

    def first_column(self) -> list[object]:
        return [row[0] for row in self.rows]


def used_range(values: Sequence[Row]) -> UsedRange | None:
    """Trim a grid of cell values to the box around its non-empty cells.

    Returns None if every cell is empty.
    """
    filled = [(r, c) for r, row in enumerate(values) for c, value in enumerate(row) if value is not None]
    if not filled:
        return None

    top = min(r for r, _ in filled)
    bottom = max(r for r, _ in filled)
    left = min(c for _, c in filled)
    right = max(c for _, c in filled)
    width = right - left + 1

    rows = []
    for row in values[top : bottom + 1]:
        cells = tuple(row[left : right + 1])
        rows.append(cells + (None,) * (width - len(cells)))
    return UsedRange(rows, top + 1, left + 1)


def read_used_range(worksheet: CalamineSheet) -> UsedRange | None:
    # calamine reports empty cells as ""
    grid = [
        tuple(None if value == "" else value for value in row)
        for row in worksheet.to_python(skip_empty_area=False)
    ]
    return used_range(grid)


def rows_as_records(used: UsedRange) -> list[dict[str, object]]:
    """Map each row below the header row to a dict keyed by header name.

    Raises:
        RowDeserializeError: If a row has a value in a column with no header
    """
    header = [cell_to_string(value) for value in used.rows[0]]
    records = []
    for offset, row in enumerate(used.rows[1:], start=1):
        record = {}
        for index, (name, value) in enumerate(zip(header, row)):
            if not name:
                if value is not None:
                    row_number = used.top + offset
                    column_number = used.left + index
                    raise RowDeserializeError(
                        row_number,
                        column_number,
                        f"Cell {column_letter(column_number)}{row_number} has a value "
                        "but its column has no header",
                    )
                continue
            record[name] = value
        records.append(record)
    return records


def column_values(used: UsedRange, column: str | None) -> list[str]:
    """Extract one column of a used range as text.

    With a column name, the first row is treated as the header and the named
    column is read from every following row; rows without it give ``""``.
    Without one, the leftmost column is returned as is, header cell included.
    """
    if column is None:
        return [cell_to_string(value) for value in used.first_column()]
    return [cell_to_string(record.get(column)) for record in rows_as_records(used)]


def read_column_values(
    workbook_path: str | Path,
    sheet: str = "Sheet1",
    column: str | None = None,
) -> list[str]:
    """Read the values of one column from a sheet of a workbook.

    Args:
        workbook_path: Path to the workbook file
        sheet: Name of the sheet to read
        column: Header of the column to read. If None, the first column is
            read and its header cell is returned as an ordinary value

    Returns:
        One string per row, in row order. Empty cells give ``""``

    Raises:
        WorkbookError: If the workbook cannot be opened
        SheetNotFoundError: If the workbook has no such sheet
        EmptyWorkbookError: If the sheet has no cells
        RowDeserializeError: If a row does not fit the header row
    """
    path = str(workbook_path)
    logging.debug(f"Opening workbook {path}")
    try:
        # from_filelike sniffs the format from the content, not the extension
        with open(path, "rb") as f:
            workbook = CalamineWorkbook.from_filelike(f)
    except (CalamineError, OSError, ValueError) as e:
        raise WorkbookError(path, f"Cannot open workbook {path}: {e}") from e

    if sheet not in workbook.sheet_names:
        raise SheetNotFoundError(path, sheet, list(workbook.sheet_names))
    try:
        used = read_used_range(workbook.get_sheet_by_name(sheet))
    except (CalamineError, ValueError) as e:
        raise WorkbookError(path, f"Cannot read sheet {sheet!r} of {path}: {e}") from e

    if used is None:
        raise EmptyWorkbookError(path, sheet)

    values = column_values(used, column)
    logging.debug(f"Read {len(values)} values from sheet {sheet!r}")
    return values
