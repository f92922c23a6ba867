from dataclasses import dataclass

PLACEHOLDER = "?"


@dataclass(frozen=True)
class RenameOptions:
    """Options for a rename run."""

    workbook: str
    files: str = ".*"
    directory: str = "."
    pattern: str = PLACEHOLDER
    sheet: str = "Sheet1"
    column: str | None = None  # None means take the first column, header included
    dry_run: bool = False
