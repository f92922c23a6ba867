"""Exceptions raised by rename-from-sheet."""


class RenameError(Exception):
    """Base class for errors that abort a rename run."""


class WorkbookError(RenameError):
    """Exception raised when a workbook cannot be opened or parsed."""

    def __init__(self, path: str, message: str):
        self.path = path
        super().__init__(message)


class SheetNotFoundError(WorkbookError):
    """Exception raised when the requested sheet is not in the workbook."""

    def __init__(self, path: str, sheet: str, available: list[str]):
        self.sheet = sheet
        self.available = available
        names = ", ".join(repr(name) for name in available) or "none"
        super().__init__(path, f"Sheet {sheet!r} not found in {path} (available: {names})")


class EmptyWorkbookError(WorkbookError):
    """Exception raised when the selected sheet has no cells."""

    def __init__(self, path: str, sheet: str):
        self.sheet = sheet
        super().__init__(path, f"Workbook is empty: sheet {sheet!r} in {path} has no rows")


class RowDeserializeError(RenameError):
    """Exception raised when a row does not fit the header row."""

    def __init__(self, row: int, column: int, message: str):
        self.row = row
        self.column = column
        super().__init__(message)


class FilePatternError(RenameError, ValueError):
    """Exception raised when the filename regex does not compile."""

    def __init__(self, pattern: str, reason: str):
        self.pattern = pattern
        super().__init__(f"Invalid file pattern {pattern!r}: {reason}")
