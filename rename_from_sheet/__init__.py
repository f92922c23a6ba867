"""A command-line tool that renames files using values from a spreadsheet column."""

from .list_files import list_files
from .rename_files import rename_files, run
from .spreadsheet import read_column_values
from .utils import expand_pattern

__all__ = ["expand_pattern", "list_files", "read_column_values", "rename_files", "run"]
