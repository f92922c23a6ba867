import logging
from pathlib import Path

import click
import rich
from rich.markup import escape

from .list_files import compile_file_pattern, list_files
from .spreadsheet import read_column_values
from .types import RenameOptions
from .utils import expand_patterns


def rename_files(
    filenames: list[str],
    new_names: list[str],
    *,
    dry_run: bool = False,
) -> list[tuple[str, str]]:
    """Rename each file to the generated name at the same position.

    Pairs stop at the shorter of the two lists. Both names are resolved
    against the current working directory. The first failed rename aborts
    the run; renames already done are kept.

    Args:
        filenames: Existing file names, in pairing order
        new_names: Target names, in pairing order
        dry_run: Print the renames without performing them

    Returns:
        The (old, new) pairs that were processed

    Raises:
        OSError: If a rename fails
    """
    if len(filenames) != len(new_names):
        logging.warning(
            f"{len(filenames)} files matched but {len(new_names)} names were generated; "
            f"only the first {min(len(filenames), len(new_names))} will be renamed"
        )

    renamed = []
    for old, new in zip(filenames, new_names):
        if dry_run:
            click.echo(f"Would rename {old} -> {new}")
        else:
            logging.debug(f"Renaming {old!r} to {new!r}")
            Path(old).rename(new)
            click.echo(f"File renamed {old} -> {new}")
        renamed.append((old, new))
    return renamed


def run(options: RenameOptions) -> list[tuple[str, str]]:
    """Rename files in the working directory with values from a workbook.

    Args:
        options: Command-line options

    Returns:
        The (old, new) pairs that were processed
    """
    regex = compile_file_pattern(options.files)
    filenames = list_files(options.directory, regex)
    values = read_column_values(options.workbook, options.sheet, options.column)
    new_names = expand_patterns(values, options.pattern)

    if not filenames:
        rich.print(f"[yellow]No files in {escape(options.directory)} match the file pattern[/yellow]")
        return []

    return rename_files(filenames, new_names, dry_run=options.dry_run)
