#!/usr/bin/env python3


import logging

import click

from .errors import FilePatternError, RenameError
from .list_files import compile_file_pattern
from .rename_files import run
from .types import PLACEHOLDER, RenameOptions


def validate_file_pattern(ctx: click.Context, param: click.Parameter, value: str) -> str:
    try:
        compile_file_pattern(value)
    except FilePatternError as e:
        raise click.BadParameter(str(e)) from e
    return value


@click.command()
@click.argument("workbook", type=click.Path(dir_okay=False))
@click.option(
    "-f",
    "--files",
    default=".*",
    show_default=True,
    callback=validate_file_pattern,
    help="A regex to match with files within the target directory",
)
@click.option(
    "-d",
    "--dir",
    "directory",
    default=".",
    show_default=True,
    help="Directory to list when matching files",
)
@click.option(
    "-p",
    "--pattern",
    default=PLACEHOLDER,
    show_default=True,
    help=(
        f"Output rename pattern. Every {PLACEHOLDER} is replaced with the cell value, "
        f"e.g. Invitation_{PLACEHOLDER}.pdf"
    ),
)
@click.option("-s", "--sheet", default="Sheet1", show_default=True, help="Name of the sheet to use")
@click.option(
    "-c",
    "--column",
    default=None,
    help="Header of the column to use (default: the first column, assumed to have no header)",
)
@click.option("-n", "--dry-run", is_flag=True, help="Show changes without renaming")
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"], case_sensitive=False),
    default="WARNING",
    help="Set the logging level (default: WARNING)",
)
@click.version_option(package_name="rename-from-sheet")
def main(
    workbook: str,
    files: str,
    directory: str,
    pattern: str,
    sheet: str,
    column: str | None,
    dry_run: bool,
    log_level: str,
) -> None:
    """Rename multiple files with values from a spreadsheet.

    Files in the current directory whose names match --files are renamed, in
    sorted order, to --pattern filled in with successive cell values.
    """
    # Set up logging
    level = getattr(logging, log_level.upper())
    logging.basicConfig(level=level, format="%(levelname)s: %(message)s")

    # When not in debug mode, only show our own debug messages
    if level != logging.DEBUG:
        for logger_name in logging.root.manager.loggerDict:
            if not logger_name.startswith("rename_from_sheet"):
                logging.getLogger(logger_name).setLevel(logging.WARNING)

    options = RenameOptions(
        workbook=workbook,
        files=files,
        directory=directory,
        pattern=pattern,
        sheet=sheet,
        column=column,
        dry_run=dry_run,
    )

    try:
        run(options)
    except (RenameError, OSError) as e:
        raise click.ClickException(str(e)) from e


if __name__ == "__main__":
    main()
