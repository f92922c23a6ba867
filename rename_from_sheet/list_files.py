import logging
import os
import re

from .errors import FilePatternError


def compile_file_pattern(pattern: str) -> re.Pattern[str]:
    """Compile the filename regex, raising FilePatternError if it is invalid."""
    try:
        return re.compile(pattern)
    except re.error as e:
        raise FilePatternError(pattern, str(e)) from e


def is_valid_text(name: str) -> bool:
    """Check that a filename decoded cleanly (no surrogate-escaped bytes)."""
    try:
        name.encode("utf-8")
    except UnicodeEncodeError:
        return False
    return True


def list_files(directory: str | os.PathLike[str], regex: re.Pattern[str] | str) -> list[str]:
    """List the names of files in a directory that match a regex.

    Only direct entries are considered. Directories, entries that cannot be
    inspected and names that are not valid text are skipped. The regex is
    searched for anywhere in the name.

    Args:
        directory: The directory to list
        regex: A compiled regex or a regex string

    Returns:
        The matching names, sorted

    Raises:
        OSError: If the directory cannot be opened
        FilePatternError: If ``regex`` is a string that does not compile
    """
    if isinstance(regex, str):
        regex = compile_file_pattern(regex)

    filenames = []
    with os.scandir(directory) as entries:
        for entry in entries:
            try:
                if entry.is_dir():
                    continue
            except OSError as e:
                logging.debug(f"Skipping {entry.name!r}: {e}")
                continue
            if not is_valid_text(entry.name):
                logging.debug(f"Skipping undecodable filename {entry.name!r}")
                continue
            if regex.search(entry.name):
                filenames.append(entry.name)

    filenames.sort()
    logging.debug(f"Matched {len(filenames)} files in {directory}")
    return filenames
