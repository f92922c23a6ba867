"""Utility functions for rename-from-sheet."""

import math
from datetime import date, datetime, time, timedelta
from decimal import Decimal

from .types import PLACEHOLDER


def expand_pattern(value: str, pattern: str, placeholder: str = PLACEHOLDER) -> str:
    """Substitute a value into an output pattern.

    Every occurrence of the placeholder is replaced with the value. The
    replacement is literal and case-sensitive; there is no way to escape the
    placeholder. A pattern without a placeholder is returned unchanged.

    Args:
        value: The text to insert
        pattern: The output pattern, e.g. ``Invitation_?.pdf``
        placeholder: The token to replace

    Returns:
        The expanded name
    """
    return pattern.replace(placeholder, value)


def expand_patterns(values: list[str], pattern: str) -> list[str]:
    """Expand the pattern once per value, preserving order."""
    return [expand_pattern(value, pattern) for value in values]


def format_float(value: float) -> str:
    """Render a float in positional notation: ``3.0`` is ``3``, ``1e-07`` is ``0.0000001``."""
    if not math.isfinite(value):
        return repr(value)
    if value.is_integer():
        return str(int(value))
    # repr is the shortest round-trip form; Decimal spells it out without an exponent
    return format(Decimal(repr(value)), "f")


def cell_to_string(value: object) -> str:
    """Convert a cell value read by python-calamine into text.

    Both extraction modes go through this function, so a cell renders the
    same way whichever mode reads it.

    Args:
        value: The cell value (``None`` for an empty cell)

    Returns:
        The text form of the cell
    """
    match value:
        case None:
            return ""
        case str():
            return value
        case bool():
            return "true" if value else "false"
        case int():
            return str(value)
        case float():
            return format_float(value)
        case datetime():
            if value.time() == time(0):
                return value.date().isoformat()
            return value.isoformat(sep=" ")
        case date() | time():
            return value.isoformat()
        case timedelta():
            return str(value)
        case _:
            return str(value)
