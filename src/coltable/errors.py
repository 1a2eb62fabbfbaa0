"""Exceptions raised by coltable."""

from __future__ import annotations

from pathlib import Path
from typing import Any


class ColTableError(Exception):
    """Base exception for all coltable errors.

    Attributes:
        message: Human readable description of the problem.
    """

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ConfigurationError(ColTableError):
    """Invalid column definition or table layout file."""

    def __init__(self, message: str, path: Path | None = None) -> None:
        if path is not None:
            message = f"{message} ({path})"
        super().__init__(message)
        self.path = path


class ColumnCountMismatchError(ColTableError):
    """A row was supplied with more, or fewer, cells than the table has columns."""

    def __init__(self, expected: int, actual: int) -> None:
        super().__init__(
            f"Cannot add a row of {actual} cells to a table with {expected} columns"
        )
        self.expected = expected
        self.actual = actual


class InvalidCellTypeError(ColTableError):
    """A cell was neither a string nor a sequence of strings."""

    def __init__(self, column: str, value: Any) -> None:
        super().__init__(
            f"Column '{column}' accepts a string or a sequence of strings, "
            f"got {type(value).__name__}"
        )
        self.column = column
        self.value = value
