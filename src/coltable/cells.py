"""Cell values: a single line of text or a stack of lines."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from coltable.errors import InvalidCellTypeError


@dataclass(frozen=True)
class SingleLine:
    """A cell holding one line of text."""

    text: str

    @property
    def values(self) -> tuple[str, ...]:
        return (self.text,)


@dataclass(frozen=True)
class MultiLine:
    """A cell holding several lines, stacked vertically within one row."""

    lines: tuple[str, ...]

    @property
    def values(self) -> tuple[str, ...]:
        return self.lines

    def line(self, index: int) -> str:
        """Return the line at ``index``, or an empty string past the end."""
        if index < len(self.lines):
            return self.lines[index]
        return ""


Cell = SingleLine | MultiLine

CellInput = str | Sequence[str] | SingleLine | MultiLine


def _is_text_sequence(value: object) -> bool:
    if not isinstance(value, Sequence) or isinstance(value, (str, bytes, bytearray)):
        return False
    return all(isinstance(line, str) for line in value)


def to_cell(value: object, column: str) -> Cell:
    """Coerce a caller supplied value into a cell.

    Args:
        value: A string, a non-string sequence of strings, or a cell.
        column: Name of the receiving column, used in error messages.

    Returns:
        The matching cell variant.

    Raises:
        InvalidCellTypeError: If the value is of any other shape.
    """
    if isinstance(value, SingleLine):
        if isinstance(value.text, str):
            return value
        raise InvalidCellTypeError(column, value)
    if isinstance(value, MultiLine):
        if _is_text_sequence(value.lines):
            return value
        raise InvalidCellTypeError(column, value)
    if isinstance(value, str):
        return SingleLine(value)
    if _is_text_sequence(value):
        return MultiLine(tuple(value))
    raise InvalidCellTypeError(column, value)
