"""Fixed-width, column-aligned text tables."""

from __future__ import annotations

import copy
import logging
import sys
from collections.abc import Iterable
from typing import TextIO

from coltable.cells import Cell, CellInput, MultiLine, SingleLine, to_cell
from coltable.column import Column
from coltable.errors import ColumnCountMismatchError

logger = logging.getLogger(__name__)

COLUMN_GAP = " "


class Table:
    """A buffered table of rows rendered as aligned text.

    Rows are sized as they are added: each column remembers the widest value
    it has seen and whether it had to start truncating. Nothing is clipped in
    storage; truncation happens on render so it applies uniformly to every
    row, including rows added before the threshold was crossed.

    Example:
        >>> table = Table([Column("Item"), Column("Tags")])
        >>> table.add_row("Widget", ["blue", "pink"])
        2
        >>> for line in table.render():
        ...     print(line)
        Item   Tags
        ====== ====
        Widget blue
               pink

    Args:
        columns: Column definitions. The table keeps its own copies, so
            later changes must go through ``table.columns``.
    """

    def __init__(self, columns: Iterable[Column]) -> None:
        self._columns: tuple[Column, ...] = tuple(copy.copy(col) for col in columns)
        self._rows: list[tuple[str, ...]] = []

    @property
    def columns(self) -> tuple[Column, ...]:
        return self._columns

    @property
    def column_count(self) -> int:
        return len(self._columns)

    @property
    def rows(self) -> tuple[tuple[str, ...], ...]:
        """Stored physical rows, after multiline expansion."""
        return tuple(self._rows)

    @property
    def row_count(self) -> int:
        return len(self._rows)

    def column(self, name: str) -> Column:
        """Look up a column by name.

        Raises:
            KeyError: If no column has that name.
        """
        for col in self._columns:
            if col.name == name:
                return col
        raise KeyError(name)

    def add_row(self, *cells: CellInput) -> int:
        """Add one logical row.

        Each cell is either a string or a sequence of strings. A sequence is
        shown as stacked lines: the row expands into as many physical rows as
        the longest sequence, with single-line cells shown on the first line
        only and shorter sequences padded with empty strings.

        Args:
            *cells: One value per column, in column order.

        Returns:
            Number of physical rows appended.

        Raises:
            ColumnCountMismatchError: If the number of cells is wrong.
            InvalidCellTypeError: If a cell is neither a string nor a
                sequence of strings.
        """
        if len(cells) != self.column_count:
            raise ColumnCountMismatchError(self.column_count, len(cells))

        # Coerce everything before touching column state.
        row = [to_cell(value, col.name) for col, value in zip(self._columns, cells)]

        for col, cell in zip(self._columns, row):
            for value in cell.values:
                col.observe(value)

        physical = self._expand(row)
        if not physical:
            logger.debug("Dropped a row with an empty multiline cell: %r", cells)
        self._rows.extend(physical)
        return len(physical)

    @staticmethod
    def _expand(row: list[Cell]) -> list[tuple[str, ...]]:
        multiline = [cell for cell in row if isinstance(cell, MultiLine)]
        if not multiline:
            return [tuple(cell.text for cell in row if isinstance(cell, SingleLine))]

        height = max(len(cell.lines) for cell in multiline)
        expanded = []
        for index in range(height):
            line = []
            for cell in row:
                if isinstance(cell, MultiLine):
                    line.append(cell.line(index))
                else:
                    line.append(cell.text if index == 0 else "")
            expanded.append(tuple(line))
        return expanded

    def render(self, show_headers: bool = True) -> list[str]:
        """Render the table as lines of text.

        Rendering reads the current state only and can be repeated.

        Args:
            show_headers: Emit the header and ``=`` separator lines first.

        Returns:
            One string per output line, without trailing newlines.
        """
        lines = []
        if show_headers:
            lines.append(COLUMN_GAP.join(col.format_header() for col in self._columns))
            lines.append(COLUMN_GAP.join(col.separator() for col in self._columns))

        for row in self._rows:
            lines.append(
                COLUMN_GAP.join(
                    col.format_value(value) for col, value in zip(self._columns, row)
                )
            )
        return lines

    def display(self, show_headers: bool = True, file: TextIO | None = None) -> None:
        """Write the rendered table to a text stream (stdout by default)."""
        out = file if file is not None else sys.stdout
        for line in self.render(show_headers):
            print(line, file=out)
