"""coltable - column-aligned text tables for the terminal.

Provides:
- Automatic column sizing from the actual data
- Per-column truncation with a ``...`` marker
- Left or right justification
- Multiline values stacked within a row
"""

from coltable.cells import Cell, MultiLine, SingleLine
from coltable.column import Column, Justification
from coltable.errors import (
    ColTableError,
    ColumnCountMismatchError,
    ConfigurationError,
    InvalidCellTypeError,
)
from coltable.table import Table

__version__ = "0.1.0"

__all__ = [
    # Version
    "__version__",
    # Core
    "Column",
    "Justification",
    "Table",
    # Cells
    "Cell",
    "SingleLine",
    "MultiLine",
    # Errors
    "ColTableError",
    "ColumnCountMismatchError",
    "ConfigurationError",
    "InvalidCellTypeError",
]
