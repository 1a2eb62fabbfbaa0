"""Pydantic models for coltable.yaml layout files."""

from __future__ import annotations

from typing import Annotated, Any, Literal

from pydantic import BaseModel, BeforeValidator, Field, model_validator

from coltable.column import Column, Justification
from coltable.table import Table


def _number_to_str(value: Any) -> Any:
    # Unquoted YAML numbers arrive as int/float.
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return value


Text = Annotated[str, BeforeValidator(_number_to_str)]

RowItem = Text | list[Text]


class ColumnConfig(BaseModel):
    """Definition of a single column.

    Attributes:
        name: Header text.
        truncate_at: Maximum characters shown before clipping; 0 disables it.
        justify: Alignment of data values.
    """

    name: str
    truncate_at: int = Field(default=0, ge=0)
    justify: Literal["left", "right"] = "left"

    def build(self) -> Column:
        return Column(self.name, self.truncate_at, Justification(self.justify))


class LayoutConfig(BaseModel):
    """Root layout configuration.

    Attributes:
        columns: Column definitions, in display order.
        show_headers: Print the header and separator lines.
        rows: Rows of data; an item given as a list is shown as stacked lines.
    """

    columns: list[ColumnConfig] = Field(min_length=1)
    show_headers: bool = True
    rows: list[list[RowItem]] = Field(default_factory=list)

    @model_validator(mode="after")
    def check_row_lengths(self) -> LayoutConfig:
        expected = len(self.columns)
        for index, row in enumerate(self.rows):
            if len(row) != expected:
                raise ValueError(
                    f"Row {index} has {len(row)} values, expected {expected}"
                )
        return self

    def build_table(self) -> Table:
        """Create a table from the columns and add every configured row."""
        table = Table(col.build() for col in self.columns)
        for row in self.rows:
            table.add_row(*row)
        return table
