"""Column definitions and their running width/truncation state."""

from __future__ import annotations

import logging
from enum import Enum

from coltable.errors import ConfigurationError

logger = logging.getLogger(__name__)

TRUNCATION_MARKER = "..."
SEPARATOR_CHAR = "="


class Justification(Enum):
    """Horizontal alignment of values inside a column."""

    LEFT = "left"
    RIGHT = "right"


class Column:
    """A named column of a table.

    The column name is part of the data set as far as sizing goes, so a long
    name widens the column even when every value is short.

    Width and truncation state only move forward: ``max_width`` never shrinks
    and once ``truncating`` is set it stays set, affecting every value and the
    header on the next render.

    Args:
        name: Header text.
        truncate_at: Maximum number of characters displayed, 0 for no limit.
        justification: Alignment used for data values. A plain "left" or
            "right" string is accepted too.
    """

    def __init__(
        self,
        name: str,
        truncate_at: int = 0,
        justification: Justification | str = Justification.LEFT,
    ) -> None:
        if truncate_at < 0:
            raise ConfigurationError(
                f"Column '{name}' has a negative truncation threshold: {truncate_at}"
            )
        self._name = name
        self._truncate_at = truncate_at
        self.justification = justification
        self._max_width = len(name)
        self._truncating = truncate_at > 0 and len(name) > truncate_at

    def __repr__(self) -> str:
        return (
            f"Column(name={self.name!r}, truncate_at={self.truncate_at}, "
            f"justification={self.justification.value!r})"
        )

    @property
    def name(self) -> str:
        return self._name

    @property
    def truncate_at(self) -> int:
        """Maximum number of characters displayed, 0 for no limit."""
        return self._truncate_at

    @property
    def justification(self) -> Justification:
        """Alignment used for data values; the only setting that can change."""
        return self._justification

    @justification.setter
    def justification(self, value: Justification | str) -> None:
        try:
            self._justification = Justification(value)
        except ValueError as e:
            raise ConfigurationError(
                f"Column '{self._name}' has an unknown justification: {value!r}"
            ) from e

    @property
    def max_width(self) -> int:
        """Widest value (or name) seen so far, in characters."""
        return self._max_width

    @property
    def truncating(self) -> bool:
        """Whether values in this column are clipped on display."""
        return self._truncating

    @property
    def field_width(self) -> int:
        """Width every rendered field of this column is padded to."""
        if self._truncating:
            return self.truncate_at + len(TRUNCATION_MARKER)
        return self._max_width

    def observe(self, value: str) -> None:
        """Fold a value into the running width and truncation state."""
        width = len(value)
        if width > self._max_width:
            self._max_width = width
        if not self._truncating and 0 < self.truncate_at < self._max_width:
            self._truncating = True
            logger.debug(
                "Column %r truncates at %d (widest value: %d)",
                self.name,
                self.truncate_at,
                self._max_width,
            )

    def clip(self, value: str) -> str:
        """Return the value as displayed, with the marker if it was cut."""
        if self._truncating and len(value) > self.truncate_at:
            return value[: self.truncate_at] + TRUNCATION_MARKER
        return value

    def format_value(self, value: str) -> str:
        """Clip and pad a data value to the field width."""
        clipped = self.clip(value)
        if self.justification is Justification.RIGHT:
            return clipped.rjust(self.field_width)
        return clipped.ljust(self.field_width)

    def format_header(self) -> str:
        """Clip and pad the column name; headers are always left aligned."""
        return self.clip(self.name).ljust(self.field_width)

    def separator(self) -> str:
        """Run of '=' as wide as the field, drawn under the header."""
        return SEPARATOR_CHAR * self.field_width
