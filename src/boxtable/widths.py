"""Column width tracking."""

from __future__ import annotations

from typing import Protocol

from boxtable.text import display_length


class SupportsWidth(Protocol):
    width: int


class ColumnWidthResolver:
    """Grows a column's width to fit the text it has to hold.

    `observe` only ever widens. `set_explicit_width` overrides the current
    width unconditionally (and may therefore force truncation), but later
    `observe` calls are free to widen the column again.
    """

    def observe(self, column: SupportsWidth, text: str) -> int:
        """Widen `column` to fit `text` and return the resulting width."""
        length = display_length(text)
        if length > column.width:
            column.width = length
        return column.width

    def set_explicit_width(self, column: SupportsWidth, width: int) -> None:
        """Pin `column` to `width`, regardless of what it holds."""
        column.width = width


# Shared instance; the resolver keeps no state of its own.
resolver = ColumnWidthResolver()
