"""Fixed-width cell formatting: alignment resolution, padding and truncation."""

from __future__ import annotations

from boxtable.models import Align, Cell, Column
from boxtable.text import PadMode, display_length, pad, truncate

PAD_MODES = {
    Align.LEFT: PadMode.RIGHT,
    Align.RIGHT: PadMode.LEFT,
    Align.CENTER: PadMode.BOTH,
}


def resolve_align(*candidates: Align | None) -> Align:
    """Return the first candidate that is set and not AUTO, LEFT otherwise."""
    for align in candidates:
        if align is not None and align is not Align.AUTO:
            return align
    return Align.LEFT


class CellFormatter:
    """Turns a cell (or its absence) into a string exactly `column.width` long."""

    def __init__(self, pad_char: str = " ") -> None:
        self._pad_char = pad_char

    def format(self, column: Column, cell: Cell | None = None, override_align: Align | None = None) -> str:
        """Format one data cell against its column.

        Alignment precedence: `override_align`, then the cell's own align,
        then the column's cell align, then LEFT. Missing cells render blank
        and null values render as ``NULL``.
        """
        if cell is None:
            cell = Cell("", column.cell_align)
        align = resolve_align(override_align, cell.align, column.cell_align)
        return self.fit(cell.text, column.width, align)

    def format_title(self, column: Column) -> str:
        return self.fit(column.title, column.width, resolve_align(column.title_align))

    def fit(self, text: str, width: int, align: Align) -> str:
        """Truncate or pad `text` to exactly `width` code points."""
        if width <= 0:
            return ""
        if display_length(text) > width:
            return truncate(text, width)
        return pad(text, width, self._pad_char, PAD_MODES.get(align, PadMode.RIGHT))
