"""Positional state tracked while a table is being rendered."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from boxtable.formatters.styles import BorderStyle, SeparatorGlyphs
    from boxtable.models import Table


class RenderContext:
    """Tracks which line is being emitted and where the visible edges are.

    Two counters advance as lines are produced: `rendered_row_idx` counts
    every emitted line (rules and header included), `table_row_idx` counts
    data rows only. Separator rows do not count as data rows.
    """

    def __init__(self, table: Table) -> None:
        self.table = table
        self.rendered_row_idx = 0
        self.table_row_idx = 0
        # Visibility cannot change mid-render.
        self._visible_keys = [column.key for column in table.columns if column.visible and column.key is not None]

    def advance(self, *, data_row: bool = False) -> None:
        """Record that one line was emitted."""
        self.rendered_row_idx += 1
        if data_row:
            self.table_row_idx += 1

    # ── Columns ───────────────────────────────────────────────────────────

    def visible_keys(self) -> list[str]:
        return list(self._visible_keys)

    def is_first_visible_column(self, key: str) -> bool:
        return bool(self._visible_keys) and self._visible_keys[0] == key

    def is_last_visible_column(self, key: str) -> bool:
        return bool(self._visible_keys) and self._visible_keys[-1] == key

    # ── Rows ──────────────────────────────────────────────────────────────

    def is_first_visible_row(self) -> bool:
        return self.rendered_row_idx == 0

    def is_last_visible_row(self) -> bool:
        return self.table_row_idx == self.table.row_count

    def rule_glyphs(self, style: BorderStyle) -> SeparatorGlyphs:
        """Pick the glyph triple for an interior horizontal rule.

        Interior rules never use the top triple, even when nothing was emitted
        before them. An empty table never counts as past its last row, so the
        rule under the header stays a middle rule.
        """
        if self.table.row_count > 0 and self.is_last_visible_row():
            return style.bottom
        return style.mid

    def frame_after(self, key: str, style: BorderStyle) -> str:
        """Frame glyph that follows the cell of column `key`."""
        return style.frame_right if self.is_last_visible_column(key) else style.frame_center
