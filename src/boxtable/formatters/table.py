"""Table rendering: turns a `Table` into framed, fixed-width text lines."""

from __future__ import annotations

import logging
import os

from boxtable.errors import NoVisibleColumnsError
from boxtable.formatters.cell import CellFormatter
from boxtable.formatters.context import RenderContext
from boxtable.formatters.styles import DEFAULT_STYLE, BorderStyle, SeparatorGlyphs, get_style
from boxtable.models import Column, Row, Separator, Table
from boxtable.text import PadMode, display_length, pad, truncate

logger = logging.getLogger(__name__)


class TableRenderer:
    """Render tables in a single border style.

    Example output (``plus_minus`` style):
        +----+-------+
        | ID | Name  |
        +----+-------+
        | 1  | Alice |
        | 2  | Bob   |
        +----+-------+
    """

    def __init__(self, style: BorderStyle | str | None = None, formatter: CellFormatter | None = None) -> None:
        if style is None:
            style = DEFAULT_STYLE
        elif isinstance(style, str):
            style = get_style(style)
        self.style = style
        self._formatter = formatter or CellFormatter()

    def render(self, table: Table) -> list[str]:
        """Render `table` into lines (no line terminators).

        Raises:
            NoVisibleColumnsError: If every column is hidden. Nothing is rendered.
        """
        ctx = RenderContext(table)
        columns = table.visible_columns
        if not columns:
            raise NoVisibleColumnsError()

        logger.debug(
            "Rendering %d row(s) across %d visible column(s) in %s style",
            table.row_count,
            len(columns),
            self.style.name,
        )

        lines: list[str] = []
        if self.style.draw_top:
            lines.append(self._render_rule(ctx, columns, self.style.top))

        if table.header_visible:
            lines.append(self._render_header(ctx, columns))
            lines.append(self._render_rule(ctx, columns, ctx.rule_glyphs(self.style)))

        if table.row_count == 0:
            lines.append(self._render_no_data(ctx, columns))
        else:
            for row in table.rows:
                if isinstance(row, Separator):
                    lines.append(self._render_rule(ctx, columns, ctx.rule_glyphs(self.style)))
                else:
                    lines.append(self._render_data_row(ctx, columns, row))

        if self.style.draw_bottom:
            lines.append(self._render_rule(ctx, columns, self.style.bottom))

        return lines

    def render_as_string(self, table: Table, line_separator: str = os.linesep) -> str:
        return line_separator.join(self.render(table))

    # ── Lines ─────────────────────────────────────────────────────────────

    def _render_rule(self, ctx: RenderContext, columns: list[Column], glyphs: SeparatorGlyphs) -> str:
        """Horizontal rule: fill under every column, joined by the glyph triple."""
        parts = [glyphs.left]
        for column in columns:
            parts.append(self.style.fill * column.width)
            parts.append(glyphs.right if ctx.is_last_visible_column(column.key or "") else glyphs.center)
        ctx.advance()
        return "".join(parts)

    def _render_header(self, ctx: RenderContext, columns: list[Column]) -> str:
        cells = [self._formatter.format_title(column) for column in columns]
        ctx.advance()
        return self._frame(ctx, columns, cells)

    def _render_data_row(self, ctx: RenderContext, columns: list[Column], row: Row) -> str:
        cells = [self._formatter.format(column, row.get(column.key or "")) for column in columns]
        ctx.advance(data_row=True)
        return self._frame(ctx, columns, cells)

    def _render_no_data(self, ctx: RenderContext, columns: list[Column]) -> str:
        """Single line spanning all visible columns in place of data rows."""
        width = self.content_width(columns)
        label = ctx.table.no_data_label
        if display_length(label) > width:
            label = truncate(label, width) if width > 0 else ""
        else:
            label = pad(label, width, " ", PadMode.BOTH)
        ctx.advance()
        return f"{self.style.frame_left}{label}{self.style.frame_right}"

    def _frame(self, ctx: RenderContext, columns: list[Column], cells: list[str]) -> str:
        parts = [self.style.frame_left]
        for column, text in zip(columns, cells):
            parts.append(text)
            parts.append(ctx.frame_after(column.key or "", self.style))
        return "".join(parts)

    def content_width(self, columns: list[Column]) -> int:
        """Width between the outer frame glyphs: column widths plus inner frames."""
        inner = (len(columns) - 1) * display_length(self.style.frame_center)
        return sum(column.width for column in columns) + inner
