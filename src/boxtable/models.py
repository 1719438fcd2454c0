"""Table, column, row and cell containers."""

from __future__ import annotations

import logging
import numbers
import os
from collections.abc import Iterable, Iterator, Mapping, Sequence
from dataclasses import InitVar, dataclass, field, replace
from datetime import date
from enum import Enum
from typing import TYPE_CHECKING, Any

from boxtable.errors import (
    ColumnKeyNotFoundError,
    DuplicateColumnKeyError,
    UnsupportedCellTypeError,
    UnsupportedColumnTypeError,
)
from boxtable.widths import resolver

if TYPE_CHECKING:
    from boxtable.formatters.styles import BorderStyle

logger = logging.getLogger(__name__)

DEFAULT_NO_DATA_LABEL = "NO DATA"
NULL_TEXT = "NULL"


class Align(Enum):
    """Text alignment within a cell. AUTO defers to the enclosing column."""

    AUTO = "auto"
    LEFT = "left"
    RIGHT = "right"
    CENTER = "center"


@dataclass
class Cell:
    """Single table cell. A `None` value is displayed as ``NULL``."""

    value: str | None = None
    align: Align = Align.AUTO

    @property
    def text(self) -> str:
        return NULL_TEXT if self.value is None else self.value


def to_cell(value: Any, align: Align = Align.AUTO) -> Cell:
    """Coerce a scalar into a `Cell`."""
    if isinstance(value, Cell):
        if value.value is None or isinstance(value.value, str):
            return value
        # Cells built by hand may carry raw scalars; keep their own align.
        return to_cell(value.value, value.align)
    if value is None:
        return Cell(None, align)
    if isinstance(value, str):
        return Cell(value, align)
    if isinstance(value, bool):
        return Cell(str(value).lower(), align)
    if isinstance(value, numbers.Number):
        return Cell(str(value), align)
    if isinstance(value, date):
        return Cell(value.isoformat(), align)
    raise UnsupportedCellTypeError(value)


@dataclass
class Column:
    """Column definition.

    `width` starts at `max_width` and grows to fit the title and every
    value added under this column, unless pinned with
    `Table.set_column_max_width`.
    """

    title: str
    cell_align: Align = Align.AUTO
    max_width: InitVar[int] = 0
    title_align: Align = Align.LEFT
    visible: bool = True
    key: str | None = None
    width: int = field(init=False, default=0)

    def __post_init__(self, max_width: int) -> None:
        if max_width < 0:
            raise ValueError(f"Column width must not be negative, got {max_width}")
        self.width = max_width
        resolver.observe(self, self.title)


class Row(Mapping[str, Cell]):
    """Ordered mapping of column key to `Cell`. Rows may be sparse."""

    def __init__(self, cells: Mapping[str, Any] | None = None) -> None:
        self._cells: dict[str, Cell] = {}
        if cells:
            self.add_cells(cells)

    def add_cell(self, key: str, value: Any, align: Align = Align.AUTO) -> Row:
        if key in self._cells:
            raise DuplicateColumnKeyError(key)
        self._cells[key] = to_cell(value, align)
        return self

    def add_cells(self, cells: Mapping[str, Any]) -> Row:
        for key, value in cells.items():
            self.add_cell(key, value)
        return self

    def __getitem__(self, key: str) -> Cell:
        try:
            return self._cells[key]
        except KeyError:
            raise ColumnKeyNotFoundError(key) from None

    def __contains__(self, key: object) -> bool:
        return key in self._cells

    def __iter__(self) -> Iterator[str]:
        return iter(self._cells)

    def __len__(self) -> int:
        return len(self._cells)

    def __repr__(self) -> str:
        return f"Row({self._cells!r})"


class Separator:
    """Row marker that renders as a horizontal rule instead of data."""

    def __repr__(self) -> str:
        return "Separator()"


TableRow = Row | Separator


class Table:
    """Ordered columns and rows to be rendered as a text grid."""

    def __init__(
        self,
        columns: Iterable[str | Column] | Mapping[str, str | Column] | None = None,
        rows: Iterable[Any] | None = None,
        *,
        show_header: bool = True,
        no_data_label: str = DEFAULT_NO_DATA_LABEL,
    ) -> None:
        self._columns: dict[str, Column] = {}
        self._rows: list[TableRow] = []
        self.header_visible = show_header
        self.no_data_label = no_data_label
        if columns is not None:
            self.add_columns(columns)
        if rows is not None:
            self.add_rows(rows)

    # ── Columns ───────────────────────────────────────────────────────────

    def add_column(self, key: str, column: str | Column) -> Table:
        """Register a column under `key`. Columns keep their insertion order."""
        if isinstance(column, str):
            column = Column(column)
        elif not isinstance(column, Column):
            raise UnsupportedColumnTypeError(key, column)

        if key in self._columns:
            raise DuplicateColumnKeyError(key)

        # Own a copy so width tracking never leaks between tables.
        owned = replace(column, key=key, max_width=column.width)
        self._columns[key] = owned
        return self

    def add_columns(self, columns: Iterable[str | Column] | Mapping[str, str | Column]) -> Table:
        """Register several columns.

        Mapping entries keep their keys. For plain sequences the key is the
        title string itself, or the Column's own key (falling back to its title).
        """
        if isinstance(columns, Mapping):
            for key, column in columns.items():
                self.add_column(key, column)
            return self

        for column in columns:
            if isinstance(column, str):
                self.add_column(column, column)
            elif isinstance(column, Column):
                self.add_column(column.key or column.title, column)
            else:
                raise UnsupportedColumnTypeError(repr(column), column)
        return self

    @property
    def columns(self) -> list[Column]:
        return list(self._columns.values())

    @property
    def column_keys(self) -> list[str]:
        return list(self._columns)

    @property
    def column_count(self) -> int:
        return len(self._columns)

    @property
    def visible_columns(self) -> list[Column]:
        return [column for column in self._columns.values() if column.visible]

    @property
    def visible_column_count(self) -> int:
        return len(self.visible_columns)

    def get_column(self, key: str) -> Column:
        try:
            return self._columns[key]
        except KeyError:
            raise ColumnKeyNotFoundError(key) from None

    def has_column(self, key: str) -> bool:
        return key in self._columns

    def set_column_align(self, key: str, align: Align) -> Table:
        """Set both the cell and the title alignment of a column."""
        self.set_cell_align(key, align)
        self.set_title_align(key, align)
        return self

    def set_cell_align(self, key: str, align: Align) -> Table:
        self.get_column(key).cell_align = align
        return self

    def set_title_align(self, key: str, align: Align) -> Table:
        self.get_column(key).title_align = align
        return self

    def set_column_max_width(self, key: str, width: int) -> Table:
        """Pin the column width. Longer content gets truncated with an ellipsis."""
        if width < 0:
            raise ValueError(f"Column width must not be negative, got {width}")
        resolver.set_explicit_width(self.get_column(key), width)
        return self

    def set_column_visibility(self, key: str, visible: bool) -> Table:
        self.get_column(key).visible = visible
        return self

    def hide_column(self, key: str | Sequence[str]) -> Table:
        """Hide one or more columns. Hiding a hidden column has no effect."""
        keys = [key] if isinstance(key, str) else list(key)
        for k in keys:
            self.set_column_visibility(k, False)
        return self

    def show_column(self, key: str) -> Table:
        return self.set_column_visibility(key, True)

    # ── Header ────────────────────────────────────────────────────────────

    def hide_header(self) -> Table:
        self.header_visible = False
        return self

    def show_header(self) -> Table:
        self.header_visible = True
        return self

    # ── Rows ──────────────────────────────────────────────────────────────

    @property
    def rows(self) -> list[TableRow]:
        return list(self._rows)

    @property
    def row_count(self) -> int:
        """Number of row entries, separators included."""
        return len(self._rows)

    @property
    def data_row_count(self) -> int:
        return sum(1 for row in self._rows if isinstance(row, Row))

    def add_row(self, row: Row | Separator | Mapping[str, Any] | Sequence[Any] | None) -> Table:
        """Append a row.

        Mappings (and `Row` instances) are keyed by column key. Plain
        sequences are assigned to columns positionally; surplus values are
        dropped. Passing `None` has no effect.
        """
        if row is None:
            return self
        if isinstance(row, Separator):
            self._rows.append(row)
            return self

        if isinstance(row, Row):
            new_row = row
        elif isinstance(row, Mapping):
            new_row = Row(row)
        elif isinstance(row, (str, bytes)):
            raise TypeError(f"Row must be a mapping or a sequence of values, not {type(row).__name__}")
        else:
            new_row = self._positional_row(row)

        targets = [(self.get_column(key), cell) for key, cell in new_row.items()]
        for column, cell in targets:
            resolver.observe(column, cell.text)

        self._rows.append(new_row)
        return self

    def add_rows(self, rows: Iterable[Any]) -> Table:
        for row in rows:
            self.add_row(row)
        return self

    def add_separator(self) -> Table:
        self._rows.append(Separator())
        return self

    def _positional_row(self, values: Iterable[Any]) -> Row:
        values = list(values)
        keys = self.column_keys
        if len(values) > len(keys):
            logger.warning(
                "Dropping %d surplus value(s) from positional row (table has %d columns)",
                len(values) - len(keys),
                len(keys),
            )
        row = Row()
        for key, value in zip(keys, values):
            row.add_cell(key, value)
        return row

    # ── Rendering ─────────────────────────────────────────────────────────

    def render(self, style: BorderStyle | str | None = None) -> list[str]:
        """Render the table into a list of lines (fancy style by default)."""
        from boxtable.formatters.table import TableRenderer

        return TableRenderer(style).render(self)

    def render_as_string(
        self,
        style: BorderStyle | str | None = None,
        line_separator: str = os.linesep,
    ) -> str:
        return line_separator.join(self.render(style))
