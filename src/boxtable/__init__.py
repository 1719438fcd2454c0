"""boxtable: render tabular data as framed, fixed-width text."""

from boxtable.errors import (
    ColumnKeyNotFoundError,
    DuplicateColumnKeyError,
    NoVisibleColumnsError,
    TableError,
    UnknownStyleError,
    UnsupportedCellTypeError,
    UnsupportedColumnTypeError,
)
from boxtable.formatters.styles import COMPACT, FANCY, MS_DOS, PLUS_MINUS, BorderStyle, get_style
from boxtable.formatters.table import TableRenderer
from boxtable.models import Align, Cell, Column, Row, Separator, Table

__version__ = "0.3.0"

__all__ = [
    "COMPACT",
    "FANCY",
    "MS_DOS",
    "PLUS_MINUS",
    "Align",
    "BorderStyle",
    "Cell",
    "Column",
    "ColumnKeyNotFoundError",
    "DuplicateColumnKeyError",
    "NoVisibleColumnsError",
    "Row",
    "Separator",
    "Table",
    "TableError",
    "TableRenderer",
    "UnknownStyleError",
    "UnsupportedCellTypeError",
    "UnsupportedColumnTypeError",
    "get_style",
    "__version__",
]
