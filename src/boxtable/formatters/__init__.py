"""Text grid formatters: styles, cells and whole tables."""

from boxtable.formatters.cell import CellFormatter
from boxtable.formatters.context import RenderContext
from boxtable.formatters.styles import STYLES, BorderStyle, SeparatorGlyphs, get_style, list_styles
from boxtable.formatters.table import TableRenderer

__all__ = [
    "STYLES",
    "BorderStyle",
    "CellFormatter",
    "RenderContext",
    "SeparatorGlyphs",
    "TableRenderer",
    "get_style",
    "list_styles",
]
