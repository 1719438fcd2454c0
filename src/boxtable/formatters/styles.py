"""Border styles: named bundles of frame and rule glyphs.

A style carries data only. Every style is drawn by the same algorithm in
`boxtable.formatters.table`; adding a style means adding a `BorderStyle`
value to `STYLES`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import NamedTuple

from boxtable.errors import UnknownStyleError


class SeparatorGlyphs(NamedTuple):
    """Left edge, column junction and right edge of one horizontal rule."""

    left: str
    center: str
    right: str


@dataclass(frozen=True)
class BorderStyle:
    """Glyphs used to frame data lines and draw horizontal rules."""

    name: str
    description: str
    frame_left: str
    frame_center: str
    frame_right: str
    fill: str
    top: SeparatorGlyphs
    mid: SeparatorGlyphs
    bottom: SeparatorGlyphs
    draw_top: bool = True
    draw_bottom: bool = True


FANCY = BorderStyle(
    name="fancy",
    description="Single-line box drawing characters",
    frame_left="│ ",
    frame_center=" │ ",
    frame_right=" │",
    fill="─",
    top=SeparatorGlyphs("┌─", "─┬─", "─┐"),
    mid=SeparatorGlyphs("├─", "─┼─", "─┤"),
    bottom=SeparatorGlyphs("└─", "─┴─", "─┘"),
)

MS_DOS = BorderStyle(
    name="msdos",
    description="Double-line box drawing characters",
    frame_left="║ ",
    frame_center=" ║ ",
    frame_right=" ║",
    fill="═",
    top=SeparatorGlyphs("╔═", "═╦═", "═╗"),
    mid=SeparatorGlyphs("╠═", "═╬═", "═╣"),
    bottom=SeparatorGlyphs("╚═", "═╩═", "═╝"),
)

_PLUS_MINUS_RULE = SeparatorGlyphs("+-", "-+-", "-+")

PLUS_MINUS = BorderStyle(
    name="plus_minus",
    description="Plain ASCII borders made of '+', '-' and '|'",
    frame_left="| ",
    frame_center=" | ",
    frame_right=" |",
    fill="-",
    top=_PLUS_MINUS_RULE,
    mid=_PLUS_MINUS_RULE,
    bottom=_PLUS_MINUS_RULE,
)

_NO_RULE = SeparatorGlyphs("", "", "")

COMPACT = BorderStyle(
    name="compact",
    description="No outer border, dashed rule under the header",
    frame_left=" ",
    frame_center="   ",
    frame_right=" ",
    fill="-",
    top=_NO_RULE,
    mid=SeparatorGlyphs("-", "- -", "-"),
    bottom=_NO_RULE,
    draw_top=False,
    draw_bottom=False,
)

DEFAULT_STYLE = FANCY

STYLES: dict[str, BorderStyle] = {
    style.name: style for style in (FANCY, MS_DOS, PLUS_MINUS, COMPACT)
}

ALIASES = {"ascii": PLUS_MINUS.name}


def get_style(name: str) -> BorderStyle:
    """Look up a style by name (case-insensitive, aliases allowed)."""
    key = name.strip().lower().replace("-", "_")
    key = ALIASES.get(key, key)
    try:
        return STYLES[key]
    except KeyError:
        raise UnknownStyleError(name, sorted(STYLES)) from None


def list_styles() -> list[BorderStyle]:
    return list(STYLES.values())
