"""Multi-byte aware length, padding and truncation helpers.

All widths are measured in Unicode code points, never in bytes.
"""

from __future__ import annotations

from enum import Enum

ELLIPSIS = "\u2026"  # …


class PadMode(Enum):
    """Side(s) receiving the padding characters."""

    LEFT = "left"
    RIGHT = "right"
    BOTH = "both"


def display_length(text: str) -> int:
    """Return the number of code points in `text`."""
    return len(text)


def pad(text: str, width: int, pad_char: str = " ", mode: PadMode = PadMode.RIGHT) -> str:
    """Pad `text` up to `width` code points.

    Text that is already `width` long (or longer) is returned unchanged;
    truncation is a separate step. With `PadMode.BOTH` the left side gets
    ``extra // 2`` characters and the right side gets the remainder.
    """
    if not pad_char:
        raise ValueError("pad_char must not be empty")

    extra = width - display_length(text)
    if extra <= 0:
        return text

    if mode is PadMode.LEFT:
        return _fill(pad_char, extra) + text
    if mode is PadMode.BOTH:
        left = extra // 2
        return _fill(pad_char, left) + text + _fill(pad_char, extra - left)
    return text + _fill(pad_char, extra)


def truncate(text: str, width: int) -> str:
    """Clip `text` to `width` code points, ending with an ellipsis when clipped."""
    if width <= 0:
        raise ValueError(f"truncate width must be positive, got {width}")
    if display_length(text) <= width:
        return text
    return text[: width - 1] + ELLIPSIS


def _fill(pad_char: str, count: int) -> str:
    """Repeat `pad_char` and clip to exactly `count` code points."""
    return (pad_char * count)[:count]
