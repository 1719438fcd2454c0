"""TTY and terminal encoding detection."""

from __future__ import annotations

import codecs
import os
import sys


def is_tty() -> bool:
    """Check if stdout is connected to a terminal."""
    if os.getenv("BOXTABLE_FORCE_TTY") == "1":
        return True
    return sys.stdout.isatty()


def supports_unicode() -> bool:
    """Check if stdout can encode box-drawing characters."""
    if os.getenv("BOXTABLE_ASCII") == "1":
        return False
    encoding = getattr(sys.stdout, "encoding", None)
    if not encoding:
        return False
    try:
        "─│═║…".encode(codecs.lookup(encoding).name)
    except (LookupError, UnicodeEncodeError):
        return False
    return True
