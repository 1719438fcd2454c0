"""Shared command infrastructure."""

from __future__ import annotations

from collections.abc import Generator
from contextlib import contextmanager
from typing import TYPE_CHECKING

import typer

from boxtable.errors import TableError
from boxtable.sources import SourceError

if TYPE_CHECKING:
    from boxtable.config import BoxtableConfig
    from boxtable.output import OutputContext


@contextmanager
def command_context(operation: str = "") -> Generator[tuple[BoxtableConfig, OutputContext], None, None]:
    """Shared context for all commands: resolved config + error handling.

    Args:
        operation: Human-readable label for error messages (e.g. "rendering table").
    """
    from boxtable.main import state

    output = state.output
    try:
        yield state.config, output
    except (TableError, SourceError) as e:
        prefix = f"{operation}: " if operation else ""
        output.error(f"error: {prefix}{e}")
        raise typer.Exit(e.exit_code) from None
