"""Border style commands."""

from __future__ import annotations

import typer

from boxtable.commands import command_context
from boxtable.errors import UnknownStyleError
from boxtable.formatters.styles import ALIASES, get_style, list_styles
from boxtable.models import Align, Column, Table

app = typer.Typer(no_args_is_help=True)


def sample_table() -> Table:
    """Small demo table with a separator and a null value."""
    table = Table(
        {
            "id": Column("ID", cell_align=Align.RIGHT),
            "name": "Name",
            "email": "Email",
        }
    )
    table.add_row([1, "Alice", "alice@example.com"])
    table.add_row([2, "Bob", None])
    table.add_separator()
    table.add_row([3, "Chloé", "chloe@example.com"])
    return table


@app.command("list")
def list_all() -> None:
    """List the available border styles."""
    with command_context("listing styles") as (config, output):
        try:
            current = get_style(config.style).name
        except UnknownStyleError:
            current = None
        rows = [
            {
                "name": style.name,
                "aliases": ", ".join(alias for alias, target in ALIASES.items() if target == style.name),
                "description": style.description,
                "default": style.name == current,
            }
            for style in list_styles()
        ]
        output.render_listing(rows, columns=["name", "aliases", "description", "default"])


@app.command("show")
def show(
    name: str = typer.Argument(help="Style name (e.g., 'fancy', 'msdos', 'ascii')."),
) -> None:
    """Render a sample table in style NAME."""
    with command_context("showing style") as (_config, output):
        style = get_style(name)
        output.status(f"{style.name}: {style.description}")
        output.render_table(sample_table(), style)
