"""boxtable CLI entrypoint."""

from __future__ import annotations

import logging
import sys

import typer

from boxtable import __version__
from boxtable.config import BoxtableConfig, resolve_config
from boxtable.output import OutputContext

app = typer.Typer(
    name="boxtable",
    help="Render CSV and JSON data as framed text tables.",
    no_args_is_help=True,
)


class State:
    """Global state shared across commands."""

    config: BoxtableConfig
    output: OutputContext


state = State()


def version_callback(value: bool) -> None:
    if value:
        typer.echo(f"boxtable {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool | None = typer.Option(
        None,
        "--version",
        "-v",
        help="Show version and exit.",
        callback=version_callback,
        is_eager=True,
    ),
    profile: str | None = typer.Option(None, "--profile", envvar="BOXTABLE_PROFILE", help="Config profile name."),
    style: str | None = typer.Option(None, "--style", "-s", help="Border style (see `boxtable styles list`)."),
    output_json: bool = typer.Option(False, "--json", help="Output table rows as JSON."),
    json_fields: str | None = typer.Option(
        None, "--fields", help="Filter JSON to FIELDS (comma-separated). Implies --json."
    ),
    jq_expr: str | None = typer.Option(None, "--jq", help="Filter JSON with jq expression. Implies --json."),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Suppress status messages."),
    verbose: bool = typer.Option(False, "--verbose", help="Log debug messages to stderr."),
) -> None:
    """boxtable - framed, fixed-width tables for the terminal."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, stream=sys.stderr, format="%(levelname)s %(name)s: %(message)s")

    state.config = resolve_config(style=style, profile=profile)

    # --fields and --jq imply --json
    is_json = output_json or json_fields is not None or jq_expr is not None
    parsed_fields = json_fields.split(",") if json_fields else None

    state.output = OutputContext(
        json_fields=parsed_fields if is_json else None,
        jq_expr=jq_expr,
        quiet=quiet,
        force_json=is_json,
    )


# Import and register command groups
from boxtable.commands import styles, table  # noqa: E402

app.add_typer(table.app, name="table", help="Render tabular data from files, URLs or stdin.")
app.add_typer(styles.app, name="styles", help="Browse border styles.")

if __name__ == "__main__":
    app()
