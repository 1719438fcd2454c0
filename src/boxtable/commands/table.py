"""Table commands: render tabular data and inspect its columns."""

from __future__ import annotations

import typer

from boxtable.commands import command_context
from boxtable.models import DEFAULT_NO_DATA_LABEL, Align, Table
from boxtable.sources import build_table, delimiter_for, detect_format, parse_records, read_source

app = typer.Typer(no_args_is_help=True)

_SOURCE_HELP = "CSV/JSON file, http(s) URL, or '-' for stdin (default)."


def _split_assignment(raw: str, option: str) -> tuple[str, str]:
    key, sep, value = raw.partition("=")
    if not sep or not key or not value:
        raise typer.BadParameter(f"expected KEY=VALUE, got {raw!r}", param_hint=option)
    return key, value


def _parse_widths(values: list[str] | None) -> list[tuple[str, int]]:
    widths: list[tuple[str, int]] = []
    for raw in values or []:
        key, value = _split_assignment(raw, "--max-width")
        try:
            width = int(value)
        except ValueError:
            raise typer.BadParameter(f"width must be an integer, got {value!r}", param_hint="--max-width") from None
        if width < 0:
            raise typer.BadParameter(f"width must not be negative, got {width}", param_hint="--max-width")
        widths.append((key, width))
    return widths


def _parse_aligns(values: list[str] | None, option: str) -> list[tuple[str, Align]]:
    aligns: list[tuple[str, Align]] = []
    for raw in values or []:
        key, value = _split_assignment(raw, option)
        try:
            aligns.append((key, Align(value.lower())))
        except ValueError:
            choices = ", ".join(a.value for a in Align)
            raise typer.BadParameter(f"unknown alignment {value!r} (choose from {choices})", param_hint=option) from None
    return aligns


def _load_table(
    source: str | None,
    fmt: str | None,
    *,
    show_header: bool = True,
    no_data_label: str = DEFAULT_NO_DATA_LABEL,
    separator_every: int = 0,
) -> Table:
    text = read_source(source)
    resolved = detect_format(source, text, fmt)
    keys, records = parse_records(text, resolved, delimiter=delimiter_for(source))
    return build_table(
        keys,
        records,
        show_header=show_header,
        no_data_label=no_data_label,
        separator_every=separator_every,
    )


@app.command("render")
def render_table(
    source: str | None = typer.Argument(None, help=_SOURCE_HELP),
    fmt: str | None = typer.Option(None, "--format", "-f", help="Input format: csv or json (auto-detected)."),
    hide: list[str] | None = typer.Option(None, "--hide", help="Hide column KEY (repeatable)."),
    max_width: list[str] | None = typer.Option(
        None, "--max-width", help="Pin column width as KEY=N; longer values are truncated (repeatable)."
    ),
    align: list[str] | None = typer.Option(
        None, "--align", help="Cell alignment as KEY=left|right|center (repeatable)."
    ),
    title_align: list[str] | None = typer.Option(
        None, "--title-align", help="Title alignment as KEY=left|right|center (repeatable)."
    ),
    no_header: bool = typer.Option(False, "--no-header", help="Do not render the header row."),
    no_data_label: str | None = typer.Option(None, "--no-data-label", help="Text shown for an empty table."),
    separator_every: int = typer.Option(
        0, "--separator-every", min=0, help="Draw a rule between every N rows (0 disables)."
    ),
) -> None:
    """Render CSV or JSON records as a framed table."""
    widths = _parse_widths(max_width)
    cell_aligns = _parse_aligns(align, "--align")
    title_aligns = _parse_aligns(title_align, "--title-align")

    with command_context("rendering table") as (config, output):
        table = _load_table(
            source,
            fmt,
            show_header=config.show_header and not no_header,
            no_data_label=no_data_label if no_data_label is not None else config.no_data_label,
            separator_every=separator_every,
        )
        if hide:
            table.hide_column(hide)
        for key, value in cell_aligns:
            table.set_cell_align(key, value)
        for key, value in title_aligns:
            table.set_title_align(key, value)
        # After loading, so pinned widths are not widened by the rows.
        for key, width in widths:
            table.set_column_max_width(key, width)
        output.render_table(table, config.style)


@app.command("columns")
def list_columns(
    source: str | None = typer.Argument(None, help=_SOURCE_HELP),
    fmt: str | None = typer.Option(None, "--format", "-f", help="Input format: csv or json (auto-detected)."),
) -> None:
    """List the columns detected in SOURCE with their computed widths."""
    with command_context("listing columns") as (_config, output):
        table = _load_table(source, fmt)
        rows = [
            {
                "key": column.key,
                "title": column.title,
                "width": column.width,
                "align": column.cell_align.value,
                "visible": column.visible,
            }
            for column in table.columns
        ]
        output.render_listing(rows, columns=["key", "title", "width", "align", "visible"])
