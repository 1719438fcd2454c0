"""Output manager: rendered tables, --json/--jq, TTY-aware listings."""

from __future__ import annotations

import json
import subprocess
import sys
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any

from boxtable._tty import is_tty
from boxtable.formatters.styles import BorderStyle
from boxtable.models import Row, Table


@dataclass
class OutputContext:
    """Manages output rendering based on flags and terminal state.

    - Tables: framed text lines in the selected border style
    - Listings: Rich table in a TTY, tab-separated values when piped
    - --json: JSON output, optionally filtered to specific fields
    - --jq: Filter JSON with jq expression
    - --quiet: Suppress status messages, keep data and errors
    """

    json_fields: list[str] | None = None
    jq_expr: str | None = None
    quiet: bool = False
    force_json: bool = False
    _is_tty: bool = field(default_factory=is_tty)

    @property
    def is_json_mode(self) -> bool:
        """Check if JSON output is requested."""
        return self.force_json or self.json_fields is not None or self.jq_expr is not None

    def render_table(self, table: Table, style: BorderStyle | str | None = None) -> None:
        """Write `table` as framed text lines (or its records in JSON mode)."""
        if self.is_json_mode:
            self._render_json(table_records(table))
            return

        for line in table.render(style):
            sys.stdout.write(line + "\n")

    def render_listing(self, rows: list[dict[str, Any]], columns: list[str]) -> None:
        """Render a plain listing (Rich in TTY, TSV in pipe)."""
        if self.is_json_mode:
            self._render_json(rows)
            return

        if not rows:
            self.status("No results found.")
            return

        if self._is_tty:
            self._render_rich_table(rows, columns)
        else:
            self._render_tsv(rows, columns)

    def status(self, msg: str) -> None:
        """Print a status message (suppressed in --quiet mode)."""
        if not self.quiet:
            sys.stderr.write(f"{msg}\n")

    def error(self, msg: str) -> None:
        """Print an error message (always shown)."""
        sys.stderr.write(f"{msg}\n")

    # ── Private rendering methods ─────────────────────────────────────────

    def _render_json(self, data: list[Any]) -> None:
        """Render JSON output with optional field filtering and jq."""
        if self.json_fields:
            data = [_pick_fields(item, self.json_fields) for item in data]

        json_str = json.dumps(data, indent=2, default=str, ensure_ascii=False)

        if self.jq_expr:
            json_str = _apply_jq(json_str, self.jq_expr)

        sys.stdout.write(json_str + "\n")

    def _render_rich_table(self, rows: list[dict[str, Any]], columns: list[str]) -> None:
        """Render a Rich table for TTY output."""
        from rich.console import Console
        from rich.table import Table as RichTable

        console = Console()
        table = RichTable(show_edge=False, pad_edge=False)

        for col in columns:
            table.add_column(col.upper(), no_wrap=True)

        for row in rows:
            table.add_row(*[_format_value(row.get(col, "")) for col in columns])

        console.print(table)

    def _render_tsv(self, rows: list[dict[str, Any]], columns: list[str]) -> None:
        """Render tab-separated values for piped output."""
        for row in rows:
            values = [_format_value(row.get(col, "")) for col in columns]
            sys.stdout.write("\t".join(values) + "\n")


def table_records(table: Table) -> list[dict[str, Any]]:
    """Data rows as dicts keyed by visible column key. Separators are skipped."""
    keys = [column.key for column in table.visible_columns if column.key is not None]
    records: list[dict[str, Any]] = []
    for row in table.rows:
        if not isinstance(row, Row):
            continue
        records.append({key: row[key].value if key in row else "" for key in keys})
    return records


def _pick_fields(item: dict[str, Any], fields: Sequence[str]) -> dict[str, Any]:
    """Pick specified fields from a dict."""
    return {f: item.get(f) for f in fields}


def _format_value(value: Any) -> str:
    """Format a value for display."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return str(value).lower()
    if isinstance(value, (list, dict)):
        return json.dumps(value, default=str)
    return str(value)


def _apply_jq(json_str: str, expr: str) -> str:
    """Apply a jq expression to JSON string."""
    try:
        result = subprocess.run(
            ["jq", expr],
            input=json_str,
            capture_output=True,
            text=True,
            check=True,
        )
        return result.stdout.rstrip()
    except FileNotFoundError:
        sys.stderr.write("error: `jq` is required for --jq flag but was not found in PATH\n")
        raise SystemExit(1) from None
    except subprocess.CalledProcessError as e:
        sys.stderr.write(f"error: jq failed: {e.stderr.strip()}\n")
        raise SystemExit(1) from None
