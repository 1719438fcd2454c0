"""Tabular input sources: stdin, local files (CSV/JSON) and HTTP URLs."""

from __future__ import annotations

import csv
import io
import json
import logging
import sys
from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import Any

import httpx

from boxtable import __version__
from boxtable._exit_codes import ERROR, HTTP_NOT_FOUND, INVALID_INPUT, NOT_FOUND
from boxtable.models import DEFAULT_NO_DATA_LABEL, Table

logger = logging.getLogger(__name__)

FORMATS = ("csv", "json")


class SourceError(Exception):
    """Raised when table data cannot be read or parsed."""

    def __init__(self, message: str, status_code: int = 0, exit_code: int = ERROR) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.exit_code = exit_code


class RemoteSource:
    """Fetches table data over HTTP."""

    def __init__(self, timeout: float = 30.0) -> None:
        self._http = httpx.Client(
            timeout=timeout,
            follow_redirects=True,
            headers={"User-Agent": f"boxtable/{__version__}"},
        )

    def close(self) -> None:
        """Close the HTTP client."""
        self._http.close()

    def fetch(self, url: str) -> str:
        """GET `url` and return the response body as text."""
        logger.debug("Fetching table data from %s", url)
        try:
            resp = self._http.get(url)
            resp.raise_for_status()
            return resp.text
        except httpx.HTTPStatusError as e:
            if e.response.status_code == HTTP_NOT_FOUND:
                raise SourceError(
                    f"Resource not found: {url}",
                    status_code=404,
                    exit_code=NOT_FOUND,
                ) from e
            raise SourceError(
                f"HTTP error {e.response.status_code}: {e.response.text}",
                status_code=e.response.status_code,
            ) from e
        except httpx.RequestError as e:
            raise SourceError(f"Connection error: {e}") from e


def is_url(source: str) -> bool:
    return source.startswith(("http://", "https://"))


def read_source(source: str | None) -> str:
    """Read raw text from stdin (`None` or ``-``), a URL or a local file."""
    if source is None or source == "-":
        return sys.stdin.read()

    if is_url(source):
        remote = RemoteSource()
        try:
            return remote.fetch(source)
        finally:
            remote.close()

    path = Path(source)
    if not path.is_file():
        raise SourceError(f"File not found: {source}", exit_code=NOT_FOUND)
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise SourceError(f"Cannot read {source}: {e}") from e


def detect_format(source: str | None, text: str, explicit: str | None = None) -> str:
    """Pick ``csv`` or ``json`` from an explicit choice, the file extension, or the content."""
    if explicit:
        fmt = explicit.lower()
        if fmt not in FORMATS:
            raise SourceError(
                f"Unsupported format `{explicit}` (expected one of: {', '.join(FORMATS)})",
                exit_code=INVALID_INPUT,
            )
        return fmt

    if source and source != "-":
        suffix = Path(source.split("?", 1)[0]).suffix.lower()
        if suffix == ".json":
            return "json"
        if suffix in (".csv", ".tsv"):
            return "csv"

    return "json" if text.lstrip().startswith(("[", "{")) else "csv"


def parse_records(text: str, fmt: str, *, delimiter: str = ",") -> tuple[list[str], list[dict[str, Any]]]:
    """Parse `text` into ordered column keys and a list of records."""
    if fmt == "csv":
        return _parse_csv(text, delimiter)
    if fmt == "json":
        return _parse_json(text)
    raise SourceError(f"Unsupported format `{fmt}`", exit_code=INVALID_INPUT)


def _parse_csv(text: str, delimiter: str) -> tuple[list[str], list[dict[str, Any]]]:
    reader = csv.DictReader(io.StringIO(text), delimiter=delimiter, restval="")
    try:
        records = [dict(record) for record in reader]
    except csv.Error as e:
        raise SourceError(f"Malformed CSV: {e}", exit_code=INVALID_INPUT) from e

    keys = list(reader.fieldnames or [])
    for record in records:
        # Surplus fields land under the `None` key; they have no column.
        record.pop(None, None)  # type: ignore[call-overload]
    return keys, records


def _parse_json(text: str) -> tuple[list[str], list[dict[str, Any]]]:
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise SourceError(f"Malformed JSON: {e}", exit_code=INVALID_INPUT) from e

    columns: list[str] | None = None
    if isinstance(data, dict):
        columns = data.get("columns")
        data = data.get("rows", [])

    if not isinstance(data, list) or not all(isinstance(item, dict) for item in data):
        raise SourceError("JSON input must be a list of objects", exit_code=INVALID_INPUT)

    keys = [str(key) for key in columns] if columns else _collect_keys(data)
    return keys, data


def _collect_keys(records: Iterable[Mapping[str, Any]]) -> list[str]:
    """Keys of all records in first-seen order."""
    seen: dict[str, None] = {}
    for record in records:
        for key in record:
            seen.setdefault(key, None)
    return list(seen)


def build_table(
    keys: list[str],
    records: Iterable[Mapping[str, Any]],
    *,
    show_header: bool = True,
    no_data_label: str = DEFAULT_NO_DATA_LABEL,
    separator_every: int = 0,
) -> Table:
    """Build a `Table` with one column per key and one row per record.

    Nested values (lists, objects) are shown as compact JSON. With
    `separator_every` > 0 a separator row is inserted between every N records.
    """
    items = list(records)
    table = Table(keys, show_header=show_header, no_data_label=no_data_label)
    for idx, record in enumerate(items, start=1):
        table.add_row({key: _scalar(value) for key, value in record.items() if key in keys})
        if separator_every > 0 and idx % separator_every == 0 and idx < len(items):
            table.add_separator()
    return table


def _scalar(value: Any) -> Any:
    if isinstance(value, (list, dict)):
        return json.dumps(value, default=str)
    return value


def delimiter_for(source: str | None) -> str:
    """Tab for ``.tsv`` sources, comma otherwise."""
    if source and source.split("?", 1)[0].lower().endswith(".tsv"):
        return "\t"
    return ","
