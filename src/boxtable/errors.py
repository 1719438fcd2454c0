"""Exceptions raised while building and rendering tables."""

from __future__ import annotations

from typing import Any

from boxtable._exit_codes import ERROR, INVALID_INPUT, NO_VISIBLE_COLUMNS, NOT_FOUND


class TableError(Exception):
    """Base class for all table errors."""

    exit_code: int = ERROR

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class DuplicateColumnKeyError(TableError):
    """Raised when a column (or a row cell) key is registered twice."""

    exit_code = INVALID_INPUT

    def __init__(self, key: str) -> None:
        super().__init__(f"Duplicate column key: {key}")
        self.key = key


class ColumnKeyNotFoundError(TableError, KeyError):
    """Raised when a column key is not known to the table or row."""

    exit_code = NOT_FOUND

    def __init__(self, key: str) -> None:
        super().__init__(f"Column key not found: {key}")
        self.key = key


class UnsupportedColumnTypeError(TableError):
    """Raised when a column definition is neither a title string nor a Column."""

    exit_code = INVALID_INPUT

    def __init__(self, key: str, value: Any) -> None:
        super().__init__(f"Unsupported column type ({type(value).__name__}): {key}")
        self.key = key


class UnsupportedCellTypeError(TableError):
    """Raised when a cell value cannot be turned into display text."""

    exit_code = INVALID_INPUT

    def __init__(self, value: Any) -> None:
        super().__init__(f"Unsupported cell value type: {type(value).__name__}")


class UnknownStyleError(TableError):
    """Raised when a border style name is not registered."""

    exit_code = INVALID_INPUT

    def __init__(self, name: str, known: list[str]) -> None:
        super().__init__(f"Unknown style `{name}` (available: {', '.join(known)})")
        self.name = name


class NoVisibleColumnsError(TableError):
    """Raised by the renderer when every column of the table is hidden."""

    exit_code = NO_VISIBLE_COLUMNS

    def __init__(self) -> None:
        super().__init__("No visible columns in table. Enable some?")
