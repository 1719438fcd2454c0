"""Tests for the table renderer, pinned to exact output lines per style."""

from __future__ import annotations

import logging
import os

import pytest

from boxtable._exit_codes import NO_VISIBLE_COLUMNS
from boxtable.errors import NoVisibleColumnsError, UnknownStyleError
from boxtable.formatters.styles import COMPACT, PLUS_MINUS, list_styles
from boxtable.formatters.table import TableRenderer
from boxtable.models import Align, Column, Row, Separator, Table


@pytest.fixture
def people() -> Table:
    """ID / Name / Email table with two rows."""
    table = Table(["ID", "Name", "Email"])
    table.add_row([1, "Alice", "alice@example.com"])
    table.add_row([2, "Bob", "bob@example.com"])
    return table


class TestBasicRendering:
    """Test a simple table in every style."""

    def test_fancy(self, people: Table) -> None:
        """Test fancy style output."""
        assert TableRenderer("fancy").render(people) == [
            "┌────┬───────┬───────────────────┐",
            "│ ID │ Name  │ Email             │",
            "├────┼───────┼───────────────────┤",
            "│ 1  │ Alice │ alice@example.com │",
            "│ 2  │ Bob   │ bob@example.com   │",
            "└────┴───────┴───────────────────┘",
        ]

    def test_default_style_is_fancy(self, people: Table) -> None:
        """Test that the renderer defaults to fancy."""
        assert TableRenderer().render(people) == TableRenderer("fancy").render(people)
        assert people.render() == TableRenderer("fancy").render(people)

    def test_msdos(self, people: Table) -> None:
        """Test msdos style output."""
        assert TableRenderer("msdos").render(people) == [
            "╔════╦═══════╦═══════════════════╗",
            "║ ID ║ Name  ║ Email             ║",
            "╠════╬═══════╬═══════════════════╣",
            "║ 1  ║ Alice ║ alice@example.com ║",
            "║ 2  ║ Bob   ║ bob@example.com   ║",
            "╚════╩═══════╩═══════════════════╝",
        ]

    def test_plus_minus(self, people: Table) -> None:
        """Test plus_minus style output."""
        assert TableRenderer(PLUS_MINUS).render(people) == [
            "+----+-------+-------------------+",
            "| ID | Name  | Email             |",
            "+----+-------+-------------------+",
            "| 1  | Alice | alice@example.com |",
            "| 2  | Bob   | bob@example.com   |",
            "+----+-------+-------------------+",
        ]

    def test_compact(self, people: Table) -> None:
        """Test compact style output without outer edges."""
        assert TableRenderer(COMPACT).render(people) == [
            " ID   Name    Email             ",
            "---- ------- -------------------",
            " 1    Alice   alice@example.com ",
            " 2    Bob     bob@example.com   ",
        ]

    def test_three_single_letter_columns(self) -> None:
        """Test the smallest ASCII table with one row."""
        table = Table(["A", "B", "C"])
        table.add_row({"A": "a", "B": "b", "C": "c"})
        assert table.render("ascii") == [
            "+---+---+---+",
            "| A | B | C |",
            "+---+---+---+",
            "| a | b | c |",
            "+---+---+---+",
        ]

    @pytest.mark.parametrize("style", list_styles(), ids=lambda s: s.name)
    def test_lines_have_equal_length(self, people: Table, style) -> None:
        """Test that every line of a rendered table is equally long."""
        people.add_separator()
        people.add_row({"Name": None})
        lines = TableRenderer(style).render(people)
        assert len({len(line) for line in lines}) == 1

    def test_render_as_string(self, people: Table) -> None:
        """Test joining lines with a custom separator."""
        text = people.render_as_string("ascii", line_separator="\n")
        assert text.splitlines() == TableRenderer(PLUS_MINUS).render(people)
        assert not text.endswith("\n")
        assert TableRenderer(PLUS_MINUS).render_as_string(people, "\n") == text

    def test_render_as_string_defaults_agree(self, people: Table) -> None:
        """Test that both string helpers join with the platform line separator by default."""
        expected = os.linesep.join(TableRenderer(PLUS_MINUS).render(people))
        assert people.render_as_string("ascii") == expected
        assert TableRenderer(PLUS_MINUS).render_as_string(people) == expected

    @pytest.mark.parametrize(
        ("style", "frame"), [("fancy", "│"), ("msdos", "║"), ("plus_minus", "|")]
    )
    def test_frame_glyph_count(self, people: Table, style: str, frame: str) -> None:
        """Test that header and data lines carry one frame glyph more than visible columns."""
        people.hide_column("Email")
        lines = people.render(style)
        for line in (lines[1], lines[3], lines[4]):
            assert line.count(frame) == 3

    def test_unknown_style(self, people: Table) -> None:
        """Test that an unknown style name raises."""
        with pytest.raises(UnknownStyleError):
            people.render("rounded")


class TestAlignment:
    """Test alignment in rendered rows."""

    def test_column_alignments(self) -> None:
        """Test left, right and center column alignment."""
        table = Table(
            {
                "l": Column("Left Align", cell_align=Align.LEFT),
                "r": Column("Right Align", cell_align=Align.RIGHT),
                "c": Column("Center Align", cell_align=Align.CENTER),
            }
        )
        table.add_row(["abc", "xyz", "def"])
        assert table.render("plus_minus") == [
            "+------------+-------------+--------------+",
            "| Left Align | Right Align | Center Align |",
            "+------------+-------------+--------------+",
            "| abc        |         xyz |     def      |",
            "+------------+-------------+--------------+",
        ]

    def test_title_alignment(self) -> None:
        """Test that set_column_align also moves the title."""
        table = Table(["Amount"])
        table.add_row(["1234567.89"])
        table.set_column_align("Amount", Align.RIGHT)
        assert table.render("ascii")[1] == "|     Amount |"
        assert table.render("ascii")[3] == "| 1234567.89 |"

    def test_cell_alignment_beats_column(self) -> None:
        """Test that a per-cell alignment wins over the column alignment."""
        table = Table({"n": Column("Number", cell_align=Align.RIGHT)})
        table.add_row(Row().add_cell("n", "7", Align.LEFT))
        assert table.render("ascii")[3] == "| 7      |"


class TestHiddenColumns:
    """Test rendering with hidden columns."""

    def test_hidden_column_is_skipped(self, people: Table) -> None:
        """Test that hidden columns are left out of every line."""
        people.hide_column("Email")
        assert people.render("fancy") == [
            "┌────┬───────┐",
            "│ ID │ Name  │",
            "├────┼───────┤",
            "│ 1  │ Alice │",
            "│ 2  │ Bob   │",
            "└────┴───────┘",
        ]

    def test_hidden_last_column_moves_right_edge(self, people: Table) -> None:
        """Test that the right edge follows the last visible column."""
        people.hide_column(["Name", "Email"])
        assert people.render("ascii")[1] == "| ID |"

    def test_all_hidden_raises(self, people: Table) -> None:
        """Test that a table with no visible columns cannot be rendered."""
        people.hide_column(["ID", "Name", "Email"])
        with pytest.raises(NoVisibleColumnsError, match="No visible columns in table. Enable some?") as exc_info:
            TableRenderer().render(people)
        assert exc_info.value.exit_code == NO_VISIBLE_COLUMNS

    def test_no_data_spans_visible_columns_only(self) -> None:
        """Test that the no-data line spans only the visible columns."""
        table = Table(
            {
                "a": Column("A", max_width=15),
                "b": Column("B", max_width=40),
                "c": Column("C", max_width=15),
            }
        )
        table.hide_column("b")
        lines = table.render("ascii")
        assert lines[0] == "+-----------------+-----------------+"
        assert lines[3] == "|              NO DATA              |"
        assert len(lines[3]) == len(lines[0])


class TestEmptyTable:
    """Test the no-data line."""

    def test_fancy(self) -> None:
        """Test an empty fancy table."""
        assert Table(["ID", "Name"]).render() == [
            "┌────┬──────┐",
            "│ ID │ Name │",
            "├────┼──────┤",
            "│  NO DATA  │",
            "└────┴──────┘",
        ]

    def test_custom_label(self) -> None:
        """Test a custom no-data label."""
        table = Table(["ID", "Name"], no_data_label="empty")
        assert table.render("ascii")[3] == "|   empty   |"

    def test_label_truncated_when_too_long(self) -> None:
        """Test that a label wider than the table is truncated."""
        assert Table(["A"]).render("ascii")[3] == "| … |"

    def test_empty_without_header(self) -> None:
        """Test an empty table with the header hidden."""
        assert Table(["ID", "Name"], show_header=False).render("ascii") == [
            "+----+------+",
            "|  NO DATA  |",
            "+----+------+",
        ]


class TestHeader:
    """Test header visibility."""

    def test_hidden_header(self, people: Table) -> None:
        """Test that a hidden header drops the header line and its rule."""
        people.hide_header()
        assert people.render("fancy") == [
            "┌────┬───────┬───────────────────┐",
            "│ 1  │ Alice │ alice@example.com │",
            "│ 2  │ Bob   │ bob@example.com   │",
            "└────┴───────┴───────────────────┘",
        ]

    def test_hidden_header_compact(self, people: Table) -> None:
        """Test compact output with only data lines."""
        people.hide_header()
        assert people.render(COMPACT) == [
            " 1    Alice   alice@example.com ",
            " 2    Bob     bob@example.com   ",
        ]


class TestValues:
    """Test null, missing, multi-byte and truncated values."""

    def test_null_and_missing_values(self) -> None:
        """Test that None renders NULL and a missing cell renders blank."""
        table = Table(["ID", "Name", "Email"])
        table.add_row({"ID": "1", "Name": None})
        assert table.render("fancy") == [
            "┌────┬──────┬───────┐",
            "│ ID │ Name │ Email │",
            "├────┼──────┼───────┤",
            "│ 1  │ NULL │       │",
            "└────┴──────┴───────┘",
        ]

    def test_multibyte(self) -> None:
        """Test that multi-byte text is measured in code points."""
        table = Table(["Key", "Value"])
        table.add_row(["項目1", "値1"])
        table.add_row(["項目2", "値2"])
        assert table.render("fancy") == [
            "┌─────┬───────┐",
            "│ Key │ Value │",
            "├─────┼───────┤",
            "│ 項目1 │ 値1    │",
            "│ 項目2 │ 値2    │",
            "└─────┴───────┘",
        ]

    def test_truncated_value(self) -> None:
        """Test that a pinned width truncates with an ellipsis."""
        table = Table({"name": "NAME"})
        table.add_row(["PBOX POH Poříčí"])
        table.set_column_max_width("name", 10)
        assert table.render("ascii")[3] == "| PBOX POH … |"


class TestSeparators:
    """Test separator rows."""

    def test_separator_between_rows_is_mid_rule(self) -> None:
        """Test that a separator between rows draws a middle rule."""
        table = Table(["ID", "Name", "Email"])
        table.add_rows([[1, "Alice", "alice@example.com"], Separator(), [2, "Bob", "bob@example.com"]])
        assert table.render("fancy") == [
            "┌────┬───────┬───────────────────┐",
            "│ ID │ Name  │ Email             │",
            "├────┼───────┼───────────────────┤",
            "│ 1  │ Alice │ alice@example.com │",
            "├────┼───────┼───────────────────┤",
            "│ 2  │ Bob   │ bob@example.com   │",
            "└────┴───────┴───────────────────┘",
        ]

    def test_trailing_separator_is_mid_rule(self, people: Table) -> None:
        """Test that a separator after the last row still draws a middle rule."""
        people.add_separator()
        lines = people.render("fancy")
        assert lines[-2] == "├────┼───────┼───────────────────┤"
        assert lines[-1] == "└────┴───────┴───────────────────┘"

    def test_separator_only_table(self) -> None:
        """Test that a table holding only a separator draws no no-data line."""
        table = Table(["ID"])
        table.add_separator()
        assert table.render("fancy") == [
            "┌────┐",
            "│ ID │",
            "├────┤",
            "├────┤",
            "└────┘",
        ]

    def test_separator_in_compact(self) -> None:
        """Test a separator in a style without outer edges."""
        table = Table(["ID"])
        table.add_rows([[1], Separator(), [2]])
        assert table.render(COMPACT) == [
            " ID ",
            "----",
            " 1  ",
            "----",
            " 2  ",
        ]

    def test_leading_separator_compact_without_header(self) -> None:
        """Test that a leading separator in compact style is as wide as the data lines."""
        table = Table(["ID"], show_header=False)
        table.add_rows([Separator(), [1]])
        assert table.render(COMPACT) == [
            "----",
            " 1  ",
        ]


class TestLogging:
    """Test renderer logging."""

    def test_debug_record(self, people: Table, caplog) -> None:
        """Test that rendering logs a debug record."""
        with caplog.at_level(logging.DEBUG, logger="boxtable.formatters.table"):
            TableRenderer("msdos").render(people)
        assert "2 row(s) across 3 visible column(s) in msdos style" in caplog.text
