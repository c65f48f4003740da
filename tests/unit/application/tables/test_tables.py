"""Tests for the tabular model: Column, Row, Table."""

import pytest

from cmdline_reporter.application.tables import Column, Row, Table
from cmdline_reporter.domain.exceptions import (
    InvalidArgumentError,
    InvalidColorError,
    InvalidCountError,
    UnknownOptionError,
)
from cmdline_reporter.domain.model.enums import Align, Encoding
from cmdline_reporter.infrastructure.output_sink import OutputSink
from tests.factories import make_row


class TestColumn:
    """Tests for Column."""

    def test_defaults(self) -> None:
        """Width 10, left, no padding, decoration unset."""
        column = Column("abc")
        assert column.width == 10
        assert column.align is Align.LEFT
        assert column.padding == 0
        assert column.color is None
        assert column.bold is None

    def test_text_stringified(self) -> None:
        """Non-str text is rendered with str(); None is empty."""
        assert Column(42).text == "42"
        assert Column(None).text == ""

    def test_cell_width_includes_padding(self) -> None:
        """Padding counts on both sides."""
        assert Column("x", width=5, padding=2).cell_width == 9

    def test_renderable_padded(self) -> None:
        """Padding becomes spaces around the text."""
        assert Column("x", padding=1).renderable().plain == " x "

    @pytest.mark.parametrize(
        ("options", "error"),
        [
            ({"height": 1}, UnknownOptionError),
            ({"width": 0}, InvalidCountError),
            ({"padding": -1}, InvalidCountError),
            ({"align": "middle"}, InvalidArgumentError),
            ({"color": "nope"}, InvalidColorError),
        ],
    )
    def test_invalid_options(self, options: dict[str, object], error: type[Exception]) -> None:
        """Bad options fail at construction."""
        with pytest.raises(error):
            Column("x", **options)


class TestRow:
    """Tests for Row."""

    def test_columns_inherit_row_decoration(self) -> None:
        """Row color and bold fill unset column decoration."""
        row = Row(color="red", bold=True)
        row.add(Column("a"))
        row.add(Column("b", color="blue", bold=False))
        assert (row.columns[0].color, row.columns[0].bold) == ("red", True)
        assert (row.columns[1].color, row.columns[1].bold) == ("blue", False)

    def test_header_is_bold(self) -> None:
        """Header columns default to bold."""
        row = make_row("a", header=True)
        assert row.columns[0].bold is True

    def test_rejects_non_column(self) -> None:
        """Only Column instances are accepted."""
        with pytest.raises(InvalidArgumentError):
            Row().add("text")  # type: ignore[arg-type]

    def test_unknown_option(self) -> None:
        """Rows carry no encoding."""
        with pytest.raises(UnknownOptionError):
            Row(encoding="ascii")

    def test_len(self) -> None:
        """len() counts columns."""
        assert len(make_row("a", "b", "c")) == 3


class TestTableInheritance:
    """Rows after the first line up with it."""

    def test_positional_attributes(self) -> None:
        """width, align and padding come from the first row."""
        first = Row()
        first.add(Column("a", width=20, align="right", padding=1))
        second = make_row("b")
        table = Table()
        table.add(first)
        table.add(second)
        column = second.columns[0]
        assert (column.width, column.align, column.padding) == (20, Align.RIGHT, 1)

    def test_decoration_from_plain_first_row(self) -> None:
        """Color and bold follow a non-header first row."""
        table = Table()
        table.add(make_row("a", color="green", bold=True))
        second = make_row("b")
        table.add(second)
        assert (second.columns[0].color, second.columns[0].bold) == ("green", True)

    def test_no_decoration_from_header(self) -> None:
        """A header's bold does not leak into data rows."""
        table = Table()
        table.add(make_row("a", header=True))
        second = make_row("b")
        table.add(second)
        assert second.columns[0].bold is None

    def test_own_decoration_kept(self) -> None:
        """A row's own color wins."""
        table = Table()
        table.add(make_row("a", color="green"))
        second = make_row("b", color="red")
        table.add(second)
        assert second.columns[0].color == "red"

    def test_extra_columns_untouched(self) -> None:
        """Columns past the first row's count keep their settings."""
        table = Table()
        table.add(make_row("a"))
        second = Row()
        second.add(Column("b"))
        second.add(Column("c", width=3))
        table.add(second)
        assert second.columns[1].width == 3

    def test_rejects_non_row(self) -> None:
        """Only Row instances are accepted."""
        with pytest.raises(InvalidArgumentError):
            Table().add(Column("x"))  # type: ignore[arg-type]


class TestTableOutput:
    """Tests for Table.output."""

    def test_empty_table_writes_nothing(self, sink: OutputSink) -> None:
        """No rows, no output."""
        Table().output(sink)
        assert sink.capture() == ""

    def test_borderless(self, sink: OutputSink) -> None:
        """Columns share one line, no box glyphs."""
        table = Table()
        table.add(make_row("alpha", "beta"))
        table.output()
        lines = sink.capture().splitlines()
        assert len(lines) == 1
        assert "alpha" in lines[0]
        assert "beta" in lines[0]
        assert lines[0].index("alpha") < lines[0].index("beta")
        assert "┌" not in lines[0]
        assert "+" not in lines[0]

    def test_unicode_border(self, sink: OutputSink) -> None:
        """Unicode tables draw box glyphs."""
        table = Table(border=True)
        table.add(make_row("alpha"))
        table.output(sink)
        output = sink.capture()
        assert output.startswith("┌")
        assert "│ alpha" in output

    def test_ascii_border(self, sink: OutputSink) -> None:
        """ASCII tables draw +, - and |."""
        table = Table(border=True, encoding="ascii")
        table.add(make_row("alpha"))
        table.output(sink)
        output = sink.capture()
        assert table.encoding is Encoding.ASCII
        assert output.startswith("+")
        assert "| alpha" in output
        assert "┌" not in output

    def test_long_text_wraps_inside_column(self, sink: OutputSink) -> None:
        """Text wider than the column folds onto more lines."""
        table = Table()
        row = Row()
        row.add(Column("abcdefghij", width=5))
        table.add(row)
        table.output(sink)
        assert sink.capture().split() == ["abcde", "fghij"]

    def test_render_width(self) -> None:
        """Wide column sets grow the render width past the table width."""
        table = Table(width=10)
        row = Row()
        row.add(Column("x", width=40))
        table.add(row)
        assert table.render_width() == 40 + 3 + 1

    def test_invalid_encoding(self) -> None:
        """Unknown encodings fail at construction."""
        with pytest.raises(InvalidArgumentError):
            Table(encoding="ebcdic")
