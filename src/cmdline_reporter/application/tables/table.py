"""Table: rows of columns rendered through rich.

Rows after the first take width, align and padding from the first row's
column at the same position, so every row lines up. Color and bold follow
the first row too, unless it is a header or the later row sets its own.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar

from rich import box
from rich.table import Table as RichTable

from cmdline_reporter.application.tables.row import Row
from cmdline_reporter.domain.exceptions import InvalidArgumentError
from cmdline_reporter.domain.model.enums import Encoding
from cmdline_reporter.domain.model.options import coerce_width, validate_options
from cmdline_reporter.infrastructure.output_sink import get_output_sink

if TYPE_CHECKING:
    from cmdline_reporter.infrastructure.output_sink import OutputSink

DEFAULT_TABLE_WIDTH = 100

_BOXES = {
    Encoding.UNICODE: box.SQUARE,
    Encoding.ASCII: box.ASCII,
}


class Table:
    """Ordered rows plus border settings.

    Attributes:
        rows: Rows in display order.
        border: Draw outer edge and lines between rows.
        width: Minimum render width.
        encoding: Border glyph set.
    """

    KEYS: ClassVar[tuple[str, ...]] = ("border", "width", "encoding")

    def __init__(self, **options: object) -> None:
        """Validate options and build an empty table.

        Raises:
            UnknownOptionError: Key not in KEYS.
            InvalidCountError: width < 1.
            InvalidArgumentError: Unknown encoding.
        """
        validate_options(options, self.KEYS)
        self.rows: list[Row] = []
        self.border = bool(options.get("border") or False)
        self.width = coerce_width(options.get("width") or DEFAULT_TABLE_WIDTH)
        self.encoding = Encoding.parse(options.get("encoding") or Encoding.UNICODE)

    def add(self, row: Row) -> None:
        """Append a row, aligning it with the first row.

        Raises:
            InvalidArgumentError: row is not a Row.
        """
        if not isinstance(row, Row):
            raise InvalidArgumentError(f"table accepts Row, got {type(row).__name__}")
        if self.rows:
            self._inherit(row)
        self.rows.append(row)

    def _inherit(self, row: Row) -> None:
        """Copy positional attributes (and decoration) from the first row."""
        first = self.rows[0]
        for index, column in enumerate(row.columns):
            if index >= len(first.columns):
                break
            source = first.columns[index]
            column.width = source.width
            column.align = source.align
            column.padding = source.padding

            if first.header:
                continue
            if column.color is None:
                column.color = source.color
            if column.bold is None:
                column.bold = source.bold

    def build(self) -> RichTable:
        """rich Table for the current rows."""
        table = RichTable(
            show_header=False,
            box=_BOXES[self.encoding] if self.border else None,
            show_edge=self.border,
            show_lines=self.border,
            padding=(0, 1),
            pad_edge=self.border,
            collapse_padding=not self.border,
        )

        for column in self.rows[0].columns:
            table.add_column(
                width=column.cell_width,
                justify=column.align.value,
                no_wrap=False,
                overflow="fold",
            )

        for row in self.rows:
            table.add_row(
                *(column.renderable() for column in row.columns),
                end_section=row.header,
            )
        return table

    def render_width(self) -> int:
        """Width wide enough for every column at its configured size."""
        if not self.rows:
            return self.width
        columns = self.rows[0].columns
        needed = sum(column.cell_width for column in columns) + 3 * len(columns) + 1
        return max(self.width, needed)

    def output(self, sink: OutputSink | None = None) -> None:
        """Write the table. An empty table writes nothing."""
        if not self.rows:
            return
        target = sink if sink is not None else get_output_sink()
        target.print(self.build(), width=self.render_width())

    def __len__(self) -> int:
        """Number of rows."""
        return len(self.rows)
