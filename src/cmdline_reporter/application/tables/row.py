"""Table row."""

from __future__ import annotations

from typing import ClassVar

from cmdline_reporter.application.rendering.style import build_style
from cmdline_reporter.application.tables.column import Column
from cmdline_reporter.domain.exceptions import InvalidArgumentError
from cmdline_reporter.domain.model.options import check_color, validate_options


class Row:
    """Ordered columns plus row-wide decoration.

    Attributes:
        columns: Columns in display order.
        header: Header rows render bold and are separated from the next row.
        color: Color keyword for columns that set none.
        bold: Weight for columns that set none.
    """

    KEYS: ClassVar[tuple[str, ...]] = ("header", "color", "bold")

    def __init__(self, **options: object) -> None:
        """Validate options and build an empty row.

        Raises:
            UnknownOptionError: Key not in KEYS.
            InvalidColorError: Unknown color keyword.
        """
        validate_options(options, self.KEYS)
        self.columns: list[Column] = []
        self.header = bool(options.get("header") or False)
        self.color = check_color(options.get("color"))
        bold = options.get("bold")
        self.bold: bool | None = None if bold is None else bool(bold)
        build_style(self.color, bool(self.bold))

    def add(self, column: Column) -> None:
        """Append a column.

        Raises:
            InvalidArgumentError: column is not a Column.
        """
        if not isinstance(column, Column):
            raise InvalidArgumentError(f"row accepts Column, got {type(column).__name__}")
        if self.color is not None and column.color is None:
            column.color = self.color
        if self.bold is not None and column.bold is None:
            column.bold = self.bold
        if self.header and column.bold is None:
            column.bold = True
        self.columns.append(column)

    def __len__(self) -> int:
        """Number of columns."""
        return len(self.columns)
