"""Table column (one cell of a row)."""

from __future__ import annotations

from typing import ClassVar

from rich.style import Style
from rich.text import Text

from cmdline_reporter.application.rendering.style import build_style
from cmdline_reporter.domain.model.enums import Align
from cmdline_reporter.domain.model.options import (
    check_color,
    coerce_lines,
    coerce_width,
    validate_options,
)

DEFAULT_COLUMN_WIDTH = 10


class Column:
    """One cell: text plus its placement and decoration.

    width, align and padding of columns after a table's first row are
    overwritten by the table so that every row lines up.

    Attributes:
        text: Cell text.
        width: Text width; longer text wraps inside the cell.
        align: Placement inside width.
        padding: Spaces on both sides of the text.
        color: Color keyword. None = inherit from row or first row.
        bold: Weight. None = inherit from row or first row.
        underline: Underline decoration.
        reversed: Swap foreground and background.
    """

    KEYS: ClassVar[tuple[str, ...]] = (
        "width",
        "align",
        "padding",
        "color",
        "bold",
        "underline",
        "reversed",
    )

    def __init__(self, text: object = "", **options: object) -> None:
        """Validate options and build the column.

        Raises:
            UnknownOptionError: Key not in KEYS.
            InvalidCountError: width < 1 or padding < 0.
            InvalidAlignmentError: Unknown align.
            InvalidColorError: Unknown color keyword.
        """
        validate_options(options, self.KEYS)
        self.text = "" if text is None else str(text)
        self.width = coerce_width(options.get("width", DEFAULT_COLUMN_WIDTH))
        self.align = Align.parse(options.get("align") or Align.LEFT)
        self.padding = coerce_lines(options.get("padding", 0), "padding")
        self.color = check_color(options.get("color"))
        bold = options.get("bold")
        self.bold: bool | None = None if bold is None else bool(bold)
        self.underline = bool(options.get("underline") or False)
        self.reversed = bool(options.get("reversed") or False)
        build_style(self.color, bool(self.bold))

    @property
    def cell_width(self) -> int:
        """Width including padding on both sides."""
        return self.width + 2 * self.padding

    def style(self) -> Style:
        """Color, then bold, then underline/reverse."""
        style = build_style(self.color, bool(self.bold)) or Style()
        if self.underline or self.reversed:
            style += Style(underline=self.underline or None, reverse=self.reversed or None)
        return style

    def renderable(self) -> Text:
        """Cell content with padding applied."""
        pad = " " * self.padding
        return Text(f"{pad}{self.text}{pad}", style=self.style())

    def __repr__(self) -> str:
        """Short debug form."""
        return f"Column({self.text!r}, width={self.width}, align={self.align.value})"
