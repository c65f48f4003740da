"""Nested formatter: hierarchical "working ... complete" report bodies.

Every report opens at one indent level deeper than the report it runs in:

    working
      working
      complete
    complete
"""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar

from cmdline_reporter.application.formatters._base import BaseFormatter
from cmdline_reporter.application.formatters._registry import register_formatter
from cmdline_reporter.domain.exceptions import InvalidArgumentError
from cmdline_reporter.domain.model.options import coerce_lines

if TYPE_CHECKING:
    from collections.abc import Mapping

    from cmdline_reporter.domain.ports.formatter import ReportBody

DEFAULT_INDENT_SIZE = 2
INLINE = "inline"


@register_formatter("nested")
class NestedFormatter(BaseFormatter):
    """Indents each report by its nesting depth.

    Options:
        message: Opening line. Default message_string.
        complete: Closing line. Default complete_string.
        type: "inline" keeps message, body output and complete on one line.
        indent_size: Spaces per level for this report.
        color: Color keyword of message and complete lines.
        bold: Weight decoration of message and complete lines.

    Attributes:
        indent_size: Spaces per level when a report gives none.
        message_string: Default opening line.
        complete_string: Default closing line.
    """

    VALID_OPTIONS: ClassVar[tuple[str, ...]] = (
        "message",
        "type",
        "complete",
        "indent_size",
        "color",
        "bold",
    )

    def __init__(self) -> None:
        """Start above the outermost level: first report opens at level 0."""
        self.indent_size = DEFAULT_INDENT_SIZE
        self.message_string = "working"
        self.complete_string = "complete"
        self._indent_level = -1

    @property
    def indent_level(self) -> int:
        """Depth of the report currently running. -1 = none running."""
        return self._indent_level

    def format(self, options: Mapping[str, object], body: ReportBody) -> None:
        """Write message, run body one level deeper, write complete."""
        color, bold = self._validate(options)
        report_type = options.get("type")
        if report_type is not None and report_type != INLINE:
            raise InvalidArgumentError(f"type must be {INLINE!r} or omitted, got {report_type!r}")
        indent_size = coerce_lines(options.get("indent_size", self.indent_size), "indent_size")

        self._indent_level += 1
        try:
            padding = " " * (self._indent_level * indent_size)
            message = padding + str(options.get("message") or self.message_string)
            complete = str(options.get("complete") or self.complete_string)

            if report_type == INLINE:
                self._inline(f"{message}...", color, bold)
            else:
                self._line(message, color, bold)
                complete = padding + complete

            body()
            self._line(complete, color, bold)
        finally:
            self._indent_level -= 1

    def progress(self, override: str | None = None) -> None:
        """Write one progress glyph ("." unless overridden) inline."""
        self._inline(str(override or "."), None, False)
