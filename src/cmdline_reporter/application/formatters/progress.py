"""Progress formatter: flat report body followed by a newline.

The body calls progress() per step; each step prints the indicator on
the current line.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar

from cmdline_reporter.application.formatters._base import BaseFormatter
from cmdline_reporter.application.formatters._registry import register_formatter
from cmdline_reporter.infrastructure.output_sink import get_output_sink

if TYPE_CHECKING:
    from collections.abc import Mapping

    from cmdline_reporter.domain.ports.formatter import ReportBody

DEFAULT_INDICATOR = "."


@register_formatter("progress")
class ProgressFormatter(BaseFormatter):
    """Prints an indicator per progress step.

    Options given to format() stay on the singleton and decorate every
    following progress() call, until the next format().

    Attributes:
        indicator: Glyph printed per step.
        color: Color keyword of each step.
        bold: Weight decoration of each step.
    """

    VALID_OPTIONS: ClassVar[tuple[str, ...]] = ("indicator", "color", "bold")

    def __init__(self) -> None:
        """Undecorated "." indicator."""
        self.indicator = DEFAULT_INDICATOR
        self.color: str | None = None
        self.bold = False

    def format(self, options: Mapping[str, object], body: ReportBody) -> None:
        """Store decoration, run body, end the progress line."""
        color, bold = self._validate(options)
        indicator = options.get("indicator")
        if indicator:
            self.indicator = str(indicator)
        self.color = color
        self.bold = bold

        body()
        get_output_sink().write("\n")

    def progress(self, override: str | None = None) -> None:
        """Write override, or the indicator, without a newline."""
        self._inline(str(override or self.indicator), self.color, self.bold)
