"""Base formatter class for report body styles.

Provides shared option checking and decorated output.
Concrete formatters inherit from this.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, ClassVar

from cmdline_reporter.application.rendering.alignment import aligned
from cmdline_reporter.application.rendering.style import build_style, render_styled
from cmdline_reporter.domain.model.enums import Align
from cmdline_reporter.domain.model.options import RenderOptions, check_color, validate_options
from cmdline_reporter.infrastructure.output_sink import get_output_sink

if TYPE_CHECKING:
    from collections.abc import Mapping

    from cmdline_reporter.domain.ports.formatter import ReportBody


class BaseFormatter(ABC):
    """Base class for formatters implementing FormatterProtocol.

    Concrete formatters must:
    1. Set `VALID_OPTIONS` class attribute
    2. Implement `format()` and `progress()`

    Instances are process-wide singletons handed out by the formatter
    registry; state kept on self persists between reports.

    Example:
        @register_formatter("quiet")
        class QuietFormatter(BaseFormatter):
            VALID_OPTIONS = ()

            def format(self, options: Mapping[str, object], body: ReportBody) -> None:
                self._validate(options)
                body()

            def progress(self, override: str | None = None) -> None:
                pass
    """

    VALID_OPTIONS: ClassVar[tuple[str, ...]]
    """Option keys format() accepts."""

    @abstractmethod
    def format(self, options: Mapping[str, object], body: ReportBody) -> None:
        """Render a report around body.

        Args:
            options: Formatter options, checked against VALID_OPTIONS.
            body: Deferred report body.
        """

    @abstractmethod
    def progress(self, override: str | None = None) -> None:
        """Render one progress step.

        Args:
            override: Replacement for the formatter's progress glyph.
        """

    def _validate(self, options: Mapping[str, object]) -> tuple[str | None, bool]:
        """Check keys and decoration. Returns (color, bold).

        Raises:
            UnknownOptionError: Key not in VALID_OPTIONS.
            InvalidColorError: Unknown color keyword.
        """
        validate_options(options, self.VALID_OPTIONS)
        color = check_color(options.get("color"))
        bold = bool(options.get("bold") or False)
        build_style(color, bold)
        return color, bold

    @staticmethod
    def _line(text: str, color: str | None, bold: bool) -> None:
        """Write text as its own line."""
        aligned(
            get_output_sink(),
            text,
            RenderOptions(align=Align.LEFT, width=max(len(text), 1), color=color, bold=bold),
        )

    @staticmethod
    def _inline(text: str, color: str | None, bold: bool) -> None:
        """Write text without a trailing newline."""
        style = build_style(color, bold)
        get_output_sink().write(render_styled(text, style))
