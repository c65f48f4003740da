"""Alignment/decoration primitive.

Every styled line the package emits goes through aligned(). Text written
without a trailing newline (inline progress glyphs, the newline closing a
progress report) and rich tables are the exceptions; they use
render_styled() and OutputSink directly.

Lines are written verbatim: no tab expansion, no wrapping, no cropping.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from cmdline_reporter.application.rendering.style import build_style, render_styled
from cmdline_reporter.domain.model.enums import Align

if TYPE_CHECKING:
    from cmdline_reporter.domain.model.options import RenderOptions
    from cmdline_reporter.infrastructure.output_sink import OutputSink


def align_text(text: str, align: Align, width: int) -> str:
    """Place text in a field of width characters.

    LEFT returns text unchanged. RIGHT pads on the left to width.
    CENTER pads on the left by (width - len(text)) // 2.
    Text at least width long is never padded and never truncated.
    """
    match align:
        case Align.LEFT:
            return text
        case Align.RIGHT:
            return text.rjust(width)
        case Align.CENTER:
            pad = max(width - len(text), 0) // 2
            return " " * pad + text


def aligned(sink: OutputSink, text: str, options: RenderOptions) -> None:
    """Write one aligned, decorated line followed by a newline."""
    style = build_style(options.color, options.bold)
    line = align_text(text, options.align, options.width)
    sink.write(render_styled(line, style) + "\n")
