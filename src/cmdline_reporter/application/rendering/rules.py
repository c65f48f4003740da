"""Horizontal rule and vertical spacing primitives."""

from __future__ import annotations

from typing import TYPE_CHECKING

from cmdline_reporter.application.rendering.alignment import aligned
from cmdline_reporter.domain.model.enums import Align
from cmdline_reporter.domain.model.options import RenderOptions

if TYPE_CHECKING:
    from cmdline_reporter.domain.model.options import RuleOptions
    from cmdline_reporter.infrastructure.output_sink import OutputSink

UNICODE_RULE_CHAR = "\u2501"  # heavy horizontal
ASCII_RULE_CHAR = "-"


def default_rule_char(sink: OutputSink) -> str:
    """Heavy horizontal glyph if the active stream can encode it, else hyphen."""
    return UNICODE_RULE_CHAR if sink.can_encode(UNICODE_RULE_CHAR) else ASCII_RULE_CHAR


def horizontal_rule(sink: OutputSink, options: RuleOptions) -> None:
    """Write the rule glyph repeated width times."""
    char = options.char if options.char is not None else default_rule_char(sink)
    aligned(
        sink,
        char * options.width,
        RenderOptions(align=Align.LEFT, width=options.width, color=options.color, bold=options.bold),
    )


def vertical_spacing(sink: OutputSink, lines: int, sentinel: str = "\0") -> None:
    """Write lines blank lines in one write.

    lines == 0 writes sentinel instead, never a newline.
    """
    if lines == 0:
        if sentinel:
            sink.write(sentinel)
        return
    sink.write("\n" * lines)
