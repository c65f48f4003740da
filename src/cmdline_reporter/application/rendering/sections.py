"""Section composer: headers and footers.

A header's decoration trails its title (separating it from the body that
follows); a footer's decoration leads its title (separating it from the
body that precedes):

    header: title, timestamp?, rule?, spacing
    footer: spacing, rule?, title, timestamp?
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from cmdline_reporter.application.rendering.alignment import aligned
from cmdline_reporter.application.rendering.rules import horizontal_rule, vertical_spacing
from cmdline_reporter.application.rendering.style import build_style
from cmdline_reporter.application.rendering.timestamp import render_timestamp
from cmdline_reporter.domain.exceptions import TitleTooLongError
from cmdline_reporter.domain.model.enums import SectionKind
from cmdline_reporter.domain.model.options import DatetimeOptions, RenderOptions, RuleOptions

if TYPE_CHECKING:
    from datetime import datetime

    from cmdline_reporter.domain.model.options import SectionOptions
    from cmdline_reporter.infrastructure.output_sink import OutputSink


def render_section(
    sink: OutputSink,
    kind: SectionKind,
    options: SectionOptions,
    now: datetime,
    sentinel: str = "\0",
) -> None:
    """Write a header or footer.

    All preconditions are checked before the first write, so a failing
    section leaves no partial output.

    Args:
        sink: Output destination.
        kind: HEADER or FOOTER.
        options: Validated section options.
        now: Time shown by the timestamp line (if any).
        sentinel: What vertical_spacing(0) writes.

    Raises:
        TitleTooLongError: Title longer than width.
        TimestampTooLongError: Timestamp longer than width.
        InvalidColorError: Unknown color keyword.
    """
    if len(options.title) > options.width:
        raise TitleTooLongError(options.title, options.width)
    build_style(options.color, options.bold)

    stamp = None
    if options.timestamp:
        stamp = render_timestamp(
            now,
            DatetimeOptions(align=options.align, width=options.width),
        )

    line = RenderOptions(
        align=options.align,
        width=options.width,
        color=options.color,
        bold=options.bold,
    )

    if kind is SectionKind.FOOTER:
        vertical_spacing(sink, options.spacing, sentinel)
        _rule(sink, options)

    aligned(sink, options.title, line)
    if stamp is not None:
        aligned(sink, stamp, line)

    if kind is SectionKind.HEADER:
        _rule(sink, options)
        vertical_spacing(sink, options.spacing, sentinel)


def _rule(sink: OutputSink, options: SectionOptions) -> None:
    """Rule line, only if the section asks for one."""
    if not options.has_rule:
        return
    char = options.rule if isinstance(options.rule, str) else None
    horizontal_rule(
        sink,
        RuleOptions(char=char, width=options.width, color=options.color, bold=options.bold),
    )
