"""Timestamp renderer."""

from __future__ import annotations

from typing import TYPE_CHECKING

from cmdline_reporter.application.rendering.alignment import aligned
from cmdline_reporter.domain.exceptions import TimestampTooLongError
from cmdline_reporter.domain.model.options import RenderOptions

if TYPE_CHECKING:
    from datetime import datetime

    from cmdline_reporter.domain.model.options import DatetimeOptions
    from cmdline_reporter.infrastructure.output_sink import OutputSink


def format_timestamp(now: datetime, fmt: str | None = None) -> str:
    """Format now with fmt, or as "YYYY-MM-DD - H:MM:SSam" when fmt is None.

    The default uses a 12-hour clock without hour padding and a lowercase
    meridiem, independent of platform strftime extensions and locale.
    """
    if fmt is not None:
        return now.strftime(fmt)
    hour = now.hour % 12 or 12
    meridiem = "am" if now.hour < 12 else "pm"
    return f"{now:%Y-%m-%d} - {hour}:{now:%M:%S}{meridiem}"


def render_timestamp(now: datetime, options: DatetimeOptions) -> str:
    """Formatted timestamp, checked against the field width.

    Raises:
        TimestampTooLongError: Formatted text longer than options.width.
    """
    text = format_timestamp(now, options.format)
    if len(text) > options.width:
        raise TimestampTooLongError(text, options.width)
    return text


def datetime_line(sink: OutputSink, now: datetime, options: DatetimeOptions) -> None:
    """Write the timestamp line. Nothing is written if it does not fit."""
    text = render_timestamp(now, options)
    aligned(
        sink,
        text,
        RenderOptions(align=options.align, width=options.width, color=options.color, bold=options.bold),
    )
