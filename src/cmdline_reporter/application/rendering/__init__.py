"""Rendering primitives: aligned lines, rules, spacing, timestamps, sections."""

from cmdline_reporter.application.rendering.alignment import align_text, aligned
from cmdline_reporter.application.rendering.rules import (
    ASCII_RULE_CHAR,
    UNICODE_RULE_CHAR,
    default_rule_char,
    horizontal_rule,
    vertical_spacing,
)
from cmdline_reporter.application.rendering.sections import render_section
from cmdline_reporter.application.rendering.style import build_style, render_styled
from cmdline_reporter.application.rendering.timestamp import (
    datetime_line,
    format_timestamp,
    render_timestamp,
)

__all__ = [
    "ASCII_RULE_CHAR",
    "UNICODE_RULE_CHAR",
    "align_text",
    "aligned",
    "build_style",
    "datetime_line",
    "default_rule_char",
    "format_timestamp",
    "horizontal_rule",
    "render_section",
    "render_styled",
    "render_timestamp",
    "vertical_spacing",
]
