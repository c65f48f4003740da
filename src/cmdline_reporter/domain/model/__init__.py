"""Domain model: option objects, enums and defaults."""

from cmdline_reporter.domain.model.defaults import ReporterDefaults
from cmdline_reporter.domain.model.enums import Align, Encoding, SectionKind
from cmdline_reporter.domain.model.options import (
    DatetimeOptions,
    RenderOptions,
    RuleOptions,
    SectionOptions,
    coerce_lines,
    coerce_width,
    validate_options,
)

__all__ = [
    "Align",
    "DatetimeOptions",
    "Encoding",
    "RenderOptions",
    "ReporterDefaults",
    "RuleOptions",
    "SectionKind",
    "SectionOptions",
    "coerce_lines",
    "coerce_width",
    "validate_options",
]
