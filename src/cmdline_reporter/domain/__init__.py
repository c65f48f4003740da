"""cmdline_reporter domain layer.

Pure domain logic with no external dependencies.
Only imports: typing, dataclasses, enum, collections.abc
"""

from cmdline_reporter.domain.exceptions import (
    InvalidAlignmentError,
    InvalidArgumentError,
    InvalidColorError,
    InvalidCountError,
    InvalidFormatterError,
    PreconditionFailedError,
    ReporterError,
    TableStateError,
    TimestampTooLongError,
    TitleTooLongError,
    UnknownOptionError,
)
from cmdline_reporter.domain.model import (
    Align,
    DatetimeOptions,
    Encoding,
    RenderOptions,
    ReporterDefaults,
    RuleOptions,
    SectionKind,
    SectionOptions,
)
from cmdline_reporter.domain.ports import FormatterProtocol, ReportBody

__all__ = [
    # Exceptions
    "ReporterError",
    "InvalidArgumentError",
    "UnknownOptionError",
    "InvalidAlignmentError",
    "InvalidColorError",
    "InvalidCountError",
    "InvalidFormatterError",
    "PreconditionFailedError",
    "TitleTooLongError",
    "TimestampTooLongError",
    "TableStateError",
    # Enums
    "Align",
    "Encoding",
    "SectionKind",
    # Options
    "ReporterDefaults",
    "RenderOptions",
    "RuleOptions",
    "DatetimeOptions",
    "SectionOptions",
    # Ports
    "FormatterProtocol",
    "ReportBody",
]
