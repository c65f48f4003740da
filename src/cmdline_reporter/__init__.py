"""cmdline_reporter - structured console reports: sections, rules, timestamps, tables."""

__version__ = "0.1.0"

from cmdline_reporter.application.formatters import (
    BaseFormatter,
    NestedFormatter,
    ProgressFormatter,
    register_formatter,
)
from cmdline_reporter.application.tables import Column, Row, Table
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
from cmdline_reporter.domain.model.defaults import ReporterDefaults
from cmdline_reporter.domain.ports.formatter import FormatterProtocol
from cmdline_reporter.infrastructure.output_sink import (
    capture_output,
    get_output_sink,
    restore_output,
    suppress_output,
)
from cmdline_reporter.presentation.api.reporter import CommandLineReporter

__all__ = [
    "BaseFormatter",
    "Column",
    "CommandLineReporter",
    "FormatterProtocol",
    "InvalidAlignmentError",
    "InvalidArgumentError",
    "InvalidColorError",
    "InvalidCountError",
    "InvalidFormatterError",
    "NestedFormatter",
    "PreconditionFailedError",
    "ProgressFormatter",
    "ReporterDefaults",
    "ReporterError",
    "Row",
    "Table",
    "TableStateError",
    "TimestampTooLongError",
    "TitleTooLongError",
    "UnknownOptionError",
    "__version__",
    "capture_output",
    "get_output_sink",
    "register_formatter",
    "restore_output",
    "suppress_output",
]
