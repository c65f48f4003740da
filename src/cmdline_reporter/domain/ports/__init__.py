"""Domain ports (interfaces/protocols)."""

from cmdline_reporter.domain.ports.formatter import FormatterProtocol, ReportBody

__all__ = [
    "FormatterProtocol",
    "ReportBody",
]
