"""Public reporting API.

Public exports:
    CommandLineReporter: Facade over sections, primitives, formatters, tables
"""

from cmdline_reporter.presentation.api.reporter import CommandLineReporter

__all__ = ["CommandLineReporter"]
