"""Report body formatters.

Built-in formatters register themselves on import.
Users can register their own with register_formatter().
"""

from cmdline_reporter.application.formatters._registry import (
    FormatterRegistry,
    canonical_name,
    get_formatter_registry,
    register_formatter,
    resolve_formatter,
)
from cmdline_reporter.application.formatters._base import BaseFormatter
from cmdline_reporter.application.formatters.nested import NestedFormatter
from cmdline_reporter.application.formatters.progress import ProgressFormatter

__all__ = [
    "BaseFormatter",
    "FormatterRegistry",
    "NestedFormatter",
    "ProgressFormatter",
    "canonical_name",
    "get_formatter_registry",
    "register_formatter",
    "resolve_formatter",
]
