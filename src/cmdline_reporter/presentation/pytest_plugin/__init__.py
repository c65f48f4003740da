"""pytest plugin for cmdline_reporter.

Provides fixtures for testing report output:
    reporter_defaults: ReporterDefaults from ini options (override in conftest.py)
    reporter_clock: Time source for timestamps (override in conftest.py)
    reporter: CommandLineReporter with output suppressed for the test

Configuration (pytest.ini or pyproject.toml):
    report_width: Default width (default: 100)
    report_formatter: Default formatter name (default: "nested")
"""

from __future__ import annotations

from typing import TYPE_CHECKING

# Register fixtures from fixtures module
from cmdline_reporter.presentation.pytest_plugin.fixtures import (
    reporter,
    reporter_clock,
    reporter_defaults,
)

if TYPE_CHECKING:
    import pytest

# Export fixtures for pytest discovery
__all__ = [
    "reporter",
    "reporter_clock",
    "reporter_defaults",
]


def pytest_addoption(parser: pytest.Parser) -> None:
    """Register ini options read by reporter_defaults."""
    parser.addini("report_width", "Default report width", default="100")
    parser.addini("report_formatter", "Default report formatter", default="nested")


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest plugin with markers."""
    config.addinivalue_line(
        "markers",
        "report: mark test as console report test",
    )
