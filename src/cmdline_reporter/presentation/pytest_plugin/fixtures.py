"""pytest fixtures for report testing.

Every test using `reporter` starts with output suppressed and ends with
the console restored, whatever the test does in between.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from datetime import datetime

import pytest

from cmdline_reporter.domain.model.defaults import ReporterDefaults
from cmdline_reporter.infrastructure.output_sink import restore_output, suppress_output
from cmdline_reporter.presentation.api.reporter import CommandLineReporter


def _get_ini_value(config: pytest.Config, name: str, default: str) -> str:
    """Get ini value from pytest config with fallback.

    Args:
        config: pytest Config object
        name: ini option name
        default: default value if not set

    Returns:
        String value of ini option
    """
    value = config.getini(name)
    if value:
        return str(value)
    return default


@pytest.fixture
def reporter_defaults(request: pytest.FixtureRequest) -> ReporterDefaults:
    """Defaults built from report_width / report_formatter ini options.

    Raises:
        ValueError: report_width is not an integer.
        InvalidCountError: report_width < 1.
    """
    width = int(_get_ini_value(request.config, "report_width", "100"))
    formatter = _get_ini_value(request.config, "report_formatter", "nested")
    return ReporterDefaults(width=width, formatter=formatter)


@pytest.fixture
def reporter_clock() -> Callable[[], datetime]:
    """Time source for timestamps. Override for deterministic output."""
    return datetime.now


@pytest.fixture
def reporter(
    reporter_defaults: ReporterDefaults,
    reporter_clock: Callable[[], datetime],
) -> Iterator[CommandLineReporter]:
    """Reporter whose output is buffered. Read it with capture_output().

    Yields:
        CommandLineReporter writing into a fresh in-memory buffer
    """
    suppress_output()
    try:
        yield CommandLineReporter(defaults=reporter_defaults, clock=reporter_clock)
    finally:
        restore_output()
