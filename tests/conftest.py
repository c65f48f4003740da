"""Shared fixtures: deterministic clock and a captured process-wide sink."""

from collections.abc import Callable, Iterator
from datetime import datetime

import pytest

from cmdline_reporter.infrastructure.output_sink import (
    OutputSink,
    get_output_sink,
    restore_output,
    suppress_output,
)
from tests.factories import fixed_clock


@pytest.fixture
def reporter_clock() -> Callable[[], datetime]:
    """Every timestamp in the suite shows FIXED_NOW."""
    return fixed_clock()


@pytest.fixture
def sink() -> Iterator[OutputSink]:
    """Process-wide sink writing into a buffer; console restored afterwards."""
    suppress_output()
    try:
        yield get_output_sink()
    finally:
        restore_output()
