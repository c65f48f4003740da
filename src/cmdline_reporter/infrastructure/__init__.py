"""Infrastructure layer: output destination."""

from cmdline_reporter.infrastructure.output_sink import (
    OutputSink,
    capture_output,
    get_output_sink,
    restore_output,
    suppress_output,
)

__all__ = [
    "OutputSink",
    "capture_output",
    "get_output_sink",
    "restore_output",
    "suppress_output",
]
