"""Infrastructure layer: process-wide output destination.

All rendered text goes to exactly one OutputSink per process. The sink
points either at the real console (sys.stdout, looked up at write time)
or at an in-memory buffer.

Lifecycle:
    suppress() -> buffer active
    capture()  -> buffer contents returned, console active (always)
    restore()  -> console active (always)

No locking: one report session at a time.
"""

from __future__ import annotations

import logging
import sys
from io import StringIO
from typing import TYPE_CHECKING, TextIO

from rich.console import Console

if TYPE_CHECKING:
    from rich.console import RenderableType
    from rich.style import Style

logger = logging.getLogger(__name__)


def _make_console(file: TextIO | None) -> Console:
    """Console that prints text verbatim: no markup, no highlighting, no wrapping."""
    return Console(
        file=file,
        markup=False,
        highlight=False,
        emoji=False,
        soft_wrap=True,
    )


class OutputSink:
    """Current destination of console text.

    Attributes:
        _buffer: Capture buffer. None = real console active.
        _console: rich Console bound to the active destination.
    """

    def __init__(self) -> None:
        """Start on the real console."""
        self._buffer: StringIO | None = None
        self._console = _make_console(None)

    @property
    def console(self) -> Console:
        """rich Console bound to the active destination."""
        return self._console

    @property
    def stream(self) -> TextIO:
        """Active destination stream."""
        if self._buffer is not None:
            return self._buffer
        return sys.stdout

    @property
    def is_capturing(self) -> bool:
        """True while output goes to the in-memory buffer."""
        return self._buffer is not None

    def can_encode(self, text: str) -> bool:
        """True if the active stream can represent text.

        Evaluated against the stream active now, never cached.
        Streams without an encoding (in-memory buffers) hold str: always True.
        """
        encoding = getattr(self.stream, "encoding", None)
        if not encoding:
            return True
        try:
            text.encode(encoding)
        except (UnicodeEncodeError, LookupError):
            return False
        return True

    def write(self, text: str) -> None:
        """Write text as-is: no newline, no decoration."""
        self.stream.write(text)

    def print(
        self,
        renderable: RenderableType,
        *,
        style: Style | None = None,
        end: str = "\n",
        width: int | None = None,
    ) -> None:
        """Print a rich renderable to the active destination."""
        self._console.print(renderable, style=style, end=end, width=width)

    def suppress(self) -> None:
        """Send output to a fresh buffer. Any previous buffer is dropped."""
        self._buffer = StringIO()
        self._console = _make_console(self._buffer)
        logger.debug("Output suppressed into in-memory buffer")

    def capture(self) -> str:
        """Return everything written since suppress() and restore the console.

        The console is restored even if reading the buffer fails.
        Returns "" when no buffer is active.
        """
        try:
            if self._buffer is None:
                return ""
            self._buffer.seek(0)
            return self._buffer.read()
        finally:
            self.restore()

    def restore(self) -> None:
        """Send output to the real console, whatever the current state."""
        self._buffer = None
        self._console = _make_console(None)
        logger.debug("Output restored to console")


_SINK = OutputSink()


def get_output_sink() -> OutputSink:
    """Process-wide sink. Created at import, never replaced."""
    return _SINK


def suppress_output() -> None:
    """Redirect process output into an in-memory buffer."""
    _SINK.suppress()


def capture_output() -> str:
    """Return captured output and restore the console."""
    return _SINK.capture()


def restore_output() -> None:
    """Restore process output to the console."""
    _SINK.restore()
