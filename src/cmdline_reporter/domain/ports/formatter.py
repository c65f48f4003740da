"""Formatter protocol: contract for report body styles.

Users extend cmdline_reporter by implementing this Protocol.
Built-in NestedFormatter and ProgressFormatter are NOT special:
same interface, same status.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Protocol, runtime_checkable

ReportBody = Callable[[], object]
"""Deferred report body. The formatter decides when to call it."""


@runtime_checkable
class FormatterProtocol(Protocol):
    """Contract for formatters.

    Any object with format() and progress() can be handed to
    CommandLineReporter.formatter directly, without registration.

    Example:
        class QuietFormatter:
            def format(self, options: Mapping[str, object], body: ReportBody) -> None:
                body()

            def progress(self, override: str | None = None) -> None:
                pass
    """

    def format(self, options: Mapping[str, object], body: ReportBody) -> None:
        """Render a report around its body.

        Args:
            options: Formatter-specific options (validated by the formatter).
            body: Deferred report body.
        """
        ...

    def progress(self, override: str | None = None) -> None:
        """Render one progress step.

        Args:
            override: Replacement for the formatter's progress glyph.
        """
        ...
