"""Reporter facade: every public rendering operation in one object.

Use directly or as a base class of a report-producing class.

Example:
    class DeployReport(CommandLineReporter):
        def run(self) -> None:
            self.header(title="Deploy", timestamp=True, rule=True)
            self.report(self._steps, message="deploying")
            with self.table(border=True):
                with self.row(header=True):
                    self.column("host", width=20)
                    self.column("status", width=8)
            self.footer(title="done", rule="=")
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from contextlib import contextmanager
from datetime import datetime
from typing import TYPE_CHECKING

from cmdline_reporter.application.formatters import get_formatter_registry
from cmdline_reporter.application.rendering.alignment import aligned
from cmdline_reporter.application.rendering.rules import horizontal_rule, vertical_spacing
from cmdline_reporter.application.rendering.sections import render_section
from cmdline_reporter.application.rendering.timestamp import datetime_line
from cmdline_reporter.application.tables import Column, Row, Table
from cmdline_reporter.domain.exceptions import InvalidFormatterError, TableStateError
from cmdline_reporter.domain.model.defaults import ReporterDefaults
from cmdline_reporter.domain.model.enums import SectionKind
from cmdline_reporter.domain.model.options import (
    DatetimeOptions,
    RenderOptions,
    RuleOptions,
    SectionOptions,
    coerce_lines,
)
from cmdline_reporter.domain.ports.formatter import FormatterProtocol
from cmdline_reporter.infrastructure.output_sink import OutputSink, get_output_sink

if TYPE_CHECKING:
    from collections.abc import Mapping

    from cmdline_reporter.application.formatters import FormatterRegistry
    from cmdline_reporter.domain.ports.formatter import ReportBody


class CommandLineReporter:
    """Entry point for console reports.

    Holds at most one active formatter, the table/row being composed, and
    the defaults applied to omitted options. Output goes to the
    process-wide OutputSink.

    Attributes:
        _defaults: Values for omitted options.
        _clock: Source of "now" for timestamps.
        _registry: Formatter registry used for name resolution.
        _formatter: Active formatter. None = resolve default on first use.
        _table: Innermost table being composed.
        _row: Innermost row being composed.
    """

    def __init__(
        self,
        defaults: ReporterDefaults | None = None,
        clock: Callable[[], datetime] | None = None,
        registry: FormatterRegistry | None = None,
    ) -> None:
        """Initialize reporter.

        Args:
            defaults: Values for omitted options. ReporterDefaults() if None.
            clock: Returns current time. datetime.now if None.
            registry: Formatter registry. Process-wide registry if None.
        """
        self._defaults = defaults or ReporterDefaults()
        self._clock = clock or datetime.now
        self._registry = registry or get_formatter_registry()
        self._formatter: FormatterProtocol | None = None
        self._table: Table | None = None
        self._row: Row | None = None

    @property
    def defaults(self) -> ReporterDefaults:
        """Values for omitted options."""
        return self._defaults

    @property
    def sink(self) -> OutputSink:
        """Process-wide output destination."""
        return get_output_sink()

    # =========================================================================
    # Formatter
    # =========================================================================

    @property
    def formatter(self) -> FormatterProtocol | None:
        """Active formatter. None until set or first used."""
        return self._formatter

    @formatter.setter
    def formatter(self, value: str | FormatterProtocol) -> None:
        self.set_formatter(value)

    def set_formatter(self, value: str | FormatterProtocol) -> FormatterProtocol:
        """Activate a formatter by name, or adopt a formatter object as-is.

        Raises:
            InvalidFormatterError: Unknown name, or object without
                format()/progress().
        """
        if isinstance(value, str):
            formatter = self._registry.resolve(value)
        elif isinstance(value, FormatterProtocol):
            formatter = value
        else:
            raise InvalidFormatterError(value)
        self._formatter = formatter
        return formatter

    def _active_formatter(self) -> FormatterProtocol:
        if self._formatter is None:
            return self.set_formatter(self._defaults.formatter)
        return self._formatter

    def report(self, body: ReportBody, **options: object) -> None:
        """Run body inside the active formatter's report layout."""
        self._active_formatter().format(options, body)

    def progress(self, override: str | None = None) -> None:
        """One progress step of the active formatter."""
        self._active_formatter().progress(override)

    # =========================================================================
    # Sections and primitives
    # =========================================================================

    def header(self, **options: object) -> None:
        """Title, timestamp?, rule?, spacing."""
        self._section(SectionKind.HEADER, options)

    def footer(self, **options: object) -> None:
        """Spacing, rule?, title, timestamp?."""
        self._section(SectionKind.FOOTER, options)

    def _section(self, kind: SectionKind, options: Mapping[str, object]) -> None:
        section = SectionOptions.from_options(options, self._defaults)
        render_section(
            self.sink,
            kind,
            section,
            self._clock(),
            self._defaults.spacing_sentinel,
        )

    def horizontal_rule(self, **options: object) -> None:
        """Glyph repeated to width."""
        horizontal_rule(self.sink, RuleOptions.from_options(options, self._defaults))

    def vertical_spacing(self, lines: object = 1) -> None:
        """lines blank lines. 0 writes the spacing sentinel.

        Raises:
            InvalidCountError: lines not coercible to an integer >= 0.
        """
        vertical_spacing(self.sink, coerce_lines(lines), self._defaults.spacing_sentinel)

    def datetime(self, **options: object) -> None:
        """Current time as one line.

        Raises:
            TimestampTooLongError: Formatted time longer than width.
        """
        datetime_line(self.sink, self._clock(), DatetimeOptions.from_options(options, self._defaults))

    def aligned(self, text: object, **options: object) -> None:
        """One aligned, decorated line."""
        aligned(self.sink, str(text), RenderOptions.from_options(options, self._defaults))

    # =========================================================================
    # Tables
    # =========================================================================

    @contextmanager
    def table(self, **options: object) -> Iterator[Table]:
        """Compose a table; it is written when the block exits normally."""
        options.setdefault("encoding", self._defaults.encoding)
        table = Table(**options)
        outer = self._table
        self._table = table
        try:
            yield table
        finally:
            self._table = outer
        table.output(self.sink)

    @contextmanager
    def row(self, **options: object) -> Iterator[Row]:
        """Compose a row of the enclosing table.

        Raises:
            TableStateError: No enclosing table().
        """
        if self._table is None:
            raise TableStateError("row", "table")
        table = self._table
        row = Row(**options)
        outer = self._row
        self._row = row
        try:
            yield row
        finally:
            self._row = outer
        table.add(row)

    def column(self, text: object, **options: object) -> Column:
        """Add a column to the enclosing row.

        Raises:
            TableStateError: No enclosing row().
        """
        if self._row is None:
            raise TableStateError("column", "row")
        column = Column(text, **options)
        self._row.add(column)
        return column

    # =========================================================================
    # Output capture
    # =========================================================================

    def suppress_output(self) -> None:
        """Send output to an in-memory buffer."""
        self.sink.suppress()

    def capture_output(self) -> str:
        """Return buffered output and restore the console."""
        return self.sink.capture()

    def restore_output(self) -> None:
        """Send output to the console."""
        self.sink.restore()
