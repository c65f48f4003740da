"""Process defaults for every rendering operation.

Applied wherever an operation's option is omitted.
"""

from __future__ import annotations

from dataclasses import dataclass

from cmdline_reporter.domain.exceptions import InvalidArgumentError, InvalidCountError
from cmdline_reporter.domain.model.enums import Align, Encoding


@dataclass(frozen=True, slots=True)
class ReporterDefaults:
    """Reporter-wide defaults.

    Immutable configuration object with FAIL-FIRST validation.

    Attributes:
        width: Field width for lines, rules, sections, tables.
        align: Alignment name used when an operation gets none.
        formatter: Formatter name resolved when report() runs without one.
        encoding: Border glyph set for tables ("unicode" or "ascii").
        spacing_sentinel: Written by vertical_spacing(0) instead of a newline.
            "" writes nothing at all.
    """

    width: int = 100
    align: str = "left"
    formatter: str = "nested"
    encoding: str = "unicode"
    spacing_sentinel: str = "\0"

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if isinstance(self.width, bool) or not isinstance(self.width, int) or self.width < 1:
            raise InvalidCountError("width", self.width, "must be an integer >= 1")
        Align.parse(self.align)
        Encoding.parse(self.encoding)
        if not isinstance(self.formatter, str) or not self.formatter:
            raise InvalidArgumentError(f"formatter must be a non-empty string, got {self.formatter!r}")
        if "\n" in self.spacing_sentinel:
            raise InvalidArgumentError("spacing_sentinel must not contain a newline")
