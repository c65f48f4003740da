"""Per-operation option objects.

Each rendering operation accepts keyword options. They are checked against
the operation's allow-list, completed from ReporterDefaults and frozen into
one of the dataclasses below before anything is written.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import ClassVar

from cmdline_reporter.domain.exceptions import (
    InvalidArgumentError,
    InvalidColorError,
    InvalidCountError,
    UnknownOptionError,
)
from cmdline_reporter.domain.model.defaults import ReporterDefaults
from cmdline_reporter.domain.model.enums import Align

DEFAULT_TITLE = "Report"
DEFAULT_SPACING = 1


def validate_options(options: Mapping[str, object], allowed: tuple[str, ...]) -> None:
    """Reject option keys outside the allow-list.

    Raises:
        UnknownOptionError: At least one key is not allowed.
    """
    unknown = sorted(set(options) - set(allowed))
    if unknown:
        raise UnknownOptionError(tuple(unknown), allowed)


def coerce_width(value: object, name: str = "width") -> int:
    """Coerce value to a positive integer.

    Raises:
        InvalidCountError: Not coercible, or < 1.
    """
    width = _coerce_int(value, name)
    if width < 1:
        raise InvalidCountError(name, value, "must be >= 1")
    return width


def coerce_lines(value: object, name: str = "lines") -> int:
    """Coerce value to a non-negative integer.

    Raises:
        InvalidCountError: Not coercible, or < 0.
    """
    lines = _coerce_int(value, name)
    if lines < 0:
        raise InvalidCountError(name, value, "must be >= 0")
    return lines


def check_color(value: object) -> str | None:
    """Accept a color keyword or None.

    Whether the keyword names a real color is decided at render time.
    """
    if value is None or value is False:
        return None
    if not isinstance(value, str) or not value:
        raise InvalidColorError(repr(value))
    return value


def _coerce_int(value: object, name: str) -> int:
    if isinstance(value, bool):
        raise InvalidCountError(name, value, "must be an integer")
    try:
        return int(value)  # type: ignore[call-overload]
    except (TypeError, ValueError) as e:
        raise InvalidCountError(name, value, "must be an integer") from e


def _pick(options: Mapping[str, object], key: str, default: object) -> object:
    """Option value, or default when absent or None."""
    value = options.get(key)
    return default if value is None else value


@dataclass(frozen=True, slots=True)
class RenderOptions:
    """Options of the alignment/decoration primitive.

    Attributes:
        align: Placement inside the field.
        width: Field width (>= 1).
        color: Color keyword, applied before bold.
        bold: Weight decoration, applied after color.
    """

    KEYS: ClassVar[tuple[str, ...]] = ("align", "width", "color", "bold")

    align: Align
    width: int
    color: str | None = None
    bold: bool = False

    @classmethod
    def from_options(cls, options: Mapping[str, object], defaults: ReporterDefaults) -> RenderOptions:
        """Validate keys and complete from defaults."""
        validate_options(options, cls.KEYS)
        return cls(
            align=Align.parse(_pick(options, "align", defaults.align)),
            width=coerce_width(_pick(options, "width", defaults.width)),
            color=check_color(options.get("color")),
            bold=bool(options.get("bold") or False),
        )


@dataclass(frozen=True, slots=True)
class RuleOptions:
    """Options of the horizontal rule.

    Attributes:
        char: Rule glyph. None = environment default. Non-string and empty
            values given by the caller become None, not an error.
        width: Number of glyph repetitions.
        color: Color keyword.
        bold: Weight decoration.
    """

    KEYS: ClassVar[tuple[str, ...]] = ("char", "width", "color", "bold")

    char: str | None
    width: int
    color: str | None = None
    bold: bool = False

    @classmethod
    def from_options(cls, options: Mapping[str, object], defaults: ReporterDefaults) -> RuleOptions:
        """Validate keys and complete from defaults."""
        validate_options(options, cls.KEYS)
        char = options.get("char")
        return cls(
            char=char if isinstance(char, str) and char else None,
            width=coerce_width(_pick(options, "width", defaults.width)),
            color=check_color(options.get("color")),
            bold=bool(options.get("bold") or False),
        )


@dataclass(frozen=True, slots=True)
class DatetimeOptions:
    """Options of the timestamp line.

    Attributes:
        align: Placement inside the field.
        width: Maximum rendered length; longer is fatal.
        format: strftime pattern. None = "YYYY-MM-DD - H:MM:SSam".
        color: Color keyword.
        bold: Weight decoration.
    """

    KEYS: ClassVar[tuple[str, ...]] = ("align", "width", "format", "color", "bold")

    align: Align
    width: int
    format: str | None = None
    color: str | None = None
    bold: bool = False

    @classmethod
    def from_options(cls, options: Mapping[str, object], defaults: ReporterDefaults) -> DatetimeOptions:
        """Validate keys and complete from defaults."""
        validate_options(options, cls.KEYS)
        fmt = options.get("format")
        if fmt is not None and not isinstance(fmt, str):
            raise InvalidArgumentError(f"format must be a string, got {fmt!r}")
        return cls(
            align=Align.parse(_pick(options, "align", defaults.align)),
            width=coerce_width(_pick(options, "width", defaults.width)),
            format=fmt or None,
            color=check_color(options.get("color")),
            bold=bool(options.get("bold") or False),
        )


@dataclass(frozen=True, slots=True)
class SectionOptions:
    """Options of a header or footer.

    Attributes:
        title: Title line. Length must not exceed width.
        width: Width of title, timestamp and rule.
        align: Placement of title and timestamp.
        spacing: Blank lines after a header / before a footer (>= 0).
        timestamp: Add a timestamp line after the title.
        rule: Add a horizontal rule. A string is the glyph; any other
            truthy value uses the default glyph. None/False = no rule.
        color: Color keyword for every line of the section.
        bold: Weight decoration for every line of the section.
    """

    KEYS: ClassVar[tuple[str, ...]] = (
        "title",
        "width",
        "align",
        "spacing",
        "timestamp",
        "rule",
        "color",
        "bold",
    )

    title: str
    width: int
    align: Align
    spacing: int = DEFAULT_SPACING
    timestamp: bool = False
    rule: object = None
    color: str | None = None
    bold: bool = False

    @classmethod
    def from_options(cls, options: Mapping[str, object], defaults: ReporterDefaults) -> SectionOptions:
        """Validate keys and complete from defaults."""
        validate_options(options, cls.KEYS)
        title = _pick(options, "title", DEFAULT_TITLE)
        if not isinstance(title, str):
            raise InvalidArgumentError(f"title must be a string, got {title!r}")
        rule = options.get("rule")
        return cls(
            title=title,
            width=coerce_width(_pick(options, "width", defaults.width)),
            align=Align.parse(_pick(options, "align", defaults.align)),
            spacing=coerce_lines(_pick(options, "spacing", DEFAULT_SPACING), "spacing"),
            timestamp=bool(options.get("timestamp")),
            rule=rule if rule else None,
            color=check_color(options.get("color")),
            bold=bool(options.get("bold") or False),
        )

    @property
    def has_rule(self) -> bool:
        """True if the section draws a horizontal rule."""
        return self.rule is not None
