"""Domain enumerations."""

from __future__ import annotations

from enum import Enum

from cmdline_reporter.domain.exceptions import InvalidArgumentError, InvalidAlignmentError


class Align(Enum):
    """Horizontal placement of a line inside its field."""

    LEFT = "left"  # unchanged, never padded
    RIGHT = "right"
    CENTER = "center"

    @classmethod
    def parse(cls, value: object) -> Align:
        """Convert "left" / "right" / "center" (or an Align) to Align.

        Raises:
            InvalidAlignmentError: Any other value.
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except (ValueError, TypeError) as e:
            raise InvalidAlignmentError(value) from e


class SectionKind(Enum):
    """Section type. Decides where rule and spacing go relative to the title."""

    HEADER = "header"  # title, timestamp, rule, spacing
    FOOTER = "footer"  # spacing, rule, title, timestamp


class Encoding(Enum):
    """Glyph set for table borders."""

    UNICODE = "unicode"
    ASCII = "ascii"

    @classmethod
    def parse(cls, value: object) -> Encoding:
        """Convert "unicode" / "ascii" (or an Encoding) to Encoding.

        Raises:
            InvalidArgumentError: Any other value.
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except (ValueError, TypeError) as e:
            raise InvalidArgumentError(f"encoding must be unicode or ascii, got {value!r}") from e
