"""Tests for rendering/alignment.py and rendering/style.py."""

import pytest
from rich.style import Style

from cmdline_reporter.application.rendering.alignment import align_text, aligned
from cmdline_reporter.application.rendering.style import build_style
from cmdline_reporter.domain.exceptions import InvalidColorError
from cmdline_reporter.domain.model.enums import Align
from cmdline_reporter.domain.model.options import RenderOptions
from cmdline_reporter.infrastructure.output_sink import OutputSink


class TestAlignText:
    """Tests for align_text."""

    @pytest.mark.parametrize("width", [1, 5, 80, 100])
    def test_left_is_unchanged(self, width: int) -> None:
        """Left alignment never pads or truncates."""
        assert align_text("abc", Align.LEFT, width) == "abc"

    @pytest.mark.parametrize(("text", "width"), [("abc", 3), ("abc", 10), ("", 4), ("x", 100)])
    def test_right_fills_width(self, text: str, width: int) -> None:
        """Right alignment gives exactly width characters ending with text."""
        line = align_text(text, Align.RIGHT, width)
        assert len(line) == width
        assert line.endswith(text)

    @pytest.mark.parametrize(
        ("text", "width", "pad"),
        [("ab", 7, 2), ("ab", 6, 2), ("abc", 10, 3), ("a", 1, 0), ("", 9, 4)],
    )
    def test_center_left_pad_is_floor(self, text: str, width: int, pad: int) -> None:
        """Center pads the left side with (width - len) // 2 spaces."""
        assert align_text(text, Align.CENTER, width) == " " * pad + text

    def test_center_overflow_not_truncated(self) -> None:
        """Text wider than the field is kept whole and unpadded."""
        assert align_text("abcdef", Align.CENTER, 3) == "abcdef"

    def test_right_overflow_not_truncated(self) -> None:
        """rjust never truncates."""
        assert align_text("abcdef", Align.RIGHT, 3) == "abcdef"


class TestBuildStyle:
    """Tests for build_style."""

    def test_no_decoration(self) -> None:
        """No color and no bold means no style."""
        assert build_style(None, False) is None

    def test_color_only(self) -> None:
        """Color keyword becomes the foreground."""
        style = build_style("red", False)
        assert style is not None
        assert style.color is not None
        assert style.color.name == "red"
        assert not style.bold

    def test_bold_only(self) -> None:
        """Bold without color."""
        style = build_style(None, True)
        assert style == Style(bold=True)

    def test_color_then_bold_compose(self) -> None:
        """Both decorations apply to one line."""
        style = build_style("green", True)
        assert style is not None
        assert style.bold is True
        assert style.color is not None
        assert style.color.name == "green"

    def test_unknown_color_raises(self) -> None:
        """Unparseable color keywords fail."""
        with pytest.raises(InvalidColorError):
            build_style("not-a-color", False)


class TestAligned:
    """Tests for aligned."""

    def test_writes_line_and_newline(self) -> None:
        """One finished line plus newline reaches the sink."""
        sink = OutputSink()
        sink.suppress()
        aligned(sink, "abc", RenderOptions(align=Align.RIGHT, width=6))
        assert sink.capture() == "   abc\n"

    def test_decorated_line_wrapped_in_sgr(self) -> None:
        """Bold and red wrap the text, also when output is captured."""
        sink = OutputSink()
        sink.suppress()
        aligned(sink, "abc", RenderOptions(align=Align.LEFT, width=6, color="red", bold=True))
        assert sink.capture() == "\x1b[1;31mabc\x1b[0m\n"

    @pytest.mark.parametrize("align", [Align.LEFT, Align.RIGHT])
    def test_tabs_written_verbatim(self, align: Align) -> None:
        """Tabs are not expanded; right alignment equals str.rjust."""
        sink = OutputSink()
        sink.suppress()
        aligned(sink, "a\tb", RenderOptions(align=align, width=10))
        assert sink.capture() == align_text("a\tb", align, 10) + "\n"

    def test_left_tab_unchanged(self) -> None:
        """Left alignment writes the text exactly as given."""
        sink = OutputSink()
        sink.suppress()
        aligned(sink, "a\tb", RenderOptions(align=Align.LEFT, width=10))
        assert sink.capture() == "a\tb\n"

    def test_bad_color_writes_nothing(self) -> None:
        """Decoration is validated before writing."""
        sink = OutputSink()
        sink.suppress()
        with pytest.raises(InvalidColorError):
            aligned(sink, "abc", RenderOptions(align=Align.LEFT, width=6, color="nope"))
        assert sink.capture() == ""
