"""Tests for rendering/rules.py."""

import io
import sys

import pytest

from cmdline_reporter.application.rendering.rules import (
    ASCII_RULE_CHAR,
    UNICODE_RULE_CHAR,
    default_rule_char,
    horizontal_rule,
    vertical_spacing,
)
from cmdline_reporter.domain.model.options import RuleOptions
from cmdline_reporter.infrastructure.output_sink import OutputSink


@pytest.fixture
def sink() -> OutputSink:
    """Private sink already capturing."""
    sink = OutputSink()
    sink.suppress()
    return sink


class TestDefaultRuleChar:
    """Tests for default_rule_char."""

    def test_unicode_capable_stream(self, sink: OutputSink) -> None:
        """Heavy horizontal line when the stream can show it."""
        assert default_rule_char(sink) == UNICODE_RULE_CHAR == "━"

    def test_ascii_stream_falls_back(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Hyphen when the stream cannot encode the heavy glyph."""
        monkeypatch.setattr(sys, "stdout", io.TextIOWrapper(io.BytesIO(), encoding="ascii"))
        assert default_rule_char(OutputSink()) == ASCII_RULE_CHAR == "-"


class TestHorizontalRule:
    """Tests for horizontal_rule."""

    def test_default_glyph_repeated_to_width(self, sink: OutputSink) -> None:
        """width=10 gives exactly ten default glyphs."""
        horizontal_rule(sink, RuleOptions(char=None, width=10))
        assert sink.capture() == UNICODE_RULE_CHAR * 10 + "\n"

    def test_custom_char(self, sink: OutputSink) -> None:
        """A given glyph replaces the default."""
        horizontal_rule(sink, RuleOptions(char="=", width=4))
        assert sink.capture() == "====\n"

    def test_multi_char_repeated_width_times(self, sink: OutputSink) -> None:
        """Longer glyphs are repeated width times, not cut to width."""
        horizontal_rule(sink, RuleOptions(char="-=", width=3))
        assert sink.capture() == "-=-=-=\n"

    def test_decorated_rule(self, sink: OutputSink) -> None:
        """Color and bold wrap the whole rule."""
        horizontal_rule(sink, RuleOptions(char="*", width=3, color="blue", bold=True))
        assert sink.capture() == "\x1b[1;34m***\x1b[0m\n"


class TestVerticalSpacing:
    """Tests for vertical_spacing."""

    def test_three_lines(self, sink: OutputSink) -> None:
        """lines=3 writes exactly three newlines."""
        vertical_spacing(sink, 3)
        assert sink.capture() == "\n\n\n"

    def test_one_line(self, sink: OutputSink) -> None:
        """Default spacing is one blank line."""
        vertical_spacing(sink, 1)
        assert sink.capture() == "\n"

    def test_zero_writes_sentinel(self, sink: OutputSink) -> None:
        """lines=0 writes the sentinel and no newline."""
        vertical_spacing(sink, 0)
        output = sink.capture()
        assert output == "\0"
        assert "\n" not in output

    def test_zero_with_empty_sentinel_writes_nothing(self, sink: OutputSink) -> None:
        """An empty sentinel makes lines=0 a true no-op."""
        vertical_spacing(sink, 0, sentinel="")
        assert sink.capture() == ""
