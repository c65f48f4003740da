"""Tests for the pytest plugin fixtures."""

from collections.abc import Callable
from datetime import datetime

import pytest

from cmdline_reporter.domain.model.defaults import ReporterDefaults
from cmdline_reporter.infrastructure.output_sink import get_output_sink
from cmdline_reporter.presentation.api.reporter import CommandLineReporter
from cmdline_reporter.presentation.pytest_plugin.fixtures import _get_ini_value
from tests.factories import FIXED_NOW


class TestReporterFixture:
    """Tests for the reporter fixture."""

    def test_output_suppressed(self, reporter: CommandLineReporter) -> None:
        """The fixture starts with a fresh capture buffer."""
        assert get_output_sink().is_capturing
        assert reporter.capture_output() == ""

    def test_defaults_from_ini(self, reporter_defaults: ReporterDefaults) -> None:
        """report_width / report_formatter come from pyproject.toml."""
        assert reporter_defaults.width == 100
        assert reporter_defaults.formatter == "nested"

    def test_clock_overridable(self, reporter_clock: Callable[[], datetime]) -> None:
        """conftest.py replaces the clock."""
        assert reporter_clock() == FIXED_NOW

    @pytest.mark.report
    def test_report_marker_registered(self, request: pytest.FixtureRequest) -> None:
        """The report marker is known to pytest."""
        assert request.node.get_closest_marker("report") is not None


class TestGetIniValue:
    """Tests for _get_ini_value."""

    def test_set_value(self, pytestconfig: pytest.Config) -> None:
        """Configured values are returned as strings."""
        assert _get_ini_value(pytestconfig, "report_width", "7") == "100"

    def test_fallback(self, pytestconfig: pytest.Config, monkeypatch: pytest.MonkeyPatch) -> None:
        """Empty values fall back to the default."""
        monkeypatch.setattr(pytestconfig, "getini", lambda name: "")
        assert _get_ini_value(pytestconfig, "report_width", "7") == "7"
