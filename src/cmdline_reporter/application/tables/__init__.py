"""Tabular model: Table of Rows of Columns."""

from cmdline_reporter.application.tables.column import Column
from cmdline_reporter.application.tables.row import Row
from cmdline_reporter.application.tables.table import Table

__all__ = ["Column", "Row", "Table"]
