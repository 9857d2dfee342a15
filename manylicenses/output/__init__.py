"""Output formatters for manylicenses."""

from manylicenses.output.counts_json import CountsJsonFormatter
from manylicenses.output.report_csv import CsvFormatter
from manylicenses.output.terminal import TerminalFormatter

__all__ = [
    "CountsJsonFormatter",
    "CsvFormatter",
    "TerminalFormatter",
]
