"""Output formatters for cc-license."""

from cc_license.output.results_json import ResultsJsonFormatter
from cc_license.output.terminal import TerminalFormatter

__all__ = [
    "ResultsJsonFormatter",
    "TerminalFormatter",
]
