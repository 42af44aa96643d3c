"""
Output formatting and export functionality.
"""

from vacation_calculator.output.formatter import ConsoleFormatter, error_message, summarize_result
from vacation_calculator.output.exporter import ResultExporter

__all__ = ["ConsoleFormatter", "ResultExporter", "error_message", "summarize_result"]
