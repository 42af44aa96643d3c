"""
Export functionality for vacation calculation results.
"""

import csv
import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Optional, Tuple

from vacation_calculator.data.schemas import CalculationResult

logger = logging.getLogger(__name__)


class ResultExporter:
    """Exports vacation calculation results to JSON and CSV."""

    def __init__(
        self,
        output_directory: str = "results",
        timestamp_format: str = "%Y%m%d_%H%M%S",
    ):
        """
        Initialize the result exporter.

        Args:
            output_directory: Directory for output files.
            timestamp_format: Format string for timestamps in filenames.
        """
        self.output_directory = output_directory
        self.timestamp_format = timestamp_format

    def _resolve_path(self, output_path: Optional[str], extension: str) -> Path:
        """Use the given path, or a timestamped file in the output directory."""
        if output_path:
            file_path = Path(output_path)
            file_path.parent.mkdir(parents=True, exist_ok=True)
            return file_path

        output_dir = Path(self.output_directory)
        output_dir.mkdir(parents=True, exist_ok=True)
        timestamp = datetime.now().strftime(self.timestamp_format)
        return output_dir / f"vacation_{timestamp}.{extension}"

    def export_json(
        self, result: CalculationResult, output_path: Optional[str] = None
    ) -> str:
        """
        Export result to JSON file.

        Args:
            result: CalculationResult to export.
            output_path: Optional specific output path.

        Returns:
            Path to the exported file.
        """
        file_path = self._resolve_path(output_path, "json")

        with open(file_path, "w", encoding="utf-8") as f:
            json.dump(self.result_to_dict(result), f, indent=2, ensure_ascii=False)

        logger.debug(f"Exported JSON result to {file_path}")
        return str(file_path)

    def export_csv(
        self, result: CalculationResult, output_path: Optional[str] = None
    ) -> str:
        """
        Export result to CSV file.

        Args:
            result: CalculationResult to export.
            output_path: Optional specific output path.

        Returns:
            Path to the exported file.
        """
        file_path = self._resolve_path(output_path, "csv")

        with open(file_path, "w", newline="", encoding="utf-8") as f:
            writer = csv.writer(f)
            writer.writerow([
                "Mode",
                "Start Date",
                "End Date",
                "Duration",
                "Calendar Days",
                "Holidays",
                "Sunday Boundaries",
                "Warnings",
            ])
            writer.writerow([
                result.mode.value,
                result.start_date.isoformat(),
                result.end_date.isoformat(),
                result.duration,
                result.calendar_days,
                ";".join(d.isoformat() for d in result.holidays_in_range),
                ";".join(b.value for b in result.sunday_boundaries),
                " | ".join(result.warnings),
            ])

        logger.debug(f"Exported CSV result to {file_path}")
        return str(file_path)

    def export_both(self, result: CalculationResult) -> Tuple[str, str]:
        """
        Export result to both JSON and CSV.

        Returns:
            Tuple of (json_path, csv_path).
        """
        return self.export_json(result), self.export_csv(result)

    @staticmethod
    def result_to_dict(result: CalculationResult) -> dict:
        """Convert CalculationResult to a JSON-serializable dictionary."""
        return {
            "mode": result.mode.value,
            "period": {
                "start_date": result.start_date.isoformat(),
                "end_date": result.end_date.isoformat(),
                "duration": result.duration,
                "calendar_days": result.calendar_days,
            },
            "holidays_in_range": [d.isoformat() for d in result.holidays_in_range],
            "metadata": {
                "calculation_timestamp": result.calculation_timestamp.isoformat(),
                "sunday_boundaries": [b.value for b in result.sunday_boundaries],
                "warnings": result.warnings,
            },
        }
