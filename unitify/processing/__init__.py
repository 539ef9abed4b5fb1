"""Collaborators around the measurement core.

Components:
    MeasurementFileProcessor: Evaluates expression files line by line.
    MeasurementValidator: Magnitude and unit-name checks.
    StatisticsCalculator: Mean, mode and median of magnitudes.
    report: Text, CSV and rich console reports.
    generator: Random expression files.
"""

from .file_processor import LineResult, MeasurementFileProcessor, SkippedLine, tokenize_line
from .generator import generate_expression_lines, write_expression_file
from .report import (
    build_statistics_panel,
    build_table,
    generate_csv_report,
    generate_text_report,
    write_report,
)
from .statistics import Statistics, StatisticsCalculator
from .validator import MeasurementValidator

__all__ = [
    "LineResult",
    "MeasurementFileProcessor",
    "MeasurementValidator",
    "SkippedLine",
    "Statistics",
    "StatisticsCalculator",
    "build_statistics_panel",
    "build_table",
    "generate_csv_report",
    "generate_expression_lines",
    "generate_text_report",
    "tokenize_line",
    "write_expression_file",
    "write_report",
]
