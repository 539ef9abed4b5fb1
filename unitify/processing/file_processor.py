"""Reading and evaluating expression files.

An expression file holds one expression per line, written as whitespace
separated ``magnitude unit`` pairs joined by operators::

    10 g * 5 g + 2 g
    100 g / 2 L
    1 km + 500 m

Blank lines and lines starting with ``#`` are ignored. Each remaining line is
tokenized into measurements and operators and evaluated with the
ExpressionEvaluator. Lines that fail to parse or evaluate are logged and
skipped, or raise when the processor is strict. Unit tokens are checked with
the MeasurementValidator before parsing, and results with a negative
magnitude are kept but logged.

Classes:
    LineResult: One evaluated line.
    SkippedLine: One line that could not be evaluated.
    MeasurementFileProcessor: Loads a file and produces ordered reports.

Functions:
    tokenize_line: Split a line into measurements and operators.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from ..config import COMMENT_PREFIX, EXPRESSION_OPERATORS
from ..errors import ParseError, UnitifyError
from ..expression import ExpressionEvaluator
from ..measurement import Measurement
from .statistics import Statistics, StatisticsCalculator
from .validator import MeasurementValidator

logger = logging.getLogger(__name__)


def tokenize_line(line: str) -> tuple[list[Measurement], list[str]]:
    """Split an expression line into operands and operators.

    Args:
        line: Text such as ``"10 g * 5 g + 2 g"``.

    Returns:
        tuple[list[Measurement], list[str]]: Operands and the operators
        between them.

    Raises:
        ParseError: On an empty line, a bad magnitude or unit, an invalid
            operator, or a dangling token.
    """
    tokens = line.split()
    if not tokens:
        raise ParseError(line, "empty expression")

    measurements: list[Measurement] = []
    operators: list[str] = []
    position = 0
    while True:
        if position + 1 >= len(tokens):
            raise ParseError(line, f"expected '<magnitude> <unit>' at token {position + 1}")
        if not MeasurementValidator.validate_unit(tokens[position + 1]):
            raise ParseError(line, f"unknown unit {tokens[position + 1]!r} at token {position + 2}")
        measurements.append(Measurement.from_string(f"{tokens[position]} {tokens[position + 1]}"))
        position += 2
        if position == len(tokens):
            break

        symbol = tokens[position]
        if symbol not in EXPRESSION_OPERATORS:
            raise ParseError(line, f"invalid operator {symbol!r} at token {position + 1}")
        operators.append(symbol)
        position += 1
    return measurements, operators


@dataclass(frozen=True)
class LineResult:
    """An evaluated expression line."""

    line_number: int
    text: str
    operands: tuple[Measurement, ...]
    operators: tuple[str, ...]
    result: Measurement


@dataclass(frozen=True)
class SkippedLine:
    """A line that could not be evaluated, with the reason."""

    line_number: int
    text: str
    reason: str


class MeasurementFileProcessor:
    """Loads an expression file and reports its results.

    Attributes:
        path: File being processed.
        strict: Raise on the first bad line instead of skipping it.
    """

    def __init__(
        self,
        path: str | os.PathLike,
        strict: bool = False,
        evaluator: ExpressionEvaluator | None = None,
    ):
        self.path = Path(path)
        self.strict = strict
        self._evaluator = evaluator or ExpressionEvaluator()
        self._results: list[LineResult] = []
        self._skipped: list[SkippedLine] = []
        self._loaded = False

    def read_file(self) -> list[LineResult]:
        """Evaluate every expression line in the file.

        Returns:
            list[LineResult]: Evaluated lines in file order.

        Raises:
            FileNotFoundError: If the file does not exist.
            UnitifyError: On a bad line when ``strict`` is set.
        """
        results: list[LineResult] = []
        skipped: list[SkippedLine] = []
        with self.path.open(encoding="utf-8") as f:
            for line_number, raw in enumerate(f, start=1):
                line = raw.strip()
                if not line or line.startswith(COMMENT_PREFIX):
                    continue
                try:
                    operands, operators = tokenize_line(line)
                    result = self._evaluator.evaluate(operands, operators)
                except UnitifyError as e:
                    if self.strict:
                        raise
                    logger.warning("Skipping line %d of %s due to error: %s", line_number, self.path, e)
                    skipped.append(SkippedLine(line_number, line, str(e)))
                    continue
                if not MeasurementValidator.validate_measurement(result):
                    logger.warning("Line %d of %s evaluates to a negative magnitude: %s", line_number, self.path, result)
                results.append(LineResult(line_number, line, tuple(operands), tuple(operators), result))

        self._results = results
        self._skipped = skipped
        self._loaded = True
        logger.info("Evaluated %d line(s) from %s, skipped %d", len(results), self.path, len(skipped))
        return list(results)

    def _require_loaded(self) -> None:
        if not self._loaded:
            msg = f"No file loaded to process: call read_file() on {self.path} first"
            raise RuntimeError(msg)

    @property
    def results(self) -> list[LineResult]:
        self._require_loaded()
        return list(self._results)

    @property
    def skipped(self) -> list[SkippedLine]:
        self._require_loaded()
        return list(self._skipped)

    @property
    def result_measurements(self) -> list[Measurement]:
        return [r.result for r in self.results]

    @property
    def measurements(self) -> list[Measurement]:
        """All operands of all evaluated lines, in file order."""
        return [m for r in self.results for m in r.operands]

    def sorted_results(self) -> list[Measurement]:
        """Results in ascending order.

        Results are grouped by base unit name first so that measurements of
        different dimensions are never compared, then ordered by base
        magnitude inside each group.
        """
        return sorted(
            self.result_measurements,
            key=lambda m: (m.unit.base_unit().name, m.base_magnitude),
        )

    def numbered_results(self) -> list[str]:
        return [f"{i}. {m}" for i, m in enumerate(self.result_measurements, start=1)]

    def generate_reports_in_original_order(self) -> list[str]:
        return [str(m) for m in self.result_measurements]

    def generate_reports_in_sorted_order(self) -> list[str]:
        return [str(m) for m in self.sorted_results()]

    def compute_statistics(self) -> Statistics:
        """Mean, median and mode of the result magnitudes.

        Raises:
            ValueError: If no line was evaluated successfully.
        """
        return StatisticsCalculator.summarize(self.result_measurements)
