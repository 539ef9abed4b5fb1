"""Descriptive statistics over measurement magnitudes.

Statistics are computed on the raw magnitudes as written, without unit
conversion; callers that mix units should convert first.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

import numpy as np

from ..measurement import Measurement


@dataclass(frozen=True)
class Statistics:
    """Summary of a collection of magnitudes."""

    count: int
    mean: float
    median: float
    mode: float

    def as_lines(self) -> list[str]:
        return [f"Mean: {self.mean:g}", f"Mode: {self.mode:g}", f"Median: {self.median:g}"]


class StatisticsCalculator:
    """Mean, mode and median of measurement magnitudes."""

    @staticmethod
    def _magnitudes(measurements: Iterable[Measurement]) -> np.ndarray:
        values = np.asarray([m.magnitude for m in measurements], dtype=float)
        if values.size == 0:
            msg = "No measurements to compute statistics."
            raise ValueError(msg)
        return values

    @staticmethod
    def compute_mean(measurements: Iterable[Measurement]) -> float:
        return float(np.mean(StatisticsCalculator._magnitudes(measurements)))

    @staticmethod
    def compute_median(measurements: Iterable[Measurement]) -> float:
        return float(np.median(StatisticsCalculator._magnitudes(measurements)))

    @staticmethod
    def compute_mode(measurements: Iterable[Measurement]) -> float:
        """Most frequent magnitude; ties resolve to the smallest value."""
        values, counts = np.unique(StatisticsCalculator._magnitudes(measurements), return_counts=True)
        return float(values[np.argmax(counts)])

    @staticmethod
    def summarize(measurements: Iterable[Measurement]) -> Statistics:
        values = StatisticsCalculator._magnitudes(measurements)
        unique, counts = np.unique(values, return_counts=True)
        return Statistics(
            count=int(values.size),
            mean=float(np.mean(values)),
            median=float(np.median(values)),
            mode=float(unique[np.argmax(counts)]),
        )
