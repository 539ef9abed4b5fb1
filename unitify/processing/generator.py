"""Random expression files for exercising the file processor.

Each generated line has three operands and two operators::

    412.3 grams + 88.01 kilograms * 5.5 meters

The first operator decides the first two units: ``+`` and ``-`` draw both
from one random dimension, ``*`` and ``/`` pair a length with a mass. The
third operand is always a length and the second operator is unconstrained,
so some lines mix dimensions and are skipped when processed.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Iterator

import numpy as np

from ..config import (
    ADD_OPERATOR,
    DIV_OPERATOR,
    GENERATOR_LINES,
    GENERATOR_MAGNITUDE_RANGE,
    MUL_OPERATOR,
    SUB_OPERATOR,
)
from ..unit import Dimension

logger = logging.getLogger(__name__)

OPERATOR_CHOICES = (ADD_OPERATOR, SUB_OPERATOR, MUL_OPERATOR, DIV_OPERATOR)

UNIT_CHOICES: dict[Dimension, tuple[str, ...]] = {
    Dimension.MASS: ("milligrams", "centigrams", "grams", "kilograms"),
    Dimension.LENGTH: ("millimeters", "centimeters", "meters", "kilometers"),
    Dimension.TIME: ("seconds", "minutes", "hours"),
    Dimension.VOLUME: ("milliliters", "centiliters", "liters", "kiloliters"),
}


def generate_expression_lines(count: int = GENERATOR_LINES, seed: int | None = None) -> Iterator[str]:
    """Yield ``count`` random expression lines.

    Args:
        count: Number of lines to produce.
        seed: Seed for ``np.random.default_rng``; equal seeds give equal lines.

    Raises:
        ValueError: If ``count`` is negative.
    """
    if count < 0:
        msg = f"Line count must be non-negative, got {count}"
        raise ValueError(msg)

    rng = np.random.default_rng(seed)
    low, high = GENERATOR_MAGNITUDE_RANGE
    dimensions = list(UNIT_CHOICES)

    def magnitude() -> float:
        return float(rng.uniform(low, high))

    def pick(dimension: Dimension) -> str:
        names = UNIT_CHOICES[dimension]
        return names[rng.integers(len(names))]

    for _ in range(count):
        first_op = OPERATOR_CHOICES[rng.integers(len(OPERATOR_CHOICES))]
        second_op = OPERATOR_CHOICES[rng.integers(len(OPERATOR_CHOICES))]
        if first_op in (ADD_OPERATOR, SUB_OPERATOR):
            dimension = dimensions[rng.integers(len(dimensions))]
            first_unit, second_unit = pick(dimension), pick(dimension)
        else:
            first_unit, second_unit = pick(Dimension.LENGTH), pick(Dimension.MASS)
        third_unit = pick(Dimension.LENGTH)
        yield (
            f"{magnitude():.6g} {first_unit} {first_op} "
            f"{magnitude():.6g} {second_unit} {second_op} "
            f"{magnitude():.6g} {third_unit}"
        )


def write_expression_file(
    path: str | os.PathLike, count: int = GENERATOR_LINES, seed: int | None = None
) -> int:
    """Write ``count`` random expression lines to ``path``.

    Returns:
        int: Number of lines written.
    """
    written = 0
    with open(path, "w", encoding="utf-8") as f:
        for line in generate_expression_lines(count, seed):
            f.write(f"{line}\n")
            written += 1
    logger.info("Wrote %d expression line(s) to %s", written, path)
    return written
