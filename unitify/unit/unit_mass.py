"""Mass unit definitions.

All mass measurements convert into grams, the base unit of the Mass family.

Classes:
    Gram: Base mass unit.
    Milligram: 0.001 grams.
    Centigram: 0.01 grams.
    Kilogram: 1000 grams.

Type Aliases:
    Mass: Union type for all mass units.

Example:
    >>> Kilogram().to_base(2)  # 2000.0 (grams)
    >>> Kilogram().base_unit().name  # "g"
"""

from __future__ import annotations

from .unit_base import Dimension
from .unit_simple import SimpleUnit


class Gram(SimpleUnit):
    """Mass unit: Gram (base unit of the Mass family).

    Attributes:
        IS_FAMILY_ROOT (bool): True, indicating this is the root mass unit.
        SCALE_TO_BASE (float): 1.0, no conversion needed for the base unit.
        SYMBOL (str): "g", the standard symbol for grams.
    """

    IS_FAMILY_ROOT = True
    DIMENSION = Dimension.MASS
    SCALE_TO_BASE = 1.0
    SYMBOL = "g"
    ALIASES = ("grams",)


class Milligram(Gram):
    SCALE_TO_BASE = 0.001
    SYMBOL = "mg"
    ALIASES = ("milligrams",)


class Centigram(Gram):
    SCALE_TO_BASE = 0.01
    SYMBOL = "cg"
    ALIASES = ("centigrams",)


class Kilogram(Gram):
    """Mass unit: Kilogram (1000 grams)."""

    SCALE_TO_BASE = 1000.0
    SYMBOL = "kg"
    ALIASES = ("kilograms",)


Mass = Gram | Milligram | Centigram | Kilogram  # Type alias for any mass unit
