"""Volume unit definitions.

All volume measurements convert into liters, the base unit of the Volume
family. Both the upper-case symbols (``L``, ``mL``) and their lower-case
spellings are accepted by the registry; the upper-case form is canonical.

Classes:
    Liter: Base volume unit.
    Milliliter: 0.001 liters.
    Centiliter: 0.01 liters.
    Kiloliter: 1000 liters.

Type Aliases:
    Volume: Union type for all volume units.
"""

from __future__ import annotations

from .unit_base import Dimension
from .unit_simple import SimpleUnit


class Liter(SimpleUnit):
    """Volume unit: Liter (base unit of the Volume family).

    Attributes:
        IS_FAMILY_ROOT (bool): True, indicating this is the root volume unit.
        SCALE_TO_BASE (float): 1.0, no conversion needed for the base unit.
        SYMBOL (str): "L", the standard symbol for liters.
    """

    IS_FAMILY_ROOT = True
    DIMENSION = Dimension.VOLUME
    SCALE_TO_BASE = 1.0
    SYMBOL = "L"
    ALIASES = ("l", "liters")


class Milliliter(Liter):
    SCALE_TO_BASE = 0.001
    SYMBOL = "mL"
    ALIASES = ("ml", "milliliters")


class Centiliter(Liter):
    SCALE_TO_BASE = 0.01
    SYMBOL = "cL"
    ALIASES = ("cl", "centiliters")


class Kiloliter(Liter):
    SCALE_TO_BASE = 1000.0
    SYMBOL = "kL"
    ALIASES = ("kl", "kiloliters")


Volume = Liter | Milliliter | Centiliter | Kiloliter  # Type alias for any volume unit
