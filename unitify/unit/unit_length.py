"""Length unit definitions.

All length measurements convert into meters, the base unit of the Length
family. Millimeters, centimeters and kilometers derive from Meter and only
override their factor and symbol.

Classes:
    Meter: Base length unit.
    Millimeter: 0.001 meters.
    Centimeter: 0.01 meters.
    Kilometer: 1000 meters.

Type Aliases:
    Length: Union type for all length units.

Example:
    >>> Kilometer().to_base(25.5)  # 25500.0 (meters)
    >>> Millimeter().from_base(1.0)  # 1000.0 (millimeters in one meter)
"""

from __future__ import annotations

from .unit_base import Dimension
from .unit_simple import SimpleUnit


class Meter(SimpleUnit):
    """Length unit: Meter (base unit of the Length family).

    Attributes:
        IS_FAMILY_ROOT (bool): True, indicating this is the root length unit.
        SCALE_TO_BASE (float): 1.0, no conversion needed for the base unit.
        SYMBOL (str): "m", the standard symbol for meters.
    """

    IS_FAMILY_ROOT = True
    DIMENSION = Dimension.LENGTH
    SCALE_TO_BASE = 1.0
    SYMBOL = "m"
    ALIASES = ("meters",)


class Millimeter(Meter):
    """Length unit: Millimeter (0.001 meters)."""

    SCALE_TO_BASE = 0.001
    SYMBOL = "mm"
    ALIASES = ("millimeters",)


class Centimeter(Meter):
    """Length unit: Centimeter (0.01 meters)."""

    SCALE_TO_BASE = 0.01
    SYMBOL = "cm"
    ALIASES = ("centimeters",)


class Kilometer(Meter):
    """Length unit: Kilometer (1000 meters).

    Attributes:
        SCALE_TO_BASE (float): 1000.0, conversion factor from km to meters.
        SYMBOL (str): "km", the standard symbol for kilometers.

    Example:
        >>> Kilometer().to_base(1.5)  # 1500.0
    """

    SCALE_TO_BASE = 1000.0
    SYMBOL = "km"
    ALIASES = ("kilometers",)


Length = Meter | Millimeter | Centimeter | Kilometer  # Type alias for any length unit
