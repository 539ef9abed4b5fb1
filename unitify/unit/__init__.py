"""Unit model and registry for dimension-aware arithmetic.

This package provides the unit algebra that measurements are built on: a
``Dimension`` tag, single-dimension unit families, compound units, and the
registry that turns unit names into unit values.

Architecture:
    The unit system is organized into specialized modules:

    - unit_base: Dimension enumeration and the abstract Unit class
    - unit_simple: SimpleUnit with family (ROOT) management and base factors
    - unit_compound: CompoundUnit composition with ``*`` and ``/``
    - unit_mass: Mass units (Gram, Milligram, Centigram, Kilogram)
    - unit_length: Length units (Meter, Millimeter, Centimeter, Kilometer)
    - unit_time: Time units (Second, Minute, Hour)
    - unit_volume: Volume units (Liter, Milliliter, Centiliter, Kiloliter)
    - registry: Name lookup and compound-name parsing

Unit Families:
    Each unit family represents one dimension and converts into its root:

    - Mass Family: Gram (root), Milligram, Centigram, Kilogram
    - Length Family: Meter (root), Millimeter, Centimeter, Kilometer
    - Time Family: Second (root), Minute, Hour
    - Volume Family: Liter (root), Milliliter, Centiliter, Kiloliter

Example:
    >>> from unitify.unit import CompoundUnit, UnitRegistry
    >>>
    >>> kg = UnitRegistry.resolve("kilograms")
    >>> kg.name, kg.base_factor  # ("kg", 1000.0)
    >>>
    >>> speed = UnitRegistry.parse_compound("km / hr")
    >>> speed.to_base(72.0)  # 20.0 (m / s)
    >>> speed.base_unit().name  # "m / s"
"""

from .registry import UNIT_TYPES, UnitRegistry
from .unit_base import Dimension, Unit
from .unit_compound import CompoundUnit
from .unit_length import Centimeter, Kilometer, Length, Meter, Millimeter
from .unit_mass import Centigram, Gram, Kilogram, Mass, Milligram
from .unit_simple import SimpleUnit
from .unit_time import Hour, Minute, Second, Time
from .unit_volume import Centiliter, Kiloliter, Liter, Milliliter, Volume

__all__ = [
    # Base classes
    "Dimension",
    "Unit",
    "SimpleUnit",
    "CompoundUnit",
    # Registry
    "UnitRegistry",
    "UNIT_TYPES",
    # Mass units
    "Gram",
    "Milligram",
    "Centigram",
    "Kilogram",
    "Mass",
    # Length units
    "Meter",
    "Millimeter",
    "Centimeter",
    "Kilometer",
    "Length",
    # Time units
    "Second",
    "Minute",
    "Hour",
    "Time",
    # Volume units
    "Liter",
    "Milliliter",
    "Centiliter",
    "Kiloliter",
    "Volume",
]
