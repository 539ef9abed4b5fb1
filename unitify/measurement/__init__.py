"""Measurements and unit conversion.

Components:
    Measurement: Immutable magnitude and unit with dimension-checked
        arithmetic and comparison.
    UnitConverter: Base-unit conversion and unit-to-unit factors.

Example:
    >>> from unitify.measurement import Measurement
    >>> Measurement(1, "km") + Measurement(500, "m")
    Measurement(1500.0, 'm')
    >>> Measurement.from_string("72 km / hr").to_base_unit()
    Measurement(20.0, 'm / s')
"""

from .converter import UnitConverter
from .measurement import Measurement

__all__ = ["Measurement", "UnitConverter"]
