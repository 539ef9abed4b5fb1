"""Stateless conversions between units.

The converter turns a measurement into its base-unit form and computes the
factor between two compatible units. It works on simple and compound units
alike; compound units are converted component by component.

Classes:
    UnitConverter: Static conversion helpers.

Example:
    >>> from unitify.measurement import Measurement
    >>> UnitConverter.to_base_unit(Measurement(72.0, "km / hr"))
    Measurement(20.0, 'm / s')
    >>> UnitConverter.conversion_factor(Kilometer(), Meter())
    1000.0
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..config import MUL_OPERATOR
from ..errors import IncompatibleUnits
from ..unit import CompoundUnit, SimpleUnit, Unit

if TYPE_CHECKING:
    from .measurement import Measurement


class UnitConverter:
    """Conversions between a measurement's unit and its base unit."""

    @staticmethod
    def to_base_unit(measurement: Measurement) -> Measurement:
        """Convert a measurement to its base-unit form.

        Args:
            measurement: Measurement in any unit.

        Returns:
            Measurement: Same quantity expressed in the base unit, or in the
            compound of base units for a compound measurement.
        """
        unit = measurement.unit
        if isinstance(unit, CompoundUnit):
            return UnitConverter.convert_compound_unit(measurement, unit)
        if isinstance(unit, SimpleUnit):
            return type(measurement)(unit.to_base(measurement.magnitude), unit.base_unit())
        msg = f"Unsupported unit type {type(unit).__name__}"
        raise TypeError(msg)

    @staticmethod
    def convert_compound_unit(measurement: Measurement, compound: CompoundUnit) -> Measurement:
        """Convert a compound-unit measurement to the compound of base units.

        The magnitude is carried through the first component, then scaled by
        the base form of one unit of every following component, multiplying
        for ``*`` and dividing for ``/``. Nested compound components are
        converted recursively.

        Args:
            measurement: Measurement whose unit is ``compound``.
            compound: The measurement's compound unit.

        Returns:
            Measurement: Measurement in ``compound.base_unit()``.
        """
        make = type(measurement)
        first, *rest = compound.units
        magnitude = UnitConverter.to_base_unit(make(measurement.magnitude, first)).magnitude
        for op, unit in zip(compound.operators, rest):
            factor = UnitConverter.to_base_unit(make(1.0, unit)).magnitude
            magnitude = magnitude * factor if op == MUL_OPERATOR else magnitude / factor
        return make(magnitude, compound.base_unit())

    @staticmethod
    def conversion_factor(from_unit: Unit, to_unit: Unit) -> float:
        """Ratio of one ``from_unit`` in base form to one ``to_unit`` out of base form.

        Computed as ``from_unit.to_base(1.0) / to_unit.from_base(1.0)``. When
        ``to_unit`` is a base unit this is the factor that converts a
        ``from_unit`` magnitude into ``to_unit``; use ``convert`` for
        conversions between two non-base units.

        Args:
            from_unit: Source unit.
            to_unit: Target unit with the same base unit.

        Returns:
            float: The factor.

        Raises:
            IncompatibleUnits: If the units do not share a base unit.
        """
        if not from_unit.is_compatible(to_unit):
            raise IncompatibleUnits(from_unit.name, to_unit.name, "no common base unit")
        return from_unit.to_base(1.0) / to_unit.from_base(1.0)

    @staticmethod
    def convert(measurement: Measurement, unit: Unit) -> Measurement:
        """Re-express a measurement in another compatible unit.

        Raises:
            IncompatibleUnits: If the units do not share a base unit.
        """
        if not measurement.unit.is_compatible(unit):
            raise IncompatibleUnits(measurement.unit.name, unit.name, "no common base unit")
        return type(measurement)(unit.from_base(measurement.unit.to_base(measurement.magnitude)), unit)
