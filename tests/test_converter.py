"""
Tests for UnitConverter.
"""

import unittest

from unitify.errors import IncompatibleUnits
from unitify.measurement import Measurement, UnitConverter
from unitify.unit import (
    Centimeter,
    CompoundUnit,
    Gram,
    Hour,
    Kilogram,
    Kilometer,
    Meter,
    Milligram,
    Minute,
    Second,
)


class TestToBaseUnit(unittest.TestCase):
    """Test conversion to base units."""

    def test_simple(self):
        """Test simple measurements convert to the family root."""
        result = UnitConverter.to_base_unit(Measurement(3, Kilogram()))
        self.assertAlmostEqual(result.magnitude, 3000.0)
        self.assertEqual(result.unit, Gram())

    def test_base_unit_unchanged(self):
        """Test a base-unit measurement keeps its magnitude."""
        result = UnitConverter.to_base_unit(Measurement(7, Meter()))
        self.assertEqual(result.magnitude, 7.0)
        self.assertEqual(result.unit, Meter())

    def test_compound_speed(self):
        """Test 72 km/hr converts to 20 m/s."""
        speed = CompoundUnit([Kilometer(), Hour()], ["/"])
        result = UnitConverter.convert_compound_unit(Measurement(72.0, speed), speed)
        self.assertAlmostEqual(result.magnitude, 20.0)
        self.assertEqual(result.unit, CompoundUnit([Meter(), Second()], ["/"]))

    def test_compound_three_components(self):
        """Test conversion folds left to right through every component."""
        unit = CompoundUnit([Kilogram(), Kilometer(), Minute()], ["*", "/"])
        result = UnitConverter.to_base_unit(Measurement(6, unit))
        self.assertAlmostEqual(result.magnitude, 6 * 1000 * 1000 / 60)
        self.assertEqual(result.unit_name, "g * m / s")

    def test_nested_compound(self):
        """Test nested compound components convert recursively."""
        speed = CompoundUnit([Kilometer(), Hour()], ["/"])
        unit = CompoundUnit([speed, Kilogram()], ["*"])
        result = UnitConverter.to_base_unit(Measurement(72, unit))
        self.assertAlmostEqual(result.magnitude, 20_000.0)
        self.assertEqual(result.unit_name, "m / s * g")

    def test_returns_new_measurement(self):
        """Test the input measurement is not modified."""
        original = Measurement(1, "km")
        UnitConverter.to_base_unit(original)
        self.assertEqual(original.magnitude, 1.0)
        self.assertEqual(original.unit, Kilometer())


class TestConversionFactor(unittest.TestCase):
    """Test conversion factors between compatible units."""

    def test_to_base(self):
        """Test factor into the base unit."""
        self.assertAlmostEqual(UnitConverter.conversion_factor(Kilometer(), Meter()), 1000.0)
        self.assertAlmostEqual(UnitConverter.conversion_factor(Hour(), Second()), 3600.0)
        self.assertAlmostEqual(UnitConverter.conversion_factor(Milligram(), Gram()), 0.001)

    def test_between_non_base_units(self):
        """Test the factor divides by the target's one-unit base inverse."""
        self.assertAlmostEqual(UnitConverter.conversion_factor(Kilometer(), Centimeter()), 10.0)
        self.assertAlmostEqual(UnitConverter.conversion_factor(Milligram(), Kilogram()), 1.0)
        self.assertAlmostEqual(UnitConverter.conversion_factor(Hour(), Minute()), 216_000.0)

    def test_compound(self):
        """Test factor between compound units."""
        kmh = CompoundUnit([Kilometer(), Hour()], ["/"])
        ms = CompoundUnit([Meter(), Second()], ["/"])
        self.assertAlmostEqual(UnitConverter.conversion_factor(kmh, ms), 1 / 3.6)

    def test_incompatible(self):
        """Test units with different bases have no factor."""
        with self.assertRaises(IncompatibleUnits):
            UnitConverter.conversion_factor(Kilogram(), Meter())

    def test_convert(self):
        """Test converting a measurement into another unit."""
        result = UnitConverter.convert(Measurement(90, "min"), Hour())
        self.assertAlmostEqual(result.magnitude, 1.5)
        self.assertEqual(result.unit, Hour())

    def test_convert_between_non_base_units(self):
        """Test conversion goes through the base unit."""
        self.assertAlmostEqual(UnitConverter.convert(Measurement(1, "km"), Centimeter()).magnitude, 100_000.0)
        self.assertAlmostEqual(UnitConverter.convert(Measurement(2, "hr"), Minute()).magnitude, 120.0)
        speed = CompoundUnit([Kilometer(), Hour()], ["/"])
        self.assertAlmostEqual(UnitConverter.convert(Measurement(20, "m/s"), speed).magnitude, 72.0)

    def test_convert_incompatible(self):
        """Test converting to an unrelated unit fails."""
        with self.assertRaises(IncompatibleUnits):
            UnitConverter.convert(Measurement(1, "kg"), Meter())


if __name__ == "__main__":
    unittest.main()
