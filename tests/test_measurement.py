"""
Tests for Measurement construction, parsing, arithmetic and comparison.
"""

import unittest

from unitify.errors import (
    DivisionByZero,
    IncompatibleUnits,
    InvalidMagnitude,
    ParseError,
    UnitifyError,
)
from unitify.measurement import Measurement
from unitify.unit import CompoundUnit, Gram, Kilometer, Meter


class TestConstruction(unittest.TestCase):
    """Test creating measurements."""

    def test_from_unit_and_name(self):
        """Test the unit may be a Unit or a registered name."""
        self.assertEqual(Measurement(5, Kilometer()).unit, Kilometer())
        self.assertEqual(Measurement(5, "kilometers").unit, Kilometer())
        self.assertEqual(Measurement(72, "km/hr").unit.name, "km / hr")

    def test_magnitude_is_float(self):
        """Test integer magnitudes are stored as floats."""
        m = Measurement(3, "g")
        self.assertIsInstance(m.magnitude, float)
        self.assertEqual(str(m), "3.0 g")

    def test_non_finite_rejected(self):
        """Test NaN and infinity are rejected."""
        with self.assertRaises(InvalidMagnitude):
            Measurement(float("nan"), "g")
        with self.assertRaises(InvalidMagnitude):
            Measurement(float("inf"), "g")

    def test_bad_types(self):
        """Test non-numeric magnitudes and non-unit units are rejected."""
        with self.assertRaises(TypeError):
            Measurement("5", "g")
        with self.assertRaises(TypeError):
            Measurement(True, "g")
        with self.assertRaises(TypeError):
            Measurement(5, 42)

    def test_frozen(self):
        """Test measurements are immutable."""
        m = Measurement(1, "g")
        with self.assertRaises(AttributeError):
            m.magnitude = 2.0


class TestFromString(unittest.TestCase):
    """Test parsing the wire format."""

    def test_simple(self):
        """Test a simple measurement."""
        m = Measurement.from_string("12.5 kg")
        self.assertEqual(m.magnitude, 12.5)
        self.assertEqual(m.unit_name, "kg")

    def test_compound(self):
        """Test the unit part may be a spaced compound name."""
        m = Measurement.from_string("72 km / hr")
        self.assertEqual(m.unit_name, "km / hr")

    def test_str_round_trip(self):
        """Test str output parses back to an equal measurement."""
        for text in ("1500.0 m", "50.0 g / L", "0.25 hr"):
            with self.subTest(text=text):
                self.assertEqual(str(Measurement.from_string(text)), text)

    def test_missing_unit(self):
        """Test a bare number is rejected."""
        with self.assertRaises(ParseError):
            Measurement.from_string("12")

    def test_bad_magnitude(self):
        """Test a non-numeric magnitude is rejected."""
        with self.assertRaises(ParseError):
            Measurement.from_string("twelve kg")
        with self.assertRaises(ParseError):
            Measurement.from_string("nan kg")

    def test_unknown_unit(self):
        """Test an unknown unit is reported as a parse error."""
        with self.assertRaises(ParseError):
            Measurement.from_string("3 parsecs")


class TestArithmetic(unittest.TestCase):
    """Test dimension-checked arithmetic."""

    def test_add_converts_to_base(self):
        """Test 1 km + 500 m is 1500 m."""
        result = Measurement(1, "km") + Measurement(500, "m")
        self.assertAlmostEqual(result.magnitude, 1500.0)
        self.assertEqual(result.unit, Meter())

    def test_subtract_uses_base_unit(self):
        """Test subtraction is expressed in the base unit."""
        result = Measurement(2, "kg") - Measurement(500, "g")
        self.assertAlmostEqual(result.magnitude, 1500.0)
        self.assertEqual(result.unit, Gram())

    def test_add_incompatible(self):
        """Test adding mass and length fails."""
        with self.assertRaises(IncompatibleUnits):
            Measurement(1, "g") + Measurement(1, "m")
        with self.assertRaises(IncompatibleUnits):
            Measurement(1, "g").subtract(Measurement(1, "s"))

    def test_add_compound(self):
        """Test compound measurements with the same structure add."""
        result = Measurement(72, "km/hr") + Measurement(5, "m/s")
        self.assertAlmostEqual(result.magnitude, 25.0)
        self.assertEqual(result.unit_name, "m / s")

    def test_add_compound_different_structure(self):
        """Test compound measurements with different bases do not add."""
        with self.assertRaises(IncompatibleUnits):
            Measurement(1, "m/s") + Measurement(1, "g/L")

    def test_divide_creates_compound(self):
        """Test 100 g / 2 L is 50 g / L."""
        result = Measurement(100, "g") / Measurement(2, "L")
        self.assertAlmostEqual(result.magnitude, 50.0)
        self.assertEqual(result.unit_name, "g / L")
        self.assertIsInstance(result.unit, CompoundUnit)

    def test_multiply_creates_compound(self):
        """Test multiplying different dimensions keeps the raw magnitudes."""
        result = Measurement(2, "kg") * Measurement(3, "m")
        self.assertAlmostEqual(result.magnitude, 6.0)
        self.assertEqual(result.unit_name, "kg * m")

    def test_compound_chain_flattens(self):
        """Test a compound left operand is extended, not nested."""
        result = Measurement(10, "g") / Measurement(2, "L") * Measurement(3, "s")
        self.assertEqual(result.unit_name, "g / L * s")
        self.assertAlmostEqual(result.magnitude, 15.0)

    def test_compound_right_operand_nests(self):
        """Test a compound right operand is parenthesized."""
        result = Measurement(10, "m") / Measurement(2, "g/L")
        self.assertEqual(result.unit_name, "m / (g / L)")

    def test_same_dimension_multiply_collapses(self):
        """Test same-dimension products collapse onto the base unit."""
        result = Measurement(2, "km") * Measurement(3, "m")
        self.assertAlmostEqual(result.magnitude, 6000.0)
        self.assertEqual(result.unit, Meter())

    def test_same_dimension_divide_collapses(self):
        """Test same-dimension quotients collapse onto the base unit."""
        result = Measurement(1, "kg") / Measurement(500, "g")
        self.assertAlmostEqual(result.magnitude, 2.0)
        self.assertEqual(result.unit, Gram())

    def test_divide_by_zero(self):
        """Test dividing by a zero measurement fails."""
        with self.assertRaises(DivisionByZero):
            Measurement(5, "g") / Measurement(0, "g")
        with self.assertRaises(DivisionByZero):
            Measurement(5, "g") / Measurement(0, "L")
        with self.assertRaises(ZeroDivisionError):
            Measurement(5, "g") / 0

    def test_divide_by_zero_in_base_units(self):
        """Test a divisor that underflows to zero in base units fails cleanly."""
        with self.assertRaises(DivisionByZero):
            Measurement(1, "g").divide(Measurement(5e-324, "mg"))
        with self.assertRaises(UnitifyError):
            Measurement(1, "g") / Measurement(5e-324, "mg")

    def test_compound_operands_must_match(self):
        """Test compound operands with different base structures do not combine."""
        with self.assertRaises(IncompatibleUnits):
            Measurement(1, "m / s").multiply(Measurement(2, "g / L"))
        with self.assertRaises(IncompatibleUnits):
            Measurement(1, "m / s") / Measurement(2, "s / m")

    def test_compound_operands_same_structure_collapse(self):
        """Test compound operands with one base structure collapse onto it."""
        result = Measurement(72, "km/hr") * Measurement(2, "m/s")
        self.assertAlmostEqual(result.magnitude, 40.0)
        self.assertEqual(result.unit_name, "m / s")
        result = Measurement(72, "km/hr") / Measurement(4, "m/s")
        self.assertAlmostEqual(result.magnitude, 5.0)

    def test_scalar(self):
        """Test scaling by plain numbers keeps the unit."""
        m = Measurement(4, "kg")
        self.assertEqual((m * 2).magnitude, 8.0)
        self.assertEqual((3 * m).magnitude, 12.0)
        self.assertEqual((m / 2).magnitude, 2.0)
        self.assertEqual((m * 2).unit, m.unit)
        self.assertEqual((-m).magnitude, -4.0)

    def test_unsupported_operand(self):
        """Test adding a non-measurement raises TypeError."""
        with self.assertRaises(TypeError):
            Measurement(1, "g") + 1

    def test_errors_share_base_class(self):
        """Test arithmetic errors derive from UnitifyError."""
        with self.assertRaises(UnitifyError):
            Measurement(1, "g") + Measurement(1, "m")


class TestConversionAndComparison(unittest.TestCase):
    """Test conversions and comparisons."""

    def test_to_base_unit(self):
        """Test base conversion of simple and compound measurements."""
        self.assertAlmostEqual(Measurement(2.5, "km").to_base_unit().magnitude, 2500.0)
        speed = Measurement(72, "km/hr").to_base_unit()
        self.assertAlmostEqual(speed.magnitude, 20.0)
        self.assertEqual(speed.unit_name, "m / s")

    def test_to(self):
        """Test conversion to another unit of the same family."""
        m = Measurement(1500, "m").to("km")
        self.assertAlmostEqual(m.magnitude, 1.5)
        self.assertEqual(m.unit, Kilometer())
        self.assertAlmostEqual(Measurement(20, "m/s").to("km/hr").magnitude, 72.0)
        with self.assertRaises(IncompatibleUnits):
            Measurement(1, "m").to("g")

    def test_base_magnitude(self):
        """Test base magnitude property."""
        self.assertAlmostEqual(Measurement(3, "min").base_magnitude, 180.0)

    def test_ordering(self):
        """Test comparisons use base magnitudes."""
        self.assertLess(Measurement(999, "m"), Measurement(1, "km"))
        self.assertGreater(Measurement(2, "hr"), Measurement(100, "min"))
        self.assertLessEqual(Measurement(60, "s"), Measurement(1, "min"))
        self.assertGreaterEqual(Measurement(1, "L"), Measurement(1000, "mL"))

    def test_equality(self):
        """Test equal quantities in different units compare equal."""
        self.assertEqual(Measurement(1, "km"), Measurement(1000, "m"))
        self.assertNotEqual(Measurement(1, "km"), Measurement(1, "m"))
        self.assertEqual(hash(Measurement(1, "kg")), hash(Measurement(1000, "g")))

    def test_compare_incompatible(self):
        """Test comparing different dimensions fails."""
        with self.assertRaises(IncompatibleUnits):
            Measurement(1, "g") < Measurement(1, "m")
        with self.assertRaises(IncompatibleUnits):
            Measurement(1, "g") == Measurement(1, "m")

    def test_compare_non_measurement(self):
        """Test comparing with other types."""
        self.assertNotEqual(Measurement(1, "g"), 1)
        with self.assertRaises(TypeError):
            Measurement(1, "g") < 1

    def test_sorting(self):
        """Test measurements of one dimension sort by base magnitude."""
        items = [Measurement(2, "km"), Measurement(300, "m"), Measurement(1, "km")]
        self.assertEqual([str(m) for m in sorted(items)], ["300.0 m", "1.0 km", "2.0 km"])

    def test_repr(self):
        """Test repr shows magnitude and unit name."""
        self.assertEqual(repr(Measurement(1500, "m")), "Measurement(1500.0, 'm')")


if __name__ == "__main__":
    unittest.main()
