"""
Tests for line tokenizing and the expression file processor.
"""

import os
import tempfile
import unittest

from unitify.errors import ParseError, UnitifyError
from unitify.processing import MeasurementFileProcessor, tokenize_line

SAMPLE = """\
# sample expressions
10 g * 5 g + 2 g
100 g / 2 L

1 km + 500 m
1 g + 1 m
3 furlongs + 1 m
2 kg - 500 g
"""


class TestTokenizeLine(unittest.TestCase):
    """Test splitting lines into operands and operators."""

    def test_expression(self):
        """Test a three-operand expression."""
        measurements, operators = tokenize_line("10 g * 5 g + 2 g")
        self.assertEqual([m.magnitude for m in measurements], [10.0, 5.0, 2.0])
        self.assertEqual(operators, ["*", "+"])

    def test_single_measurement(self):
        """Test a line holding one measurement."""
        measurements, operators = tokenize_line("12 kilometers")
        self.assertEqual(len(measurements), 1)
        self.assertEqual(measurements[0].unit_name, "km")
        self.assertEqual(operators, [])

    def test_compound_operand(self):
        """Test glued compound units are a single operand."""
        measurements, operators = tokenize_line("72 km/hr + 5 m/s")
        self.assertEqual(measurements[0].unit_name, "km / hr")
        self.assertEqual(operators, ["+"])

    def test_invalid_operator(self):
        """Test an invalid operator token."""
        with self.assertRaises(ParseError):
            tokenize_line("1 g % 2 g")

    def test_unknown_unit(self):
        """Test unit tokens are validated before parsing."""
        with self.assertRaises(ParseError) as ctx:
            tokenize_line("1 g + 3 furlongs")
        self.assertIn("unknown unit 'furlongs' at token 5", str(ctx.exception))

    def test_dangling_tokens(self):
        """Test missing units and trailing operators."""
        for line in ("5", "1 g +", "1 g + 2", ""):
            with self.subTest(line=line):
                with self.assertRaises(ParseError):
                    tokenize_line(line)


class TestMeasurementFileProcessor(unittest.TestCase):
    """Test processing expression files."""

    def setUp(self):
        self.tmpdir = tempfile.TemporaryDirectory()
        self.path = os.path.join(self.tmpdir.name, "expressions.txt")
        with open(self.path, "w", encoding="utf-8") as f:
            f.write(SAMPLE)

    def tearDown(self):
        self.tmpdir.cleanup()

    def test_read_file(self):
        """Test valid lines are evaluated and bad ones skipped."""
        processor = MeasurementFileProcessor(self.path)
        with self.assertLogs("unitify.processing.file_processor", level="WARNING") as logs:
            results = processor.read_file()
        self.assertEqual(len(results), 4)
        self.assertEqual([r.line_number for r in results], [2, 3, 5, 8])
        self.assertEqual(len(processor.skipped), 2)
        self.assertEqual([s.line_number for s in processor.skipped], [6, 7])
        self.assertEqual(len(logs.records), 2)

    def test_reports_in_original_order(self):
        """Test results are reported in file order."""
        processor = MeasurementFileProcessor(self.path)
        with self.assertLogs("unitify.processing.file_processor", level="WARNING"):
            processor.read_file()
        self.assertEqual(
            processor.generate_reports_in_original_order(),
            ["52.0 g", "50.0 g / L", "1500.0 m", "1500.0 g"],
        )
        self.assertEqual(processor.numbered_results()[0], "1. 52.0 g")

    def test_reports_in_sorted_order(self):
        """Test sorting groups by base unit, then magnitude."""
        processor = MeasurementFileProcessor(self.path)
        with self.assertLogs("unitify.processing.file_processor", level="WARNING"):
            processor.read_file()
        self.assertEqual(
            processor.generate_reports_in_sorted_order(),
            ["52.0 g", "1500.0 g", "50.0 g / L", "1500.0 m"],
        )

    def test_measurements(self):
        """Test operands of evaluated lines are kept in order."""
        processor = MeasurementFileProcessor(self.path)
        with self.assertLogs("unitify.processing.file_processor", level="WARNING"):
            processor.read_file()
        self.assertEqual(len(processor.measurements), 3 + 2 + 2 + 2)
        self.assertEqual(str(processor.measurements[0]), "10.0 g")

    def test_statistics(self):
        """Test statistics over result magnitudes."""
        processor = MeasurementFileProcessor(self.path)
        with self.assertLogs("unitify.processing.file_processor", level="WARNING"):
            processor.read_file()
        stats = processor.compute_statistics()
        self.assertEqual(stats.count, 4)
        self.assertAlmostEqual(stats.mean, (52 + 50 + 1500 + 1500) / 4)
        self.assertAlmostEqual(stats.mode, 1500.0)
        self.assertAlmostEqual(stats.median, 776.0)

    def test_strict(self):
        """Test strict mode raises on the first bad line."""
        processor = MeasurementFileProcessor(self.path, strict=True)
        with self.assertRaises(UnitifyError):
            processor.read_file()

    def test_not_loaded(self):
        """Test reports require a prior read."""
        processor = MeasurementFileProcessor(self.path)
        with self.assertRaises(RuntimeError):
            processor.generate_reports_in_original_order()
        with self.assertRaises(RuntimeError):
            processor.compute_statistics()

    def test_missing_file(self):
        """Test a missing file raises FileNotFoundError."""
        processor = MeasurementFileProcessor(os.path.join(self.tmpdir.name, "missing.txt"))
        with self.assertRaises(FileNotFoundError):
            processor.read_file()

    def test_zero_base_divisor_is_skipped(self):
        """Test a divisor that is zero in base units skips the line."""
        path = os.path.join(self.tmpdir.name, "tiny.txt")
        with open(path, "w", encoding="utf-8") as f:
            f.write("1 g / 5e-324 mg\n4 g / 2 g\n")
        processor = MeasurementFileProcessor(path)
        with self.assertLogs("unitify.processing.file_processor", level="WARNING"):
            processor.read_file()
        self.assertEqual(processor.generate_reports_in_original_order(), ["2.0 g"])
        self.assertEqual([s.line_number for s in processor.skipped], [1])

    def test_negative_result_is_logged(self):
        """Test a negative result is kept and logged."""
        path = os.path.join(self.tmpdir.name, "negative.txt")
        with open(path, "w", encoding="utf-8") as f:
            f.write("1 g - 3 g\n")
        processor = MeasurementFileProcessor(path)
        with self.assertLogs("unitify.processing.file_processor", level="WARNING") as logs:
            processor.read_file()
        self.assertEqual(processor.generate_reports_in_original_order(), ["-2.0 g"])
        self.assertIn("negative magnitude", logs.output[0])

    def test_empty_results_statistics(self):
        """Test statistics of a file with no valid lines."""
        path = os.path.join(self.tmpdir.name, "empty.txt")
        with open(path, "w", encoding="utf-8") as f:
            f.write("# nothing here\n\n")
        processor = MeasurementFileProcessor(path)
        self.assertEqual(processor.read_file(), [])
        with self.assertRaises(ValueError):
            processor.compute_statistics()


if __name__ == "__main__":
    unittest.main()
