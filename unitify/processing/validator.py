"""Input validation for measurements and unit names."""

from __future__ import annotations

from ..errors import UnitifyError
from ..measurement import Measurement
from ..unit import UnitRegistry


class MeasurementValidator:
    """Checks applied by ingestion code before accepting data."""

    @staticmethod
    def validate_measurement(measurement: Measurement) -> bool:
        """Return True if the magnitude is non-negative."""
        return measurement.magnitude >= 0

    @staticmethod
    def validate_unit(name: str) -> bool:
        """Return True if the name is a registered simple or well-formed compound unit."""
        if UnitRegistry.is_known(name):
            return True
        if not UnitRegistry.is_compound_name(name):
            return False
        try:
            UnitRegistry.parse_compound(name)
        except UnitifyError:
            return False
        return True
