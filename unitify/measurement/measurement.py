"""Measurements: a magnitude paired with a unit.

This module provides the Measurement value type and its dimension-checked
arithmetic. Measurements are immutable; every operation returns a new
Measurement.

Arithmetic Rules:
    Addition and subtraction:
        Both operands must share a base unit. The result is the sum or
        difference of the base magnitudes, expressed in the left operand's
        base unit (``1 km + 500 m == 1500.0 m``).

    Multiplication and division:
        Operands of the same dimension are converted to base form and the
        base magnitudes are combined; the result keeps the common base unit.
        ``m * m`` therefore yields ``m``, not ``m²``. Operands of different
        dimensions produce a compound unit whose components are the left
        operand's components followed by the right operand's unit, with the
        raw magnitudes combined (``100 g / 2 L == 50.0 g / L``). Two compound
        operands always share the compound dimension, so their base
        structures must match.

    Comparison:
        Operands must share a base unit; base magnitudes are compared.

Classes:
    Measurement: Immutable magnitude and unit with unit-aware operators.

Example:
    >>> Measurement(1, "km") + Measurement(500, "m")
    Measurement(1500.0, 'm')
    >>> str(Measurement(100, "g") / Measurement(2, "L"))
    '50.0 g / L'
"""

from __future__ import annotations

from dataclasses import dataclass
from math import isfinite

from ..config import DIV_OPERATOR, MUL_OPERATOR, Number
from ..errors import DivisionByZero, IncompatibleUnits, InvalidMagnitude, ParseError, UnknownUnit
from ..unit import CompoundUnit, Unit, UnitRegistry
from .converter import UnitConverter


@dataclass(frozen=True, eq=False)
class Measurement:
    """A magnitude expressed in a unit.

    The unit may be given as a Unit or as a unit name, which is resolved
    through the registry (compound names such as ``"m / s"`` included).

    Attributes:
        magnitude: Finite magnitude in ``unit``.
        unit: Simple or compound unit.

    Raises:
        InvalidMagnitude: If the magnitude is NaN or infinite.
        TypeError: If the magnitude is not a number or the unit is not a Unit.
    """

    magnitude: float
    unit: Unit

    def __post_init__(self):
        if isinstance(self.magnitude, bool) or not isinstance(self.magnitude, Number):
            msg = f"Magnitude must be a number, got {type(self.magnitude).__name__}"
            raise TypeError(msg)
        if not isfinite(self.magnitude):
            raise InvalidMagnitude(self.magnitude)
        object.__setattr__(self, "magnitude", float(self.magnitude))

        if isinstance(self.unit, str):
            object.__setattr__(self, "unit", UnitRegistry.lookup(self.unit))
        elif not isinstance(self.unit, Unit):
            msg = f"Unit must be a Unit or a unit name, got {type(self.unit).__name__}"
            raise TypeError(msg)

    # ------------------------------------ Construction ------------------------------------
    @classmethod
    def from_string(cls, text: str) -> Measurement:
        """Parse ``"<magnitude> <unit>"`` into a Measurement.

        The unit part may be a compound name (``"72 km / hr"``).

        Args:
            text: Text in the wire format produced by ``str(measurement)``.

        Returns:
            Measurement: The parsed measurement.

        Raises:
            ParseError: If the magnitude is not a finite number or the unit is
                not recognised.
        """
        parts = text.split(maxsplit=1)
        if len(parts) != 2:
            raise ParseError(text, "expected '<magnitude> <unit>'")
        magnitude_token, unit_token = parts

        try:
            magnitude = float(magnitude_token)
        except ValueError:
            raise ParseError(text, f"magnitude {magnitude_token!r} is not a number") from None
        if not isfinite(magnitude):
            raise ParseError(text, f"magnitude {magnitude_token!r} is not finite")

        try:
            unit = UnitRegistry.lookup(unit_token)
        except UnknownUnit as exc:
            raise ParseError(text, str(exc)) from exc
        return cls(magnitude, unit)

    # ------------------------------------- Properties -------------------------------------
    @property
    def unit_name(self) -> str:
        return self.unit.name

    @property
    def base_magnitude(self) -> float:
        """Magnitude converted to the unit's base form."""
        return self.unit.to_base(self.magnitude)

    # ------------------------------------- Conversion -------------------------------------
    def to_base_unit(self) -> Measurement:
        """Return this measurement in its base unit(s)."""
        return UnitConverter.to_base_unit(self)

    def to(self, unit: Unit | str) -> Measurement:
        """Convert to another unit with the same base unit.

        Args:
            unit: Target unit or unit name.

        Returns:
            Measurement: Equivalent measurement in ``unit``.

        Raises:
            IncompatibleUnits: If the target unit has a different base unit.
        """
        if isinstance(unit, str):
            unit = UnitRegistry.lookup(unit)
        return UnitConverter.convert(self, unit)

    def same_dimension(self, other: Measurement) -> tuple[Measurement, Measurement]:
        """Convert both operands to base form and check they match.

        Args:
            other: The other operand.

        Returns:
            tuple[Measurement, Measurement]: ``self`` and ``other`` in base form.

        Raises:
            IncompatibleUnits: If the dimensions or base units differ.
        """
        self._check_operand(other)
        if self.unit.dimension is not other.unit.dimension:
            detail = f"{self.unit.dimension.value} vs {other.unit.dimension.value}"
            raise IncompatibleUnits(self.unit.name, other.unit.name, detail)

        left = UnitConverter.to_base_unit(self)
        right = UnitConverter.to_base_unit(other)
        if left.unit.name != right.unit.name:
            detail = f"base units {left.unit.name!r} vs {right.unit.name!r}"
            raise IncompatibleUnits(self.unit.name, other.unit.name, detail)
        return left, right

    def _shares_dimension(self, other: Measurement) -> bool:
        return self.unit.dimension is other.unit.dimension

    def _compose(self, other: Measurement, operator: str) -> CompoundUnit:
        if isinstance(self.unit, CompoundUnit):
            units = [*self.unit.units, other.unit]
            operators = [*self.unit.operators, operator]
        else:
            units = [self.unit, other.unit]
            operators = [operator]
        return CompoundUnit(units, operators)

    @staticmethod
    def _check_operand(other: object) -> None:
        if not isinstance(other, Measurement):
            msg = f"Expected a Measurement operand, got {type(other).__name__}"
            raise TypeError(msg)

    # -------------------------------- Arithmetic Operations --------------------------------
    def add(self, other: Measurement) -> Measurement:
        """Add two measurements that share a base unit.

        Returns:
            Measurement: Sum expressed in the left operand's base unit.

        Raises:
            IncompatibleUnits: If the base units differ.
        """
        left, right = self.same_dimension(other)
        return Measurement(left.magnitude + right.magnitude, left.unit)

    def subtract(self, other: Measurement) -> Measurement:
        """Subtract a measurement that shares this one's base unit.

        Returns:
            Measurement: Difference expressed in the left operand's base unit.

        Raises:
            IncompatibleUnits: If the base units differ.
        """
        left, right = self.same_dimension(other)
        return Measurement(left.magnitude - right.magnitude, left.unit)

    def multiply(self, other: Measurement) -> Measurement:
        """Multiply two measurements.

        Same-dimension operands collapse onto their common base unit;
        otherwise a compound unit ``<left> * <right>`` is synthesized.

        Returns:
            Measurement: The product.

        Raises:
            IncompatibleUnits: If both operands are compound with different
                base structures.
        """
        self._check_operand(other)
        if self._shares_dimension(other):
            left, right = self.same_dimension(other)
            return Measurement(left.magnitude * right.magnitude, left.unit)
        return Measurement(self.magnitude * other.magnitude, self._compose(other, MUL_OPERATOR))

    def divide(self, other: Measurement) -> Measurement:
        """Divide by another measurement.

        Same-dimension operands collapse onto their common base unit;
        otherwise a compound unit ``<left> / <right>`` is synthesized.

        Returns:
            Measurement: The quotient.

        Raises:
            DivisionByZero: If ``other`` has a zero magnitude.
            IncompatibleUnits: If both operands are compound with different
                base structures.
        """
        self._check_operand(other)
        if other.magnitude == 0:
            msg = f"Cannot divide {self} by a zero measurement ({other})"
            raise DivisionByZero(msg)
        if self._shares_dimension(other):
            left, right = self.same_dimension(other)
            if right.magnitude == 0:
                msg = f"Cannot divide {self} by {other}: zero in base units"
                raise DivisionByZero(msg)
            return Measurement(left.magnitude / right.magnitude, left.unit)
        return Measurement(self.magnitude / other.magnitude, self._compose(other, DIV_OPERATOR))

    def scale(self, k: Number) -> Measurement:
        """Multiply the magnitude by a plain number, keeping the unit."""
        return Measurement(self.magnitude * k, self.unit)

    def __add__(self, other: Measurement) -> Measurement:
        if not isinstance(other, Measurement):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: Measurement) -> Measurement:
        if not isinstance(other, Measurement):
            return NotImplemented
        return self.subtract(other)

    def __mul__(self, other: Measurement | Number) -> Measurement:
        if isinstance(other, Measurement):
            return self.multiply(other)
        if isinstance(other, Number) and not isinstance(other, bool):
            return self.scale(other)
        return NotImplemented

    def __rmul__(self, k: Number) -> Measurement:
        if isinstance(k, Number) and not isinstance(k, bool):
            return self.scale(k)
        return NotImplemented

    def __truediv__(self, other: Measurement | Number) -> Measurement:
        if isinstance(other, Measurement):
            return self.divide(other)
        if isinstance(other, Number) and not isinstance(other, bool):
            if other == 0:
                msg = f"Cannot divide {self} by zero"
                raise DivisionByZero(msg)
            return Measurement(self.magnitude / other, self.unit)
        return NotImplemented

    def __neg__(self) -> Measurement:
        return Measurement(-self.magnitude, self.unit)

    # ------------------------------------- Comparison -------------------------------------
    def __lt__(self, other: Measurement) -> bool:
        if not isinstance(other, Measurement):
            return NotImplemented
        left, right = self.same_dimension(other)
        return left.magnitude < right.magnitude

    def __le__(self, other: Measurement) -> bool:
        if not isinstance(other, Measurement):
            return NotImplemented
        left, right = self.same_dimension(other)
        return left.magnitude <= right.magnitude

    def __gt__(self, other: Measurement) -> bool:
        if not isinstance(other, Measurement):
            return NotImplemented
        left, right = self.same_dimension(other)
        return left.magnitude > right.magnitude

    def __ge__(self, other: Measurement) -> bool:
        if not isinstance(other, Measurement):
            return NotImplemented
        left, right = self.same_dimension(other)
        return left.magnitude >= right.magnitude

    def __eq__(self, other: object) -> bool:
        """Compare base magnitudes.

        Raises:
            IncompatibleUnits: If both operands are measurements with
                different base units.
        """
        if not isinstance(other, Measurement):
            return NotImplemented
        left, right = self.same_dimension(other)
        return left.magnitude == right.magnitude

    def __ne__(self, other: object) -> bool:
        if not isinstance(other, Measurement):
            return NotImplemented
        return not self == other

    def __hash__(self) -> int:
        base = UnitConverter.to_base_unit(self)
        return hash((base.magnitude, base.unit.name))

    # --------------------------------------- Display ---------------------------------------
    def __str__(self) -> str:
        """Return the wire format ``"<magnitude> <unit name>"``."""
        return f"{self.magnitude} {self.unit.name}"

    def __repr__(self) -> str:
        return f"Measurement({self.magnitude!r}, {self.unit.name!r})"
