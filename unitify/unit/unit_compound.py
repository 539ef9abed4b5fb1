"""Compound units built from other units joined by ``*`` and ``/``.

A compound unit such as ``km / hr`` is an ordered tuple of component units
and a tuple of operators, one fewer than the components. Conversions fold
left to right through the components, multiplying for ``*`` and dividing for
``/``, exactly as the name reads.

Components may themselves be compound and are converted as a whole. A
leading compound component reads left to right without parentheses; any
later one is parenthesized, so ``m / s`` divided by ``g / L`` reads
``m / s / (g / L)``.

Classes:
    CompoundUnit: Immutable composition of units and operators.

Example:
    >>> from unitify.unit.unit_length import Kilometer
    >>> from unitify.unit.unit_time import Hour
    >>> speed = CompoundUnit([Kilometer(), Hour()], ["/"])
    >>> speed.name  # "km / hr"
    >>> speed.to_base(72.0)  # 20.0 (m / s)
    >>> speed.base_unit().name  # "m / s"
"""

from __future__ import annotations

from collections.abc import Iterable
from enum import Enum
from typing import Any

from ..config import COMPOUND_OPERATORS, MUL_OPERATOR
from ..errors import EmptyCompoundUnit, MalformedCompoundUnit
from .unit_base import Dimension, Unit


def _as_symbol(operator: Any) -> str:
    if isinstance(operator, Enum):
        return operator.value
    return operator


class CompoundUnit(Unit):
    """Ordered composition of units joined by ``*`` or ``/``.

    Invariant: ``len(operators) == len(units) - 1`` and ``len(units) >= 1``.
    The display name is computed once at construction.

    Attributes:
        units (tuple[Unit, ...]): Component units in order.
        operators (tuple[str, ...]): Operators between consecutive components.
    """

    __slots__ = ("_units", "_operators", "_name")

    def __init__(self, units: Iterable[Unit], operators: Iterable[str] = ()):
        """Create a compound unit.

        Args:
            units: Component units, at least one.
            operators: ``"*"`` or ``"/"`` symbols, one fewer than ``units``.

        Raises:
            EmptyCompoundUnit: If ``units`` is empty.
            MalformedCompoundUnit: If the operator count does not match, or an
                operator is not ``*`` or ``/``.
            TypeError: If a component is not a Unit.
        """
        units = tuple(units)
        operators = tuple(_as_symbol(op) for op in operators)

        if not units:
            msg = "A compound unit needs at least one component unit"
            raise EmptyCompoundUnit(msg)
        if len(operators) != len(units) - 1:
            msg = (
                f"A compound unit with {len(units)} component(s) needs "
                f"{len(units) - 1} operator(s), got {len(operators)}"
            )
            raise MalformedCompoundUnit(msg)
        for op in operators:
            if op not in COMPOUND_OPERATORS:
                msg = f"Invalid compound-unit operator {op!r}; expected '*' or '/'"
                raise MalformedCompoundUnit(msg)
        for unit in units:
            if not isinstance(unit, Unit):
                msg = f"Compound-unit components must be Unit instances, got {type(unit).__name__}"
                raise TypeError(msg)

        object.__setattr__(self, "_units", units)
        object.__setattr__(self, "_operators", operators)
        object.__setattr__(self, "_name", self._build_name())

    def __setattr__(self, key: str, value: Any) -> None:
        msg = f"{type(self).__name__} is immutable"
        raise AttributeError(msg)

    def _build_name(self) -> str:
        parts = [self._units[0].name]
        for op, unit in zip(self._operators, self._units[1:]):
            parts.append(op)
            parts.append(self._component_name(unit))
        return " ".join(parts)

    @staticmethod
    def _component_name(unit: Unit) -> str:
        if isinstance(unit, CompoundUnit) and len(unit.units) > 1:
            return f"({unit.name})"
        return unit.name

    @property
    def units(self) -> tuple[Unit, ...]:
        return self._units

    @property
    def operators(self) -> tuple[str, ...]:
        return self._operators

    @property
    def name(self) -> str:
        return self._name

    @property
    def dimension(self) -> Dimension:
        return Dimension.COMPOUND

    @property
    def is_compound(self) -> bool:
        return True

    def to_base(self, value: float) -> float:
        """Convert a magnitude in this unit to base form.

        The first component converts ``value`` itself; every following
        component contributes its one-unit factor, multiplied in for ``*``
        and divided out for ``/``.

        Args:
            value: Magnitude expressed in this compound unit.

        Returns:
            float: Magnitude expressed in the compound of base units.
        """
        result = self._units[0].to_base(value)
        for op, unit in zip(self._operators, self._units[1:]):
            factor = unit.to_base(1.0)
            result = result * factor if op == MUL_OPERATOR else result / factor
        return result

    def from_base(self, value: float) -> float:
        """Convert a magnitude in base form back into this compound unit."""
        result = self._units[0].from_base(value)
        for op, unit in zip(self._operators, self._units[1:]):
            factor = unit.from_base(1.0)
            result = result * factor if op == MUL_OPERATOR else result / factor
        return result

    def base_unit(self) -> CompoundUnit:
        """Return the compound of each component's base unit, same operators."""
        return CompoundUnit((unit.base_unit() for unit in self._units), self._operators)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CompoundUnit):
            return NotImplemented
        return self._units == other._units and self._operators == other._operators

    def __hash__(self) -> int:
        return hash((self._units, self._operators))

    def __repr__(self) -> str:
        return f"CompoundUnit({self._name!r})"
