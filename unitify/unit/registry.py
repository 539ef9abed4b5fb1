"""Name-to-unit registry for text ingestion.

The registry maps every recognised unit symbol and long-form name (``"kg"``,
``"kilograms"``, ``"L"``, ``"liters"``, ...) to a unit prototype. The table is
built once when this module is imported and exposed read-only, so it can be
shared freely after import.

Resolution is exact-match and case-sensitive: ``"mL"`` and ``"ml"`` are both
listed, ``"ML"`` is not. Every alias resolves to the unit's canonical symbol,
so ``UnitRegistry.resolve("kilograms").name == "kg"``.

Compound names such as ``"km / hr"`` are parsed into a CompoundUnit by
alternating unit and operator tokens.

Classes:
    UnitRegistry: Lookup and compound-name parsing over the unit table.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from types import MappingProxyType

from ..config import COMPOUND_OPERATORS
from ..errors import ParseError, UnknownUnit
from .unit_base import Dimension, Unit
from .unit_compound import CompoundUnit
from .unit_length import Centimeter, Kilometer, Meter, Millimeter
from .unit_mass import Centigram, Gram, Kilogram, Milligram
from .unit_simple import SimpleUnit
from .unit_time import Hour, Minute, Second
from .unit_volume import Centiliter, Kiloliter, Liter, Milliliter

UNIT_TYPES: tuple[type[SimpleUnit], ...] = (
    Milligram,
    Centigram,
    Gram,
    Kilogram,
    Millimeter,
    Centimeter,
    Meter,
    Kilometer,
    Second,
    Minute,
    Hour,
    Milliliter,
    Centiliter,
    Liter,
    Kiloliter,
)

# Operators may be glued to unit names ("m/s") or spaced ("m / s").
_COMPOUND_TOKEN = re.compile(r"[*/]|[^\s*/]+")


def _build_table(unit_types: tuple[type[SimpleUnit], ...]) -> Mapping[str, SimpleUnit]:
    table: dict[str, SimpleUnit] = {}
    for unit_type in unit_types:
        unit = unit_type()
        for name in (unit_type.SYMBOL, *unit_type.ALIASES):
            if name in table:
                msg = f"Unit name {name!r} is registered twice"
                raise ValueError(msg)
            table[name] = unit
    return MappingProxyType(table)


_TABLE = _build_table(UNIT_TYPES)


class UnitRegistry:
    """Read-only lookup of unit names.

    All methods are class methods over the module-level table; the class is
    never instantiated.
    """

    @classmethod
    def resolve(cls, name: str) -> SimpleUnit:
        """Resolve a simple unit name or abbreviation.

        Args:
            name: Exact unit name, e.g. ``"km"`` or ``"kilometers"``.

        Returns:
            SimpleUnit: The registered unit prototype.

        Raises:
            UnknownUnit: If the name is not registered.
        """
        try:
            return _TABLE[name]
        except KeyError:
            raise UnknownUnit(name) from None

    @staticmethod
    def is_compound_name(name: str) -> bool:
        """Return True if the name contains a ``*`` or ``/`` operator."""
        return any(op in name for op in COMPOUND_OPERATORS)

    @classmethod
    def parse_compound(cls, name: str) -> CompoundUnit:
        """Parse a compound unit name such as ``"km / hr"``.

        Tokens must alternate unit, operator, unit, ... and start and end
        with a unit.

        Args:
            name: Compound unit name.

        Returns:
            CompoundUnit: Unit built from the resolved tokens.

        Raises:
            ParseError: If a unit token is unknown or operators are misplaced.
        """
        tokens = _COMPOUND_TOKEN.findall(name)
        if not tokens:
            raise ParseError(name, "empty unit name")

        units: list[Unit] = []
        operators: list[str] = []
        for position, token in enumerate(tokens):
            expects_unit = position % 2 == 0
            if expects_unit:
                if token in COMPOUND_OPERATORS:
                    raise ParseError(name, f"expected a unit at token {position + 1}, got {token!r}")
                try:
                    units.append(cls.resolve(token))
                except UnknownUnit as exc:
                    raise ParseError(name, str(exc)) from exc
            else:
                if token not in COMPOUND_OPERATORS:
                    raise ParseError(name, f"expected '*' or '/' at token {position + 1}, got {token!r}")
                operators.append(token)

        if len(operators) == len(units):
            raise ParseError(name, "unit name ends with an operator")
        return CompoundUnit(units, operators)

    @classmethod
    def lookup(cls, name: str) -> Unit:
        """Resolve either a simple or a compound unit name.

        Raises:
            UnknownUnit: For an unknown simple name.
            ParseError: For a malformed compound name.
        """
        name = name.strip()
        if cls.is_compound_name(name):
            return cls.parse_compound(name)
        return cls.resolve(name)

    @staticmethod
    def is_known(name: str) -> bool:
        return name in _TABLE

    @staticmethod
    def names() -> tuple[str, ...]:
        return tuple(_TABLE)

    @staticmethod
    def units_of(dimension: Dimension) -> tuple[SimpleUnit, ...]:
        """Return one prototype per unit of the given dimension, in table order."""
        return tuple(unit_type() for unit_type in UNIT_TYPES if unit_type.DIMENSION is dimension)
