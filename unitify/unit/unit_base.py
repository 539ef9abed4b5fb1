"""Base unit model shared by simple and compound units.

This module provides the ``Dimension`` tag and the abstract ``Unit`` class
that every unit in Unitify derives from. A unit knows its display name, its
physical dimension, and how to move a magnitude to and from the canonical
base unit of that dimension.

There are exactly two concrete kinds of unit:

- SimpleUnit (``unit_simple``): a single-dimension unit such as ``kg`` that
  belongs to a family rooted at the dimension's base unit (``g``).
- CompoundUnit (``unit_compound``): an ordered composition of units joined
  by ``*`` and ``/`` such as ``km / hr``.

Callers that need kind-specific behaviour branch on ``Unit.is_compound`` or
``isinstance`` rather than downcasting.

Key Concepts:
- Dimension: Mass, Length, Time, Volume, or Compound
- Base Unit: The reference unit of a dimension (g, m, s, L), factor 1.0
- Base Form: A magnitude expressed against its base unit(s)
- Compatibility: Two units are compatible when their base units share a name

Classes:
    Dimension: Enumerated physical kind of a unit.
    Unit: Abstract base class for all unit kinds.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum


class Dimension(Enum):
    """Physical kind of a unit.

    ``COMPOUND`` is used for every compound unit regardless of its
    components; structural compatibility between compound units is decided
    by comparing their base units instead.
    """

    MASS = "Mass"
    LENGTH = "Length"
    TIME = "Time"
    VOLUME = "Volume"
    COMPOUND = "Compound"


class Unit(ABC):
    """Abstract base class for all units.

    Units are immutable values. Subclasses must provide a name, a dimension,
    conversions to and from base form, and their base unit.
    """

    __slots__ = ()

    @property
    @abstractmethod
    def name(self) -> str:
        """Display name of the unit (e.g. ``"kg"`` or ``"m / s"``)."""

    @property
    @abstractmethod
    def dimension(self) -> Dimension:
        """Physical dimension of the unit."""

    @property
    @abstractmethod
    def is_compound(self) -> bool:
        """True for compound units, False for simple units."""

    @abstractmethod
    def to_base(self, value: float) -> float:
        """Convert a magnitude in this unit to its base form.

        Args:
            value: Magnitude expressed in this unit.

        Returns:
            float: Magnitude expressed in the base unit(s).
        """

    @abstractmethod
    def from_base(self, value: float) -> float:
        """Convert a magnitude in base form back into this unit.

        Args:
            value: Magnitude expressed in the base unit(s).

        Returns:
            float: Magnitude expressed in this unit.
        """

    @abstractmethod
    def base_unit(self) -> Unit:
        """Return the canonical base unit this unit converts into."""

    def is_compatible(self, other: Unit) -> bool:
        """Check whether a magnitude in ``other`` can be combined with this unit.

        Two units are compatible when their base units render to the same
        name, which for compound units also requires the same component
        order and the same operators.

        Args:
            other: Unit to compare with.

        Returns:
            bool: True if both units share a base unit.
        """
        if self.dimension is not other.dimension:
            return False
        return self.base_unit().name == other.base_unit().name

    def __str__(self) -> str:
        return self.name
