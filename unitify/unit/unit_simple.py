"""Single-dimension units organised into unit families.

This module provides the SimpleUnit class, which serves as the foundation for
every non-compound unit in Unitify (grams, kilometers, minutes, ...). Each
unit is a class; the value used throughout the package is an instance of
that class. Instances carry no state, so two instances of the same class are
interchangeable and compare equal.

Units are grouped into "unit families" where each family represents one
physical dimension. The family root is the dimension's base unit, and every
other unit in the family converts into it with a constant factor.

Key Concepts:
- ROOT Class: Each unit family has a root class that defines the family
- IS_FAMILY_ROOT: Boolean flag marking the base unit of each family
- Automatic Assignment: ROOT classes are determined automatically via MRO
- SCALE_TO_BASE: Factor turning one unit into the family's base unit

Classes:
    SimpleUnit: Base class for all single-dimension units.

Example:
    >>> class Meter(SimpleUnit):
    ...     IS_FAMILY_ROOT = True
    ...     DIMENSION = Dimension.LENGTH
    ...     SCALE_TO_BASE = 1.0
    ...     SYMBOL = "m"
    ...
    >>> class Kilometer(Meter):
    ...     SCALE_TO_BASE = 1000.0
    ...     SYMBOL = "km"
    ...
    >>> Kilometer().to_base(5.2)  # 5200.0 (meters)
    >>> Kilometer().base_unit()  # Meter(m = 1 m)
"""

from __future__ import annotations

from typing import ClassVar

from .unit_base import Dimension, Unit


class SimpleUnit(Unit):
    """Base class for single-dimension units with a constant base factor.

    Attributes:
        ROOT (ClassVar[type[SimpleUnit]]): Root class defining the unit family.
        DIMENSION (ClassVar[Dimension]): Physical dimension of the family.
        SCALE_TO_BASE (ClassVar[float]): Conversion factor to the base unit.
        SYMBOL (ClassVar[str]): Canonical unit symbol used as the unit name.
        ALIASES (ClassVar[tuple[str, ...]]): Extra names the registry accepts.
        IS_FAMILY_ROOT (ClassVar[bool]): Indicates if this class is a root unit.
    """

    __slots__ = ()

    ROOT: ClassVar[type[SimpleUnit]]
    DIMENSION: ClassVar[Dimension]
    SCALE_TO_BASE: ClassVar[float] = 1.0
    SYMBOL: ClassVar[str] = ""
    ALIASES: ClassVar[tuple[str, ...]] = ()
    IS_FAMILY_ROOT: ClassVar[bool] = False

    def __init_subclass__(cls, **kwargs):
        """Automatically set ROOT class for subclasses.

        The ROOT class is the first ancestor with IS_FAMILY_ROOT=True, or the
        class itself if none is found. The base factor is validated here so
        a bad unit definition fails at import time.

        Args:
            **kwargs: Additional keyword arguments passed to super().__init_subclass__.

        Raises:
            ValueError: If SCALE_TO_BASE is not strictly positive.
        """
        super().__init_subclass__(**kwargs)
        if not cls.SCALE_TO_BASE > 0:
            msg = f"{cls.__name__}.SCALE_TO_BASE must be > 0, got {cls.SCALE_TO_BASE!r}"
            raise ValueError(msg)

        if "ROOT" in cls.__dict__ and cls.ROOT is not None:
            return

        if cls.__dict__.get("IS_FAMILY_ROOT", False):
            cls.ROOT = cls
            return

        for base in cls.mro()[1:]:
            if base.__dict__.get("IS_FAMILY_ROOT", False):
                cls.ROOT = base
                return

        cls.ROOT = cls

    def __new__(cls):
        if not cls.SYMBOL or not hasattr(cls, "DIMENSION"):
            msg = f"{cls.__name__} is not a concrete unit"
            raise TypeError(msg)
        return super().__new__(cls)

    @property
    def name(self) -> str:
        return type(self).SYMBOL

    @property
    def dimension(self) -> Dimension:
        return type(self).DIMENSION

    @property
    def is_compound(self) -> bool:
        return False

    @property
    def base_factor(self) -> float:
        """Factor converting one of this unit into the family's base unit."""
        return type(self).SCALE_TO_BASE

    def to_base(self, value: float) -> float:
        return value * self.base_factor

    def from_base(self, value: float) -> float:
        return value / self.base_factor

    def base_unit(self) -> SimpleUnit:
        """Return the family root unit (e.g. ``Gram()`` for ``Kilogram()``)."""
        return type(self).ROOT()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SimpleUnit):
            return NotImplemented
        return type(self) is type(other)

    def __hash__(self) -> int:
        return hash(type(self))

    def __repr__(self) -> str:
        """Return the class name with the unit's base factor.

        Returns:
            str: e.g. ``"Kilogram(kg = 1000 g)"``.
        """
        root = type(self).ROOT
        return f"{type(self).__name__}({self.name} = {self.base_factor:g} {root.SYMBOL})"
