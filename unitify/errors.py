"""Exception taxonomy for unit algebra and expression evaluation.

Every failure raised by the core derives from :class:`UnitifyError`, so a
caller that only wants to skip a bad expression can catch that single type.
Each concrete error also derives from the closest built-in exception, which
keeps them usable with code that already expects ``ValueError``,
``TypeError`` or ``ZeroDivisionError``.

Classes:
    UnitifyError: Root of the hierarchy.
    UnknownUnit: A unit name is not in the registry.
    ParseError: A measurement or compound-unit string is malformed.
    MalformedCompoundUnit: Component/operator counts or operators are invalid.
    EmptyCompoundUnit: A compound unit was built without components.
    IncompatibleUnits: Operands do not share the same base unit.
    DivisionByZero: The right operand of a division has zero magnitude.
    MalformedExpression: The expression stacks underflow or do not balance.
    InvalidMagnitude: A magnitude is NaN or infinite.
"""

from __future__ import annotations

from typing import Any


class UnitifyError(Exception):
    """Base class for all errors raised by the measurement core."""


class UnknownUnit(UnitifyError, LookupError):
    """Raised when a unit name cannot be resolved by the registry.

    Attributes:
        name: The unrecognised unit name.
    """

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Unknown unit: {name!r}")


class ParseError(UnitifyError, ValueError):
    """Raised when text cannot be turned into a measurement or unit.

    Attributes:
        text: The offending input text.
    """

    def __init__(self, text: str, reason: str):
        self.text = text
        self.reason = reason
        super().__init__(f"Cannot parse {text!r}: {reason}")


class MalformedCompoundUnit(UnitifyError, ValueError):
    """Raised when a compound unit's operators do not fit its components."""


class EmptyCompoundUnit(UnitifyError, ValueError):
    """Raised when a compound unit is constructed with no components."""


class IncompatibleUnits(UnitifyError, TypeError):
    """Raised when two measurements cannot be combined or compared.

    Attributes:
        left: Unit name of the left operand.
        right: Unit name of the right operand.
    """

    def __init__(self, left: str, right: str, detail: str = ""):
        self.left = left
        self.right = right
        msg = f"Incompatible units: {left!r} and {right!r}"
        if detail:
            msg = f"{msg} ({detail})"
        super().__init__(msg)


class DivisionByZero(UnitifyError, ZeroDivisionError):
    """Raised when dividing by a measurement whose magnitude is zero."""


class MalformedExpression(UnitifyError, ValueError):
    """Raised when an expression cannot be reduced to a single measurement."""


class InvalidMagnitude(UnitifyError, ValueError):
    """Raised when a measurement is given a NaN or infinite magnitude.

    Attributes:
        magnitude: The rejected value.
    """

    def __init__(self, magnitude: Any):
        self.magnitude = magnitude
        super().__init__(f"Magnitude must be a finite number, got {magnitude!r}")


__all__ = [
    "UnitifyError",
    "UnknownUnit",
    "ParseError",
    "MalformedCompoundUnit",
    "EmptyCompoundUnit",
    "IncompatibleUnits",
    "DivisionByZero",
    "MalformedExpression",
    "InvalidMagnitude",
]
