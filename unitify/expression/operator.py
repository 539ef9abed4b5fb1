"""Binary operators understood by the expression evaluator."""

from __future__ import annotations

from enum import Enum, IntEnum
from typing import TYPE_CHECKING

from ..errors import MalformedExpression

if TYPE_CHECKING:
    from ..measurement import Measurement


class Precedence(IntEnum):
    """Binding strength of an operator; higher binds tighter."""

    ADD_SUB = 1
    MUL_DIV = 2


class Operator(str, Enum):
    """Arithmetic operator between two measurements.

    Members compare equal to their symbol, so ``Operator.MUL == "*"``.
    """

    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"

    @property
    def precedence(self) -> Precedence:
        if self in (Operator.MUL, Operator.DIV):
            return Precedence.MUL_DIV
        return Precedence.ADD_SUB

    @classmethod
    def parse(cls, symbol: str | Operator) -> Operator:
        """Return the operator for a symbol.

        Raises:
            MalformedExpression: If the symbol is not ``+ - * /``.
        """
        try:
            return cls(symbol)
        except ValueError:
            msg = f"Invalid operator: {symbol!r}"
            raise MalformedExpression(msg) from None

    def apply(self, left: Measurement, right: Measurement) -> Measurement:
        """Combine two measurements with this operator."""
        if self is Operator.ADD:
            return left.add(right)
        if self is Operator.SUB:
            return left.subtract(right)
        if self is Operator.MUL:
            return left.multiply(right)
        return left.divide(right)

    def __str__(self) -> str:
        return self.value
