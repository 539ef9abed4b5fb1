"""Operator-precedence evaluation of measurement expressions.

This module evaluates flat infix expressions such as
``10 g * 5 g + 2 g`` with standard precedence: multiplication and division
bind tighter than addition and subtraction, and operators of equal
precedence reduce left to right. Parentheses are not supported.

Algorithm:
    A single left-to-right pass over two stacks (Shunting-Yard style):

        1. Push the first operand.
        2. For each (operator, operand) pair, pop and reduce while the
           operator on top of the stack has precedence >= the incoming one,
           then push the incoming operator and operand.
        3. Drain the operator stack the same way.
        4. The single remaining operand is the result.

    Reducing pops one operator and the top two operands and pushes the
    result of Measurement arithmetic. Any arithmetic failure aborts the
    whole expression; no partial result is returned.

Classes:
    ExpressionEvaluator: Stateless two-stack evaluator.

Functions:
    evaluate: Module-level shortcut for ``ExpressionEvaluator().evaluate``.

Example:
    >>> from unitify.measurement import Measurement
    >>> grams = [Measurement(10, "g"), Measurement(5, "g"), Measurement(2, "g")]
    >>> evaluate(grams, ["*", "+"])
    Measurement(52.0, 'g')
"""

from __future__ import annotations

from collections.abc import Sequence

from ..errors import MalformedExpression
from ..measurement import Measurement
from .operator import Operator


class ExpressionEvaluator:
    """Evaluates measurement expressions with operator precedence."""

    def evaluate(
        self,
        measurements: Sequence[Measurement],
        operators: Sequence[str | Operator],
    ) -> Measurement:
        """Evaluate ``m0 op0 m1 op1 m2 ...``.

        Args:
            measurements: N operands in expression order.
            operators: N-1 operators placed between consecutive operands.

        Returns:
            Measurement: The value of the expression. A single operand with
            no operators is returned unchanged.

        Raises:
            MalformedExpression: If there are no operands, an operator is
                invalid, or operands and operators do not balance.
            UnitifyError: Any arithmetic failure of the operands
                (IncompatibleUnits, DivisionByZero, ...).
        """
        if not measurements:
            msg = "Invalid expression: no operands"
            raise MalformedExpression(msg)

        operand_stack: list[Measurement] = [measurements[0]]
        operator_stack: list[Operator] = []

        for position, symbol in enumerate(operators, start=1):
            current = Operator.parse(symbol)
            while operator_stack and operator_stack[-1].precedence >= current.precedence:
                self._reduce(operand_stack, operator_stack.pop())
            operator_stack.append(current)
            if position < len(measurements):
                operand_stack.append(measurements[position])

        while operator_stack:
            self._reduce(operand_stack, operator_stack.pop())

        extra = len(measurements) - len(operators) - 1
        if extra > 0 or len(operand_stack) != 1:
            msg = f"Invalid expression: {len(measurements)} operands for {len(operators)} operators"
            raise MalformedExpression(msg)
        return operand_stack[0]

    def evaluate_tokens(self, tokens: Sequence[Measurement | str | Operator]) -> Measurement:
        """Evaluate an interleaved ``[m0, op0, m1, op1, m2, ...]`` sequence.

        Raises:
            MalformedExpression: If tokens do not alternate operand, operator.
        """
        measurements: list[Measurement] = []
        operators: list[str | Operator] = []
        for position, token in enumerate(tokens):
            if position % 2 == 0:
                if not isinstance(token, Measurement):
                    msg = f"Invalid expression: expected a measurement at position {position}, got {token!r}"
                    raise MalformedExpression(msg)
                measurements.append(token)
            else:
                if isinstance(token, Measurement):
                    msg = f"Invalid expression: expected an operator at position {position}, got {token}"
                    raise MalformedExpression(msg)
                operators.append(token)
        return self.evaluate(measurements, operators)

    @staticmethod
    def _reduce(operand_stack: list[Measurement], operator: Operator) -> None:
        if len(operand_stack) < 2:
            msg = f"Invalid expression: not enough operands for operator {operator}"
            raise MalformedExpression(msg)
        right = operand_stack.pop()
        left = operand_stack.pop()
        operand_stack.append(operator.apply(left, right))


def evaluate(
    measurements: Sequence[Measurement],
    operators: Sequence[str | Operator],
) -> Measurement:
    """Evaluate an expression with a fresh ExpressionEvaluator."""
    return ExpressionEvaluator().evaluate(measurements, operators)
