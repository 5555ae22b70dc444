"""
Stack Evaluator.

Reduces a token sequence to a single float using an operand stack, an
operator stack and a pending-operator flag. There is no operator
precedence: without parentheses, "3a2c4" is (3 + 2) * 4.
"""

from __future__ import annotations

import logging
import math
from typing import Callable, Dict, Iterable, List

from ..errors import (
    InvalidOperatorError,
    MalformedExpressionError,
    OperatorWithoutOperandsError,
    TooManyOperandsError,
    UnexpectedRightParenthesisError,
    UnmatchedLeftParenthesisError,
)
from ..tokens import LEFT_PAREN, LeftParen, Number, Operator, RightParen, Token

logger = logging.getLogger(__name__)


def _divide(left: float, right: float) -> float:
    # IEEE-754 semantics instead of ZeroDivisionError
    if right == 0:
        if left == 0 or math.isnan(left):
            return math.nan
        return math.copysign(math.inf, left) * math.copysign(1.0, right)
    return left / right


OPERATIONS: Dict[str, Callable[[float, float], float]] = {
    "+": lambda a, b: a + b,
    "-": lambda a, b: a - b,
    "*": lambda a, b: a * b,
    "/": _divide,
}


class StackEvaluator:
    """
    Two-stack evaluator.

    Reduction happens at three points:
    - eager: an operator arrives while the previous one is still pending,
      so the previous one is applied to the top two operands first
    - right parenthesis: reduce down to the matching open sentinel
    - closing: after the scan, drain whatever operators remain, last
      pushed first
    """

    def __init__(self, trace: bool = False):
        self.trace = trace

    def evaluate(self, tokens: Iterable[Token]) -> float:
        """
        Evaluate a token sequence.

        Args:
            tokens: An Expression or any iterable of tokens. It is not
                modified.

        Returns:
            The numeric result.

        Raises:
            EvaluationError: If the sequence cannot be reduced to one value.
        """
        operands: List[float] = []
        operators: List[str] = []
        pending = False

        for token in tokens:
            if self.trace:
                logger.debug(
                    "token=%s operands=%s operators=%s pending=%s",
                    token, operands, operators, pending,
                )

            if isinstance(token, Number):
                operands.append(token.value)

            elif isinstance(token, Operator):
                if not operands:
                    raise OperatorWithoutOperandsError(token.symbol)
                if pending:
                    self._reduce(operands, operators)
                operators.append(token.symbol)
                pending = True

            elif isinstance(token, LeftParen):
                operators.append(LEFT_PAREN)
                pending = False

            elif isinstance(token, RightParen):
                if not operators:
                    raise UnexpectedRightParenthesisError()
                while operators[-1] != LEFT_PAREN:
                    self._reduce(operands, operators)
                    if not operators:
                        raise UnexpectedRightParenthesisError()
                operators.pop()
                pending = False

            else:
                raise MalformedExpressionError(f"unknown token {token!r}")

        return self._finish(operands, operators)

    def _finish(self, operands: List[float], operators: List[str]) -> float:
        """Closing reduction."""
        while operators:
            if operators[-1] == LEFT_PAREN:
                raise UnmatchedLeftParenthesisError()
            self._reduce(operands, operators)

        if not operands:
            raise MalformedExpressionError("no value to return")
        if len(operands) > 1:
            raise TooManyOperandsError(len(operands))

        result = operands[0]
        if self.trace:
            logger.debug("result=%s", result)
        return result

    def _reduce(self, operands: List[float], operators: List[str]) -> None:
        """Apply the top operator to the top two operands, in place."""
        symbol = operators.pop()
        if len(operands) < 2:
            raise MalformedExpressionError(
                f"operator {symbol} needs two operands, found {len(operands)}"
            )
        right = operands.pop()
        left = operands.pop()
        operands.append(self.apply(symbol, left, right))

    @staticmethod
    def apply(symbol: str, left: float, right: float) -> float:
        operation = OPERATIONS.get(symbol)
        if operation is None:
            raise InvalidOperatorError(symbol)
        return operation(left, right)


def evaluate(tokens: Iterable[Token]) -> float:
    """Evaluate a token sequence with a default StackEvaluator."""
    return StackEvaluator().evaluate(tokens)
