"""
Error types for tokenization and evaluation.

Every failure carries an ErrorKind. Tokenization failures derive from
TokenizationError and evaluation failures from EvaluationError, so callers
can tell lexically invalid input from input that tokenized but cannot be
reduced.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional


class ErrorKind(Enum):
    """Kinds of expression failures."""
    UNEXPECTED_CHARACTER = "unexpected_character"
    OPERATOR_WITHOUT_OPERANDS = "operator_without_operands"
    UNEXPECTED_RIGHT_PARENTHESIS = "unexpected_right_parenthesis"
    UNMATCHED_LEFT_PARENTHESIS = "unmatched_left_parenthesis"
    TOO_MANY_OPERANDS = "too_many_operands"
    INVALID_OPERATOR = "invalid_operator"
    MALFORMED_EXPRESSION = "malformed_expression"


class ExpressionError(ValueError):
    """Base class for all expression failures."""

    kind: ErrorKind = ErrorKind.MALFORMED_EXPRESSION

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class TokenizationError(ExpressionError):
    """The input text is lexically invalid."""

    kind = ErrorKind.UNEXPECTED_CHARACTER


class UnexpectedCharacterError(TokenizationError):
    kind = ErrorKind.UNEXPECTED_CHARACTER

    def __init__(self, char: str):
        super().__init__(f"Unexpected character: {char!r}")
        self.char = char


class EvaluationError(ExpressionError):
    """The token sequence cannot be reduced to a single value."""


class OperatorWithoutOperandsError(EvaluationError):
    kind = ErrorKind.OPERATOR_WITHOUT_OPERANDS

    def __init__(self, operator: str):
        super().__init__(f"Operator {operator} without operands")
        self.operator = operator


class UnexpectedRightParenthesisError(EvaluationError):
    kind = ErrorKind.UNEXPECTED_RIGHT_PARENTHESIS

    def __init__(self):
        super().__init__("Unexpected right parenthesis")


class UnmatchedLeftParenthesisError(EvaluationError):
    kind = ErrorKind.UNMATCHED_LEFT_PARENTHESIS

    def __init__(self):
        super().__init__("Unmatched left parenthesis")


class TooManyOperandsError(EvaluationError):
    kind = ErrorKind.TOO_MANY_OPERANDS

    def __init__(self, count: int):
        super().__init__(f"Too many operands: {count} values left after evaluation")
        self.count = count


class InvalidOperatorError(EvaluationError):
    kind = ErrorKind.INVALID_OPERATOR

    def __init__(self, operator: str):
        super().__init__(f"Invalid operator: {operator}")
        self.operator = operator


class MalformedExpressionError(EvaluationError):
    kind = ErrorKind.MALFORMED_EXPRESSION

    def __init__(self, detail: Optional[str] = None):
        message = "Malformed expression"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)
