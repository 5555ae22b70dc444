"""
Expression Parser interface.

Separates reading text (parse) from reducing tokens (evaluate) so that
tokenizer dialects can be swapped without touching the evaluator.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Iterable, Optional, Tuple

from ..config import Dialect
from ..errors import ExpressionError
from ..tokens import Expression, Token
from .evaluator import StackEvaluator
from .tokenizer import Tokenizer


class ExpressionParser(ABC):
    """Capability interface: parse text, evaluate tokens."""

    @abstractmethod
    def parse(self, text: str) -> Expression:
        """Tokenize text into an Expression."""

    @abstractmethod
    def evaluate(self, expression: Iterable[Token]) -> float:
        """Reduce an Expression to a single value."""

    def calculate(self, text: str) -> float:
        """Parse text and evaluate the resulting Expression."""
        return self.evaluate(self.parse(text))

    def validate(self, text: str) -> Tuple[bool, Optional[str]]:
        """
        Check whether text parses and evaluates.

        Returns:
            Tuple of (is_valid, error_message).
        """
        try:
            self.calculate(text)
            return True, None
        except ExpressionError as e:
            return False, str(e)


class StackExpressionParser(ExpressionParser):
    """
    Parser backed by a dialect Tokenizer and a StackEvaluator.

    Example:
        >>> StackExpressionParser().calculate("3a2c4")
        20.0
    """

    def __init__(
        self,
        dialect: Optional[Dialect] = None,
        evaluator: Optional[StackEvaluator] = None,
    ):
        self.tokenizer = Tokenizer(dialect)
        self.evaluator = evaluator or StackEvaluator()

    @property
    def dialect(self) -> Dialect:
        return self.tokenizer.dialect

    def with_dialect(self, dialect: Dialect) -> "StackExpressionParser":
        """Return a parser for another dialect sharing this evaluator."""
        return StackExpressionParser(dialect=dialect, evaluator=self.evaluator)

    def parse(self, text: str) -> Expression:
        return self.tokenizer.tokenize(text)

    def evaluate(self, expression: Iterable[Token]) -> float:
        return self.evaluator.evaluate(expression)
