"""
Calculation Engine.

Combines configuration, tokenization and evaluation into one entry point
that reports failures as result objects instead of exceptions.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple, Union

from .config import Dialect, EngineConfig, load_config
from .errors import ErrorKind, ExpressionError, TokenizationError
from .logic.evaluator import StackEvaluator
from .logic.parser import StackExpressionParser
from .tokens import Expression

logger = logging.getLogger(__name__)


@dataclass
class CalculationResult:
    """Outcome of one calculation."""

    valid: bool
    text: str
    value: Optional[float] = None
    expression: Optional[Expression] = None
    error: Optional[str] = None
    error_kind: Optional[ErrorKind] = None

    @property
    def stage(self) -> Optional[str]:
        """Which stage failed: "tokenize", "evaluate", or None on success."""
        if self.valid:
            return None
        return "tokenize" if self.expression is None else "evaluate"

    def summary(self) -> str:
        if self.valid:
            return f"{self.text} = {self.value:g}"
        return f"{self.text}: {self.error}"

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON output."""
        return {
            "valid": self.valid,
            "text": self.text,
            "value": self.value,
            "tokens": [str(t) for t in self.expression] if self.expression is not None else None,
            "error": self.error,
            "error_kind": self.error_kind.value if self.error_kind else None,
            "stage": self.stage,
        }


class CalculationEngine:
    """
    Config-driven calculator.

    Usage:
        engine = CalculationEngine()
        result = engine.calculate("3ae4c66fb32")
        result.value  # 235.0
    """

    def __init__(self, config: Optional[EngineConfig] = None):
        self.config = config or EngineConfig()
        self.evaluator = StackEvaluator(trace=self.config.trace)
        self.parser = StackExpressionParser(
            dialect=self.config.resolve_dialect(),
            evaluator=self.evaluator,
        )

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> "CalculationEngine":
        return cls(load_config(path))

    def parser_for(self, dialect: Optional[str] = None) -> StackExpressionParser:
        if dialect is None:
            return self.parser
        return self.parser.with_dialect(self.config.resolve_dialect(dialect))

    @property
    def dialects(self) -> Dict[str, Dialect]:
        return self.config.available_dialects()

    def calculate(self, text: str, dialect: Optional[str] = None) -> CalculationResult:
        """
        Parse and evaluate text.

        Args:
            text: Expression text.
            dialect: Optional dialect name overriding the configured one.

        Returns:
            CalculationResult. Expression failures are captured in the
            result; anything else propagates.
        """
        parser = self.parser_for(dialect)
        expression: Optional[Expression] = None
        try:
            expression = parser.parse(text)
            value = parser.evaluate(expression)
        except ExpressionError as e:
            stage = "tokenize" if isinstance(e, TokenizationError) else "evaluate"
            logger.debug("%s failed for %r: %s", stage, text, e)
            return CalculationResult(
                valid=False,
                text=text,
                expression=expression,
                error=str(e),
                error_kind=e.kind,
            )

        return CalculationResult(valid=True, text=text, value=value, expression=expression)

    def calculate_many(
        self,
        texts: List[str],
        dialect: Optional[str] = None,
    ) -> List[CalculationResult]:
        return [self.calculate(t, dialect=dialect) for t in texts]

    def validate(self, text: str, dialect: Optional[str] = None) -> Tuple[bool, Optional[str]]:
        """
        Validate text without raising.

        Returns:
            Tuple of (is_valid, error_message).
        """
        return self.parser_for(dialect).validate(text)
