"""
stackcalc: compact arithmetic expression engine.

Reads single-line expressions written with digits and either mnemonic
letters (a-f) or the usual symbols, and reduces them left to right with
a two-stack evaluator.
"""

from typing import Optional

from .config import (
    BUILTIN_DIALECTS,
    MNEMONIC,
    STANDARD,
    SYMBOLIC,
    ConfigError,
    Dialect,
    EngineConfig,
    load_config,
)
from .engine import CalculationEngine, CalculationResult
from .errors import (
    ErrorKind,
    EvaluationError,
    ExpressionError,
    InvalidOperatorError,
    MalformedExpressionError,
    OperatorWithoutOperandsError,
    TokenizationError,
    TooManyOperandsError,
    UnexpectedCharacterError,
    UnexpectedRightParenthesisError,
    UnmatchedLeftParenthesisError,
)
from .logic import ExpressionParser, StackEvaluator, StackExpressionParser, Tokenizer, evaluate, tokenize
from .tokens import Expression, LeftParen, Number, Operator, RightParen, Token


def calculate(text: str, dialect: Optional[Dialect] = None) -> float:
    """Tokenize and evaluate text in one call."""
    return evaluate(tokenize(text, dialect))


__version__ = "1.0.0"
__all__ = [
    # Tokens
    "Token",
    "Number",
    "Operator",
    "LeftParen",
    "RightParen",
    "Expression",
    # Operations
    "tokenize",
    "evaluate",
    "calculate",
    "Tokenizer",
    "StackEvaluator",
    "ExpressionParser",
    "StackExpressionParser",
    # Engine
    "CalculationEngine",
    "CalculationResult",
    # Config
    "Dialect",
    "EngineConfig",
    "ConfigError",
    "load_config",
    "BUILTIN_DIALECTS",
    "MNEMONIC",
    "SYMBOLIC",
    "STANDARD",
    # Errors
    "ErrorKind",
    "ExpressionError",
    "TokenizationError",
    "EvaluationError",
    "UnexpectedCharacterError",
    "OperatorWithoutOperandsError",
    "UnexpectedRightParenthesisError",
    "UnmatchedLeftParenthesisError",
    "TooManyOperandsError",
    "InvalidOperatorError",
    "MalformedExpressionError",
]
