"""
Logic engine for stackcalc.

Provides tokenization and stack-based evaluation of compact expressions.
"""

from .tokenizer import Tokenizer, tokenize
from .evaluator import StackEvaluator, evaluate
from .parser import ExpressionParser, StackExpressionParser

__all__ = [
    "Tokenizer",
    "tokenize",
    "StackEvaluator",
    "evaluate",
    "ExpressionParser",
    "StackExpressionParser",
]
