"""
Token types for the expression engine.

An Expression is the ordered, immutable token sequence produced by the
tokenizer and consumed by the evaluator.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, Tuple, Union, overload


OPERATOR_SYMBOLS = ("+", "-", "*", "/")
LEFT_PAREN = "("
RIGHT_PAREN = ")"


@dataclass(frozen=True)
class Number:
    """A non-negative numeric literal."""
    value: float

    def __str__(self) -> str:
        return f"{self.value:g}"


@dataclass(frozen=True)
class Operator:
    """A binary arithmetic operator."""
    symbol: str

    def __str__(self) -> str:
        return self.symbol


@dataclass(frozen=True)
class LeftParen:
    def __str__(self) -> str:
        return LEFT_PAREN


@dataclass(frozen=True)
class RightParen:
    def __str__(self) -> str:
        return RIGHT_PAREN


Token = Union[Number, Operator, LeftParen, RightParen]


class Expression:
    """
    Immutable sequence of tokens in source reading order.

    Supports iteration, indexing, len() and equality with other
    expressions or plain lists/tuples of tokens.
    """

    __slots__ = ("_tokens",)

    def __init__(self, tokens: Iterable[Token] = ()):
        self._tokens: Tuple[Token, ...] = tuple(tokens)

    @property
    def tokens(self) -> Tuple[Token, ...]:
        return self._tokens

    def __iter__(self) -> Iterator[Token]:
        return iter(self._tokens)

    def __len__(self) -> int:
        return len(self._tokens)

    @overload
    def __getitem__(self, index: int) -> Token: ...

    @overload
    def __getitem__(self, index: slice) -> "Expression": ...

    def __getitem__(self, index):
        if isinstance(index, slice):
            return Expression(self._tokens[index])
        return self._tokens[index]

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Expression):
            return self._tokens == other._tokens
        if isinstance(other, (list, tuple)):
            return self._tokens == tuple(other)
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._tokens)

    def __repr__(self) -> str:
        return f"Expression({list(self._tokens)!r})"

    def __str__(self) -> str:
        return " ".join(str(t) for t in self._tokens)
