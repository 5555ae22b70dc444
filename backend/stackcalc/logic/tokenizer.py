"""
Tokenizer.

Turns compact expression text into an Expression in a single pass.
"""

from __future__ import annotations

from typing import List, Optional

from ..config import STANDARD, Dialect
from ..errors import UnexpectedCharacterError
from ..tokens import LEFT_PAREN, RIGHT_PAREN, Expression, LeftParen, Number, Operator, RightParen, Token


class Tokenizer:
    """
    Single-pass tokenizer driven by a Dialect.

    Digits accumulate into a number buffer. A dialect character flushes
    the buffer before its own token is emitted. Whitespace is skipped
    without flushing, so "1 2" reads as 12.
    """

    def __init__(self, dialect: Optional[Dialect] = None):
        self.dialect = dialect or STANDARD

    def tokenize(self, text: str) -> Expression:
        """
        Tokenize text.

        Raises:
            UnexpectedCharacterError: On a character that is not a digit,
                whitespace, or mapped by the dialect.
        """
        tokens: List[Token] = []
        digits: List[str] = []

        for char in text:
            if "0" <= char <= "9":
                digits.append(char)
                continue

            if char.isspace():
                continue

            symbol = self.dialect.lookup(char)
            if symbol is None:
                raise UnexpectedCharacterError(char)

            if digits:
                tokens.append(Number(float("".join(digits))))
                digits.clear()
            tokens.append(self._symbol_token(symbol))

        if digits:
            tokens.append(Number(float("".join(digits))))

        return Expression(tokens)

    @staticmethod
    def _symbol_token(symbol: str) -> Token:
        if symbol == LEFT_PAREN:
            return LeftParen()
        if symbol == RIGHT_PAREN:
            return RightParen()
        return Operator(symbol)


def tokenize(text: str, dialect: Optional[Dialect] = None) -> Expression:
    """Tokenize text with the given dialect (standard by default)."""
    return Tokenizer(dialect).tokenize(text)
