"""
Token definitions for the expression lexer.

Expressions only know about integer literals, six arithmetic operators
and parentheses, so the token set is small. Every token keeps the
character offset it was read from for diagnostics.

Author: exprparser contributors
"""

from enum import Enum, auto
from dataclasses import dataclass
from typing import Optional


class TokenType(Enum):
    """Enumeration of all token types."""

    # Literals
    INTEGER = auto()                # 42, 007

    # Operators
    PLUS = auto()                   # +
    MINUS = auto()                  # -
    STAR = auto()                   # *
    SLASH = auto()                  # /
    PERCENT = auto()                # %
    CARET = auto()                  # ^

    # Punctuation
    LEFT_PAREN = auto()             # (
    RIGHT_PAREN = auto()            # )

    # Special tokens
    EOF = auto()                    # End of input
    INVALID = auto()                # Unrecognized character


@dataclass(frozen=True)
class Token:
    """
    A lexical token.

    Holds the token type, the raw text it was read from and the 0-based
    character offset of that text in the input. Integer tokens also carry
    their parsed value.
    """
    type: TokenType
    lexeme: str
    position: int
    value: Optional[int] = None

    def __str__(self) -> str:
        if self.type == TokenType.EOF:
            return "EOF"
        return f"{self.type.name}({self.lexeme!r})"

    @property
    def is_operator(self) -> bool:
        """Check if this token is a binary operator."""
        return self.type in OPERATORS.values()

    def describe(self) -> str:
        """Human readable form used in error messages."""
        if self.type == TokenType.EOF:
            return "end of input"
        return f"`{self.lexeme}'"


OPERATORS = {
    "+": TokenType.PLUS,
    "-": TokenType.MINUS,
    "*": TokenType.STAR,
    "/": TokenType.SLASH,
    "%": TokenType.PERCENT,
    "^": TokenType.CARET,
}

PUNCTUATION = {
    "(": TokenType.LEFT_PAREN,
    ")": TokenType.RIGHT_PAREN,
}

SINGLE_CHAR_TOKENS = {**OPERATORS, **PUNCTUATION}
