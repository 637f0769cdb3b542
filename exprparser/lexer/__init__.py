"""
Expression Lexer Package

Converts expression text into an ordered list of tokens with position
metadata, ending with an EOF token.

Author: exprparser contributors
"""

from .tokens import Token, TokenType
from .lexer import Lexer, tokenize
from .errors import Diagnostic, ExprError, LexerError, UnexpectedCharacterError

__all__ = [
    "Lexer",
    "tokenize",
    "Token",
    "TokenType",
    "Diagnostic",
    "ExprError",
    "LexerError",
    "UnexpectedCharacterError",
]
