"""
Expression lexer - turns an input string into tokens.

Only whitespace, digits, the six operators and parentheses are valid
input. Anything else stops the lexer at the first bad character; there is
no error recovery since one bad character already makes the expression
meaningless.

Author: exprparser contributors
"""

import logging
from typing import Iterator, List

from .tokens import Token, TokenType, SINGLE_CHAR_TOKENS
from .errors import UnexpectedCharacterError

logger = logging.getLogger(__name__)

# str.isdigit() also accepts superscripts that int() rejects
DIGITS = "0123456789"


class Lexer:
    """
    Expression lexical analyzer.

    `iter_tokens` produces tokens lazily and reports bad characters as
    INVALID tokens; `tokenize` materializes the whole list and raises on
    the first INVALID token instead.
    """

    def __init__(self, source: str):
        """
        Initialize the lexer with source text.

        Args:
            source: Expression text
        """
        self.source = source

    def iter_tokens(self) -> Iterator[Token]:
        """
        Yield tokens from the start of the source.

        Stops after the first INVALID token, otherwise ends with EOF.
        """
        pos = 0
        length = len(self.source)

        while pos < length:
            char = self.source[pos]

            if char.isspace():
                pos += 1
                continue

            if char in DIGITS:
                start = pos
                while pos < length and self.source[pos] in DIGITS:
                    pos += 1
                lexeme = self.source[start:pos]
                yield Token(TokenType.INTEGER, lexeme, start, int(lexeme))
                continue

            token_type = SINGLE_CHAR_TOKENS.get(char)
            if token_type is None:
                yield Token(TokenType.INVALID, char, pos)
                return

            yield Token(token_type, char, pos)
            pos += 1

        yield Token(TokenType.EOF, "", length)

    def tokenize(self) -> List[Token]:
        """
        Tokenize the entire source.

        Returns:
            List of tokens ending with an EOF token

        Raises:
            UnexpectedCharacterError: On the first character that starts no token
        """
        tokens: List[Token] = []
        for token in self.iter_tokens():
            if token.type == TokenType.INVALID:
                raise UnexpectedCharacterError(
                    token.lexeme, token.position, token_number=len(tokens) + 1
                )
            tokens.append(token)

        logger.debug("tokenized %d characters into %d tokens", len(self.source), len(tokens))
        return tokens


def tokenize(source: str) -> List[Token]:
    """
    Convenience function to tokenize a source string.

    Raises:
        LexerError: If lexing fails
    """
    return Lexer(source).tokenize()
