"""
Error handling for the expression parser.

Every syntax error is fatal: the parser stops at the first one and the
error records the offending token's offset and 1-based token number so
the reporter can put a caret under it.

Author: exprparser contributors
"""

from typing import Optional

from ..lexer.tokens import Token, TokenType
from ..lexer.errors import ExprError


class ParseError(ExprError):
    """
    Exception raised when the parser encounters a syntax error.

    Contains the offending token alongside the diagnostic.
    """

    def __init__(
        self,
        message: str,
        token: Token,
        token_number: int,
        code: Optional[str] = None,
        help_text: Optional[str] = None
    ):
        super().__init__(
            message=message,
            position=token.position,
            code=code,
            token_number=token_number,
            help_text=help_text
        )
        self.token = token


class UnexpectedTokenError(ParseError):
    """A token that cannot start an operand."""

    def __init__(self, token: Token, token_number: int):
        if token.type == TokenType.EOF:
            message = "Unexpected end of input"
            help_text = "An operator must be followed by a number or a parenthesized expression."
        elif token.is_operator:
            message = f"Unexpected token {token.describe()}"
            help_text = f"{token.describe()} needs a number or a parenthesized expression on its left."
        else:
            message = f"Unexpected token {token.describe()}"
            help_text = "Expected a number or `('."
        super().__init__(message, token, token_number, code="P001", help_text=help_text)


class UnmatchedParenError(ParseError):
    """An opening parenthesis that is never closed."""

    def __init__(self, token: Token, token_number: int, open_position: int):
        super().__init__(
            f"Expected `)', found {token.describe()}",
            token,
            token_number,
            code="P002",
            help_text=f"The `(' at offset {open_position} was never closed."
        )
        self.open_position = open_position


class TrailingInputError(ParseError):
    """Tokens left over after a complete expression."""

    def __init__(self, token: Token, token_number: int):
        super().__init__(
            f"Expected end of input, found {token.describe()}",
            token,
            token_number,
            code="P003",
            help_text="Two operands must be joined by an operator."
        )


class NestingTooDeepError(ParseError):
    """Parentheses nested deeper than the configured limit."""

    def __init__(self, token: Token, token_number: int, limit: int):
        super().__init__(
            f"Nesting depth exceeds {limit}",
            token,
            token_number,
            code="P004",
            help_text="Raise the parser's max_depth or simplify the expression."
        )
        self.limit = limit
