"""
Error handling for the expression lexer.

Defines the diagnostic record shared by every stage of the pipeline and
the root of the exception hierarchy, plus the lexer's own errors.

Author: exprparser contributors
"""

from typing import Optional
from dataclasses import dataclass


@dataclass(frozen=True)
class Diagnostic:
    """A located message produced by the lexer, parser or evaluator."""
    message: str
    position: int                       # 0-based character offset
    severity: str = "error"             # "error", "warning"
    code: Optional[str] = None
    token_number: Optional[int] = None  # 1-based, None for evaluation errors
    help_text: Optional[str] = None

    def __str__(self) -> str:
        severity_prefix = self.severity.upper()
        if self.code:
            severity_prefix += f"[{self.code}]"
        result = f"{severity_prefix}: {self.message}\n"
        result += f"  --> offset {self.position}"
        if self.token_number is not None:
            result += f", token {self.token_number}"
        result += "\n"

        if self.help_text:
            result += f"  help: {self.help_text}\n"

        return result


class ExprError(Exception):
    """
    Base class of every error raised while lexing, parsing or evaluating.

    Carries a `Diagnostic` so callers can report the error without
    knowing which stage produced it.
    """

    def __init__(
        self,
        message: str,
        position: int,
        code: Optional[str] = None,
        token_number: Optional[int] = None,
        help_text: Optional[str] = None
    ):
        super().__init__(message)
        self.diagnostic = Diagnostic(
            message=message,
            position=position,
            code=code,
            token_number=token_number,
            help_text=help_text
        )

    @property
    def message(self) -> str:
        return self.diagnostic.message

    @property
    def position(self) -> int:
        return self.diagnostic.position

    @property
    def token_number(self) -> Optional[int]:
        return self.diagnostic.token_number

    @property
    def code(self) -> Optional[str]:
        return self.diagnostic.code

    def __str__(self) -> str:
        return str(self.diagnostic)


class LexerError(ExprError):
    """Exception raised when the lexer cannot tokenize the input."""


class UnexpectedCharacterError(LexerError):
    """A character that starts no token. Lexing stops here."""

    def __init__(self, character: str, position: int, token_number: int):
        if character.isprintable():
            help_text = "Expressions may only contain digits, + - * / % ^, parentheses and whitespace."
        else:
            help_text = f"Non-printable character (Unicode: U+{ord(character):04X}) is not allowed."
        super().__init__(
            message=f"Unexpected character `{character}'",
            position=position,
            code="L001",
            token_number=token_number,
            help_text=help_text
        )
        self.character = character
