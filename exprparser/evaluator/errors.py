"""
Evaluation error handling.

Runtime errors point at the operator (or literal) whose evaluation
failed; they carry no token number since the tree no longer knows about
tokens.

Author: exprparser contributors
"""

from typing import Optional

from ..lexer.errors import ExprError


class EvaluationError(ExprError):
    """Exception raised when a well-formed tree cannot be evaluated."""

    def __init__(
        self,
        message: str,
        position: int,
        code: Optional[str] = None,
        help_text: Optional[str] = None
    ):
        super().__init__(message=message, position=position, code=code, help_text=help_text)


class DivisionByZeroError(EvaluationError):
    """Right operand of `/` or `%` evaluated to zero."""

    def __init__(self, position: int):
        super().__init__("Division by zero", position, code="E001")


class NegativeExponentError(EvaluationError):
    """Right operand of `^` evaluated to a negative number."""

    def __init__(self, exponent: int, position: int):
        super().__init__(
            f"Negative exponent {exponent}",
            position,
            code="E002",
            help_text="Integer exponentiation is only defined for exponents >= 0."
        )
        self.exponent = exponent


class IntegerOverflowError(EvaluationError):
    """A value does not fit the configured integer width."""

    def __init__(self, value: Optional[int], bits: int, position: int):
        super().__init__(
            f"Integer overflow: result does not fit in {bits} bits",
            position,
            code="E003",
            help_text="Use a wider integer_bits or the saturate/wrap overflow policy."
        )
        self.value = value
        self.bits = bits
