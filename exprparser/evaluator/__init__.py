"""
Expression Evaluator Package

Reduces a parsed expression tree to a fixed-width integer.

Author: exprparser contributors
"""

from .evaluator import Evaluator, evaluate
from .errors import (
    EvaluationError, DivisionByZeroError, NegativeExponentError,
    IntegerOverflowError
)

__all__ = [
    "Evaluator",
    "evaluate",
    "EvaluationError",
    "DivisionByZeroError",
    "NegativeExponentError",
    "IntegerOverflowError",
]
