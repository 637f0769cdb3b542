"""
Configuration for the parser and evaluator.

Author: exprparser contributors
"""

from dataclasses import dataclass
from enum import Enum


class OverflowPolicy(Enum):
    """What the evaluator does with results outside the integer range"""
    ERROR = "error"         # Raise IntegerOverflowError
    SATURATE = "saturate"   # Clamp to the nearest bound
    WRAP = "wrap"           # Two's-complement wraparound


@dataclass
class ParserConfig:
    """Configuration parameters for the parser"""

    # Maximum parenthesis nesting. Each level costs several Python frames, so
    # a limit beyond what the interpreter stack holds is cut short there
    max_depth: int = 128

    def __post_init__(self):
        if self.max_depth < 1:
            raise ValueError(f"max_depth must be positive, got {self.max_depth}")


@dataclass
class EvaluatorConfig:
    """Configuration parameters for the evaluator"""

    # Width of the signed integers results must fit in
    integer_bits: int = 64
    overflow: OverflowPolicy = OverflowPolicy.ERROR

    def __post_init__(self):
        if self.integer_bits < 2:
            raise ValueError(f"integer_bits must be at least 2, got {self.integer_bits}")
        if not isinstance(self.overflow, OverflowPolicy):
            self.overflow = OverflowPolicy(self.overflow)

    @property
    def min_value(self) -> int:
        return -(1 << (self.integer_bits - 1))

    @property
    def max_value(self) -> int:
        return (1 << (self.integer_bits - 1)) - 1
