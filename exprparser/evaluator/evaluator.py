"""
Tree-walking evaluator for expression trees.

Reduces a parsed expression to one integer. The walk is post-order,
left operand before right, and uses an explicit stack: a long chain such
as `1+1+...+1` is a left-deep tree deeper than the interpreter's
recursion limit.

Integer semantics follow fixed-width machine integers: `/` truncates
toward zero, `%` takes the sign of the dividend, and every literal and
intermediate result must fit in `EvaluatorConfig.integer_bits` signed
bits. What happens when one does not is the configured OverflowPolicy.

Author: exprparser contributors
"""

import logging
from typing import List, Optional, Tuple

from ..config import EvaluatorConfig, OverflowPolicy
from ..parser.ast_nodes import Expr, Literal, BinaryOp, BinaryOperator
from .errors import DivisionByZeroError, NegativeExponentError, IntegerOverflowError

logger = logging.getLogger(__name__)


class Evaluator:
    """
    Expression evaluator.

    Stateless apart from its configuration, so one instance can evaluate
    any number of trees.
    """

    def __init__(self, config: Optional[EvaluatorConfig] = None):
        self.config = config or EvaluatorConfig()

    def evaluate(self, node: Expr) -> int:
        """
        Evaluate an expression tree.

        Raises:
            EvaluationError: On division by zero, a negative exponent or
                overflow under OverflowPolicy.ERROR
        """
        values: List[int] = []
        stack: List[Tuple[Expr, bool]] = [(node, False)]

        while stack:
            current, operands_ready = stack.pop()

            if isinstance(current, Literal):
                values.append(self._fit(current.value, current.position))
            elif isinstance(current, BinaryOp):
                if not operands_ready:
                    stack.append((current, True))
                    stack.append((current.right, False))
                    stack.append((current.left, False))
                    continue
                right = values.pop()
                left = values.pop()
                values.append(self._apply(current, left, right))
            else:
                raise TypeError(f"Not an expression node: {current!r}")

        result = values.pop()
        logger.debug("evaluated expression to %d", result)
        return result

    def _apply(self, node: BinaryOp, left: int, right: int) -> int:
        """Apply the operator of `node` to already evaluated operands."""
        operator = node.operator

        if operator == BinaryOperator.ADD:
            result = left + right
        elif operator == BinaryOperator.SUB:
            result = left - right
        elif operator == BinaryOperator.MUL:
            result = left * right
        elif operator == BinaryOperator.DIV:
            if right == 0:
                raise DivisionByZeroError(node.position)
            result = _truncated_div(left, right)
        elif operator == BinaryOperator.MOD:
            if right == 0:
                raise DivisionByZeroError(node.position)
            result = left - right * _truncated_div(left, right)
        elif operator == BinaryOperator.POW:
            return self._power(left, right, node.position)
        else:
            raise TypeError(f"Unknown operator: {operator!r}")

        return self._fit(result, node.position)

    def _power(self, base: int, exponent: int, position: int) -> int:
        if exponent < 0:
            raise NegativeExponentError(exponent, position)

        bits = self.config.integer_bits
        # |base| >= 2 and exponent >= bits always leaves the range; don't build
        # a huge integer just to find that out
        if abs(base) < 2 or exponent < bits:
            return self._fit(base ** exponent, position)

        if self.config.overflow == OverflowPolicy.ERROR:
            raise IntegerOverflowError(None, bits, position)
        if self.config.overflow == OverflowPolicy.SATURATE:
            negative = base < 0 and exponent % 2 == 1
            return self.config.min_value if negative else self.config.max_value
        return self._wrap(pow(base, exponent, 1 << bits))

    def _fit(self, value: int, position: int) -> int:
        """Apply the overflow policy to `value`."""
        config = self.config
        if config.min_value <= value <= config.max_value:
            return value

        if config.overflow == OverflowPolicy.ERROR:
            raise IntegerOverflowError(value, config.integer_bits, position)
        if config.overflow == OverflowPolicy.SATURATE:
            return config.min_value if value < 0 else config.max_value
        return self._wrap(value)

    def _wrap(self, value: int) -> int:
        modulus = 1 << self.config.integer_bits
        return (value - self.config.min_value) % modulus + self.config.min_value


def _truncated_div(left: int, right: int) -> int:
    """Integer division rounding toward zero."""
    quotient = abs(left) // abs(right)
    return -quotient if (left < 0) != (right < 0) else quotient


def evaluate(node: Expr, config: Optional[EvaluatorConfig] = None) -> int:
    """
    Convenience function to evaluate an expression tree.

    Raises:
        EvaluationError: If evaluation fails
    """
    return Evaluator(config).evaluate(node)
