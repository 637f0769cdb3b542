"""
Abstract Syntax Tree node definitions for arithmetic expressions.

The tree is a closed variant: an expression is either a `Literal` or a
`BinaryOp`, and nothing else. Every consumer (evaluator, graph export,
the helpers below) dispatches over exactly these two cases and raises
TypeError on anything else.

Nodes are frozen dataclasses and own their children exclusively. The
helpers in this module walk the tree with an explicit stack, since a
long chain like `1+1+...+1` builds a left-deep tree far deeper than the
Python recursion limit.

Author: exprparser contributors
"""

from dataclasses import dataclass
from enum import Enum
from typing import Iterator, List, Tuple, Union

from ..lexer.tokens import TokenType


class ASTNodeType(Enum):
    """Enumeration of all AST node types."""
    LITERAL = "Literal"
    BINARY_OP = "BinaryOp"


class BinaryOperator(Enum):
    """Binary operators, valued by their source symbol."""
    ADD = "+"
    SUB = "-"
    MOD = "%"
    MUL = "*"
    DIV = "/"
    POW = "^"

    @property
    def symbol(self) -> str:
        return self.value

    @property
    def precedence(self) -> int:
        """Grammar level of the operator; higher binds tighter."""
        return PRECEDENCE[self]

    @classmethod
    def from_token_type(cls, token_type: TokenType) -> 'BinaryOperator':
        return TOKEN_OPERATORS[token_type]


PRECEDENCE = {
    BinaryOperator.ADD: 1,
    BinaryOperator.SUB: 1,
    BinaryOperator.MOD: 1,
    BinaryOperator.MUL: 2,
    BinaryOperator.DIV: 2,
    BinaryOperator.POW: 3,
}

TOKEN_OPERATORS = {
    TokenType.PLUS: BinaryOperator.ADD,
    TokenType.MINUS: BinaryOperator.SUB,
    TokenType.PERCENT: BinaryOperator.MOD,
    TokenType.STAR: BinaryOperator.MUL,
    TokenType.SLASH: BinaryOperator.DIV,
    TokenType.CARET: BinaryOperator.POW,
}


@dataclass(frozen=True)
class Literal:
    """Integer literal leaf."""
    value: int
    position: int = 0

    @property
    def node_type(self) -> ASTNodeType:
        return ASTNodeType.LITERAL

    def children(self) -> Tuple['Expr', ...]:
        return ()

    def __str__(self) -> str:
        return f"Literal({self.value})"


@dataclass(frozen=True)
class BinaryOp:
    """Binary operation; `position` is the offset of the operator token."""
    operator: BinaryOperator
    left: 'Expr'
    right: 'Expr'
    position: int = 0

    @property
    def node_type(self) -> ASTNodeType:
        return ASTNodeType.BINARY_OP

    def children(self) -> Tuple['Expr', ...]:
        return (self.left, self.right)

    def __str__(self) -> str:
        return f"BinaryOp({self.operator.symbol})"


Expr = Union[Literal, BinaryOp]


def iter_nodes(node: Expr) -> Iterator[Expr]:
    """Yield every node of the tree in pre-order, left child first."""
    stack: List[Expr] = [node]
    while stack:
        current = stack.pop()
        if not isinstance(current, (Literal, BinaryOp)):
            raise TypeError(f"Not an expression node: {current!r}")
        yield current
        stack.extend(reversed(current.children()))


def to_source(node: Expr) -> str:
    """
    Render a tree back into expression text.

    Parentheses are only emitted where precedence or left-associativity
    require them, so parsing the result yields an equal tree.
    """
    # (node, children already pushed) frames for a post-order walk
    results: List[str] = []
    stack: List[Tuple[Expr, bool]] = [(node, False)]

    while stack:
        current, expanded = stack.pop()
        if isinstance(current, Literal):
            results.append(str(current.value))
        elif isinstance(current, BinaryOp):
            if not expanded:
                stack.append((current, True))
                stack.append((current.right, False))
                stack.append((current.left, False))
                continue
            right = results.pop()
            left = results.pop()
            if _needs_parens(current.left, current.operator, is_right=False):
                left = f"({left})"
            if _needs_parens(current.right, current.operator, is_right=True):
                right = f"({right})"
            results.append(f"{left} {current.operator.symbol} {right}")
        else:
            raise TypeError(f"Not an expression node: {current!r}")

    return results[0]


def _needs_parens(child: Expr, parent: BinaryOperator, is_right: bool) -> bool:
    if not isinstance(child, BinaryOp):
        return False
    if child.operator.precedence < parent.precedence:
        return True
    # All levels are left-associative
    return is_right and child.operator.precedence == parent.precedence


def dump(node: Expr, indent: str = "  ") -> str:
    """Indented, one node per line description of the tree."""
    lines = []
    stack: List[Tuple[Expr, int]] = [(node, 0)]
    while stack:
        current, depth = stack.pop()
        if isinstance(current, Literal):
            lines.append(f"{indent * depth}Literal={current.value}")
        elif isinstance(current, BinaryOp):
            lines.append(f"{indent * depth}Op={current.operator.name}")
            stack.extend((child, depth + 1) for child in reversed(current.children()))
        else:
            raise TypeError(f"Not an expression node: {current!r}")
    return "\n".join(lines)
