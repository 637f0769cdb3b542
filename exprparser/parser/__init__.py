"""
Expression Parser Package

Recursive descent parser producing an immutable expression tree, one
grammar rule per precedence level.

Author: exprparser contributors
"""

from .ast_nodes import (
    ASTNodeType, BinaryOperator, Literal, BinaryOp, Expr,
    iter_nodes, to_source, dump
)
from .parser import Parser, parse, parse_string
from .errors import (
    ParseError, UnexpectedTokenError, UnmatchedParenError,
    TrailingInputError, NestingTooDeepError
)

__all__ = [
    # Core parser
    "Parser",
    "parse",
    "parse_string",

    # AST nodes
    "ASTNodeType", "BinaryOperator", "Literal", "BinaryOp", "Expr",
    "iter_nodes", "to_source", "dump",

    # Error handling
    "ParseError", "UnexpectedTokenError", "UnmatchedParenError",
    "TrailingInputError", "NestingTooDeepError",
]
