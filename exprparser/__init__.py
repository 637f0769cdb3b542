"""
exprparser

Lexer, recursive descent parser and evaluator for integer arithmetic
expressions, with located error reporting and Graphviz export of the
syntax tree.

Architecture:
    exprparser/
    ├── lexer/           # Tokenization
    ├── parser/          # Syntax analysis and AST generation
    ├── evaluator/       # Tree-walking evaluation
    ├── reporter.py      # Error rendering with source excerpt and caret
    ├── graph.py         # Graphviz (dot) export
    └── cli.py           # Command line and interactive session

Author: exprparser contributors
License: MIT
"""

__version__ = "0.1.0"
__author__ = "exprparser contributors"
__license__ = "MIT"

from .config import ParserConfig, EvaluatorConfig, OverflowPolicy
from .lexer import Lexer, Token, TokenType, tokenize, ExprError, LexerError
from .parser import Parser, parse, parse_string, ParseError, Literal, BinaryOp, BinaryOperator
from .evaluator import Evaluator, evaluate, EvaluationError
from .reporter import render

__all__ = [
    # Configuration
    "ParserConfig",
    "EvaluatorConfig",
    "OverflowPolicy",

    # Pipeline
    "Lexer", "Token", "TokenType", "tokenize",
    "Parser", "parse", "parse_string",
    "Literal", "BinaryOp", "BinaryOperator",
    "Evaluator", "evaluate",
    "render",

    # Errors
    "ExprError", "LexerError", "ParseError", "EvaluationError",

    # Version info
    "__version__",
    "__author__",
    "__license__",
]
