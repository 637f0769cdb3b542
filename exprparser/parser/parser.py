"""
Recursive descent parser for arithmetic expressions.

Grammar, lowest precedence first:

    expr     --> term (('+' | '-' | '%') term)*
    term     --> factor (('*' | '/') factor)*
    factor   --> exponent ('^' exponent)*
    exponent --> INTEGER | '(' expr ')'

Each rule parses one operand of the next level and then loops while an
operator of its own level follows, folding the operands to the left.
This gives left associativity at every level, `^` included, without
left recursion. One token of lookahead decides every step, so there is
no backtracking.

Author: exprparser contributors
"""

import logging
from typing import List, Optional

from ..config import ParserConfig
from ..lexer.tokens import Token, TokenType
from .ast_nodes import Expr, Literal, BinaryOp, BinaryOperator
from .errors import (
    UnexpectedTokenError, UnmatchedParenError, TrailingInputError,
    NestingTooDeepError
)

logger = logging.getLogger(__name__)


EXPR_OPERATORS = {TokenType.PLUS, TokenType.MINUS, TokenType.PERCENT}
TERM_OPERATORS = {TokenType.STAR, TokenType.SLASH}
FACTOR_OPERATORS = {TokenType.CARET}


class Parser:
    """
    Expression parser.

    A parser instance consumes one token list once; create a new one for
    every expression.
    """

    def __init__(self, tokens: List[Token], config: Optional[ParserConfig] = None):
        """
        Initialize parser with a list of tokens.

        Args:
            tokens: Tokens from the lexer, normally ending with EOF
            config: Parser limits, defaults to ParserConfig()
        """
        self.tokens = tokens
        self.config = config or ParserConfig()
        self.current = 0
        self.depth = 0

    @classmethod
    def from_source(cls, source: str, config: Optional[ParserConfig] = None) -> 'Parser':
        """Tokenize `source` and return a parser over the result."""
        from ..lexer import tokenize

        return cls(tokenize(source), config)

    def parse(self) -> Expr:
        """
        Parse the token list into an expression tree.

        Raises:
            ParseError: On the first syntax error
        """
        try:
            ast = self._parse_expr()
        except RecursionError:
            # The interpreter's stack ran out before max_depth was reached;
            # self.depth still holds the level that failed
            logger.debug("recursion limit hit at nesting depth %d", self.depth)
            raise NestingTooDeepError(self._peek(), self._token_number(), self.depth) from None

        if not self._check(TokenType.EOF):
            raise TrailingInputError(self._peek(), self._token_number())

        logger.debug("parsed %d tokens into %s", len(self.tokens), ast.node_type.value)
        return ast

    def _parse_expr(self) -> Expr:
        """expr --> term (('+' | '-' | '%') term)*"""
        node = self._parse_term()
        while self._peek().type in EXPR_OPERATORS:
            node = self._fold(node, self._parse_term)
        return node

    def _parse_term(self) -> Expr:
        """term --> factor (('*' | '/') factor)*"""
        node = self._parse_factor()
        while self._peek().type in TERM_OPERATORS:
            node = self._fold(node, self._parse_factor)
        return node

    def _parse_factor(self) -> Expr:
        """factor --> exponent ('^' exponent)*"""
        node = self._parse_exponent()
        while self._peek().type in FACTOR_OPERATORS:
            node = self._fold(node, self._parse_exponent)
        return node

    def _parse_exponent(self) -> Expr:
        """exponent --> INTEGER | '(' expr ')'"""
        token = self._peek()

        if token.type == TokenType.INTEGER:
            self._advance()
            return Literal(token.value, token.position)

        if token.type == TokenType.LEFT_PAREN:
            if self.depth >= self.config.max_depth:
                raise NestingTooDeepError(token, self._token_number(), self.config.max_depth)
            self._advance()
            self.depth += 1
            node = self._parse_expr()
            if not self._match(TokenType.RIGHT_PAREN):
                raise UnmatchedParenError(self._peek(), self._token_number(), token.position)
            self.depth -= 1
            return node

        raise UnexpectedTokenError(token, self._token_number())

    def _fold(self, left: Expr, parse_operand) -> BinaryOp:
        """Consume the operator at the cursor and join `left` with the next operand."""
        operator_token = self._advance()
        right = parse_operand()
        return BinaryOp(
            BinaryOperator.from_token_type(operator_token.type),
            left,
            right,
            operator_token.position
        )

    # Utility methods

    def _match(self, token_type: TokenType) -> bool:
        """Check if current token matches type and consume if so."""
        if self._check(token_type):
            self._advance()
            return True
        return False

    def _check(self, token_type: TokenType) -> bool:
        """Check if current token matches type without consuming."""
        return self._peek().type == token_type

    def _advance(self) -> Token:
        """Consume and return current token. EOF is never consumed."""
        token = self._peek()
        if token.type != TokenType.EOF:
            self.current += 1
        return token

    def _peek(self) -> Token:
        """Return current token without consuming."""
        if self.current < len(self.tokens):
            return self.tokens[self.current]
        # Token lists built by hand may lack the EOF token
        end = self.tokens[-1].position + len(self.tokens[-1].lexeme) if self.tokens else 0
        return Token(TokenType.EOF, "", end)

    def _token_number(self) -> int:
        """1-based number of the current token."""
        return self.current + 1


def parse(tokens: List[Token], config: Optional[ParserConfig] = None) -> Expr:
    """
    Convenience function to parse a token list.

    Raises:
        ParseError: If parsing fails
    """
    return Parser(tokens, config).parse()


def parse_string(source: str, config: Optional[ParserConfig] = None) -> Expr:
    """
    Convenience function to tokenize and parse a source string.

    Raises:
        LexerError: If lexing fails
        ParseError: If parsing fails
    """
    return Parser.from_source(source, config).parse()
